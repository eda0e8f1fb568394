"""Tests for svg_jsx.optimizer module."""

import json
import subprocess

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_jsx.config import OptimizerConfig, PluginConfig
from svg_jsx.errors import OptimizerError
from svg_jsx.optimizer import optimize_svg


class TestOptimizeSvg:
    """Tests for optimize_svg function."""

    def test_success(self, stub_run):
        fake = stub_run(stdout="<svg/>")
        config = OptimizerConfig(
            plugins=(PluginConfig("removeComments"),), multipass=True, node="nodejs"
        )

        assert optimize_svg("<svg></svg>", config) == "<svg/>"
        args, kwargs = fake.calls[0]
        assert args[:2] == ["nodejs", "-e"]
        request = json.loads(kwargs["input"])
        assert request == {
            "svg": "<svg></svg>",
            "config": {"multipass": True, "plugins": ["removeComments"]},
        }

    def test_utf8_pipes(self, stub_run):
        fake = stub_run(stdout="<svg><text>Grüße ✓</text></svg>")
        result = optimize_svg("<svg><text>Grüße ✓</text></svg>", OptimizerConfig())
        assert result == "<svg><text>Grüße ✓</text></svg>"
        args, kwargs = fake.calls[0]
        assert kwargs["encoding"] == "utf-8"

    def test_failure(self, stub_run):
        stub_run(returncode=1, stderr="Cannot find module 'svgo'")
        with pytest.raises(OptimizerError, match="Cannot find module"):
            optimize_svg("<svg></svg>", OptimizerConfig())

    def test_missing_node(self, stub_run):
        stub_run(raises=FileNotFoundError())
        with pytest.raises(OptimizerError) as excinfo:
            optimize_svg("<svg></svg>", OptimizerConfig())
        assert excinfo.value.kind == "OptimizerFailure"

    def test_timeout(self, stub_run):
        stub_run(raises=subprocess.TimeoutExpired("node", 10))
        with pytest.raises(OptimizerError, match="timed out"):
            optimize_svg("<svg></svg>", OptimizerConfig())


class TestOptimizerConfig:
    """Tests for OptimizerConfig.to_svgo."""

    def test_default_plugins(self):
        config = OptimizerConfig().to_svgo()
        assert config["multipass"] is False
        preset = config["plugins"][0]
        assert preset["name"] == "preset-default"
        assert preset["params"]["overrides"]["removeViewBox"] is False
        assert config["plugins"][1:] == [
            "removeXMLNS",
            "removeDimensions",
            "convertPathData",
            "minifyStyles",
            "removeUselessStrokeAndFill",
            "removeUnknownsAndDefaults",
        ]

    def test_float_precision(self):
        config = OptimizerConfig(plugins=(), float_precision=2).to_svgo()
        assert config == {"multipass": False, "plugins": [], "floatPrecision": 2}
