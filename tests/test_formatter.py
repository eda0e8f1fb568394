"""Tests for svg_jsx.formatter module."""

import subprocess

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_jsx.config import FormatterConfig
from svg_jsx.errors import FormatterError
from svg_jsx.formatter import (
    format_source,
    indent_source,
    minify_source,
    prettier_arguments,
)


class TestIndentSource:
    """Tests for indent_source function."""

    def test_reindents_component(self):
        source = "\n".join(
            [
                "export const Icon = (props) => {",
                "return (",
                "<svg>",
                "<g>",
                '<path d="M0 0" />',
                "</g>",
                "</svg>",
                ");",
                "};",
            ]
        )
        assert indent_source(source) == "\n".join(
            [
                "export const Icon = (props) => {",
                "  return (",
                "    <svg>",
                "      <g>",
                '        <path d="M0 0" />',
                "      </g>",
                "    </svg>",
                "  );",
                "};",
            ]
        )

    def test_inline_element_does_not_indent(self):
        source = "<svg>\n<text>Hi</text>\n<g />\n</svg>"
        assert indent_source(source) == "<svg>\n  <text>Hi</text>\n  <g />\n</svg>"

    def test_comment_lines(self):
        source = "<svg>\n{/* note */}\n<g />\n</svg>"
        assert indent_source(source) == "<svg>\n  {/* note */}\n  <g />\n</svg>"

    def test_blank_lines_kept_empty(self):
        source = 'import React from "react";\n   \nexport default 1;'
        assert indent_source(source) == 'import React from "react";\n\nexport default 1;'

    def test_tabs_and_width(self):
        source = "f = () => {\nreturn 1;\n};"
        assert indent_source(source, use_tabs=True) == "f = () => {\n\treturn 1;\n};"
        assert indent_source(source, tab_width=4) == "f = () => {\n    return 1;\n};"

    def test_unbalanced_close_never_negative(self):
        assert indent_source("}\n}\nx") == "}\n}\nx"

    def test_crlf_normalized(self):
        assert indent_source("a {\r\nb\r\n}") == "a {\n  b\n}"


class TestMinifySource:
    """Tests for minify_source function."""

    def test_markup(self):
        source = '<svg>\n  <path d="M0 0" />\n</svg>'
        assert minify_source(source) == '<svg><path d="M0 0" /></svg>'

    def test_no_newlines(self):
        source = (
            'import React from "react";\n\n'
            "export const Icon = (props) => {\n"
            "  return (\n"
            '    <svg viewBox="0 0 10 10" {...props}>\n'
            "    </svg>\n"
            "  );\n"
            "};"
        )
        result = minify_source(source)
        assert "\n" not in result
        assert result.startswith('import React from "react";export const Icon=(props)=>{')
        assert '<svg viewBox="0 0 10 10"{...props}>' in result

    def test_string_content_kept(self):
        result = minify_source('<text font-family="a, b = c">x</text>')
        assert 'font-family="a, b = c"' in result

    def test_whitespace_in_strings_collapsed(self):
        assert minify_source('<path d="M0 0\n   L1 1" />') == '<path d="M0 0 L1 1" />'

    def test_deterministic(self):
        source = "const a = {\n  b: 1,\n};"
        assert minify_source(source) == minify_source(source)
        assert minify_source(source) == "const a={b: 1,};"

    def test_line_breaks_next_to_tags_dropped(self):
        source = '<text>\n  Hello{" "}\n  <tspan>world</tspan>\n</text>'
        assert minify_source(source) == '<text>Hello{" "}<tspan>world</tspan></text>'

    def test_inline_space_before_tag_kept(self):
        assert minify_source("<text>a <tspan>b</tspan></text>") == (
            "<text>a <tspan>b</tspan></text>"
        )


class TestPrettierArguments:
    """Tests for prettier_arguments function."""

    def test_defaults(self):
        args = prettier_arguments(FormatterConfig(), "typescript")
        assert args == [
            "--parser",
            "typescript",
            "--print-width",
            "80",
            "--tab-width",
            "2",
            "--trailing-comma",
            "es5",
            "--arrow-parens",
            "avoid",
        ]

    def test_plain_uses_babel(self):
        args = prettier_arguments(FormatterConfig(), "plain")
        assert args[:2] == ["--parser", "babel"]

    def test_flags(self):
        config = FormatterConfig(
            use_tabs=True,
            semicolons=False,
            quote_style="single",
            trailing_comma="none",
            bracket_spacing=False,
            arrow_parens="always",
        )
        args = prettier_arguments(config, "typescript")
        assert "--use-tabs" in args
        assert "--no-semi" in args
        assert "--single-quote" in args
        assert "--jsx-single-quote" in args
        assert "--no-bracket-spacing" in args
        assert args[args.index("--trailing-comma") + 1] == "none"
        assert args[args.index("--arrow-parens") + 1] == "always"


class TestFormatSource:
    """Tests for format_source function."""

    def test_success(self, stub_run):
        fake = stub_run(stdout="formatted\n")
        config = FormatterConfig(command=("npx", "prettier"), timeout=3.0)

        assert format_source("code", config, "typescript") == "formatted\n"
        args, kwargs = fake.calls[0]
        assert args[:2] == ["npx", "prettier"]
        assert kwargs["input"] == "code"
        assert kwargs["timeout"] == 3.0

    def test_utf8_pipes(self, stub_run):
        fake = stub_run(stdout="<text>Grüße ✓</text>\n")
        source = format_source("<text>Grüße ✓</text>", FormatterConfig(), "plain")
        assert source == "<text>Grüße ✓</text>\n"
        args, kwargs = fake.calls[0]
        assert kwargs["encoding"] == "utf-8"

    def test_nonzero_exit(self, stub_run):
        stub_run(returncode=2, stderr="SyntaxError")
        with pytest.raises(FormatterError, match="SyntaxError"):
            format_source("code", FormatterConfig(), "plain")

    def test_missing_command(self, stub_run):
        stub_run(raises=FileNotFoundError())
        with pytest.raises(FormatterError, match="not found: prettier"):
            format_source("code", FormatterConfig(), "plain")

    def test_timeout(self, stub_run):
        stub_run(raises=subprocess.TimeoutExpired("prettier", 10))
        with pytest.raises(FormatterError, match="timed out"):
            format_source("code", FormatterConfig(), "plain")

    def test_empty_output(self, stub_run):
        stub_run(stdout="  ")
        with pytest.raises(FormatterError):
            format_source("code", FormatterConfig(), "plain")
