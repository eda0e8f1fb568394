"""Conversion options and YAML option-file parsing."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml

ExportStyle = Literal["const", "default", "named"]
QuoteStyle = Literal["double", "single"]
TrailingComma = Literal["none", "minimal", "all"]
ArrowParens = Literal["avoid", "always"]
LanguageMode = Literal["typescript", "plain"]

EXPORT_STYLES: tuple[ExportStyle, ...] = ("const", "default", "named")
QUOTE_STYLES: tuple[QuoteStyle, ...] = ("double", "single")
TRAILING_COMMAS: tuple[TrailingComma, ...] = ("none", "minimal", "all")
ARROW_PARENS: tuple[ArrowParens, ...] = ("avoid", "always")

# Default tool timeout in seconds
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class PluginConfig:
    """A single optimizer plugin with optional parameters."""

    name: str
    params: dict[str, Any] | None = None

    def to_svgo(self) -> str | dict[str, Any]:
        """Convert to an SVGO plugin entry."""
        if self.params is None:
            return self.name
        return {"name": self.name, "params": self.params}


DEFAULT_PLUGINS: tuple[PluginConfig, ...] = (
    PluginConfig(
        "preset-default",
        {
            "overrides": {
                # Keep viewBox for responsive scaling
                "removeViewBox": False,
                # Keep ids that are likely referenced
                "cleanupIds": {
                    "preservePrefixes": ["icon-", "gradient-", "pattern-"],
                },
            },
        },
    ),
    PluginConfig("removeXMLNS"),
    PluginConfig("removeDimensions"),
    PluginConfig("convertPathData"),
    PluginConfig("minifyStyles"),
    PluginConfig("removeUselessStrokeAndFill"),
    PluginConfig("removeUnknownsAndDefaults"),
)


@dataclass(frozen=True)
class OptimizerConfig:
    """SVG optimizer (SVGO) configuration."""

    plugins: tuple[PluginConfig, ...] = DEFAULT_PLUGINS
    multipass: bool = False
    float_precision: int | None = None
    node: str = "node"
    timeout: float = DEFAULT_TIMEOUT

    def to_svgo(self) -> dict[str, Any]:
        """Convert to an SVGO config object."""
        config: dict[str, Any] = {
            "multipass": self.multipass,
            "plugins": [plugin.to_svgo() for plugin in self.plugins],
        }
        if self.float_precision is not None:
            config["floatPrecision"] = self.float_precision
        return config


@dataclass(frozen=True)
class FormatterConfig:
    """Source formatter (Prettier) configuration."""

    print_width: int = 80
    tab_width: int = 2
    use_tabs: bool = False
    semicolons: bool = True
    quote_style: QuoteStyle = "double"
    trailing_comma: TrailingComma = "minimal"
    bracket_spacing: bool = True
    arrow_parens: ArrowParens = "avoid"
    command: tuple[str, ...] = ("prettier",)
    timeout: float = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ConversionOptions:
    """Complete configuration for one conversion."""

    typescript: bool = True
    memo: bool = True
    pass_props: bool = True
    minify: bool = False
    remove_ids: bool = False
    omit_imports: bool = False
    export_style: ExportStyle = "const"
    export_name: str | None = None
    quotes: QuoteStyle = "double"
    optimize_svg: bool = False
    optimizer: OptimizerConfig = field(default_factory=OptimizerConfig)
    use_formatter: bool = False
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    @property
    def language(self) -> LanguageMode:
        """Formatter language mode."""
        return "typescript" if self.typescript else "plain"


def _check_keys(data: dict, allowed: set[str], section: str) -> None:
    """Reject keys that are not part of a section."""
    unknown = sorted(set(data) - allowed)
    if unknown:
        valid = ", ".join(sorted(allowed))
        raise ValueError(
            f"Unknown {section} option(s): {', '.join(unknown)}. Valid options: {valid}"
        )


def _check_choice(value: Any, choices: tuple[str, ...], name: str) -> str:
    """Validate an enumerated option value."""
    if value not in choices:
        raise ValueError(
            f"Invalid {name} '{value}'. Valid values: {', '.join(choices)}"
        )
    return value


def _parse_bool(value: Any, name: str) -> bool:
    """Validate a boolean option value."""
    if not isinstance(value, bool):
        raise ValueError(f"Option '{name}' must be true or false, got {value!r}")
    return value


def parse_plugin(data: Any) -> PluginConfig:
    """Parse one optimizer plugin entry.

    A plugin is either a bare name or a mapping with ``name`` and optional
    ``params``.

    Args:
        data: Plugin entry from YAML.

    Returns:
        Parsed PluginConfig.

    Raises:
        ValueError: If the entry is malformed.
    """
    if isinstance(data, str):
        return PluginConfig(name=data)
    if not isinstance(data, dict):
        raise ValueError(f"Optimizer plugin must be a name or a mapping, got {data!r}")

    _check_keys(data, {"name", "params"}, "optimizer plugin")
    if "name" not in data:
        raise ValueError("Each optimizer plugin must have a 'name' field")

    params = data.get("params")
    if params is not None and not isinstance(params, dict):
        raise ValueError(f"Plugin '{data['name']}': 'params' must be a mapping")

    return PluginConfig(name=str(data["name"]), params=params)


def parse_optimizer_section(data: dict) -> OptimizerConfig:
    """Parse the optimizer section.

    Args:
        data: Optimizer section dictionary.

    Returns:
        Parsed OptimizerConfig.

    Raises:
        ValueError: If the format is invalid.
    """
    _check_keys(
        data, {"plugins", "multipass", "float_precision", "node", "timeout"}, "optimizer"
    )

    kwargs: dict[str, Any] = {}
    if "plugins" in data:
        if not isinstance(data["plugins"], list):
            raise ValueError("Optimizer 'plugins' must be a list")
        kwargs["plugins"] = tuple(parse_plugin(item) for item in data["plugins"])
    if "multipass" in data:
        kwargs["multipass"] = _parse_bool(data["multipass"], "multipass")
    if "float_precision" in data:
        kwargs["float_precision"] = int(data["float_precision"])
    if "node" in data:
        kwargs["node"] = str(data["node"])
    if "timeout" in data:
        kwargs["timeout"] = float(data["timeout"])

    return OptimizerConfig(**kwargs)


def parse_formatter_section(data: dict) -> FormatterConfig:
    """Parse the formatter section.

    Args:
        data: Formatter section dictionary.

    Returns:
        Parsed FormatterConfig.

    Raises:
        ValueError: If the format is invalid.
    """
    _check_keys(
        data,
        {
            "print_width",
            "tab_width",
            "use_tabs",
            "semicolons",
            "quote_style",
            "trailing_comma",
            "bracket_spacing",
            "arrow_parens",
            "command",
            "timeout",
        },
        "formatter",
    )

    kwargs: dict[str, Any] = {}
    if "print_width" in data:
        kwargs["print_width"] = int(data["print_width"])
    if "tab_width" in data:
        kwargs["tab_width"] = int(data["tab_width"])
    if "use_tabs" in data:
        kwargs["use_tabs"] = _parse_bool(data["use_tabs"], "use_tabs")
    if "semicolons" in data:
        kwargs["semicolons"] = _parse_bool(data["semicolons"], "semicolons")
    if "quote_style" in data:
        kwargs["quote_style"] = _check_choice(
            data["quote_style"], QUOTE_STYLES, "quote_style"
        )
    if "trailing_comma" in data:
        # Prettier's own name for "minimal"
        value = "minimal" if data["trailing_comma"] == "es5" else data["trailing_comma"]
        kwargs["trailing_comma"] = _check_choice(value, TRAILING_COMMAS, "trailing_comma")
    if "bracket_spacing" in data:
        kwargs["bracket_spacing"] = _parse_bool(
            data["bracket_spacing"], "bracket_spacing"
        )
    if "arrow_parens" in data:
        kwargs["arrow_parens"] = _check_choice(
            data["arrow_parens"], ARROW_PARENS, "arrow_parens"
        )
    if "command" in data:
        command = data["command"]
        if isinstance(command, str):
            command = command.split()
        if not command:
            raise ValueError("Formatter 'command' must not be empty")
        kwargs["command"] = tuple(str(part) for part in command)
    if "timeout" in data:
        kwargs["timeout"] = float(data["timeout"])

    return FormatterConfig(**kwargs)


_BOOL_OPTIONS = (
    "typescript",
    "memo",
    "pass_props",
    "minify",
    "remove_ids",
    "omit_imports",
    "optimize_svg",
    "use_formatter",
)


def parse_options(data: dict) -> ConversionOptions:
    """Parse conversion options from a dictionary.

    Unknown keys are rejected so that typos do not silently fall back to
    defaults.

    Args:
        data: Options dictionary, typically loaded from YAML.

    Returns:
        Parsed ConversionOptions.

    Raises:
        ValueError: If the format is invalid.
    """
    _check_keys(
        data,
        set(_BOOL_OPTIONS)
        | {"export_style", "export_name", "quotes", "optimizer", "formatter"},
        "conversion",
    )

    kwargs: dict[str, Any] = {}
    for name in _BOOL_OPTIONS:
        if name in data:
            kwargs[name] = _parse_bool(data[name], name)

    if "export_style" in data:
        kwargs["export_style"] = _check_choice(
            data["export_style"], EXPORT_STYLES, "export_style"
        )
    if data.get("export_name") is not None:
        kwargs["export_name"] = str(data["export_name"])
    if "quotes" in data:
        kwargs["quotes"] = _check_choice(data["quotes"], QUOTE_STYLES, "quotes")

    if data.get("optimizer") is not None:
        if not isinstance(data["optimizer"], dict):
            raise ValueError("'optimizer' section must be a mapping")
        kwargs["optimizer"] = parse_optimizer_section(data["optimizer"])
    if data.get("formatter") is not None:
        if not isinstance(data["formatter"], dict):
            raise ValueError("'formatter' section must be a mapping")
        kwargs["formatter"] = parse_formatter_section(data["formatter"])

    return ConversionOptions(**kwargs)


def parse_options_file(options_path: Path) -> ConversionOptions:
    """Parse a YAML options file.

    An empty file yields the default options.

    Args:
        options_path: Path to the YAML file.

    Returns:
        Parsed ConversionOptions.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the options are invalid.
    """
    with open(options_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return ConversionOptions()
    if not isinstance(data, dict):
        raise ValueError("Options file must be a YAML dictionary")

    return parse_options(data)
