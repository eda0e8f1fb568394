"""SVG JSX - Convert SVG markup into React component source."""

__version__ = "0.1.0"

from .config import (
    ConversionOptions,
    FormatterConfig,
    OptimizerConfig,
    PluginConfig,
    parse_options,
    parse_options_file,
)
from .convert import (
    ConversionResult,
    component_name_from_path,
    convert,
    convert_svg_file,
    convert_svg_text,
    format_conversion_report,
    output_filename,
)
from .errors import (
    ConversionError,
    Diagnostic,
    FormatterError,
    GenerationError,
    OptimizerError,
    ParseError,
)
from .generator import generate
from .parser import Comment, Element, TextRun, parse
from .transform import transform

__all__ = [
    # Configuration
    "ConversionOptions",
    "FormatterConfig",
    "OptimizerConfig",
    "PluginConfig",
    "parse_options",
    "parse_options_file",
    # Pipeline
    "ConversionResult",
    "component_name_from_path",
    "convert",
    "convert_svg_file",
    "convert_svg_text",
    "format_conversion_report",
    "output_filename",
    # Errors
    "ConversionError",
    "Diagnostic",
    "FormatterError",
    "GenerationError",
    "OptimizerError",
    "ParseError",
    # Stages
    "Comment",
    "Element",
    "TextRun",
    "parse",
    "transform",
    "generate",
]
