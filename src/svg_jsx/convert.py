"""SVG to JSX conversion pipeline.

The pipeline runs in order: optimize -> parse -> transform -> generate ->
format. Only parse and generate errors stop a conversion; optimizer and
formatter failures fall back to local behavior and are reported as
warnings.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import ConversionOptions, FormatterConfig, LanguageMode, OptimizerConfig
from .errors import (
    Diagnostic,
    FormatterError,
    GenerationError,
    OptimizerError,
    ParseError,
)
from .formatter import format_source, indent_source, minify_source
from .generator import generate
from .optimizer import optimize_svg
from .parser import parse
from .transform import transform

logger = logging.getLogger(__name__)

Optimizer = Callable[[str, OptimizerConfig], str]
Formatter = Callable[[str, FormatterConfig, LanguageMode], str]

DEFAULT_COMPONENT_NAME = "MyIcon"

ERROR_TEMPLATE = (
    "// Error converting SVG: {message}\n"
    "// Please check your SVG syntax and try again."
)

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


@dataclass
class ConversionResult:
    """Outcome of one conversion.

    Exactly one of ``source`` and ``error`` is set.
    """

    component_name: str
    source: str | None = None
    error: Diagnostic | None = None
    warnings: list[Diagnostic] = field(default_factory=list)
    optimized: bool = False

    @property
    def has_errors(self) -> bool:
        """Check if the conversion failed."""
        return self.error is not None

    def to_text(self) -> str:
        """Return the source, or the error rendered as source comments."""
        if self.error is not None:
            return ERROR_TEMPLATE.format(message=self.error.message)
        return self.source or ""


def preprocess(
    svg_text: str,
    options: ConversionOptions,
    warnings: list[Diagnostic],
    optimizer: Optimizer = optimize_svg,
) -> tuple[str, bool]:
    """Optionally run the SVG optimizer.

    Args:
        svg_text: Raw SVG markup.
        options: Conversion options.
        warnings: List that receives a diagnostic if the optimizer fails.
        optimizer: Optimizer callable.

    Returns:
        Tuple of (SVG text, whether it was optimized). On failure the
        original text is returned unchanged.
    """
    if not options.optimize_svg:
        return svg_text, False

    try:
        return optimizer(svg_text, options.optimizer), True
    except OptimizerError as e:
        logger.warning("SVG optimization failed, using original input: %s", e)
        warnings.append(e.to_diagnostic())
        return svg_text, False


def postprocess(
    source: str,
    options: ConversionOptions,
    warnings: list[Diagnostic],
    formatter: Formatter = format_source,
) -> str:
    """Minify or format generated source.

    Minification replaces formatting; the formatter is not called when
    ``minify`` is set. Without the formatter, or when it fails, the
    built-in indenter is used.

    Args:
        source: Generated source.
        options: Conversion options.
        warnings: List that receives a diagnostic if the formatter fails.
        formatter: Formatter callable.

    Returns:
        Final source text.
    """
    if options.minify:
        return minify_source(source)

    if options.use_formatter:
        try:
            return formatter(source, options.formatter, options.language)
        except FormatterError as e:
            logger.warning("Formatting failed, using built-in indenter: %s", e)
            warnings.append(e.to_diagnostic())

    return indent_source(source, options.formatter.tab_width, options.formatter.use_tabs)


def convert_svg_text(
    svg_text: str,
    component_name: str,
    options: ConversionOptions | None = None,
    optimizer: Optimizer = optimize_svg,
    formatter: Formatter = format_source,
) -> ConversionResult:
    """Convert SVG markup into component source.

    Args:
        svg_text: SVG markup.
        component_name: Name of the generated component.
        options: Conversion options (default: ConversionOptions()).
        optimizer: Optimizer callable, used when ``optimize_svg`` is set.
        formatter: Formatter callable, used when ``use_formatter`` is set.

    Returns:
        ConversionResult with either source or an error.
    """
    if options is None:
        options = ConversionOptions()

    result = ConversionResult(component_name=component_name)
    if not svg_text.strip():
        result.source = ""
        return result

    svg_text, result.optimized = preprocess(svg_text, options, result.warnings, optimizer)

    try:
        tree = parse(svg_text)
        transform(tree, options, optimized=result.optimized)
        source = generate(tree, component_name, options)
    except (ParseError, GenerationError) as e:
        logger.debug("Conversion of %s failed: %s", component_name, e)
        result.error = e.to_diagnostic()
        return result

    result.source = postprocess(source, options, result.warnings, formatter)
    logger.debug(
        "Converted %s (%d warning(s))", component_name, len(result.warnings)
    )
    return result


def convert(
    svg_text: str,
    component_name: str,
    options: ConversionOptions | None = None,
    optimizer: Optimizer = optimize_svg,
    formatter: Formatter = format_source,
) -> str:
    """Convert SVG markup into component source text.

    Never raises for bad input: a failed conversion returns the error as
    source comments, so the result can always be displayed as code.

    Args:
        svg_text: SVG markup.
        component_name: Name of the generated component.
        options: Conversion options (default: ConversionOptions()).
        optimizer: Optimizer callable.
        formatter: Formatter callable.

    Returns:
        Component source, or an error comment.

    Example:
        >>> convert("<p>no svg</p>", "Icon")
        '// Error converting SVG: No <svg> root element found\\n// Please check your SVG syntax and try again.'
    """
    try:
        result = convert_svg_text(svg_text, component_name, options, optimizer, formatter)
    except Exception as e:
        logger.exception("Unexpected failure converting %s", component_name)
        return ERROR_TEMPLATE.format(message=str(e) or type(e).__name__)
    return result.to_text()


def component_name_from_path(path: Path) -> str:
    """Derive a PascalCase component name from a file name.

    Examples:
        >>> component_name_from_path(Path("arrow-left.svg"))
        'ArrowLeft'
        >>> component_name_from_path(Path("24px_home.svg"))
        'Svg24pxHome'
    """
    words = _WORD_RE.findall(path.stem)
    name = "".join(word[0].upper() + word[1:] for word in words)
    if not name:
        return DEFAULT_COMPONENT_NAME
    if name[0].isdigit():
        name = f"Svg{name}"
    return name


def output_filename(component_name: str, typescript: bool) -> str:
    """File name for generated source: ``<name>.tsx`` or ``<name>.jsx``."""
    extension = "tsx" if typescript else "jsx"
    return f"{component_name}.{extension}"


def convert_svg_file(
    svg_path: Path,
    component_name: str | None = None,
    options: ConversionOptions | None = None,
    optimizer: Optimizer = optimize_svg,
    formatter: Formatter = format_source,
) -> ConversionResult:
    """Convert an SVG file into component source.

    Args:
        svg_path: Path to the SVG file.
        component_name: Component name (default: derived from the file name).
        options: Conversion options.
        optimizer: Optimizer callable.
        formatter: Formatter callable.

    Returns:
        ConversionResult.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the file is not UTF-8 text.
    """
    svg_text = svg_path.read_text(encoding="utf-8")
    if component_name is None:
        component_name = component_name_from_path(svg_path)
    return convert_svg_text(svg_text, component_name, options, optimizer, formatter)


def format_conversion_report(result: ConversionResult) -> str:
    """Format a conversion result summary as text.

    Args:
        result: Conversion result.

    Returns:
        Formatted text.
    """
    lines: list[str] = []
    lines.append(f"Component: {result.component_name}")
    lines.append(f"Optimized: {'yes' if result.optimized else 'no'}")

    for warning in result.warnings:
        lines.append(f"  [WARNING] {warning}")
    if result.error is not None:
        lines.append(f"  [ERROR] {result.error}")

    if result.has_errors:
        lines.append("*** CONVERSION FAILED - No output generated ***")
    else:
        lines.append("Conversion completed successfully.")

    return "\n".join(lines)
