"""Source formatting: Prettier adapter, fallback indenter and minifier."""

import logging
import re
import subprocess

from .config import FormatterConfig, LanguageMode
from .errors import FormatterError

logger = logging.getLogger(__name__)

# Prettier's names for the trailing comma modes
_TRAILING_COMMA_FLAGS = {"none": "none", "minimal": "es5", "all": "all"}

_STRING_RE = re.compile(r"\"[^\"]*\"|'[^']*'")
_WHITESPACE_RE = re.compile(r"\s+")
_BETWEEN_TAGS_RE = re.compile(r">\s+<")
_LINE_BREAK_AFTER_TAG_RE = re.compile(r">[ \t]*\r?\n\s*")
_LINE_BREAK_BEFORE_TAG_RE = re.compile(r"\s*\n[ \t]*<")
_SEMICOLON_BRACE_RE = re.compile(r";\s*}")
_PUNCTUATION_RE = re.compile(r"\s*([{}=,;])\s*")


def prettier_arguments(config: FormatterConfig, language: LanguageMode) -> list[str]:
    """Build Prettier CLI arguments for a formatter configuration.

    Args:
        config: Formatter configuration.
        language: ``typescript`` or ``plain``.

    Returns:
        Command-line arguments (without the command itself).
    """
    args = [
        "--parser",
        "typescript" if language == "typescript" else "babel",
        "--print-width",
        str(config.print_width),
        "--tab-width",
        str(config.tab_width),
        "--trailing-comma",
        _TRAILING_COMMA_FLAGS[config.trailing_comma],
        "--arrow-parens",
        config.arrow_parens,
    ]
    if config.use_tabs:
        args.append("--use-tabs")
    if not config.semicolons:
        args.append("--no-semi")
    if config.quote_style == "single":
        args.extend(["--single-quote", "--jsx-single-quote"])
    if not config.bracket_spacing:
        args.append("--no-bracket-spacing")
    return args


def format_source(source: str, config: FormatterConfig, language: LanguageMode) -> str:
    """Format source text with the Prettier CLI.

    Args:
        source: Source text to format.
        config: Formatter configuration.
        language: ``typescript`` or ``plain``.

    Returns:
        Formatted source text.

    Raises:
        FormatterError: If Prettier is missing, times out or rejects the input.
    """
    command = [*config.command, *prettier_arguments(config, language)]
    logger.debug("Running formatter: %s", " ".join(command))
    try:
        result = subprocess.run(
            command,
            input=source,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=config.timeout,
        )
    except FileNotFoundError as e:
        raise FormatterError(f"Formatter command not found: {config.command[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise FormatterError(f"Formatter timed out after {config.timeout:g}s") from e

    if result.returncode != 0:
        message = result.stderr.strip() or f"exit status {result.returncode}"
        raise FormatterError(f"Formatter failed: {message}")
    if not result.stdout.strip():
        raise FormatterError("Formatter returned no output")
    return result.stdout


def _closes_block(line: str) -> bool:
    return line.startswith(("</", "}", ")"))


def _opens_block(line: str) -> bool:
    if line.startswith("<") and not line.startswith("</"):
        # Opening tag, unless it closes itself on the same line
        return not line.endswith("/>") and "</" not in line
    return line.endswith(("{", "("))


def indent_source(source: str, tab_width: int = 2, use_tabs: bool = False) -> str:
    """Re-indent source text line by line.

    Indentation increases after opening tags, ``{`` and ``(`` left open at
    the end of a line, and decreases before lines starting with a closing
    tag, ``}`` or ``)``. Blank lines are kept empty.

    Args:
        source: Source text.
        tab_width: Spaces per indentation level.
        use_tabs: Indent with tabs instead of spaces.

    Returns:
        Re-indented source text.
    """
    unit = "\t" if use_tabs else " " * tab_width
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    result: list[str] = []
    level = 0
    for line in lines:
        stripped = line.strip()
        if not stripped:
            result.append("")
            continue

        if _closes_block(stripped):
            level = max(0, level - 1)
        result.append(unit * level + stripped)
        if _opens_block(stripped):
            level += 1

    return "\n".join(result)


def _minify_code(code: str) -> str:
    # JSX drops whitespace that contains a line break, so it must not turn
    # into a space next to a tag
    code = _LINE_BREAK_AFTER_TAG_RE.sub(">", code)
    code = _LINE_BREAK_BEFORE_TAG_RE.sub("<", code)
    code = _WHITESPACE_RE.sub(" ", code)
    code = _BETWEEN_TAGS_RE.sub("><", code)
    code = _SEMICOLON_BRACE_RE.sub("}", code)
    return _PUNCTUATION_RE.sub(r"\1", code)


def minify_source(source: str) -> str:
    """Collapse source text onto a single line.

    Whitespace runs become single spaces, whitespace around ``{ } = , ;``
    and between tags is removed, as is whitespace containing a line break
    next to a tag, and a ``;`` before ``}`` is dropped.
    String literals keep their content apart from whitespace runs, which
    are collapsed to one space.

    Args:
        source: Source text.

    Returns:
        Minified source without newlines.
    """
    parts: list[str] = []
    last = 0
    for match in _STRING_RE.finditer(source):
        parts.append(_minify_code(source[last : match.start()]))
        parts.append(_WHITESPACE_RE.sub(" ", match.group()))
        last = match.end()
    parts.append(_minify_code(source[last:]))
    return "".join(parts).strip()
