"""JSX serialization and component scaffolding."""

from .config import ConversionOptions, QuoteStyle
from .errors import GenerationError
from .parser import Comment, Element, Node, TextRun

INDENT = "  "
PROPS_SPREAD = "{...props}"
PROPS_TYPE = "React.SVGProps<SVGSVGElement>"
SPACE = '{" "}'

QUOTE_CHARS: dict[QuoteStyle, str] = {"double": '"', "single": "'"}
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&#39;"}


def quote_attribute(value: str, quote: str = '"') -> str:
    """Quote an attribute value for JSX.

    The preferred quote character is used unless the value contains it, in
    which case the other quote character is used. If the value contains
    both, the preferred quote is written as an HTML entity, which JSX
    decodes in attribute strings.

    Examples:
        >>> quote_attribute("0 0 10 10")
        '"0 0 10 10"'
        >>> quote_attribute('say "hi"')
        '\\'say "hi"\\''
    """
    other = "'" if quote == '"' else '"'
    if quote not in value:
        return f"{quote}{value}{quote}"
    if other not in value:
        return f"{other}{value}{other}"
    return f"{quote}{value.replace(quote, _QUOTE_ENTITIES[quote])}{quote}"


def format_comment(text: str) -> str:
    """Format comment text as a JSX comment expression."""
    body = text.strip().replace("*/", "*\\/")
    if not body:
        return "{/* */}"
    return f"{{/* {body} */}}"


def escape_text(text: str) -> str:
    """Collapse whitespace in character data and escape JSX braces and angle brackets."""
    collapsed = " ".join(text.split())
    escaped = []
    for char in collapsed:
        if char in "{}<>":
            escaped.append(f'{{"{char}"}}')
        else:
            escaped.append(char)
    return "".join(escaped)


def _is_blank(node: Node) -> bool:
    return isinstance(node, TextRun) and not node.text.strip()


def _mixed_text(children: list[Node], index: int) -> str:
    """Render a text run that sits among element or comment siblings.

    JSX drops whitespace at line breaks, so whitespace that separates the
    text from a sibling is written as an explicit ``{" "}``. A blank run is
    kept as ``{" "}`` only when it separates two siblings on one line.
    """
    text = children[index].text
    inner = 0 < index < len(children) - 1
    if not text.strip():
        return SPACE if inner and "\n" not in text else ""

    body = escape_text(text)
    if text[0].isspace() and index > 0:
        body = SPACE + body
    if text[-1].isspace() and index < len(children) - 1:
        body = body + SPACE
    return body


def format_attributes(attributes: dict[str, str], quote: str = '"') -> list[str]:
    """Format attributes as ``name="value"`` strings, in order."""
    return [f"{name}={quote_attribute(value, quote)}" for name, value in attributes.items()]


def serialize(
    element: Element,
    quote: str = '"',
    level: int = 0,
    extra_attributes: tuple[str, ...] = (),
) -> list[str]:
    """Serialize an element and its descendants to JSX lines.

    Elements without children are self-closed. An element whose only
    children are text is written on one line. The tree is walked with an
    explicit stack, so nesting depth is not limited by the recursion limit.

    Args:
        element: Element to serialize.
        quote: Preferred attribute quote character.
        level: Indentation level of the element.
        extra_attributes: Pre-formatted attributes appended after the
            element's own attributes.

    Returns:
        Indented lines of JSX markup.
    """
    lines: list[str] = []
    # Items are elements still to open, or finished lines such as close tags
    stack: list[tuple[Element, int, tuple[str, ...]] | str] = [
        (element, level, extra_attributes)
    ]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            lines.append(item)
            continue

        node, depth, extra = item
        pad = INDENT * depth
        parts = format_attributes(node.attributes, quote) + list(extra)
        open_tag = "".join([f"<{node.tag}"] + [f" {part}" for part in parts])

        if all(_is_blank(child) for child in node.children):
            lines.append(f"{pad}{open_tag} />")
            continue

        if all(isinstance(child, TextRun) for child in node.children):
            text = escape_text("".join(child.text for child in node.children))
            lines.append(f"{pad}{open_tag}>{text}</{node.tag}>")
            continue

        lines.append(f"{pad}{open_tag}>")
        pending: list[tuple[Element, int, tuple[str, ...]] | str] = []
        for index, child in enumerate(node.children):
            if isinstance(child, Element):
                pending.append((child, depth + 1, ()))
            elif isinstance(child, Comment):
                pending.append(f"{pad}{INDENT}{format_comment(child.text)}")
            else:
                text = _mixed_text(node.children, index)
                if text:
                    pending.append(f"{pad}{INDENT}{text}")
        pending.append(f"{pad}</{node.tag}>")
        stack.extend(reversed(pending))
    return lines


def generate_imports(options: ConversionOptions) -> list[str]:
    """Generate the import lines required by the component."""
    if options.omit_imports:
        return []

    quote = QUOTE_CHARS[options.quotes]
    source = f"{quote}react{quote}"
    if options.typescript and options.memo:
        return [f"import React, {{ memo }} from {source};"]
    if options.typescript:
        return [f"import React from {source};"]
    if options.memo:
        return [f"import {{ memo }} from {source};"]
    return []


def generate_export(
    component_name: str, component_code: str, options: ConversionOptions
) -> str:
    """Wrap a component expression in the configured export form.

    Args:
        component_name: Component name.
        component_code: Component function expression.
        options: Conversion options.

    Returns:
        Export statement(s).
    """
    export_name = options.export_name or component_name

    if options.export_style == "default":
        return f"export default {component_code};"

    if options.export_style == "named":
        # An expression cannot be renamed at the export site, so bind it first
        if export_name == component_name:
            export_clause = f"export {{ {component_name} }};"
        else:
            export_clause = f"export {{ {component_name} as {export_name} }};"
        return f"const {component_name} = {component_code};\n\n{export_clause}"

    return f"export const {export_name} = {component_code};"


def generate_component(root: Element, options: ConversionOptions) -> str:
    """Generate the component function expression for an svg tree."""
    quote = QUOTE_CHARS[options.quotes]
    extra = (PROPS_SPREAD,) if options.pass_props else ()
    markup = serialize(root, quote, level=2, extra_attributes=extra)

    props = f"props: {PROPS_TYPE}" if options.typescript else "props"
    lines = [f"({props}) => {{", f"{INDENT}return ("]
    lines.extend(markup)
    lines.extend([f"{INDENT});", "}"])
    function = "\n".join(lines)

    if options.memo:
        return f"memo({function})"
    return function


def generate(root: Element, component_name: str, options: ConversionOptions) -> str:
    """Generate component source text from a transformed svg tree.

    Args:
        root: Transformed root element.
        component_name: Name of the generated component.
        options: Conversion options.

    Returns:
        Unformatted component source.

    Raises:
        GenerationError: If the root element is not svg.
    """
    if root.tag != "svg":
        raise GenerationError(f"Expected an <svg> root element, got <{root.tag}>")

    component = generate_component(root, options)
    statement = generate_export(component_name, component, options)

    imports = generate_imports(options)
    if imports:
        return "\n".join(imports) + "\n\n" + statement
    return statement
