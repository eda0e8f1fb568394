"""Tolerant SVG markup parser.

The parser works in two passes:
- tokenize: split markup into text, comment, tag and attribute tokens
- parse: build an element tree rooted at the first <svg> element

Unlike xml.etree, it accepts void elements written without a closing slash
(``<path d="...">``), unquoted attribute values and stray close tags, and it
keeps comments as nodes.
"""

import re
from dataclasses import dataclass, field
from typing import Generator, Iterator, Literal, NamedTuple

from .attributes import is_void_element
from .errors import ParseError

TokenKind = Literal[
    "text",
    "comment",
    "cdata",
    "open",
    "attr",
    "end",
    "self_close",
    "close",
]

_TAG_NAME_RE = re.compile(r"[A-Za-z_][\w:.-]*")
_ATTR_NAME_RE = re.compile(r"[^\s=/>\"'<]+")
# A "/" directly followed by ">" ends the tag, not the value
_UNQUOTED_VALUE_RE = re.compile(r"(?:[^\s\"'>/]|/(?!>))+")
_WHITESPACE_RE = re.compile(r"\s*")


class Token(NamedTuple):
    """A lexical token.

    For ``attr`` tokens, ``value`` is the attribute name and ``extra`` the
    unquoted attribute value. For other kinds ``extra`` is empty.
    """

    kind: TokenKind
    value: str
    extra: str = ""
    pos: int = 0


@dataclass
class TextRun:
    """Character data inside an element."""

    text: str


@dataclass
class Comment:
    """Comment body, without the <!-- --> delimiters."""

    text: str


@dataclass
class Element:
    """An element with ordered attributes and children."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    @property
    def is_void(self) -> bool:
        """Check if this element is always self-closing."""
        return is_void_element(self.tag)

    def iter(self) -> Iterator["Element"]:
        """Iterate over this element and all descendant elements, depth-first."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(
                child for child in reversed(element.children) if isinstance(child, Element)
            )


Node = Element | TextRun | Comment


def _skip_declaration(text: str, pos: int) -> int:
    """Skip a <!...> declaration such as <!DOCTYPE>, including an internal subset."""
    close = text.find(">", pos)
    if close == -1:
        return len(text)
    bracket = text.find("[", pos, close)
    if bracket != -1:
        subset_end = text.find("]", bracket)
        if subset_end == -1:
            return len(text)
        close = text.find(">", subset_end)
        if close == -1:
            return len(text)
    return close + 1


def _tokenize_attributes(text: str, pos: int) -> Generator[Token, None, int]:
    """Tokenize attributes up to and including the end of a start tag.

    Returns (via StopIteration) the position after the tag.
    """
    length = len(text)
    while True:
        pos = _WHITESPACE_RE.match(text, pos).end()
        if pos >= length:
            return length
        if text.startswith("/>", pos):
            yield Token("self_close", "/>", pos=pos)
            return pos + 2
        if text[pos] == ">":
            yield Token("end", ">", pos=pos)
            return pos + 1

        match = _ATTR_NAME_RE.match(text, pos)
        if match is None:
            # Stray "/", quote or "<" inside a tag
            pos += 1
            continue

        name = match.group()
        attr_pos = pos
        value = ""
        pos = _WHITESPACE_RE.match(text, match.end()).end()
        if pos < length and text[pos] == "=":
            pos = _WHITESPACE_RE.match(text, pos + 1).end()
            if pos < length and text[pos] in "\"'":
                quote = text[pos]
                close = text.find(quote, pos + 1)
                if close == -1:
                    yield Token("attr", name, text[pos + 1 :], attr_pos)
                    return length
                value = text[pos + 1 : close]
                pos = close + 1
            else:
                value_match = _UNQUOTED_VALUE_RE.match(text, pos)
                if value_match is not None:
                    value = value_match.group()
                    pos = value_match.end()
        yield Token("attr", name, value, attr_pos)


def tokenize(text: str) -> Iterator[Token]:
    """Split SVG markup into tokens.

    XML declarations, processing instructions and <!DOCTYPE> declarations
    produce no tokens.

    Args:
        text: SVG markup.

    Yields:
        Tokens in document order.

    Example:
        >>> [t.kind for t in tokenize('<svg a="1"><!--x--></svg>')]
        ['open', 'attr', 'end', 'comment', 'close']
    """
    pos = 0
    length = len(text)
    while pos < length:
        lt = text.find("<", pos)
        if lt == -1:
            yield Token("text", text[pos:], pos=pos)
            return
        if lt > pos:
            yield Token("text", text[pos:lt], pos=pos)

        if text.startswith("<!--", lt):
            end = text.find("-->", lt + 4)
            if end == -1:
                yield Token("comment", text[lt + 4 :], pos=lt)
                return
            yield Token("comment", text[lt + 4 : end], pos=lt)
            pos = end + 3
        elif text.startswith("<![CDATA[", lt):
            end = text.find("]]>", lt + 9)
            if end == -1:
                yield Token("cdata", text[lt + 9 :], pos=lt)
                return
            yield Token("cdata", text[lt + 9 : end], pos=lt)
            pos = end + 3
        elif text.startswith("<?", lt):
            end = text.find("?>", lt + 2)
            if end == -1:
                return
            pos = end + 2
        elif text.startswith("<!", lt):
            pos = _skip_declaration(text, lt)
        elif text.startswith("</", lt):
            end = text.find(">", lt + 2)
            if end == -1:
                return
            match = _TAG_NAME_RE.match(text, lt + 2)
            if match is not None:
                yield Token("close", match.group(), pos=lt)
            pos = end + 1
        else:
            match = _TAG_NAME_RE.match(text, lt + 1)
            if match is None:
                # A "<" that does not start a tag is character data
                yield Token("text", "<", pos=lt)
                pos = lt + 1
                continue
            yield Token("open", match.group(), pos=lt)
            pos = yield from _tokenize_attributes(text, match.end())


def parse(text: str) -> Element:
    """Parse SVG markup into an element tree.

    The first <svg> element is the root. Content before it and after its
    close tag is dropped. Inside the root, parsing is best-effort: void
    elements need no closing slash, a close tag closes every element opened
    after its match, and close tags without a match are ignored.

    Args:
        text: SVG markup.

    Returns:
        Root svg element.

    Raises:
        ParseError: If there is no <svg> element or it is never closed.
    """
    root: Element | None = None
    stack: list[Element] = []
    pending: Element | None = None

    for token in tokenize(text):
        kind = token.kind

        if kind == "open":
            pending = Element(tag=token.value)

        elif kind == "attr":
            if pending is not None:
                # First occurrence wins on duplicates
                pending.attributes.setdefault(token.value, token.extra)

        elif kind in ("end", "self_close"):
            if pending is None:
                continue
            element, pending = pending, None

            if stack:
                stack[-1].children.append(element)
            elif root is None and element.tag == "svg":
                root = element
            else:
                continue

            if kind == "end" and not element.is_void:
                stack.append(element)
            elif element is root:
                return root

        elif kind == "close":
            for depth in range(len(stack) - 1, -1, -1):
                if stack[depth].tag == token.value:
                    del stack[depth:]
                    if not stack:
                        return root
                    break

        elif stack:
            if kind == "comment":
                stack[-1].children.append(Comment(token.value))
            else:
                stack[-1].children.append(TextRun(token.value))

    if root is None:
        raise ParseError("No <svg> root element found")
    raise ParseError("The <svg> root element is never closed")
