"""Rewrite a parsed SVG tree to JSX conventions."""

from .attributes import jsx_attribute_name
from .config import ConversionOptions
from .parser import Element


def rename_attributes(element: Element) -> None:
    """Rename the attributes of a single element to their JSX spelling.

    Attribute order is preserved. If two attributes map to the same JSX
    name (e.g. ``class`` and ``className``), the first one wins.

    Args:
        element: Element to modify in place.
    """
    renamed: dict[str, str] = {}
    for name, value in element.attributes.items():
        renamed.setdefault(jsx_attribute_name(name), value)
    element.attributes = renamed


def strip_ids(root: Element) -> int:
    """Remove every id attribute in the tree.

    Args:
        root: Root element.

    Returns:
        Number of id attributes removed.
    """
    removed = 0
    for element in root.iter():
        if element.attributes.pop("id", None) is not None:
            removed += 1
    return removed


def transform(
    root: Element, options: ConversionOptions, optimized: bool = False
) -> Element:
    """Transform a parsed tree in place.

    Running the transform again on its own output changes nothing.

    Args:
        root: Root svg element (modified in place).
        options: Conversion options.
        optimized: Whether the SVG went through the optimizer, in which case
            id handling is left to the optimizer.

    Returns:
        The same root element.
    """
    for element in root.iter():
        rename_attributes(element)

    if options.remove_ids and not optimized:
        strip_ids(root)

    return root
