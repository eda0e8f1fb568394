"""Tests for svg_jsx.attributes module."""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_jsx.attributes import (
    ATTRIBUTE_MAP,
    VOID_ELEMENTS,
    is_void_element,
    jsx_attribute_name,
)


class TestJsxAttributeName:
    """Tests for jsx_attribute_name function."""

    def test_mapped_names(self):
        assert jsx_attribute_name("stroke-width") == "strokeWidth"
        assert jsx_attribute_name("font-family") == "fontFamily"
        assert jsx_attribute_name("xlink:href") == "xlinkHref"

    def test_class_becomes_class_name(self):
        assert jsx_attribute_name("class") == "className"

    def test_unmapped_names_pass_through(self):
        assert jsx_attribute_name("viewBox") == "viewBox"
        assert jsx_attribute_name("d") == "d"
        assert jsx_attribute_name("data-name") == "data-name"

    def test_camel_case_names_have_no_entry(self):
        for camel in ATTRIBUTE_MAP.values():
            assert jsx_attribute_name(camel) == camel

    def test_table_size(self):
        assert len(ATTRIBUTE_MAP) >= 80


class TestIsVoidElement:
    """Tests for is_void_element function."""

    def test_svg_void_elements(self):
        for tag in ["circle", "ellipse", "line", "path", "polygon", "polyline", "rect", "stop", "use"]:
            assert is_void_element(tag)

    def test_html_void_elements(self):
        assert is_void_element("br")
        assert is_void_element("img")

    def test_case_insensitive(self):
        assert is_void_element("PATH")

    def test_container_elements(self):
        assert not is_void_element("svg")
        assert not is_void_element("g")
        assert not is_void_element("text")


class TestVoidElements:
    """Tests for the VOID_ELEMENTS set."""

    def test_entries_are_lowercase(self):
        assert all(tag == tag.lower() for tag in VOID_ELEMENTS)

    def test_every_entry_is_void(self):
        for tag in VOID_ELEMENTS:
            assert is_void_element(tag.upper())

    def test_void_set_complete(self):
        assert {"circle", "path", "rect", "use", "br"} <= VOID_ELEMENTS
