"""Tests for the hastscript-style builder."""

import pytest

from innertext.builder import comment, doctype, h, root, text
from innertext.nodes import Comment, Doctype, Element, Root, Text


class TestSelector:
    """Parsing of tag#id.class selectors."""

    def test_tag_only(self) -> None:
        node = h("p")
        assert node.tag_name == "p"
        assert node.properties == {}
        assert node.children == ()

    def test_tag_is_lowercased(self) -> None:
        assert h("TD").tag_name == "td"

    def test_id_and_classes(self) -> None:
        node = h("div#main.note.wide")
        assert node.tag_name == "div"
        assert node.properties == {"id": "main", "className": ["note", "wide"]}

    def test_defaults_to_div(self) -> None:
        node = h(".note")
        assert node.tag_name == "div"
        assert node.properties == {"className": ["note"]}

    def test_empty_parts_are_ignored(self) -> None:
        assert h("span.").properties == {}


class TestProperties:
    """The optional properties mapping."""

    def test_properties(self) -> None:
        node = h("p", {"hidden": True, "title": "x"}, "a")
        assert node.properties == {"hidden": True, "title": "x"}
        assert node.children == (Text("a"),)

    def test_attribute_names_are_mapped(self) -> None:
        node = h("td", {"nowrap": True, "class": "a b"})
        assert node.properties == {"noWrap": True, "className": ["a", "b"]}

    def test_none_values_are_dropped(self) -> None:
        assert h("p", {"hidden": None}).properties == {}

    def test_properties_merge_with_selector(self) -> None:
        node = h("p#first", {"lang": "en"})
        assert node.properties == {"id": "first", "lang": "en"}


class TestChildren:
    """Child coercion and flattening."""

    def test_strings_become_text(self) -> None:
        assert h("p", "a", "b").children == (Text("a"), Text("b"))

    def test_numbers_become_text(self) -> None:
        assert h("td", 1, 2.5).children == (Text("1"), Text("2.5"))

    def test_none_and_bools_are_skipped(self) -> None:
        assert h("p", None, True, False, "a").children == (Text("a"),)

    def test_lists_are_flattened(self) -> None:
        node = h("ul", [h("li", "a"), [h("li", "b")]])
        assert [child.tag_name for child in node.children] == ["li", "li"]

    def test_generators_are_flattened(self) -> None:
        node = h("ul", (h("li", str(i)) for i in range(3)))
        assert len(node.children) == 3

    def test_root_children_are_spliced(self) -> None:
        node = h("p", root("a", h("b")), "c")
        assert node.children == (Text("a"), h("b"), Text("c"))

    def test_nodes_are_kept(self) -> None:
        note = comment("note")
        assert h("p", note).children == (note,)

    def test_unsupported_child(self) -> None:
        with pytest.raises(TypeError, match="object"):
            h("p", object())


class TestOtherNodes:
    """root, text, comment and doctype helpers."""

    def test_root(self) -> None:
        tree = root(doctype(), h("html"))
        assert isinstance(tree, Root)
        assert isinstance(tree.children[0], Doctype)
        assert isinstance(tree.children[1], Element)

    def test_text(self) -> None:
        assert text("a") == Text(value="a")

    def test_comment(self) -> None:
        assert comment("a") == Comment(value="a")

    def test_doctype_default_name(self) -> None:
        assert doctype().name == "html"
