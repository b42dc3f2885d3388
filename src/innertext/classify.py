"""Tag and attribute predicates used by the text algorithm.

Every predicate takes any node and answers a yes/no question about it.
Non-element nodes always answer no. ``classify`` folds the predicates the
collector branches on into a single NodeCategory.

Example:
    >>> from innertext.builder import h
    >>> is_block_or_caption(h("div"))
    True
    >>> classify(h("p"))
    <NodeCategory.P: 'p'>
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import TypeAlias

from innertext.errors import ClassifierError
from innertext.nodes import Element, Node

ElementTest: TypeAlias = Callable[[Element], bool]
Test: TypeAlias = str | ElementTest | Iterable[str | ElementTest] | None


def convert_element(test: Test) -> Callable[[Node], bool]:
    """Build a node predicate from a test.

    Args:
        test: A tag name, a callable taking an Element, an iterable mixing
            both (matches if any entry matches), or None (any element).

    Returns:
        Predicate returning True for elements that pass ``test``.

    Raises:
        ClassifierError: If ``test`` is of an unsupported type.

    Examples:
        >>> cell = convert_element(["th", "td"])
        >>> cell(Element("td"))
        True
        >>> cell(Element("tr"))
        False
    """
    if test is None:
        return _any_element

    if isinstance(test, str):
        tag_name = test
        return lambda node: isinstance(node, Element) and node.tag_name == tag_name

    if callable(test):
        check = test
        return lambda node: isinstance(node, Element) and bool(check(node))

    if isinstance(test, Iterable):
        tag_names: set[str] = set()
        checks: list[ElementTest] = []
        for entry in test:
            if isinstance(entry, str):
                tag_names.add(entry)
            elif callable(entry):
                checks.append(entry)
            else:
                msg = f"Expected tag name or callable in element test, got {type(entry).__name__}"
                raise ClassifierError(msg)
        frozen_names = frozenset(tag_names)
        frozen_checks = tuple(checks)

        def _matches_any(node: Node) -> bool:
            if not isinstance(node, Element):
                return False
            if node.tag_name in frozen_names:
                return True
            return any(check(node) for check in frozen_checks)

        return _matches_any

    msg = f"Expected tag name, callable, iterable or None as element test, got {type(test).__name__}"
    raise ClassifierError(msg)


def _any_element(node: Node) -> bool:
    return isinstance(node, Element)


def _hidden(node: Element) -> bool:
    return bool(node.get("hidden"))


def _closed_dialog(node: Element) -> bool:
    return node.tag_name == "dialog" and not node.get("open")


is_br = convert_element("br")
is_p = convert_element("p")
is_table_cell = convert_element(["th", "td"])
is_table_row = convert_element("tr")
is_hidden = convert_element(_hidden)
is_closed_dialog = convert_element(_closed_dialog)

# Void elements are not listed: they have no text.
# See: <https://html.spec.whatwg.org/#hidden-elements>
NOT_RENDERED_TAGS: frozenset[str] = frozenset(
    {
        "datalist",
        "head",
        "noembed",
        "noframes",
        "noscript",  # Act as if scripting is enabled.
        "rp",
        "script",
        "style",
        "template",
        "title",
    }
)

is_not_rendered = convert_element(
    [
        *NOT_RENDERED_TAGS,
        _hidden,
        # See: <https://html.spec.whatwg.org/#flow-content-3>
        _closed_dialog,
    ]
)

# See: <https://html.spec.whatwg.org/#the-css-user-agent-style-sheet-and-presentational-hints>
BLOCK_OR_CAPTION_TAGS: frozenset[str] = frozenset(
    {
        "address",  # Flow content
        "article",  # Sections and headings
        "aside",  # Sections and headings
        "blockquote",  # Flow content
        "body",  # Page
        "caption",  # `table-caption`
        "center",  # Flow content (legacy)
        "dd",  # Lists
        "dialog",  # Flow content
        "dir",  # Lists (legacy)
        "dl",  # Lists
        "dt",  # Lists
        "div",  # Flow content
        "figure",  # Flow content
        "figcaption",  # Flow content
        "footer",  # Flow content
        "form",  # Flow content
        "h1",  # Sections and headings
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",  # Flow content
        "hgroup",  # Sections and headings
        "hr",  # Flow content
        "html",  # Page
        "legend",  # Flow content
        "listing",  # Flow content (legacy)
        "main",  # Flow content
        "menu",  # Lists
        "nav",  # Sections and headings
        "ol",  # Lists
        "p",  # Flow content
        "plaintext",  # Flow content (legacy)
        "pre",  # Flow content
        "section",  # Sections and headings
        "ul",  # Lists
        "xmp",  # Flow content (legacy)
    }
)

is_block_or_caption = convert_element(BLOCK_OR_CAPTION_TAGS)


def is_rendered(node: Node) -> bool:
    """Whether ``node``'s contents take part in the rendered text.

    Only elements can be excluded; every other node counts as rendered.
    """
    return not is_not_rendered(node)


class NodeCategory(Enum):
    """The closed set of node kinds the text collector distinguishes."""

    NOT_RENDERED = "not-rendered"
    BR = "br"
    ROW = "row"
    CELL = "cell"
    P = "p"
    BLOCK_OR_CAPTION = "block-or-caption"
    OTHER = "other"


def classify(node: Node) -> NodeCategory:
    """Return the first category ``node`` falls into.

    Checked in order: not rendered, ``<br>``, table row, table cell, ``<p>``,
    block-or-caption. Everything else, including non-elements, is OTHER.
    """
    if not isinstance(node, Element):
        return NodeCategory.OTHER
    if is_not_rendered(node):
        return NodeCategory.NOT_RENDERED
    if is_br(node):
        return NodeCategory.BR
    if is_table_row(node):
        return NodeCategory.ROW
    if is_table_cell(node):
        return NodeCategory.CELL
    if is_p(node):
        return NodeCategory.P
    if is_block_or_caption(node):
        return NodeCategory.BLOCK_OR_CAPTION
    return NodeCategory.OTHER
