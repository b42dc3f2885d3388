"""Build trees with a compact, hastscript-style helper.

``h(selector, properties?, *children)`` creates an Element. Strings become
Text nodes, lists and tuples are flattened, and None is skipped, so trees
read close to the markup they stand for.

Example:
    >>> tree = h("table", [h("tr", [h("th", "Oscar"), h("th", "Papa")])])
    >>> tree.children[0].children[1]
    Element(tag_name='th', properties={}, children=(Text(value='Papa', position=None),), position=None)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from innertext.nodes import Child, Comment, Doctype, Element, Node, PropertyValue, Root, Text

ChildLike: TypeAlias = Node | str | int | float | Iterable["ChildLike"] | None

# HTML attribute names whose hast property name differs from the attribute.
_PROPERTY_NAMES: dict[str, str] = {
    "class": "className",
    "for": "htmlFor",
    "http-equiv": "httpEquiv",
    "nowrap": "noWrap",
    "accept-charset": "acceptCharset",
}


def h(selector: str, *args: Any) -> Element:
    """Create an element.

    Args:
        selector: Tag name, optionally followed by ``#id`` and ``.class``
            parts (``"div#main.note"``)
        *args: An optional properties mapping first, then children

    Returns:
        The new Element.

    Examples:
        >>> h("p", {"hidden": True}, "Kilo").properties
        {'hidden': True}
        >>> h("div.note").properties
        {'className': ['note']}
    """
    tag_name, properties = _parse_selector(selector)

    rest = args
    if rest and isinstance(rest[0], Mapping):
        for name, value in rest[0].items():
            properties.update(_property(name, value))
        rest = rest[1:]

    return Element(tag_name=tag_name, properties=properties, children=_children(rest))


def root(*children: ChildLike) -> Root:
    """Create a root holding ``children``."""
    return Root(children=_children(children))


def text(value: str) -> Text:
    """Create a text node."""
    return Text(value=value)


def comment(value: str) -> Comment:
    """Create a comment node."""
    return Comment(value=value)


def doctype(name: str = "html") -> Doctype:
    """Create a doctype node."""
    return Doctype(name=name)


def _parse_selector(selector: str) -> tuple[str, dict[str, PropertyValue]]:
    properties: dict[str, PropertyValue] = {}
    class_names: list[str] = []

    # Scan backwards so "a#b.c.d" splits into tag, id and classes
    cut = len(selector)
    for index in range(len(selector) - 1, -1, -1):
        marker = selector[index]
        if marker not in "#.":
            continue
        value = selector[index + 1 : cut]
        if value:
            if marker == "#":
                properties["id"] = value
            else:
                class_names.insert(0, value)
        cut = index
    tag_name = selector[:cut] or "div"

    if class_names:
        properties["className"] = class_names
    return tag_name.lower(), properties


def _property(name: str, value: Any) -> dict[str, PropertyValue]:
    key = _PROPERTY_NAMES.get(name, name)
    if value is None:
        return {}
    if key == "className" and isinstance(value, str):
        return {key: value.split()}
    return {key: value}


def _children(values: Iterable["ChildLike"]) -> tuple[Child, ...]:
    result: list[Child] = []
    for value in values:
        match value:
            case None:
                continue
            case Root(children=children):
                # A root cannot be a child; splice its children in place
                result.extend(children or ())
            case Node():
                result.append(value)  # type: ignore[arg-type]
            case str():
                result.append(Text(value=value))
            case bool():
                continue
            case int() | float():
                result.append(Text(value=str(value)))
            case Iterable():
                result.extend(_children(value))
            case _:
                msg = f"Cannot use {type(value).__name__} as a child node"
                raise TypeError(msg)
    return tuple(result)
