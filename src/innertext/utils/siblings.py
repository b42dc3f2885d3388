"""Sibling lookups within a parent's children.

Nodes carry no back-references, so callers pass the parent (and usually the
child's index) explicitly.

Example:
    >>> from innertext.builder import h
    >>> from innertext.classify import is_table_row
    >>> table = h("table", h("tr"), h("tr"))
    >>> find_after(table, 0, is_table_row) is table.children[1]
    True
"""

from __future__ import annotations

from collections.abc import Callable

from innertext.nodes import Child, Node


def find_after(
    parent: Node,
    start: int | Node,
    test: Callable[[Node], bool] | None = None,
) -> Child | None:
    """Find the first child of ``parent`` after ``start`` that passes ``test``.

    Args:
        parent: Node whose children are searched
        start: Index of a child, or the child itself (matched by identity)
        test: Predicate; None matches any node

    Returns:
        The matching child, or None when there is none (or when ``start`` is
        not a child of ``parent``).
    """
    children: tuple[Child, ...] = getattr(parent, "children", None) or ()

    if isinstance(start, int):
        index = start
    else:
        index = next((i for i, child in enumerate(children) if child is start), -1)
        if index == -1:
            return None

    for child in children[index + 1 :]:
        if test is None or test(child):
            return child
    return None
