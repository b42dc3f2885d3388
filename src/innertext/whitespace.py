"""Infer the CSS ``white-space`` value of a node.

Only the values the HTML user-agent stylesheet and presentational hints can
produce are modelled. Stylesheets are not supported, so an element inherits
its parent's value unless its tag or attributes say otherwise.

Void elements are not special-cased (``nobr wbr`` -> ``normal`` is ignored):
they have no text.
"""

from __future__ import annotations

from enum import StrEnum

from innertext.nodes import Element, Node


class WhiteSpace(StrEnum):
    """Supported values of the CSS ``white-space`` property.

    ``pre``, ``pre-wrap`` and ``nowrap`` all disable collapsing; they differ
    only in soft wrapping, which does not change the text.

    """

    NORMAL = "normal"
    PRE = "pre"
    NOWRAP = "nowrap"
    PRE_WRAP = "pre-wrap"

    @property
    def collapses(self) -> bool:
        """Whether runs of spaces, tabs and line feeds are collapsed."""
        return self is WhiteSpace.NORMAL


def infer_whitespace(node: Node, inherited: WhiteSpace) -> WhiteSpace:
    """Compute the ``white-space`` value of ``node``.

    Args:
        node: Any tree node
        inherited: The parent's value

    Returns:
        The value that applies to ``node``'s contents.

    Examples:
        >>> infer_whitespace(Element("pre"), WhiteSpace.NORMAL)
        <WhiteSpace.PRE: 'pre'>
        >>> infer_whitespace(Element("pre", {"wrap": True}), WhiteSpace.NORMAL)
        <WhiteSpace.PRE_WRAP: 'pre-wrap'>
    """
    if not isinstance(node, Element):
        return inherited

    match node.tag_name:
        case "listing" | "plaintext" | "xmp":
            return WhiteSpace.PRE
        case "nobr":
            return WhiteSpace.NOWRAP
        case "pre":
            return WhiteSpace.PRE_WRAP if node.get("wrap") else WhiteSpace.PRE
        case "td" | "th":
            return WhiteSpace.NOWRAP if node.get("noWrap") else inherited
        case "textarea":
            return WhiteSpace.PRE_WRAP
        case _:
            return inherited
