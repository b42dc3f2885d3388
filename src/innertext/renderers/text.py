"""innerText renderer: the text a browser would expose for a tree.

Implements the ``innerText`` getter over a hast-style tree, acting as if the
node is being rendered by a CSS-supporting user agent with only the default
user-agent stylesheet:
<https://html.spec.whatwg.org/#the-innertext-idl-attribute>

Collection walks the tree once and produces a flat list of items: text
fragments, and required line break counts. A final pass turns each run of
counts into as many line feeds as its largest count, dropping runs at the
very start or end.

Example:
    >>> from innertext.builder import h
    >>> to_text(h("div", h("p", "Foxtrot."), h("p", "Golf.")))
    'Foxtrot.\\n\\nGolf.'

Thread Safety:
All per-render state lives in local lists and a StringBuilder created for each
render() call. A single InnerTextRenderer can be shared across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from innertext.classify import (
    NodeCategory,
    classify,
    is_block_or_caption,
    is_br,
    is_table_cell,
    is_table_row,
)
from innertext.config import coerce_whitespace, get_text_config
from innertext.nodes import Comment, Element, Node, Text
from innertext.stringbuilder import StringBuilder
from innertext.text import collect_preformatted_text, collect_text
from innertext.utils.siblings import find_after
from innertext.whitespace import WhiteSpace, infer_whitespace

LINE_FEED = "\n"
TAB = "\t"


@dataclass(frozen=True, slots=True)
class RequiredLineBreaks:
    """At least ``count`` line feeds must separate the text around this point.

    1 comes from block-level boxes, 2 from ``<p>`` elements.

    """

    count: Literal[1, 2]


Item: TypeAlias = str | RequiredLineBreaks

# A break before content is a count (or nothing); after content it may also be
# a forced line feed from a <br> or a table row.
BreakBefore: TypeAlias = Literal[1, 2] | bool | None
BreakAfter: TypeAlias = Literal[1, 2] | Literal["\n"] | bool | None


@dataclass(frozen=True, slots=True)
class CollectionContext:
    """What a child inherits from its parent during collection.

    Attributes:
        whitespace: The parent's ``white-space`` value
        break_before: Break directly before this child, if any (only set for
            the first child)
        break_after: Break directly after this child: the parent's suffix for
            the last child, otherwise whether the next sibling is a ``<br>``

    """

    whitespace: WhiteSpace
    break_before: BreakBefore = None
    break_after: BreakAfter = None


class InnerTextRenderer:
    """Render a tree to its ``innerText``.

    Usage:
        >>> renderer = InnerTextRenderer()
        >>> renderer.render(h("p", "Alpha   bravo"))
        'Alpha bravo'

        >>> # Assume the node sits inside a <pre>
        >>> InnerTextRenderer(whitespace="pre").render(h("span", " a  b "))
        ' a  b '

    """

    __slots__ = ("_whitespace",)

    def __init__(self, whitespace: WhiteSpace | str | None = None) -> None:
        """Initialize the renderer.

        Args:
            whitespace: ``white-space`` value to assume for the rendered
                node's parent. None reads it from the active TextConfig at
                render time.

        Raises:
            ConfigError: If ``whitespace`` is not a supported value.
        """
        self._whitespace = None if whitespace is None else coerce_whitespace(whitespace)

    def render(self, node: Node) -> str:
        """Render ``node`` to text.

        Text and comment nodes are treated as having normal white-space with
        breaks on both sides, and their own collapsed value is returned (the
        DOM would return their raw data). Every other node is handled as if it
        were an element, so roots work, and nodes without children (such as
        doctypes) give the empty string.

        Note that ``node`` itself is acted upon as if it is rendered: a
        ``<title>`` or a ``hidden`` element passed in directly still gives
        its text.
        """
        seed = self._whitespace or get_text_config().whitespace

        match node:
            case Text(value=value) | Comment(value=value):
                return collect_text(value, break_before=True, break_after=True)

        block = is_block_or_caption(node)
        whitespace = infer_whitespace(node, seed)
        items = self._collect_children(node, whitespace, prefix=block, suffix=block)
        return _join(items)

    def _collect_children(
        self,
        parent: Node,
        whitespace: WhiteSpace,
        *,
        prefix: BreakBefore,
        suffix: BreakAfter,
    ) -> list[Item]:
        """Run the collection steps on each child of ``parent`` and concatenate."""
        children = getattr(parent, "children", None) or ()
        last = len(children) - 1
        items: list[Item] = []

        for index, child in enumerate(children):
            context = CollectionContext(
                whitespace=whitespace,
                break_before=prefix if index == 0 else None,
                break_after=is_br(children[index + 1]) if index < last else suffix,
            )
            items.extend(self._collect(child, parent, index, context))

        return items

    def _collect(
        self,
        node: Node,
        parent: Node,
        index: int,
        context: CollectionContext,
    ) -> list[Item]:
        """Inner text collection steps for one node.

        See: <https://html.spec.whatwg.org/#inner-text-collection-steps>
        """
        match node:
            case Element():
                return self._collect_element(node, parent, index, context)
            case Text(value=value):
                if context.whitespace.collapses:
                    return [collect_text(value, context.break_before, context.break_after)]
                return [collect_preformatted_text(value)]
            case _:
                # Comments, doctypes, nested roots and foreign nodes
                return []

    def _collect_element(
        self,
        node: Element,
        parent: Node,
        index: int,
        context: CollectionContext,
    ) -> list[Item]:
        """Collect an element, wrapping its children in the breaks it requires."""
        # The white-space value is needed before the children are visited.
        whitespace = infer_whitespace(node, context.whitespace)
        category = classify(node)
        prefix: Literal[1, 2] | None = None
        suffix: Literal[1, 2, "\n"] | None = None

        # `visibility` is always `visible` with default styles, so only
        # elements that are not being rendered are skipped.
        match category:
            case NodeCategory.NOT_RENDERED:
                return []
            case NodeCategory.BR:
                suffix = LINE_FEED
            # A row that is not the last row of its table. Implicitly closed
            # rows are not accounted for.
            case NodeCategory.ROW if find_after(parent, index, is_table_row) is not None:
                suffix = LINE_FEED
            case NodeCategory.P:
                prefix = suffix = 2
            case NodeCategory.BLOCK_OR_CAPTION:
                prefix = suffix = 1

        items = self._collect_children(node, whitespace, prefix=prefix, suffix=suffix)

        # A cell that is not the last cell of its row.
        if category is NodeCategory.CELL and find_after(parent, index, is_table_cell) is not None:
            items.append(TAB)

        if prefix:
            items.insert(0, RequiredLineBreaks(prefix))
        match suffix:
            case str():
                items.append(suffix)
            case int():
                items.append(RequiredLineBreaks(suffix))

        return items


def _join(items: list[Item]) -> str:
    """Reduce collected items to the final text.

    Empty strings are removed. Runs of required line break counts at the
    start or end are removed. Every other run is replaced by as many line
    feeds as the largest count in it.
    """
    sb = StringBuilder()
    # None until the first text is seen, so a leading run is never flushed
    pending: int | None = None

    for item in items:
        match item:
            case RequiredLineBreaks(count=count):
                if pending is not None and count > pending:
                    pending = count
            case str() if item:
                sb.append_repeated(LINE_FEED, pending or 0)
                pending = 0
                sb.append(item)

    return sb.build()


def to_text(node: Node, *, whitespace: WhiteSpace | str | None = None) -> str:
    """Get the ``innerText`` of a node.

    Args:
        node: Root, element, text or comment node (other nodes give "").
        whitespace: ``white-space`` value of the node's parent, one of
            "normal", "pre", "pre-wrap" or "nowrap". Defaults to the active
            TextConfig (normally "normal").

    Returns:
        The rendered text.

    Raises:
        ConfigError: If ``whitespace`` is not a supported value.
    """
    return InnerTextRenderer(whitespace=whitespace).render(node)
