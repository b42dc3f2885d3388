"""TextRenderer protocol: stable interface for tree-to-text renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``InnerTextRenderer`` is the reference implementation.

Example:
    from innertext.renderers.protocol import TextRenderer

    def index_page(renderer: TextRenderer, tree: Root) -> str:
        return renderer.render(tree)

"""

from typing import Protocol

from innertext.nodes import Node


class TextRenderer(Protocol):
    """Protocol for tree-to-text renderers.

    Implementations must accept any node and return a rendered string.

    """

    def render(self, node: Node) -> str:
        """Render a node (and its descendants) to a string.

        Args:
            node: The node to render.

        Returns:
            Rendered string output.

        """
        ...
