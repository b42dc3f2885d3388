"""
innertext: innerText for HTML syntax trees

Computes the text a browser would expose as ``innerText`` for a hast-style
tree: block elements and paragraphs become line breaks, table cells become
tabs, white space collapses the way CSS collapses it, and hidden content
(``<head>``, ``<script>``, ``hidden`` elements, closed dialogs) is skipped.
No stylesheets are applied and nothing is laid out.

Quick Start:
    >>> from innertext import h, to_text
    >>> to_text(h("div", h("p", "Foxtrot."), h("p", "Golf.")))
    'Foxtrot.\\n\\nGolf.'

    >>> # Trees from hast tooling
    >>> from innertext import from_json
    >>> to_text(from_json('{"type": "text", "value": "  Alpha  "}'))
    'Alpha'

    >>> # Assume the node sits in preformatted context
    >>> to_text(h("span", " a  b "), whitespace="pre")
    ' a  b '

Installation:
    pip install innertext              # Zero runtime dependencies
"""

from innertext.builder import comment, doctype, h, root, text
from innertext.classify import (
    NodeCategory,
    classify,
    convert_element,
    is_block_or_caption,
    is_br,
    is_closed_dialog,
    is_hidden,
    is_not_rendered,
    is_p,
    is_rendered,
    is_table_cell,
    is_table_row,
)
from innertext.config import (
    TextConfig,
    get_text_config,
    reset_text_config,
    set_text_config,
    text_config_context,
)
from innertext.errors import (
    ClassifierError,
    ConfigError,
    DeserializationError,
    InnerTextError,
)
from innertext.location import Point, Position
from innertext.nodes import Comment, Doctype, Element, Node, Root, Text, Unknown
from innertext.renderers.protocol import TextRenderer
from innertext.renderers.text import InnerTextRenderer, RequiredLineBreaks, to_text
from innertext.serialization import from_dict, from_json, to_dict, to_json
from innertext.text import collect_preformatted_text, collect_text
from innertext.utils.siblings import find_after
from innertext.whitespace import WhiteSpace, infer_whitespace

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "to_text",
    "InnerTextRenderer",
    "TextRenderer",
    "RequiredLineBreaks",
    # Nodes
    "Node",
    "Root",
    "Element",
    "Text",
    "Comment",
    "Doctype",
    "Unknown",
    # Building trees
    "h",
    "root",
    "text",
    "comment",
    "doctype",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Classification
    "NodeCategory",
    "classify",
    "convert_element",
    "is_block_or_caption",
    "is_br",
    "is_closed_dialog",
    "is_hidden",
    "is_not_rendered",
    "is_p",
    "is_rendered",
    "is_table_cell",
    "is_table_row",
    "find_after",
    # White space
    "WhiteSpace",
    "infer_whitespace",
    "collect_text",
    "collect_preformatted_text",
    # Configuration (ContextVar-based)
    "TextConfig",
    "get_text_config",
    "set_text_config",
    "reset_text_config",
    "text_config_context",
    # Errors
    "InnerTextError",
    "ConfigError",
    "DeserializationError",
    "ClassifierError",
    # Location
    "Point",
    "Position",
]
