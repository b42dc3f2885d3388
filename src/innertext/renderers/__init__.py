"""innertext renderers.

Renderers convert typed tree nodes into output formats.

Available Renderers:
- InnerTextRenderer: Renders a tree to the text a browser exposes as innerText

Thread Safety:
All renderers keep per-call state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from innertext.renderers.protocol import TextRenderer
from innertext.renderers.text import InnerTextRenderer, RequiredLineBreaks, to_text

__all__ = ["InnerTextRenderer", "RequiredLineBreaks", "TextRenderer", "to_text"]
