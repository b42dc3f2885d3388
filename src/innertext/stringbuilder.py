"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Used by the text renderer to assemble the
final text from collected fragments and materialized line breaks.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("Alpha").append_repeated("\\n", 2).append("Bravo")
            >>> sb.build()
            'Alpha\\n\\nBravo'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_repeated(self, s: str, count: int) -> StringBuilder:
        """Append ``s`` repeated ``count`` times (nothing when ``count`` < 1).

        Returns:
            self for method chaining
        """
        if s and count > 0:
            self._parts.append(s * count)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
