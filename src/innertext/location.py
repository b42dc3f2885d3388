"""Source positions for tree nodes.

Provides Point and Position dataclasses mirroring the unist ``position``
field that hast trees carry. Positions are informational only: the text
collection algorithm never reads them, but they survive loading and dumping
so that callers can map output back to source.

Thread Safety:
Point and Position are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A single place in a source file.

    ``line`` and ``column`` are 1-indexed; ``offset`` is 0-indexed.

    """

    line: int
    column: int
    offset: int | None = None

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Position:
    """Location of a node in its source file.

    Attributes:
        start: Place of the first character of the node
        end: Place of the first character after the node
        source_file: Source file path (optional)

    Examples:
        >>> pos = Position(Point(1, 1, 0), Point(1, 6, 5))
        >>> str(pos)
        '1:1-1:6'

    """

    start: Point
    end: Point
    source_file: str | None = None

    def __str__(self) -> str:
        """Format position for messages.

        Returns:
            Formatted string like "page.html:1:1-1:6" or "1:1-1:6"
        """
        span = f"{self.start}-{self.end}"
        if self.source_file:
            return f"{self.source_file}:{span}"
        return span
