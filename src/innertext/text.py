"""Collect the rendered text of a single text node.

Implements the parts of CSS Text white-space processing that change the text
of a box: collapsing spaces and tabs, removing bidi formatting characters
around them, and transforming segment breaks (line feeds).

See: <https://drafts.csswg.org/css-text/#white-space-phase-1>

Not implemented: removing segment breaks between East Asian Wide characters,
and the Chinese/Japanese/Yi punctuation rule. Those segment breaks turn into
spaces like any other.

Example:
    >>> collect_text("  Alpha \\n\\t bravo  ", break_before=True, break_after=True)
    'Alpha bravo'
    >>> collect_text("  Alpha  ")
    ' Alpha '
"""

from __future__ import annotations

import re

# Characters with the Bidi_Control property [UAX9]: ALM, LRM, RLM, LRE-RLO, LRI-PDI.
_BIDI_CONTROLS = re.compile("[\u061c\u200e\u200f\u202a-\u202e\u2066-\u2069]")
_SPACES_OR_TABS = re.compile("[\t ]+")

ZERO_WIDTH_SPACE = "\u200b"


def collect_text(
    value: str,
    break_before: object = False,
    break_after: object = False,
) -> str:
    """Collapse white space in ``value`` as ``white-space: normal`` does.

    Args:
        value: Raw text
        break_before: Truthy when a line break directly precedes the text
            (a block edge or a required line break count); leading white
            space is then removed instead of collapsed to a space.
        break_after: Truthy when a line break directly follows the text
            (a block edge or a ``<br>``); trailing white space is removed.

    Returns:
        The text as it would be rendered.
    """
    lines = [_BIDI_CONTROLS.sub("", line) for line in str(value).split("\n")]
    filled = [index for index, line in enumerate(lines) if line.strip(" \t")]
    first_filled = filled[0] if filled else len(lines)
    last_filled = filled[-1] if filled else -1

    # Spaces and tabs between a segment break and other text are removed.
    # Before the first text (or after the last) only the caller's breaks count.
    segments = [
        _collapse_spaces_and_tabs(
            line,
            bounded_before=bool(break_before) or index > first_filled,
            bounded_after=bool(break_after) or index < last_filled,
        )
        for index, line in enumerate(lines)
    ]

    # Empty lines are dropped: they never turn into spaces.
    parts: list[str] = []
    previous: str | None = None
    for segment in segments:
        if not segment:
            continue
        if previous is not None and _segment_break_is_space(previous, segment):
            parts.append(" ")
        parts.append(segment)
        previous = segment

    return "".join(parts)


def collect_preformatted_text(value: str) -> str:
    """Return ``value`` untouched, as ``pre``, ``pre-wrap`` and ``nowrap`` render it."""
    return str(value)


def _collapse_spaces_and_tabs(line: str, *, bounded_before: bool, bounded_after: bool) -> str:
    """Collapse runs of spaces and tabs in one line to a single space.

    Every collapsible tab is converted to a space, and any collapsible space
    following another collapsible space is removed. A run at a bounded edge
    is removed entirely.
    """
    collapsed = _SPACES_OR_TABS.sub(" ", line)
    if bounded_before:
        collapsed = collapsed.removeprefix(" ")
    if bounded_after:
        collapsed = collapsed.removesuffix(" ")
    return collapsed


def _segment_break_is_space(before: str, after: str) -> bool:
    """Whether the segment break between two segments renders as a space.

    If the character immediately before or immediately after the segment
    break is the zero-width space, the break is removed, leaving behind the
    zero-width space.
    """
    return not (before.endswith(ZERO_WIDTH_SPACE) or after.startswith(ZERO_WIDTH_SPACE))
