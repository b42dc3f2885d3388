"""Typed tree nodes for innertext.

The node model follows hast, the HTML syntax tree format: a document is a
``Root`` holding ``Element``, ``Text``, ``Comment`` and ``Doctype`` children.
All nodes are frozen dataclasses with slots for:
- Immutability: the text algorithm borrows the tree and never mutates it
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Root
├── Element
├── Text
├── Comment
├── Doctype
└── Unknown (any other hast node type, kept for round-trips)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from innertext.location import Position

PropertyValue: TypeAlias = str | bool | int | float | list[str | int | float] | None

_NO_PROPERTIES: Mapping[str, PropertyValue] = MappingProxyType({})


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


# =============================================================================
# Parents
# =============================================================================


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Document or fragment root.

    HTML: the document itself (or a fragment of it)

    """

    children: tuple[Child, ...] = ()
    position: Position | None = None


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An element.

    HTML: <tag property="value">children</tag>

    Property names follow hast conventions: ``className``, ``noWrap``,
    ``hidden``. Boolean attributes hold ``True``/``False``.

    """

    tag_name: str
    properties: Mapping[str, PropertyValue] = field(default_factory=dict)
    children: tuple[Child, ...] = ()
    position: Position | None = None

    def get(self, name: str, default: PropertyValue = None) -> PropertyValue:
        """Read a property, treating a missing mapping as empty."""
        return (self.properties or _NO_PROPERTIES).get(name, default)


# =============================================================================
# Literals
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Text content.

    HTML: character data between tags

    """

    value: str
    position: Position | None = None


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Comment.

    HTML: <!-- value -->

    """

    value: str
    position: Position | None = None


@dataclass(frozen=True, slots=True)
class Doctype(Node):
    """Document type declaration.

    HTML: <!doctype html>

    """

    name: str = "html"
    position: Position | None = None


@dataclass(frozen=True, slots=True)
class Unknown(Node):
    """A node of a type this package does not model.

    Holds the original hast ``type`` and the remaining fields so the node
    survives a load/dump round-trip. Contributes no text.

    """

    type_name: str
    data: Mapping[str, Any] = field(default_factory=dict)
    position: Position | None = None


# PEP 695 type aliases
Child: TypeAlias = Element | Text | Comment | Doctype | Unknown
