"""Tree serialization: hast-shaped dicts and JSON for innertext nodes.

Loads trees produced by hast tooling (``{"type": "element", "tagName": "p",
"properties": {}, "children": [...]}``) into typed nodes, and dumps typed
nodes back to the same shape. Useful for:
- Extracting text from trees built by an HTML parser in another process
- Caching trees on disk
- Debugging and inspection

All JSON output is deterministic (sorted keys).

Example:
    from innertext.serialization import from_json, to_json
    from innertext import to_text

    tree = from_json('{"type": "element", "tagName": "p", "children": '
                     '[{"type": "text", "value": "Delta"}]}')
    to_text(tree)  # 'Delta'

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Mapping
from typing import Any

from innertext.errors import DeserializationError
from innertext.location import Point, Position
from innertext.nodes import Comment, Doctype, Element, Node, Root, Text, Unknown
from innertext.utils.logger import get_logger

logger = get_logger(__name__)


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a hast-shaped, JSON-compatible dict.

    Args:
        node: Any innertext node.

    Returns:
        Dict with a ``type`` discriminator and the node's fields under their
        hast names.

    Raises:
        TypeError: If ``node`` is not an innertext node.

    """
    match node:
        case Root(children=children):
            result: dict[str, Any] = {"type": "root", "children": _dump_children(children)}
        case Element(tag_name=tag_name, properties=properties, children=children):
            result = {
                "type": "element",
                "tagName": tag_name,
                "properties": {k: _dump_property(v) for k, v in (properties or {}).items()},
                "children": _dump_children(children),
            }
        case Text(value=value):
            result = {"type": "text", "value": value}
        case Comment(value=value):
            result = {"type": "comment", "value": value}
        case Doctype(name=name):
            result = {"type": "doctype", "name": name}
        case Unknown(type_name=type_name, data=data):
            result = {**data, "type": type_name}
        case _:
            msg = f"Cannot serialize {type(node).__name__}"
            raise TypeError(msg)

    position = getattr(node, "position", None)
    if position is not None:
        result["position"] = {
            "start": _dump_point(position.start),
            "end": _dump_point(position.end),
        }
    return result


def from_dict(data: Mapping[str, Any], *, path: str = "$") -> Node:
    """Build a typed node from a hast-shaped dict.

    Missing ``children`` and ``properties`` load as empty. Node types other
    than root, element, text, comment and doctype load as Unknown nodes,
    which contribute no text.

    Args:
        data: Dict describing a node (as produced by hast tooling or to_dict).
        path: Location of ``data`` in the outer input, used in error messages.

    Returns:
        Typed node (frozen dataclass).

    Raises:
        DeserializationError: If ``data`` is not a mapping, has no ``type``,
            or is an element without a ``tagName``.

    """
    if not isinstance(data, Mapping):
        msg = f"Expected a node object, got {type(data).__name__}"
        raise DeserializationError(msg, path)

    type_name = data.get("type")
    if not isinstance(type_name, str):
        msg = "Missing 'type' field in node"
        raise DeserializationError(msg, path)

    position = _load_position(data.get("position"), path)

    match type_name:
        case "root":
            return Root(children=_load_children(data, path), position=position)
        case "element":
            tag_name = data.get("tagName")
            if not isinstance(tag_name, str):
                msg = "Element is missing a 'tagName'"
                raise DeserializationError(msg, path)
            properties = data.get("properties") or {}
            if not isinstance(properties, Mapping):
                msg = f"Expected 'properties' to be an object, got {type(properties).__name__}"
                raise DeserializationError(msg, path)
            return Element(
                tag_name=tag_name,
                properties=dict(properties),
                children=_load_children(data, path),
                position=position,
            )
        case "text":
            return Text(value=str(data.get("value", "")), position=position)
        case "comment":
            return Comment(value=str(data.get("value", "")), position=position)
        case "doctype":
            return Doctype(name=str(data.get("name", "html")), position=position)
        case _:
            logger.debug("Loading unknown node type %r at %s", type_name, path)
            rest = {k: v for k, v in data.items() if k not in ("type", "position")}
            return Unknown(type_name=type_name, data=rest, position=position)


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string.

    Output is deterministic (sorted keys). Non-ASCII text is kept as is.

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str | bytes) -> Node:
    """Deserialize a node from a JSON string.

    Raises:
        DeserializationError: If the JSON is invalid or doesn't describe a node.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})"
        raise DeserializationError(msg) from e
    return from_dict(raw)


def _load_children(data: Mapping[str, Any], path: str) -> tuple[Any, ...]:
    children = data.get("children") or ()
    if not isinstance(children, (list, tuple)):
        msg = f"Expected 'children' to be an array, got {type(children).__name__}"
        raise DeserializationError(msg, path)
    return tuple(
        from_dict(child, path=f"{path}.children[{index}]")
        for index, child in enumerate(children)
    )


def _load_position(value: Any, path: str) -> Position | None:
    """Load a unist position; incomplete positions are dropped."""
    if value is None:
        return None
    if not isinstance(value, Mapping):
        logger.debug("Dropping position at %s: not an object", path)
        return None
    start = _load_point(value.get("start"))
    end = _load_point(value.get("end"))
    if start is None or end is None:
        logger.debug("Dropping incomplete position at %s", path)
        return None
    return Position(start=start, end=end)


def _load_point(value: Any) -> Point | None:
    if not isinstance(value, Mapping):
        return None
    line = value.get("line")
    column = value.get("column")
    if not isinstance(line, int) or not isinstance(column, int):
        return None
    offset = value.get("offset")
    return Point(line=line, column=column, offset=offset if isinstance(offset, int) else None)


def _dump_point(point: Point) -> dict[str, Any]:
    result: dict[str, Any] = {"line": point.line, "column": point.column}
    if point.offset is not None:
        result["offset"] = point.offset
    return result


def _dump_children(children: tuple[Node, ...] | None) -> list[dict[str, Any]]:
    return [to_dict(child) for child in children or ()]


def _dump_property(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    return value
