"""Wire document node types."""

from __future__ import annotations

from typing import Any

type Node = None | bool | int | float | str | list[Node] | dict[str, Node]

PRIMITIVE_TYPES = bool | int | float | str


class WireObject(dict[str, Any]):
    """Object node that was built ahead of time.

    The dispatcher hands these back unchanged, so callers can pre-serialize
    parts of a response.
    """


class WireArray(list[Any]):
    """Array node that was built ahead of time."""


def is_wire_node(value: Any) -> bool:
    """Return True if value needs no conversion before it goes on the wire."""
    return value is None or isinstance(value, PRIMITIVE_TYPES | WireObject | WireArray)
