"""Record codec registry and value-to-wire conversion."""

from __future__ import annotations

import base64
from collections.abc import Callable, Collection, Iterable, Mapping
from collections.abc import Set as AbstractSet
from datetime import date, datetime, time
from decimal import Decimal
from ipaddress import (
    IPv4Address,
    IPv4Interface,
    IPv4Network,
    IPv6Address,
    IPv6Interface,
    IPv6Network,
)
from pathlib import PurePath
from types import GeneratorType
from typing import Any, ClassVar
from uuid import UUID

from rpcmarshal.errors import ConversionError
from rpcmarshal.log import get_logger
from rpcmarshal.nodes import Node, is_wire_node

logger = get_logger(__name__)

# Byte payloads are Sequences too; they must not be walked element by element.
_BINARY_TYPES = bytes | bytearray | memoryview

# Opaque identifiers whose str() is their canonical text form
_TEXT_TYPES = (
    UUID
    | Decimal
    | PurePath
    | IPv4Address
    | IPv6Address
    | IPv4Network
    | IPv6Network
    | IPv4Interface
    | IPv6Interface
)

_ISO_TYPES = datetime | date | time

# Lazy element producers that stand in for an array. Other iterators (files,
# endless itertools objects) are left to the str() fallback.
_LAZY_ARRAY_TYPES = GeneratorType | map | filter | zip | enumerate


class RecordCodecs:
    """Ordered registry of domain record converters.

    Converters are tried in registration order and the first one whose type
    matches the value (by isinstance) wins. Re-registering a type replaces
    its converter but keeps its position, so precedence never shifts.

    Usage:
        RecordCodecs.register(
            Battery,
            lambda b: {"level": b.level, "charging": b.charging},
        )
    """

    _registry: ClassVar[dict[type, Callable[[Any], Node]]] = {}

    @classmethod
    def register[T](cls, typ: type[T], convert: Callable[[T], Node]) -> None:
        """Register convert as the wire projection for typ and its subclasses.

        Args:
            typ: The record type to match
            convert: Function from a record to a wire node. Nested values
                should go back through marshal().

        """
        cls._registry[typ] = convert

    @classmethod
    def get[T](cls, typ: type[T]) -> Callable[[T], Node] | None:
        """Get the converter registered for exactly typ, or None."""
        return cls._registry.get(typ)

    @classmethod
    def lookup(cls, value: Any) -> Callable[[Any], Node] | None:
        """Find the first converter whose type matches value."""
        for typ, convert in cls._registry.items():
            if isinstance(value, typ):
                return convert
        return None

    @classmethod
    def registered_types(cls) -> tuple[type, ...]:
        """Registered record types in check order."""
        return tuple(cls._registry)

    @classmethod
    def unregister(cls, typ: type) -> bool:
        """Unregister a type's converter.

        Returns:
            True if the type was registered and removed, False otherwise.

        """
        if typ in cls._registry:
            del cls._registry[typ]
            return True
        return False

    @classmethod
    def clear(cls) -> None:
        """Clear the registry and re-register the built-in record catalogue."""
        from rpcmarshal.converters import register_builtin_records

        cls._registry.clear()
        register_builtin_records()


def marshal(value: Any) -> Node:
    """Convert any value into a JSON-compatible wire node.

    Checks run in a fixed order and the first match wins:
    None and primitives, sets, other collections, mappings, registered
    records, identifier types, byte payloads, generators and map/filter/zip
    objects, and finally str(value).

    Args:
        value: Any Python object

    Returns:
        None, bool, int, float, str, list or dict made only of those

    Raises:
        ConversionError: If a record converter fails or a mapping has a
            non-string key

    """
    if is_wire_node(value):
        return value

    if isinstance(value, AbstractSet):
        return marshal_array(list(value))
    if isinstance(value, Collection) and not isinstance(value, _BINARY_TYPES | Mapping):
        return marshal_array(value)
    if isinstance(value, Mapping):
        return marshal_object(value)

    if convert := RecordCodecs.lookup(value):
        return _convert_record(convert, value)

    if isinstance(value, _ISO_TYPES):
        return value.isoformat()
    if isinstance(value, _TEXT_TYPES):
        return str(value)
    if isinstance(value, _BINARY_TYPES):
        return base64.b64encode(value).decode("ascii")

    if isinstance(value, _LAZY_ARRAY_TYPES):
        return marshal_array(value)

    logger.debug("marshal.fallback", type=type(value).__name__)
    return str(value)


def marshal_array(items: Iterable[Any]) -> list[Node]:
    """Marshal each element in iteration order."""
    return [marshal(item) for item in items]


def marshal_object(mapping: Mapping[Any, Any]) -> dict[str, Node]:
    """Marshal each value under its unchanged key.

    Raises:
        ConversionError: If a key is not a string

    """
    result: dict[str, Node] = {}
    for key, item in mapping.items():
        result[object_key(key, mapping)] = marshal(item)
    return result


def object_key(key: Any, owner: Any) -> str:
    """Return key if it can name a wire object member.

    Raises:
        ConversionError: If key is not a string

    """
    if not isinstance(key, str):
        msg = f"object keys must be str, got {type(key).__name__} {key!r}"
        raise ConversionError(type(owner).__name__, msg)
    return key


def _convert_record(convert: Callable[[Any], Node], value: Any) -> Node:
    """Run a record converter, turning its failures into ConversionError."""
    try:
        return convert(value)
    except ConversionError:
        raise
    except Exception as exc:
        type_name = type(value).__name__
        logger.warning("marshal.conversion_failed", type=type_name, error=str(exc))
        raise ConversionError(type_name, str(exc)) from exc
