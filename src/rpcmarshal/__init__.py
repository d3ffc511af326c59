"""rpcmarshal - Marshal device and platform values into JSON-RPC wire documents."""

from rpcmarshal.codecs import (
    RecordCodecs,
    marshal,
    marshal_array,
    marshal_object,
)
from rpcmarshal.converters import register_builtin_records
from rpcmarshal.devices import (
    DeviceCache,
    device_match,
)
from rpcmarshal.errors import (
    ConversionError,
    DeviceNotFoundError,
)
from rpcmarshal.formats.json import to_json
from rpcmarshal.log import (
    configure_logging,
    get_logger,
)
from rpcmarshal.nodes import (
    Node,
    WireArray,
    WireObject,
    is_wire_node,
)

__all__ = [
    # Errors
    "ConversionError",
    # Discovery cache
    "DeviceCache",
    "DeviceNotFoundError",
    # Wire nodes
    "Node",
    # Marshalling
    "RecordCodecs",
    "WireArray",
    "WireObject",
    # Logging
    "configure_logging",
    "device_match",
    "get_logger",
    "is_wire_node",
    "marshal",
    "marshal_array",
    "marshal_object",
    "register_builtin_records",
    "to_json",
]
