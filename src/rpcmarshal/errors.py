"""Errors raised while marshalling values."""

from __future__ import annotations


class ConversionError(ValueError):
    """A value could not be converted to a wire node.

    Raised when a record converter fails or a mapping carries a key the wire
    format cannot represent. The underlying exception, if any, is chained as
    ``__cause__``.
    """

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Failed to marshal {type_name}: {reason}")


class DeviceNotFoundError(KeyError):
    """No cached device matches the requested alias or address."""

    def __init__(self, device_id: str) -> None:
        self.device_id = device_id
        super().__init__(f"Can't find device {device_id}")
