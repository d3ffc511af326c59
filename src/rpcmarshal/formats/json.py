"""JSON format adapter."""

from __future__ import annotations

import json
from typing import Any

from rpcmarshal.codecs import marshal


def to_json(value: Any, *, indent: int | None = None) -> str:
    """Marshal a value and encode the resulting wire document as JSON text.

    Args:
        value: Any value marshal() accepts
        indent: JSON indentation level (default None for compact output)

    Returns:
        JSON string representation

    Raises:
        ConversionError: If the value cannot be marshalled

    """
    return json.dumps(marshal(value), indent=indent)
