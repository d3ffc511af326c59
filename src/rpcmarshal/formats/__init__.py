"""Format adapters for wire documents.

Each format module provides a to_<format> function built on marshal().
"""

from rpcmarshal.formats.json import to_json

__all__ = ["to_json"]
