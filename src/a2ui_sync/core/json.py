"""Fast JSON decoding of inbound message lines and compact encoding of data model values."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


_decoder = msgspec.json.Decoder()


def decode_json(text: str, repair: bool = False) -> Any:
    """
    Decode one JSON document with multiple fallbacks.

    Args:
        text: JSON text
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Decoded value

    Raises:
        JSONParseError: If decoding fails
    """
    # Try msgspec first (fastest)
    try:
        return _decoder.decode(text.encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e)

    # Last resort: try json_repair
    try:
        repaired = repair_json(text)
        return json.loads(repaired)
    except (ValueError, TypeError) as repair_error:
        raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error)


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    # Use msgspec for compact output (very fast)
    if indent == 0:
        try:
            encoder = msgspec.json.Encoder()
            return encoder.encode(obj).decode("utf-8")
        except (TypeError, ValueError, OverflowError):
            pass

    # Use stdlib for pretty-printed output or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None, separators=None if indent else (",", ":"))


def canonical_json(value: Any) -> str:
    """Compact JSON text for an object/array node (what interpolation substitutes)."""
    return safe_json_dumps(value)
