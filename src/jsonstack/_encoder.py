"""Compact JSON serialization of native Python values."""

import math
from typing import Any

from jsonstack._config import EncodeConfig
from jsonstack._profile import ProfileContext

_ESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
    "\\": "\\\\",
    '"': '\\"',
}

_ASCII_LIMIT = 127
_BMP_LIMIT = 0xFFFF


def _encode_string(s: str, ensure_ascii: bool) -> str:
    """Encode string with proper escape sequences."""
    result = ['"']
    for char in s:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            result.append(escaped)
        elif char < " ":
            result.append(f"\\u{ord(char):04x}")
        elif ensure_ascii and ord(char) > _ASCII_LIMIT:
            result.append(_escape_non_ascii(ord(char)))
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _escape_non_ascii(code: int) -> str:
    if code <= _BMP_LIMIT:
        return f"\\u{code:04x}"
    code -= 0x10000
    high = 0xD800 | (code >> 10)
    low = 0xDC00 | (code & 0x3FF)
    return f"\\u{high:04x}\\u{low:04x}"


def _encode_number(n: int | float) -> str:
    """Encode numeric values; integral values drop the fractional part."""
    if isinstance(n, int):
        return str(n)
    if math.isnan(n) or math.isinf(n):
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    text = repr(n)
    if text.endswith(".0"):
        return text[:-2]
    return text


def _encode_array(
    arr: list[Any] | tuple[Any, ...], config: EncodeConfig
) -> str:
    """Encode array items, noting the failing index on error."""
    encoded_items = []
    for index, item in enumerate(arr):
        try:
            encoded_items.append(_encode_value(item, config))
        except (TypeError, ValueError) as e:
            e.add_note(f"when serializing {type(arr).__name__} item {index}")
            raise
    return "[" + ",".join(encoded_items) + "]"


def _encode_dict(d: dict[Any, Any], config: EncodeConfig) -> str:
    """Encode dictionary with key filtering."""
    items = []

    for key, value in d.items():
        if not isinstance(key, str):
            if config.skipkeys:
                continue
            msg = f"keys must be str, not {type(key).__name__}"
            raise TypeError(msg)

        try:
            encoded_value = _encode_value(value, config)
        except (TypeError, ValueError) as e:
            e.add_note(f"when serializing dict item {key!r}")
            raise
        items.append((key, encoded_value))

    if config.sort_keys:
        items.sort(key=lambda x: x[0])

    formatted_items = [
        f"{_encode_string(key, config.ensure_ascii)}:{value}"
        for key, value in items
    ]
    return "{" + ",".join(formatted_items) + "}"


def _encode_value(obj: Any, config: EncodeConfig) -> str:  # noqa: PLR0911
    """Encode any JSON-serializable value."""
    if obj is None:
        return "null"
    elif obj is True:
        return "true"
    elif obj is False:
        return "false"
    elif isinstance(obj, str):
        return _encode_string(obj, config.ensure_ascii)
    elif isinstance(obj, int | float):
        return _encode_number(obj)
    elif isinstance(obj, dict):
        return _encode_dict(obj, config)
    elif isinstance(obj, list | tuple):
        return _encode_array(obj, config)
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)


def encode(obj: Any, config: EncodeConfig) -> str:
    with ProfileContext("encode"):
        return _encode_value(obj, config)
