"""
Character-level JSON parser with exact error positions.

Parses JSON text into native Python values (str, float, bool, None, list,
dict) one character at a time, reporting the offending character and its
offset for malformed input, and serializes values back to compact JSON.
"""

from typing import IO
from typing import Any

from jsonstack._access import get
from jsonstack._access import get_ind
from jsonstack._access import replace
from jsonstack._access import replace_ind
from jsonstack._config import EncodeConfig
from jsonstack._config import ParseConfig
from jsonstack._driver import parse_document
from jsonstack._encoder import encode
from jsonstack._errors import JSONDecodeError
from jsonstack._errors import UnexpectedEOF
from jsonstack._errors import UnexpectedToken
from jsonstack._profile import HotPathStats
from jsonstack._profile import clear_hot_path_stats
from jsonstack._profile import get_hot_path_stats

__version__ = "0.1.0"

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)


def parse(text: str, **kwargs: Any) -> Any:
    """
    Parses JSON text into Python values.

    Raises UnexpectedToken with the offending character and its offset, or
    UnexpectedEOF when the text ends before the value does. Numbers always
    come back as float unless ``parse_float`` says otherwise.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    return parse_document(text, config)


def stringify(value: Any, **kwargs: Any) -> str:
    """
    Serializes Python values to compact JSON text.

    Object member order follows the dict unless ``sort_keys`` is set.
    """
    config = EncodeConfig(**kwargs)
    return encode(value, config)


loads = parse
dumps = stringify


def load(fp: IO[str], **kwargs: Any) -> Any:
    """Parses JSON from a file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


def dump(value: Any, fp: IO[str], **kwargs: Any) -> None:
    """Serializes Python values to a file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(stringify(value, **kwargs))


__all__ = [
    "EncodeConfig",
    "HotPathStats",
    "JSONDecodeError",
    "JsonValue",
    "ParseConfig",
    "UnexpectedEOF",
    "UnexpectedToken",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get",
    "get_ind",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "replace",
    "replace_ind",
    "stringify",
]
