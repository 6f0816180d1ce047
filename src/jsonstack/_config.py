"""Immutable parse and encode settings."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

ParseFloatHook = Callable[[str], Any] | None
ObjectHook = Callable[[dict[str, Any]], Any] | None


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    A single instance is shared by a parse call and every nested sub-parse,
    so it must stay immutable.
    """

    parse_float: ParseFloatHook = None
    object_hook: ObjectHook = None

    def __post_init__(self) -> None:
        if self.parse_float is not None and not callable(self.parse_float):
            raise TypeError("parse_float must be callable")
        if self.object_hook is not None and not callable(self.object_hook):
            raise TypeError("object_hook must be callable")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures JSON encoding behavior with immutable settings.

    Output is always compact; these options only affect key handling and
    escaping.
    """

    skipkeys: bool = False
    ensure_ascii: bool = False
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.skipkeys, bool):
            raise TypeError("skipkeys must be a boolean")
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")


DEFAULT_PARSE_CONFIG = ParseConfig()
