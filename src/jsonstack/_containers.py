"""
Token accumulators for arrays and objects under construction.

The driver feeds each accumulator a flat token stream: resolved member
values as Item, keys as Key, and the structural Comma/Colon between them.
Each push is checked against the previous token; ``finalize`` checks the
whole sequence once more before building the value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import TypeAlias

from jsonstack._config import ParseConfig
from jsonstack._errors import Rejected
from jsonstack._profile import ProfileContext


class Delimiter(Enum):
    COLON = ":"
    COMMA = ","


@dataclass(frozen=True, slots=True)
class Item:
    value: Any


@dataclass(frozen=True, slots=True)
class Key:
    name: str


Token: TypeAlias = Delimiter | Item | Key

_MEMBER_GROUP = 4  # Key, Colon, Item, Comma


class ArrayAccumulator:
    """Accepts ``Item (Comma Item)*`` or nothing."""

    __slots__ = ("tokens",)

    def __init__(self) -> None:
        self.tokens: list[Token] = []

    def get_delimiter(self, char: str) -> Delimiter | None:
        return Delimiter.COMMA if char == "," else None

    def is_end_char(self, char: str) -> bool:
        return char == "]"

    def next_must_be_key(self) -> bool:
        return False

    def push(self, token: Token) -> None:
        last = self.tokens[-1] if self.tokens else None
        if last is None or last is Delimiter.COMMA:
            valid = isinstance(token, Item)
        elif isinstance(last, Item):
            valid = token is Delimiter.COMMA
        else:
            valid = False
        if not valid:
            raise Rejected()
        self.tokens.append(token)

    def finalize(self, config: ParseConfig) -> list[Any]:
        if self.tokens and self.tokens[-1] is Delimiter.COMMA:
            raise Rejected()
        return [token.value for token in self.tokens if isinstance(token, Item)]


class ObjectAccumulator:
    """Accepts ``Key Colon Item (Comma Key Colon Item)*`` or nothing."""

    __slots__ = ("tokens",)

    def __init__(self) -> None:
        self.tokens: list[Token] = []

    def get_delimiter(self, char: str) -> Delimiter | None:
        if char == ",":
            return Delimiter.COMMA
        if char == ":":
            return Delimiter.COLON
        return None

    def is_end_char(self, char: str) -> bool:
        return char == "}"

    def next_must_be_key(self) -> bool:
        return not self.tokens or self.tokens[-1] is Delimiter.COMMA

    def push(self, token: Token) -> None:
        last = self.tokens[-1] if self.tokens else None
        if last is None or last is Delimiter.COMMA:
            # A member name arrives as a resolved string value.
            if isinstance(token, Item) and isinstance(token.value, str):
                token = Key(token.value)
            valid = isinstance(token, Key)
        elif isinstance(last, Key):
            valid = token is Delimiter.COLON
        elif last is Delimiter.COLON:
            valid = isinstance(token, Item)
        else:
            valid = token is Delimiter.COMMA
        if not valid:
            raise Rejected()
        self.tokens.append(token)

    def finalize(self, config: ParseConfig) -> Any:
        with ProfileContext("finalize_object", len(self.tokens)):
            tokens = self.tokens
            if tokens and tokens[-1] is Delimiter.COMMA:
                raise Rejected()

            members: dict[str, Any] = {}
            for start in range(0, len(tokens), _MEMBER_GROUP):
                group = tokens[start : start + _MEMBER_GROUP]
                if not _is_member(group):
                    raise Rejected()
                key, _, item = group[:3]
                members[key.name] = item.value  # type: ignore[union-attr]

            if config.object_hook is not None:
                return config.object_hook(members)
            return members


def _is_member(group: list[Token]) -> bool:
    """Checks one ``Key, Colon, Item[, Comma]`` group."""
    if len(group) not in (_MEMBER_GROUP - 1, _MEMBER_GROUP):
        return False
    if len(group) == _MEMBER_GROUP and group[3] is not Delimiter.COMMA:
        return False
    return (
        isinstance(group[0], Key)
        and group[1] is Delimiter.COLON
        and isinstance(group[2], Item)
    )


Container: TypeAlias = ArrayAccumulator | ObjectAccumulator
