"""
Character-driven automata for JSON scalars.

Every automaton exposes ``push(char) -> bool``: True once the scalar is
complete, False while more input is expected. A character that cannot
continue the scalar raises Rejected and is not consumed.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any
from typing import ClassVar

from jsonstack._errors import Rejected

DIGITS = "0123456789"
HEX_DIGITS = "0123456789abcdefABCDEF"

SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_CONTROL_LIMIT = " "
_UNICODE_ESCAPE_LENGTH = 5  # "u" plus four hex digits


class TextAutomaton:
    """
    Reads the body of a JSON string; the opening quote is already consumed.

    ``_escape`` is None outside an escape, "" right after a backslash, and
    "u..." while collecting the hex digits of a unicode escape.
    """

    __slots__ = ("_chunks", "_completed", "_escape")

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._completed = False
        self._escape: str | None = None

    def push(self, char: str) -> bool:
        if self._completed:
            raise Rejected(char)
        if self._escape is not None:
            self._push_escape(char)
            return False
        if char == '"':
            self._completed = True
            return True
        if char == "\\":
            self._escape = ""
            return False
        if char < _CONTROL_LIMIT:
            raise Rejected(char)
        self._chunks.append(char)
        return False

    def _push_escape(self, char: str) -> None:
        if not self._escape:
            if char == "u":
                self._escape = "u"
                return
            if char not in SIMPLE_ESCAPES:
                raise Rejected(char)
            self._chunks.append(SIMPLE_ESCAPES[char])
            self._escape = None
            return

        if char not in HEX_DIGITS:
            raise Rejected(char)
        self._escape += char
        if len(self._escape) == _UNICODE_ESCAPE_LENGTH:
            self._append_code_point(int(self._escape[1:], 16))
            self._escape = None

    def _append_code_point(self, code: int) -> None:
        # A low surrogate right after a high one completes a pair.
        if 0xDC00 <= code <= 0xDFFF and self._chunks:
            high = ord(self._chunks[-1][-1])
            if 0xD800 <= high <= 0xDBFF:
                combined = 0x10000 + ((high - 0xD800) << 10) + (code - 0xDC00)
                self._chunks[-1] = self._chunks[-1][:-1] + chr(combined)
                return
        self._chunks.append(chr(code))

    def into_value(self) -> str:
        if not self._completed:
            raise Rejected()
        return "".join(self._chunks)


class LiteralAutomaton:
    """
    Matches one of a fixed set of keywords.

    Rejects as soon as the text read so far stops being a prefix of every
    candidate, rather than buffering a whole word first.
    """

    __slots__ = ("_text",)

    literals: ClassVar[tuple[str, ...]] = ()

    def __init__(self, prefix: str = "") -> None:
        self._text = prefix

    def push(self, char: str) -> bool:
        candidate = self._text + char
        if not any(literal.startswith(candidate) for literal in self.literals):
            raise Rejected(char)
        self._text = candidate
        return candidate in self.literals

    def _matched(self) -> str:
        if self._text not in self.literals:
            raise Rejected()
        return self._text


class BooleanAutomaton(LiteralAutomaton):
    __slots__ = ()

    literals = ("true", "false")

    def into_value(self) -> bool:
        return self._matched() == "true"


class NullAutomaton(LiteralAutomaton):
    __slots__ = ()

    literals = ("null",)

    def into_value(self) -> None:
        self._matched()


class NumberPosition(Enum):
    """Which part of a number literal the next character belongs to."""

    WHOLE = "whole"
    INTO_DECIMAL = "into_decimal"  # after a lone leading zero
    DECIMAL = "decimal"
    EXPONENT = "exponent"


class NumberAutomaton:
    """
    Reads a JSON number one character at a time.

    Numbers have no terminator, so the driver asks ``can_accept`` about the
    following character and finalizes as soon as the answer is no.
    """

    __slots__ = ("_decimal", "_exponent", "_negative", "_whole", "position")

    def __init__(self) -> None:
        self.position = NumberPosition.WHOLE
        self._negative = False
        self._whole = ""
        self._decimal = ""
        self._exponent = ""

    def can_accept(self, char: str) -> bool:
        position = self.position
        if position is NumberPosition.WHOLE:
            if char in DIGITS:
                return True
            if char == "-":
                return not self._whole and not self._negative
            return bool(self._whole) and char in ".eE"
        if position is NumberPosition.INTO_DECIMAL:
            return char in ".eE"
        if position is NumberPosition.DECIMAL:
            return char in DIGITS or (bool(self._decimal) and char in "eE")
        return char in DIGITS or (not self._exponent and char in "+-")

    def push(self, char: str) -> bool:
        if not self.can_accept(char):
            raise Rejected(char)

        position = self.position
        if char == "-" and position is NumberPosition.WHOLE:
            self._negative = True
        elif char == ".":
            self.position = NumberPosition.DECIMAL
        elif char in "eE":
            self.position = NumberPosition.EXPONENT
        elif position is NumberPosition.WHOLE:
            self._whole += char
            if char == "0" and self._whole == "0":
                self.position = NumberPosition.INTO_DECIMAL
        elif position is NumberPosition.DECIMAL:
            self._decimal += char
        else:
            self._exponent += char
        return False

    def literal(self) -> str:
        """Rebuilds the literal text; rejects a number that ended too early."""
        position = self.position
        if (
            not self._whole
            or (position is NumberPosition.DECIMAL and not self._decimal)
            or (
                position is NumberPosition.EXPONENT
                and not self._exponent.lstrip("+-")
            )
        ):
            raise Rejected()

        parts = ["-" if self._negative else "", self._whole]
        if self._decimal:
            parts += [".", self._decimal]
        if position is NumberPosition.EXPONENT:
            parts += ["e", self._exponent]
        return "".join(parts)

    def into_value(
        self, parse_float: Callable[[str], Any] | None = None
    ) -> Any:
        text = self.literal()
        if parse_float is not None:
            return parse_float(text)
        return float(text)
