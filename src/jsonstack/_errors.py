"""
Error types raised while decoding JSON text.

Parsing surfaces exactly two failure kinds: an unexpected character at a
known offset, and a premature end of input. Both derive from
JSONDecodeError so callers can catch either with one clause.
"""

from typing import Any
from typing import TypeAlias

Position: TypeAlias = int


class JSONDecodeError(ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Error state containing position, line/column numbers, and the document
    the position refers to, to help users identify and fix JSON syntax issues.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__, (self.msg, self.doc, self.pos))


class UnexpectedToken(JSONDecodeError):
    """
    A character that cannot appear where it was found.

    Carries the offending character and its 0-based offset in the text
    given to the outermost parse call.
    """

    def __init__(self, character: str, doc: str, pos: Position) -> None:
        self.character = character
        super().__init__(f"Unexpected character {character!r}", doc, pos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnexpectedToken):
            return NotImplemented
        return (self.character, self.pos) == (other.character, other.pos)

    def __hash__(self) -> int:
        return hash((UnexpectedToken, self.character, self.pos))

    def __repr__(self) -> str:
        return f"UnexpectedToken(character={self.character!r}, pos={self.pos})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__, (self.character, self.doc, self.pos))


class UnexpectedEOF(JSONDecodeError):
    """Input ended before the value being read was complete."""

    def __init__(self, doc: str) -> None:
        super().__init__("Unexpected end of input", doc, len(doc))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnexpectedEOF):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(UnexpectedEOF)

    def __repr__(self) -> str:
        return "UnexpectedEOF()"

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__, (self.doc,))


class Rejected(Exception):
    """
    Raised by automata and accumulators when input breaks their grammar.

    ``character`` is the rejected character, or None when the failure is
    only detected at finalization. The driver converts this into an
    UnexpectedToken or UnexpectedEOF with an absolute offset; it never
    leaves the package.
    """

    def __init__(self, character: str | None = None) -> None:
        super().__init__(character)
        self.character = character
