"""Bracket nesting and string/escape tracking over a character stream."""

from jsonstack._errors import Rejected

_OPENERS = {"}": "{", "]": "["}


class DepthTracker:
    """
    Tracks open-bracket nesting, ignoring brackets inside strings.

    The driver uses ``level`` and ``in_string`` to tell a container's own
    commas, colons and closing bracket apart from the same characters in
    nested values.
    """

    __slots__ = ("_brackets", "_escape", "_in_string")

    def __init__(self) -> None:
        self._brackets: list[str] = []
        self._in_string = False
        self._escape = False

    @property
    def level(self) -> int:
        return len(self._brackets)

    @property
    def in_string(self) -> bool:
        return self._in_string

    def feed(self, char: str) -> None:
        """Consumes one character; a mismatched close bracket is Rejected."""
        if self._in_string:
            if self._escape:
                self._escape = False
            elif char == "\\":
                self._escape = True
            elif char == '"':
                self._in_string = False
        elif char == "{" or char == "[":
            self._brackets.append(char)
        elif char == "}" or char == "]":
            if not self._brackets or self._brackets.pop() != _OPENERS[char]:
                raise Rejected(char)
        elif char == '"':
            self._in_string = True
