"""
Top-level parsing driver.

A SpanParser walks one span of the document character by character. It
keeps at most one pending item: a scalar automaton, a number automaton, a
container accumulator, or a finished value. While a container is pending,
raw characters are buffered until the DepthTracker shows a comma, colon or
closing bracket at the container's own level. The buffered span is then
handed to a fresh SpanParser, and the value it returns becomes the next
Item of the container.

Cost: every nesting level re-scans the text of its members, so parsing is
roughly ``len(text) * depth`` character steps, and each level adds Python
stack frames. Callers bound the cost by bounding input size.
"""

import logging
from dataclasses import dataclass
from typing import Any
from typing import TypeAlias

from jsonstack._config import DEFAULT_PARSE_CONFIG
from jsonstack._config import ParseConfig
from jsonstack._containers import ArrayAccumulator
from jsonstack._containers import Container
from jsonstack._containers import Item
from jsonstack._containers import ObjectAccumulator
from jsonstack._errors import Position
from jsonstack._errors import Rejected
from jsonstack._errors import UnexpectedEOF
from jsonstack._errors import UnexpectedToken
from jsonstack._profile import ProfileContext
from jsonstack._scalars import DIGITS
from jsonstack._scalars import BooleanAutomaton
from jsonstack._scalars import NullAutomaton
from jsonstack._scalars import NumberAutomaton
from jsonstack._scalars import TextAutomaton
from jsonstack._tracker import DepthTracker

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"

Scalar: TypeAlias = TextAutomaton | BooleanAutomaton | NullAutomaton


@dataclass(frozen=True, slots=True)
class Finalized:
    value: Any


PendingItem: TypeAlias = Container | Scalar | NumberAutomaton | Finalized


class SpanParser:
    """
    Parses ``doc[start:end]`` as exactly one JSON value.

    Offsets in raised errors are absolute positions in ``doc``. Instances
    are single use and share nothing mutable with each other.
    """

    def __init__(
        self,
        doc: str,
        start: Position = 0,
        end: Position | None = None,
        config: ParseConfig = DEFAULT_PARSE_CONFIG,
    ) -> None:
        self.doc = doc
        self.start = start
        self.end = len(doc) if end is None else end
        self.config = config
        self.pending: PendingItem | None = None
        self.tracker = DepthTracker()
        # Start of the member text buffered inside a pending container.
        self.anchor: Position | None = None
        self.expect_key_quote = False

    def parse(self) -> Any:
        with ProfileContext("parse_span", self.end - self.start):
            doc = self.doc
            tracker = self.tracker
            for pos in range(self.start, self.end):
                char = doc[pos]
                try:
                    tracker.feed(char)
                except Rejected as e:
                    raise UnexpectedToken(char, doc, pos) from e

                pending = self.pending
                if pending is None:
                    self._begin(char, pos)
                elif isinstance(pending, Finalized):
                    if char not in WHITESPACE:
                        raise UnexpectedToken(char, doc, pos)
                elif isinstance(pending, NumberAutomaton):
                    self._feed_number(pending, char, pos)
                elif isinstance(pending, ArrayAccumulator | ObjectAccumulator):
                    self._feed_container(pending, char, pos)
                else:
                    self._feed_scalar(pending, char, pos)

            return self._finish()

    def _begin(self, char: str, pos: Position) -> None:
        """Starts a new pending item from its leading character."""
        if char == '"':
            self.pending = TextAutomaton()
        elif char == "[":
            self.pending = ArrayAccumulator()
        elif char == "{":
            self.pending = ObjectAccumulator()
        elif char == "t" or char == "f":
            self.pending = BooleanAutomaton(char)
        elif char == "n":
            self.pending = NullAutomaton(char)
        elif char == "-" or char in DIGITS:
            number = NumberAutomaton()
            self.pending = number
            self._feed_number(number, char, pos)
        elif char not in WHITESPACE:
            raise UnexpectedToken(char, self.doc, pos)

    def _feed_scalar(self, scalar: Scalar, char: str, pos: Position) -> None:
        try:
            completed = scalar.push(char)
        except Rejected as e:
            raise UnexpectedToken(char, self.doc, pos) from e
        if completed:
            self.pending = Finalized(scalar.into_value())

    def _feed_number(
        self, number: NumberAutomaton, char: str, pos: Position
    ) -> None:
        try:
            number.push(char)
        except Rejected as e:
            raise UnexpectedToken(char, self.doc, pos) from e

        # No terminator: the number ends at the first character it can't take.
        following = pos + 1
        if following < self.end and number.can_accept(self.doc[following]):
            return
        try:
            self.pending = Finalized(number.into_value(self.config.parse_float))
        except Rejected as e:
            if following < self.end:
                raise UnexpectedToken(
                    self.doc[following], self.doc, following
                ) from e
            raise UnexpectedEOF(self.doc) from e

    def _feed_container(
        self, container: Container, char: str, pos: Position
    ) -> None:
        tracker = self.tracker
        delimiter = container.get_delimiter(char)

        if (
            delimiter is not None
            and tracker.level == 1
            and not tracker.in_string
        ):
            if not self._has_member_text(pos):
                raise UnexpectedToken(char, self.doc, pos)
            value = self._resolve_member(char, pos)
            try:
                container.push(Item(value))
                container.push(delimiter)
            except Rejected as e:
                raise UnexpectedToken(char, self.doc, pos) from e
            self.anchor = None

        elif (
            container.is_end_char(char)
            and tracker.level == 0
            and not tracker.in_string
        ):
            try:
                if self._has_member_text(pos):
                    container.push(Item(self._resolve_member(char, pos)))
                value = container.finalize(self.config)
            except Rejected as e:
                raise UnexpectedToken(char, self.doc, pos) from e
            self.pending = Finalized(value)
            self.anchor = None

        else:
            if self.anchor is None:
                self.anchor = pos
                self.expect_key_quote = container.next_must_be_key()
            if self.expect_key_quote and char not in WHITESPACE:
                # Object members must start with a quoted key.
                if char != '"':
                    raise UnexpectedToken(char, self.doc, pos)
                self.expect_key_quote = False

    def _has_member_text(self, pos: Position) -> bool:
        return (
            self.anchor is not None
            and self.doc[self.anchor : pos].strip(WHITESPACE) != ""
        )

    def _resolve_member(self, char: str, pos: Position) -> Any:
        """
        Parses the buffered member text that ``char`` at ``pos`` terminates.

        A member that runs out of input was cut short by the delimiter, so
        the end-of-input error is reported against the delimiter itself.
        """
        anchor = self.anchor
        assert anchor is not None
        logger.debug("resolving member span [%d, %d)", anchor, pos)
        try:
            return SpanParser(self.doc, anchor, pos, self.config).parse()
        except UnexpectedEOF as e:
            logger.debug(
                "member span [%d, %d) ended early at %r", anchor, pos, char
            )
            raise UnexpectedToken(char, self.doc, pos) from e

    def _finish(self) -> Any:
        pending = self.pending
        if isinstance(pending, Finalized):
            return pending.value

        anchor = self.anchor
        if anchor is not None and anchor < self.end:
            # Report a precise error inside the unterminated member, if any.
            logger.debug("checking trailing span [%d, %d)", anchor, self.end)
            SpanParser(self.doc, anchor, self.end, self.config).parse()
        raise UnexpectedEOF(self.doc)


def parse_document(doc: str, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> Any:
    """Parses an entire document into native Python values."""
    return SpanParser(doc, 0, len(doc), config).parse()
