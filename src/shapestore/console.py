"""
Command loop: the interactive text front end of the figure store.

Reads one line per step, dispatches to the FigureStore and renders
results or error text. Every recoverable error is handled here:
    - UnknownOperationError (bad menu selection)
    - BadPropertyError (number outside the property domain)
    - unparseable figure type / property (parsers return None)

None of them end the loop. Only EXIT (or end of input) does.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable, Optional

from shapestore.analyzer import analyze_store
from shapestore.config import DEFAULT_MESSAGES, ConsoleMessages
from shapestore.model import FigureType
from shapestore.store import BadPropertyError, FigureStore

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\Z", re.ASCII)
_SPECIAL_RE = re.compile(r"[+-]?(?:nan|inf|infinity)\Z", re.IGNORECASE)


class Operation(Enum):
    """Top-level menu operations, keyed by their menu code."""

    INSERT = "1"
    GET_AREA = "2"
    GET_PERIMETER = "3"
    EXIT = "4"


class UnknownOperationError(ValueError):
    """Raised when the menu selection matches no Operation."""

    def __init__(self, raw: Optional[str]):
        self.raw = raw
        super().__init__(f"Unknown operation: {raw}")


def parse_operation(raw: Optional[str]) -> Operation:
    """
    Map a menu line to an Operation.

    Raises:
        UnknownOperationError: carrying the raw input, for anything else
    """
    if raw is not None:
        try:
            return Operation(raw.strip())
        except ValueError:
            pass
    raise UnknownOperationError(raw)


def parse_figure_type(raw: Optional[str]) -> Optional[FigureType]:
    if raw is None:
        return None
    try:
        return FigureType(raw.strip())
    except ValueError:
        return None


def parse_property(raw: Optional[str]) -> Optional[float]:
    """
    Parse a real number, or return None when the input is not one.

    Accepts ASCII decimal and exponent forms plus nan / inf / infinity
    (any case, optional sign). Underscores and non-ASCII digits are rejected.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not (_DECIMAL_RE.match(text) or _SPECIAL_RE.match(text)):
        return None
    return float(text)


class ConsoleLoop:
    """
    Menu-driven loop over one FigureStore.

    The loop holds the only reference to its store for its lifetime.
    input_func / output_func default to input() / print() and can be
    replaced to script the loop.
    """

    def __init__(
        self,
        store: FigureStore,
        input_func: Optional[Callable[[], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        messages: ConsoleMessages = DEFAULT_MESSAGES,
    ):
        self.store = store
        self._input = input_func or input
        self._output = output_func or print
        self.messages = messages

    def run(self) -> int:
        """Run until EXIT or end of input. Returns the process exit code."""
        while self.step():
            pass
        logger.info(analyze_store(self.store).summary())
        return 0

    def step(self) -> bool:
        """Handle one menu selection. Returns False when the loop should stop."""
        self._output(self.messages.menu)
        raw = self._read()
        if raw is None:
            return False

        try:
            operation = parse_operation(raw)
        except UnknownOperationError as e:
            logger.debug("Unknown operation %r", e.raw)
            self._output(self.messages.unknown_operation.format(raw=e.raw))
            return True

        if operation is Operation.INSERT:
            self.add_figure()
        elif operation is Operation.GET_AREA:
            self._output(self.messages.total_area.format(value=self.store.total_area()))
        elif operation is Operation.GET_PERIMETER:
            self._output(self.messages.total_perimeter.format(value=self.store.total_perimeter()))
        elif operation is Operation.EXIT:
            return False
        return True

    def add_figure(self) -> None:
        """
        Prompt for a figure type and property value, then store the figure.

        Both lines are read before either is checked; the property is
        checked first, so a bad type with a bad value reports the value.
        """
        self._output(self.messages.figure_type_prompt)
        raw_type = self._read()
        self._output(self.messages.property_prompt)
        value = parse_property(self._read())

        if value is None:
            self._output(self.messages.invalid_property)
            return

        figure_type = parse_figure_type(raw_type)
        if figure_type is None:
            self._output(self.messages.invalid_figure_type)
            return

        try:
            figure = self.store.add(figure_type, value)
        except BadPropertyError as e:
            self._output(self.messages.bad_property.format(value=e.value))
            return
        self._output(self.messages.figure_added.format(figure=figure))

    def _read(self) -> Optional[str]:
        # None means end of input
        try:
            return self._input()
        except EOFError:
            return None
