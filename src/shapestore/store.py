"""
Figure Store: the validated, append-only collection of figures.

The store owns:
    - Validation of property values (must be > 0 and not NaN)
    - Insertion-ordered storage
    - Aggregate queries (total perimeter, total area)

IMPORTANT: aggregate queries are read-only and idempotent.
Positive infinity is accepted as a property value; totals may then be inf.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Iterable, Iterator, List, Tuple

from shapestore.model import Circle, Figure, FigureType, Square, area, make_figure, perimeter

logger = logging.getLogger(__name__)


class BadPropertyError(ValueError):
    """Raised when a property value is not a positive, non-NaN number."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Bad property value: {value}")


def validate_property(value: float) -> float:
    """
    Check a property value and return it unchanged.

    Raises:
        TypeError: If value is not a real number (bool is rejected too)
        BadPropertyError: If value <= 0 or value is NaN
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Property value must be a real number, got {type(value).__name__}")
    if value <= 0 or math.isnan(value):
        raise BadPropertyError(value)
    return value


def _total(terms: Iterable[float]) -> float:
    """Correctly rounded sum of non-negative terms; +inf once it overflows."""
    try:
        return math.fsum(terms)
    except OverflowError:
        # fsum refuses finite terms whose sum exceeds the float range
        return math.inf


class FigureStore:
    """
    Append-only, insertion-ordered collection of figures.

    Figures are immutable once stored. There is no removal or mutation.
    """

    def __init__(self) -> None:
        self._figures: List[Figure] = []

    def __len__(self) -> int:
        return len(self._figures)

    def __iter__(self) -> Iterator[Figure]:
        return iter(tuple(self._figures))

    @property
    def figures(self) -> Tuple[Figure, ...]:
        """Snapshot of stored figures in insertion order."""
        return tuple(self._figures)

    def add_circle(self, radius: float) -> Circle:
        return self._append(FigureType.CIRCLE, radius)

    def add_square(self, side: float) -> Square:
        return self._append(FigureType.SQUARE, side)

    def add(self, figure_type: FigureType, value: float) -> Figure:
        """Add a figure of the given type; see add_circle / add_square."""
        if figure_type is FigureType.CIRCLE:
            return self.add_circle(value)
        if figure_type is FigureType.SQUARE:
            return self.add_square(value)
        raise TypeError(f"Unsupported FigureType: {figure_type!r}")

    def total_perimeter(self) -> float:
        return _total(perimeter(f) for f in self._figures)

    def total_area(self) -> float:
        return _total(area(f) for f in self._figures)

    def _append(self, figure_type: FigureType, value: float) -> Figure:
        try:
            validate_property(value)
        except BadPropertyError:
            logger.debug("Rejected %s with property %r", figure_type.name.lower(), value)
            raise
        figure = make_figure(figure_type, value)
        self._figures.append(figure)
        logger.debug("Stored %r (%d figures)", figure, len(self._figures))
        return figure
