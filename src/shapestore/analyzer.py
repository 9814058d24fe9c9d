"""
Store Analyzer — read-only inventory of a FigureStore.

This module provides lightweight analysis of a store:
    - Figure counts per shape
    - Aggregate perimeter and area
    - Largest figure by area
    - Warning flags for non-finite totals

IMPORTANT: It does NOT modify the store.
It only produces read-only reports.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from shapestore.model import Circle, Figure, Square, area
from shapestore.store import FigureStore


@dataclass
class StoreReport:
    """Analysis report for one figure store."""

    total_figures: int = 0
    circle_count: int = 0
    square_count: int = 0

    total_perimeter: float = 0.0
    total_area: float = 0.0

    largest_figure: Optional[Figure] = None

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def summary(self) -> str:
        """One-line rendering of the report."""
        text = (
            f"{self.total_figures} figure(s) "
            f"({self.square_count} square(s), {self.circle_count} circle(s)); "
            f"perimeter={self.total_perimeter}, area={self.total_area}"
        )
        if self.warnings:
            text += f"; warnings: {'; '.join(self.warnings)}"
        return text


def analyze_store(store: FigureStore) -> StoreReport:
    """
    Perform analysis of a FigureStore.

    Checks for:
    - Shape counts
    - Aggregate totals
    - Largest figure (first wins on equal area)
    - Non-finite totals (a stored property of +inf)

    Returns a StoreReport with metrics and warnings.
    """
    report = StoreReport()
    figures = store.figures

    report.total_figures = len(figures)
    report.circle_count = sum(1 for f in figures if isinstance(f, Circle))
    report.square_count = sum(1 for f in figures if isinstance(f, Square))

    report.total_perimeter = store.total_perimeter()
    report.total_area = store.total_area()

    largest_area = None
    for figure in figures:
        a = area(figure)
        if largest_area is None or a > largest_area:
            largest_area = a
            report.largest_figure = figure

    if not math.isfinite(report.total_perimeter):
        report.add_warning(f"Non-finite total perimeter: {report.total_perimeter}")

    if not math.isfinite(report.total_area):
        report.add_warning(f"Non-finite total area: {report.total_area}")

    infinite = [f for f in figures if math.isinf(f.value)]
    if infinite:
        report.add_warning(f"Figures with infinite property: {len(infinite)}")

    return report
