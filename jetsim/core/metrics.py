"""
Toolpath metrics: cutting perimeter, rapid length, pierce count, extents, feed.
"""

from __future__ import annotations

from typing import Iterable, Optional

from jetsim.core.toolpath import (
    ArcCut,
    BoundingBox,
    DEFAULT_CUTTING_SPEED,
    LinearCut,
    LineDiagnostic,
    MotionPrimitive,
    MoveKind,
    ParsedProgram,
)


class MetricsAccumulator:
    """
    Running totals over a toolpath, fed one primitive at a time.

    Distances are XY chord lengths for every move, arcs included.
    """

    def __init__(self) -> None:
        self.toolpath: list[MotionPrimitive] = []
        self.cutting_perimeter = 0.0
        self.rapid_length = 0.0
        self.piercing_count = 0
        self.feed_rates: list[float] = []
        self.bounding_box: Optional[BoundingBox] = None

    def add(self, move: MotionPrimitive) -> None:
        self.toolpath.append(move)

        if move.kind is MoveKind.CUTTING:
            self.cutting_perimeter += move.chord_length
            # Zero means no F word has been seen yet
            if isinstance(move, (LinearCut, ArcCut)) and move.feed_rate:
                self.feed_rates.append(move.feed_rate)
        else:
            self.rapid_length += move.chord_length

        if move.is_pierce_point:
            self.piercing_count += 1

        box = self.bounding_box or BoundingBox.around(move.start)
        self.bounding_box = box.include(move.start).include(move.end)

    @property
    def average_cutting_speed(self) -> float:
        if not self.feed_rates:
            return DEFAULT_CUTTING_SPEED
        return sum(self.feed_rates) / len(self.feed_rates)

    def result(self, diagnostics: Iterable[LineDiagnostic] = ()) -> ParsedProgram:
        return ParsedProgram(
            toolpath=tuple(self.toolpath),
            cutting_perimeter=self.cutting_perimeter,
            rapid_length=self.rapid_length,
            piercing_count=self.piercing_count,
            average_cutting_speed=self.average_cutting_speed,
            feed_samples=len(self.feed_rates),
            bounding_box=self.bounding_box or BoundingBox(),
            diagnostics=tuple(diagnostics),
        )


def summarize(
    toolpath: Iterable[MotionPrimitive],
    diagnostics: Iterable[LineDiagnostic] = (),
) -> ParsedProgram:
    """Compute metrics for an already-built toolpath."""
    acc = MetricsAccumulator()
    for move in toolpath:
        acc.add(move)
    return acc.result(diagnostics)
