"""
Toolpath data model: points, motion primitives, modal state and parse results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

import numpy as np


# ============================================================================
# Geometry
# ============================================================================

@dataclass(frozen=True)
class Point:
    """Machine-space point in millimeters. z is optional and ignored by metrics."""
    x: float
    y: float
    z: Optional[float] = None

    def distance_xy(self, other: Point) -> float:
        """Chord distance in the XY plane."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def as_xy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


ORIGIN = Point(0.0, 0.0, 0.0)

# Average cutting speed reported when no feed rate was programmed (mm/min)
DEFAULT_CUTTING_SPEED = 50.0


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned XY extent of a toolpath."""
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def include(self, point: Point) -> BoundingBox:
        return BoundingBox(
            min_x=min(self.min_x, point.x),
            max_x=max(self.max_x, point.x),
            min_y=min(self.min_y, point.y),
            max_y=max(self.max_y, point.y),
        )

    @classmethod
    def around(cls, point: Point) -> BoundingBox:
        return cls(point.x, point.x, point.y, point.y)


# ============================================================================
# Motion Primitives
# ============================================================================

class MoveKind(Enum):
    """Whether the jet is cutting during a move."""
    RAPID = "rapid"
    CUTTING = "cutting"


class MoveCommand(Enum):
    """Motion commands understood by the interpreter."""
    RAPID = "G00"
    LINEAR = "G01"
    ARC_CW = "G02"
    ARC_CCW = "G03"

    @classmethod
    def from_g(cls, value: Optional[float]) -> Optional[MoveCommand]:
        """Map a G field value to a command; anything else is not a motion line."""
        return _G_COMMANDS.get(value) if value is not None else None

    @property
    def kind(self) -> MoveKind:
        return MoveKind.RAPID if self is MoveCommand.RAPID else MoveKind.CUTTING


_G_COMMANDS: dict[float, MoveCommand] = {
    0.0: MoveCommand.RAPID,
    1.0: MoveCommand.LINEAR,
    2.0: MoveCommand.ARC_CW,
    3.0: MoveCommand.ARC_CCW,
}


@dataclass(frozen=True)
class ArcGeometry:
    """Resolved circular-move geometry."""
    center: Point
    radius: float
    angle: float      # sweep magnitude in radians, [0, 2*pi)
    clockwise: bool


@dataclass(frozen=True)
class MotionPrimitive:
    """Base class for one executed move."""
    start: Point
    end: Point
    sequence: int
    is_pierce_point: bool = False

    @property
    def kind(self) -> MoveKind:
        return self.command.kind

    @property
    def command(self) -> MoveCommand:
        raise NotImplementedError

    @property
    def chord_length(self) -> float:
        return self.start.distance_xy(self.end)


@dataclass(frozen=True)
class RapidMove(MotionPrimitive):
    """G00 - Rapid positioning, jet off."""

    @property
    def command(self) -> MoveCommand:
        return MoveCommand.RAPID


@dataclass(frozen=True)
class LinearCut(MotionPrimitive):
    """G01 - Straight cut."""
    feed_rate: float = 0.0

    @property
    def command(self) -> MoveCommand:
        return MoveCommand.LINEAR


@dataclass(frozen=True)
class ArcCut(MotionPrimitive):
    """G02/G03 - Circular cut. ``arc`` is None when I/J were not both given."""
    feed_rate: float = 0.0
    clockwise: bool = True
    arc: Optional[ArcGeometry] = None

    @property
    def command(self) -> MoveCommand:
        return MoveCommand.ARC_CW if self.clockwise else MoveCommand.ARC_CCW


# ============================================================================
# Modal State
# ============================================================================

@dataclass(frozen=True)
class ModalState:
    """
    Modal values carried from one motion line to the next.

    Immutable: each interpreted line yields a new state via ``advance``.
    """
    position: Point = ORIGIN
    last_move_kind: MoveKind = MoveKind.RAPID
    feed_rate: float = 0.0

    def resolve_target(
        self,
        x: Optional[float],
        y: Optional[float],
        z: Optional[float],
    ) -> Point:
        """Absolute target; missing axes keep the current value."""
        return Point(
            x if x is not None else self.position.x,
            y if y is not None else self.position.y,
            z if z is not None else self.position.z,
        )

    def advance(self, end: Point, kind: MoveKind, feed_rate: float) -> ModalState:
        return replace(self, position=end, last_move_kind=kind, feed_rate=feed_rate)


# ============================================================================
# Parse Result
# ============================================================================

@dataclass(frozen=True)
class LineDiagnostic:
    """A program line skipped because it could not be interpreted."""
    line_number: int
    text: str
    message: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}"


@dataclass(frozen=True)
class ParsedProgram:
    """Ordered toolpath plus aggregate metrics for one NC program."""
    toolpath: tuple[MotionPrimitive, ...] = ()
    cutting_perimeter: float = 0.0
    rapid_length: float = 0.0
    piercing_count: int = 0
    average_cutting_speed: float = DEFAULT_CUTTING_SPEED
    feed_samples: int = 0   # cutting moves with a programmed feed
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    diagnostics: tuple[LineDiagnostic, ...] = ()

    @property
    def cutting_moves(self) -> int:
        return sum(1 for move in self.toolpath if move.kind is MoveKind.CUTTING)

    @property
    def rapid_moves(self) -> int:
        return sum(1 for move in self.toolpath if move.kind is MoveKind.RAPID)

    @property
    def pierce_points(self) -> list[MotionPrimitive]:
        return [move for move in self.toolpath if move.is_pierce_point]
