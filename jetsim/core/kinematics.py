"""
Planar arc kinematics: resolve G02/G03 geometry and sample toolpaths for replay.

Features:
- Arc center/radius/sweep from I/J center offsets
- Arc sampling along the programmed direction
- Toolpath to XY polyline conversion
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from jetsim.core.toolpath import ArcCut, ArcGeometry, MotionPrimitive, Point


def resolve_arc(
    start: Point,
    end: Point,
    i: Optional[float],
    j: Optional[float],
    clockwise: bool,
) -> Optional[ArcGeometry]:
    """
    Resolve arc geometry from center offsets relative to ``start``.

    Returns None when either offset is missing. The stored angle is the sweep
    magnitude; the direction travels in ``clockwise``.
    """
    if i is None or j is None:
        return None

    center = Point(start.x + i, start.y + j)
    radius = math.sqrt(i * i + j * j)
    start_angle = math.atan2(start.y - center.y, start.x - center.x)
    end_angle = math.atan2(end.y - center.y, end.x - center.x)

    delta = end_angle - start_angle
    if clockwise:
        if delta > 0:
            delta -= 2 * math.pi
    else:
        if delta < 0:
            delta += 2 * math.pi

    return ArcGeometry(center=center, radius=radius, angle=abs(delta), clockwise=clockwise)


def arc_end_angles(move: ArcCut) -> tuple[float, float]:
    """Start and end angles (radians) of an arc about its center."""
    if move.arc is None:
        raise ValueError(f"Arc move {move.sequence} has no resolved geometry")
    cx, cy = move.arc.center.x, move.arc.center.y
    return (
        math.atan2(move.start.y - cy, move.start.x - cx),
        math.atan2(move.end.y - cy, move.end.x - cx),
    )


def _arc_points_xy(move: ArcCut, num_samples: int) -> np.ndarray:
    """Sample an arc in the XY plane. Returns (num_samples, 2)."""
    arc = move.arc
    start_angle, _ = arc_end_angles(move)
    sweep = -arc.angle if arc.clockwise else arc.angle
    t = np.linspace(0, 1, num_samples, endpoint=True)
    angles = start_angle + t * sweep
    x = arc.center.x + arc.radius * np.cos(angles)
    y = arc.center.y + arc.radius * np.sin(angles)
    return np.column_stack((x, y))


def primitive_to_points(move: MotionPrimitive, num_samples: int = 32) -> np.ndarray:
    """
    Convert a single motion primitive to an array of XY points (N, 2).
    Rapid/linear and arcs without geometry: start and end; arc: sampled along the arc.
    """
    if num_samples < 2:
        raise ValueError("num_samples must be at least 2")
    if isinstance(move, ArcCut) and move.arc is not None:
        return _arc_points_xy(move, num_samples)
    return np.array([move.start.as_xy(), move.end.as_xy()], dtype=np.float64)


def toolpath_to_points(
    toolpath: Sequence[MotionPrimitive],
    num_samples: int = 32,
    connect: bool = True,
) -> np.ndarray:
    """
    Convert a toolpath to a single XY polyline (N, 2), in sequence order.
    If connect=True, the first point of every primitive after the first is
    dropped since it equals the previous end.
    """
    if not toolpath:
        return np.zeros((0, 2), dtype=np.float64)

    chunks = [primitive_to_points(move, num_samples=num_samples) for move in toolpath]

    if connect:
        out = [chunks[0]] + [chunk[1:] for chunk in chunks[1:]]
        return np.concatenate(out, axis=0)
    return np.concatenate(chunks, axis=0)
