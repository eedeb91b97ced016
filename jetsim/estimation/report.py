"""
Plain-text job report: move statistics, metrics and cut-time breakdown.
"""

from __future__ import annotations

from typing import Optional

from jetsim.core.toolpath import ParsedProgram
from jetsim.estimation.cut_time import CutTimeCalculation
from jetsim.estimation.formatting import format_time, format_time_difference


def render_report(
    program: ParsedProgram,
    estimate: CutTimeCalculation,
    reference_minutes: Optional[float] = None,
    replay_points: Optional[int] = None,
) -> str:
    box = program.bounding_box
    breakdown = estimate.breakdown
    lines = [
        "Toolpath",
        f"  Total moves:        {len(program.toolpath)}",
        f"  Cutting moves:      {program.cutting_moves}",
        f"  Rapid moves:        {program.rapid_moves}",
        f"  Pierce points:      {program.piercing_count}",
        "",
        "Metrics",
        f"  Cutting perimeter:  {program.cutting_perimeter:.2f} mm",
        f"  Rapid length:       {program.rapid_length:.2f} mm",
        f"  Average speed:      {program.average_cutting_speed:.2f} mm/min",
        f"  Extents:            X {box.min_x:.2f} .. {box.max_x:.2f}, "
        f"Y {box.min_y:.2f} .. {box.max_y:.2f} "
        f"({box.width:.2f} x {box.height:.2f} mm)",
        "",
        "Cut time",
        f"  Pierce time:        {estimate.pierce_count} x {estimate.pierce_time_per_piece:.2f} min"
        f" = {breakdown.piercing_time:.2f} min",
        f"  Cutting time:       {estimate.total_cutting_perimeter:.2f} / {estimate.cutting_speed:.2f}"
        f" = {breakdown.cutting_time:.2f} min",
        f"  Total:              {format_time(breakdown.total_time)}",
    ]
    if replay_points is not None:
        lines.insert(5, f"  Replay points:      {replay_points}")
    if reference_minutes is not None:
        lines.append(
            f"  Reference:          {format_time(reference_minutes)} "
            f"({format_time_difference(breakdown.total_time, reference_minutes)})"
        )
    if program.diagnostics:
        lines.append("")
        lines.append(f"Skipped lines ({len(program.diagnostics)})")
        lines.extend(f"  {diag}" for diag in program.diagnostics)
    return "\n".join(lines)
