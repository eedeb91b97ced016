"""
Cut-time estimation for waterjet programs.

Total Time = (Pierce Count x Pierce Time) + (Cutting Perimeter / Cutting Speed)

All times are in minutes, lengths in mm and speeds in mm/min.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Optional

from jetsim.core.toolpath import ParsedProgram
from jetsim.estimation.config import EstimatorConfig

logger = logging.getLogger(__name__)


class InvalidCutTimeParameters(ValueError):
    """Estimator inputs rejected before calculation."""


@dataclass(frozen=True)
class CutTimeBreakdown:
    piercing_time: float
    cutting_time: float
    total_time: float


@dataclass(frozen=True)
class CutTimeCalculation:
    """A validated calculation together with the inputs that produced it."""
    pierce_count: int
    pierce_time_per_piece: float
    total_cutting_perimeter: float
    cutting_speed: float
    breakdown: CutTimeBreakdown

    @property
    def calculated_cut_time(self) -> float:
        return self.breakdown.total_time


def calculate_cut_time(
    pierce_count: int,
    pierce_time_per_unit: float,
    cutting_perimeter: float,
    cutting_speed: float,
) -> CutTimeBreakdown:
    """
    Pure cut-time formula.

    ``cutting_speed`` must be positive; callers validate it with
    ``validate_cut_time_inputs``. Zero propagates ZeroDivisionError.
    """
    piercing_time = pierce_count * pierce_time_per_unit
    cutting_time = cutting_perimeter / cutting_speed
    return CutTimeBreakdown(
        piercing_time=piercing_time,
        cutting_time=cutting_time,
        total_time=piercing_time + cutting_time,
    )


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_cut_time_inputs(
    pierce_count,
    pierce_time_per_unit,
    cutting_perimeter,
    cutting_speed,
) -> None:
    """Raise InvalidCutTimeParameters unless every input is usable by the formula."""
    values = {
        "pierce_count": pierce_count,
        "pierce_time_per_unit": pierce_time_per_unit,
        "cutting_perimeter": cutting_perimeter,
        "cutting_speed": cutting_speed,
    }
    for name, value in values.items():
        if not _is_number(value):
            raise InvalidCutTimeParameters(f"{name} must be a number, got {value!r}")

    if pierce_count < 0:
        raise InvalidCutTimeParameters(f"pierce_count must be >= 0, got {pierce_count}")
    if pierce_time_per_unit < 0:
        raise InvalidCutTimeParameters(f"pierce_time_per_unit must be >= 0, got {pierce_time_per_unit}")
    if cutting_perimeter < 0:
        raise InvalidCutTimeParameters(f"cutting_perimeter must be >= 0, got {cutting_perimeter}")
    if cutting_speed <= 0:
        raise InvalidCutTimeParameters(f"cutting_speed must be > 0, got {cutting_speed}")


def build_cut_time_calculation(
    pierce_count: int,
    pierce_time_per_unit: float,
    cutting_perimeter: float,
    cutting_speed: float,
) -> CutTimeCalculation:
    """Validate inputs, then run the formula."""
    validate_cut_time_inputs(pierce_count, pierce_time_per_unit, cutting_perimeter, cutting_speed)
    breakdown = calculate_cut_time(pierce_count, pierce_time_per_unit, cutting_perimeter, cutting_speed)
    return CutTimeCalculation(
        pierce_count=pierce_count,
        pierce_time_per_piece=pierce_time_per_unit,
        total_cutting_perimeter=cutting_perimeter,
        cutting_speed=cutting_speed,
        breakdown=breakdown,
    )


def estimate_program_time(
    program: ParsedProgram,
    config: Optional[EstimatorConfig] = None,
    pierce_time: Optional[float] = None,
    cutting_speed: Optional[float] = None,
) -> CutTimeCalculation:
    """
    Estimate cut time for a parsed program.

    Explicit arguments win over the config; the cutting speed otherwise falls
    back to the config override, then to the program's average feed rate, and
    to the config fallback when the program set no feed at all.
    """
    config = config or EstimatorConfig()
    if pierce_time is None:
        pierce_time = config.pierce_time_per_pierce
    if cutting_speed is None:
        cutting_speed = config.cutting_speed_override
    if cutting_speed is None:
        if program.feed_samples:
            cutting_speed = program.average_cutting_speed
        else:
            cutting_speed = config.fallback_cutting_speed

    calculation = build_cut_time_calculation(
        program.piercing_count,
        pierce_time,
        program.cutting_perimeter,
        cutting_speed,
    )
    logger.debug(
        "Estimated %.2f min (%d pierces x %.2f min + %.3f mm / %.2f mm/min)",
        calculation.calculated_cut_time,
        program.piercing_count,
        pierce_time,
        program.cutting_perimeter,
        cutting_speed,
    )
    return calculation
