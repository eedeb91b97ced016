from jetsim.estimation.config import ConfigError, EstimatorConfig
from jetsim.estimation.cut_time import (
    CutTimeBreakdown,
    CutTimeCalculation,
    InvalidCutTimeParameters,
    build_cut_time_calculation,
    calculate_cut_time,
    estimate_program_time,
    validate_cut_time_inputs,
)
from jetsim.estimation.formatting import format_time, format_time_difference
from jetsim.estimation.report import render_report

__all__ = [
    "ConfigError",
    "EstimatorConfig",
    "CutTimeBreakdown",
    "CutTimeCalculation",
    "InvalidCutTimeParameters",
    "build_cut_time_calculation",
    "calculate_cut_time",
    "estimate_program_time",
    "validate_cut_time_inputs",
    "format_time",
    "format_time_difference",
    "render_report",
]
