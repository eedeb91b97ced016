"""
Waterjet NC interpreter and cut-time estimator.
"""

from jetsim.core import parse_file, parse_string
from jetsim.estimation import calculate_cut_time, estimate_program_time, format_time

__version__ = "0.1.0"

__all__ = [
    "parse_file",
    "parse_string",
    "calculate_cut_time",
    "estimate_program_time",
    "format_time",
]
