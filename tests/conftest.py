"""
Pytest configuration and shared fixtures for jetsim tests.

Provides sample NC programs used across the test suite.
"""

import os
import sys

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))


SQUARE_PROGRAM = """\
; 10 mm corner
G00 X0 Y0
G01 X10 Y0 F100
G01 X10 Y10 F100
"""

# Two separate contours, each entered by a rapid, one containing an arc
TWO_PARTS_PROGRAM = """\
(PART 1)
G00 X5 Y5
G01 X25 Y5 F200
G01 X25 Y25
G00 X40 Y5
(PART 2 - half circle)
G02 X60 Y5 I10 J0 F100
G01 X40 Y5
M30
"""


@pytest.fixture
def square_program() -> str:
    return SQUARE_PROGRAM


@pytest.fixture
def two_parts_program() -> str:
    return TWO_PARTS_PROGRAM


@pytest.fixture
def nc_file(tmp_path):
    """Write a program to a temporary .nc file and return its path."""
    def _write(content: str, name: str = "job.nc"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
