import pytest

from jetsim.core import parse_string
from jetsim.estimation import (
    EstimatorConfig,
    InvalidCutTimeParameters,
    build_cut_time_calculation,
    calculate_cut_time,
    estimate_program_time,
    validate_cut_time_inputs,
)


def test_cut_time_formula():
    result = calculate_cut_time(pierce_count=2, pierce_time_per_unit=0.5, cutting_perimeter=100, cutting_speed=50)
    assert result.piercing_time == 1.0
    assert result.cutting_time == 2.0
    assert result.total_time == 3.0


def test_cut_time_formula_does_not_guard_zero_speed():
    with pytest.raises(ZeroDivisionError):
        calculate_cut_time(1, 0.5, 10, 0)


@pytest.mark.parametrize("args", [
    (-1, 0.5, 100, 50),
    (1, -0.5, 100, 50),
    (1, 0.5, -100, 50),
    (1, 0.5, 100, 0),
    (1, 0.5, 100, -5),
    ("2", 0.5, 100, 50),
    (True, 0.5, 100, 50),
    (1, 0.5, None, 50),
])
def test_invalid_inputs_are_rejected(args):
    with pytest.raises(InvalidCutTimeParameters):
        validate_cut_time_inputs(*args)


def test_build_calculation_keeps_inputs():
    calc = build_cut_time_calculation(4, 0.25, 300.0, 150.0)
    assert calc.pierce_count == 4
    assert calc.pierce_time_per_piece == 0.25
    assert calc.total_cutting_perimeter == 300.0
    assert calc.cutting_speed == 150.0
    assert calc.calculated_cut_time == pytest.approx(3.0)


def test_estimate_uses_program_average_and_default_pierce_time(two_parts_program):
    program = parse_string(two_parts_program)
    calc = estimate_program_time(program)
    assert calc.pierce_time_per_piece == 0.5
    assert calc.cutting_speed == pytest.approx(150.0)
    assert calc.breakdown.piercing_time == pytest.approx(1.0)
    assert calc.breakdown.cutting_time == pytest.approx(80.0 / 150.0)


def test_estimate_prefers_explicit_values_over_config(square_program):
    program = parse_string(square_program)
    config = EstimatorConfig(pierce_time_per_pierce=1.0, cutting_speed_override=40.0)

    from_config = estimate_program_time(program, config)
    assert from_config.pierce_time_per_piece == 1.0
    assert from_config.cutting_speed == 40.0

    explicit = estimate_program_time(program, config, pierce_time=0.0, cutting_speed=10.0)
    assert explicit.breakdown.piercing_time == 0.0
    assert explicit.breakdown.cutting_time == pytest.approx(2.0)


def test_estimate_rejects_invalid_override(square_program):
    program = parse_string(square_program)
    with pytest.raises(InvalidCutTimeParameters):
        estimate_program_time(program, cutting_speed=0.0)


def test_estimate_uses_config_fallback_when_no_feed_programmed():
    program = parse_string("G01 X100\n")
    config = EstimatorConfig(fallback_cutting_speed=200.0)
    calc = estimate_program_time(program, config)
    assert calc.cutting_speed == 200.0
    assert calc.breakdown.cutting_time == pytest.approx(0.5)


def test_config_fallback_is_ignored_when_feed_programmed():
    program = parse_string("G01 X100 F400\n")
    calc = estimate_program_time(program, EstimatorConfig(fallback_cutting_speed=200.0))
    assert calc.cutting_speed == 400.0
