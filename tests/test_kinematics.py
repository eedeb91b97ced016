import math

import numpy as np
import pytest

from jetsim.core import parse_string, primitive_to_points, toolpath_to_points
from jetsim.core.kinematics import arc_end_angles, resolve_arc
from jetsim.core.toolpath import ArcCut, Point


def test_resolve_arc_requires_both_offsets():
    start, end = Point(0, 0), Point(10, 0)
    assert resolve_arc(start, end, 5.0, None, clockwise=True) is None
    assert resolve_arc(start, end, None, 0.0, clockwise=True) is None


def test_resolve_arc_forces_sweep_sign_by_direction():
    start, end = Point(10, 0), Point(0, 10)  # quarter turn CCW about origin
    ccw = resolve_arc(start, end, -10.0, 0.0, clockwise=False)
    cw = resolve_arc(start, end, -10.0, 0.0, clockwise=True)
    assert ccw.angle == pytest.approx(math.pi / 2)
    assert cw.angle == pytest.approx(3 * math.pi / 2)
    assert ccw.center == cw.center == Point(0.0, 0.0)


def test_arc_end_angles():
    move = parse_string("G00 X40 Y5\nG02 X60 Y5 I10 J0 F100\n").toolpath[1]
    start_angle, end_angle = arc_end_angles(move)
    assert start_angle == pytest.approx(math.pi)
    assert end_angle == pytest.approx(0.0)


def test_arc_end_angles_without_geometry_raises():
    move = ArcCut(Point(0, 0), Point(1, 0), 0)
    with pytest.raises(ValueError):
        arc_end_angles(move)


def test_linear_primitive_points_are_endpoints():
    move = parse_string("G01 X3 Y4 F10\n").toolpath[0]
    pts = primitive_to_points(move)
    np.testing.assert_allclose(pts, [[0.0, 0.0], [3.0, 4.0]])


def test_clockwise_arc_is_sampled_over_the_top():
    move = parse_string("G00 X40 Y5\nG02 X60 Y5 I10 J0 F100\n").toolpath[1]
    pts = primitive_to_points(move, num_samples=5)
    assert pts.shape == (5, 2)
    np.testing.assert_allclose(pts[0], [40.0, 5.0], atol=1e-9)
    np.testing.assert_allclose(pts[2], [50.0, 15.0], atol=1e-9)
    np.testing.assert_allclose(pts[-1], [60.0, 5.0], atol=1e-9)
    radii = np.hypot(pts[:, 0] - 50.0, pts[:, 1] - 5.0)
    np.testing.assert_allclose(radii, 10.0)


def test_counterclockwise_arc_is_sampled_underneath():
    move = parse_string("G00 X40 Y5\nG03 X60 Y5 I10 J0 F100\n").toolpath[1]
    pts = primitive_to_points(move, num_samples=5)
    np.testing.assert_allclose(pts[2], [50.0, -5.0], atol=1e-9)


def test_arc_without_geometry_falls_back_to_chord():
    move = parse_string("G02 X10 Y0 I5\n").toolpath[0]
    pts = primitive_to_points(move, num_samples=16)
    np.testing.assert_allclose(pts, [[0.0, 0.0], [10.0, 0.0]])


def test_num_samples_must_allow_a_segment():
    move = parse_string("G01 X1\n").toolpath[0]
    with pytest.raises(ValueError):
        primitive_to_points(move, num_samples=1)


def test_toolpath_polyline_connects_shared_endpoints(two_parts_program):
    toolpath = parse_string(two_parts_program).toolpath
    connected = toolpath_to_points(toolpath, num_samples=8)
    separate = toolpath_to_points(toolpath, num_samples=8, connect=False)

    # 5 straight moves (2 points each) and one arc (8 points)
    assert separate.shape == (5 * 2 + 8, 2)
    assert connected.shape == (separate.shape[0] - (len(toolpath) - 1), 2)
    np.testing.assert_allclose(connected[0], [0.0, 0.0])
    np.testing.assert_allclose(connected[-1], [40.0, 5.0])


def test_empty_toolpath_polyline():
    assert toolpath_to_points(()).shape == (0, 2)
