import math

import pytest

from blackbody.shapes import curve_points, star_points
from blackbody.zoomable_axes import ZoomableAxes


def test_star_points_alternate_radii_from_the_top():
    pts = star_points(center=(100.0, 50.0), outer_radius=35.0, inner_radius=20.0, num_points=9)
    assert len(pts) == 18
    assert pts[0] == pytest.approx((100.0, 15.0))
    radii = [math.hypot(x - 100.0, y - 50.0) for x, y in pts]
    assert radii[0::2] == pytest.approx([35.0] * 9)
    assert radii[1::2] == pytest.approx([20.0] * 9)


def test_star_points_go_clockwise_on_screen():
    pts = star_points()
    # screen y grows downward, so the second vertex lies to the right of the top one
    assert pts[1][0] > pts[0][0]


def test_curve_points_map_and_clip():
    axes = ZoomableAxes(width=550, height=400)
    origin = (100.0, 500.0)
    pts = curve_points(axes, [0.0, 1500.0, 3000.0], [0.0, 150.0 / 1e33, 1.0], origin)
    assert pts[0] == pytest.approx((100.0, 500.0))
    assert pts[1] == pytest.approx((375.0, 300.0))
    # far above the vertical range: pinned to the top of the graph
    assert pts[2] == pytest.approx((650.0, 100.0))
