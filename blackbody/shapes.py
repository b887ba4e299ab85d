#!/usr/bin/env python3
"""
Point lists for the shapes the renderer draws: the star and the spectrum curves.
"""
import math
from typing import List, Sequence, Tuple

from .constants import STAR_INNER_RADIUS, STAR_OUTER_RADIUS, STAR_POINTS
from .zoomable_axes import ZoomableAxes


def star_points(center: Tuple[float, float] = (0.0, 0.0),
                outer_radius: float = STAR_OUTER_RADIUS,
                inner_radius: float = STAR_INNER_RADIUS,
                num_points: int = STAR_POINTS) -> List[Tuple[float, float]]:
    """
    Outline of a star with num_points limbs, starting at the top and going clockwise
    in screen coordinates (y down). Vertices alternate between the outer and inner radius.
    """
    cx, cy = center
    segments = 2 * num_points
    points = []
    for i in range(segments):
        angle = (i / segments) * 2 * math.pi - math.pi / 2
        radius = outer_radius if i % 2 == 0 else inner_radius
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def curve_points(axes: ZoomableAxes,
                 wavelengths: Sequence[float],
                 radiances: Sequence[float],
                 origin: Tuple[float, float]) -> List[Tuple[float, float]]:
    """
    Screen points for a sampled spectrum, with origin the screen position of the graph's
    (0, 0) corner. Points above the top of the graph are clipped to it.
    """
    ox, oy = origin
    pts = []
    for w, r in zip(wavelengths, radiances):
        x = axes.wavelength_to_view_x(w)
        y = min(axes.spectral_radiance_to_view_y(r), axes.height)
        pts.append((ox + x, oy - y))
    return pts
