#!/usr/bin/env python3
"""
Zoomable graph axes: maps between model values and graph pixels.

The horizontal axis shows wavelength from 0 to horizontal_zoom (nm); the vertical axis
shows spectral radiance in graph units from 0 to vertical_zoom. View coordinates are
measured from the graph origin, x to the right and y upwards.
"""
from typing import List, Tuple

from .constants import (
    AXES_HEIGHT,
    AXES_WIDTH,
    DEFAULT_VERTICAL_ZOOM,
    DEFAULT_WAVELENGTH_MAX,
    HORIZONTAL_ZOOM_FACTOR,
    MAX_HORIZONTAL_ZOOM,
    MAX_VERTICAL_ZOOM,
    MIN_HORIZONTAL_ZOOM,
    MIN_VERTICAL_ZOOM,
    MINOR_TICKS_PER_MAJOR_TICK,
    RADIANCE_TO_GRAPH_UNITS,
    VERTICAL_ZOOM_FACTOR,
    WAVELENGTH_PER_TICK,
)
from .math_utils import clamp, linear


class ZoomableAxes:
    """
    Zoom state of the spectrum graph.

    Zooming in narrows the displayed range by the zoom factor; zooming out widens it.
    Both ranges are clamped to their configured bounds.
    """

    def __init__(self, width: float = AXES_WIDTH, height: float = AXES_HEIGHT):
        self.width = width
        self.height = height
        self.horizontal_zoom = DEFAULT_WAVELENGTH_MAX
        self.vertical_zoom = DEFAULT_VERTICAL_ZOOM

    def reset(self) -> None:
        self.horizontal_zoom = DEFAULT_WAVELENGTH_MAX
        self.vertical_zoom = DEFAULT_VERTICAL_ZOOM

    # -----------------------
    # Zoom steps
    # -----------------------

    def zoom_in_horizontal(self) -> float:
        self.horizontal_zoom = clamp(self.horizontal_zoom / HORIZONTAL_ZOOM_FACTOR,
                                     MIN_HORIZONTAL_ZOOM, MAX_HORIZONTAL_ZOOM)
        return self.horizontal_zoom

    def zoom_out_horizontal(self) -> float:
        self.horizontal_zoom = clamp(self.horizontal_zoom * HORIZONTAL_ZOOM_FACTOR,
                                     MIN_HORIZONTAL_ZOOM, MAX_HORIZONTAL_ZOOM)
        return self.horizontal_zoom

    def zoom_in_vertical(self) -> float:
        self.vertical_zoom = clamp(self.vertical_zoom / VERTICAL_ZOOM_FACTOR,
                                   MIN_VERTICAL_ZOOM, MAX_VERTICAL_ZOOM)
        return self.vertical_zoom

    def zoom_out_vertical(self) -> float:
        self.vertical_zoom = clamp(self.vertical_zoom * VERTICAL_ZOOM_FACTOR,
                                   MIN_VERTICAL_ZOOM, MAX_VERTICAL_ZOOM)
        return self.vertical_zoom

    @property
    def can_zoom_in_horizontal(self) -> bool:
        return self.horizontal_zoom > MIN_HORIZONTAL_ZOOM

    @property
    def can_zoom_out_horizontal(self) -> bool:
        return self.horizontal_zoom < MAX_HORIZONTAL_ZOOM

    @property
    def can_zoom_in_vertical(self) -> bool:
        return self.vertical_zoom > MIN_VERTICAL_ZOOM

    @property
    def can_zoom_out_vertical(self) -> bool:
        return self.vertical_zoom < MAX_VERTICAL_ZOOM

    # -----------------------
    # Conversions
    # -----------------------

    def wavelength_to_view_x(self, wavelength: float) -> float:
        return linear(0, self.horizontal_zoom, 0, self.width, wavelength)

    def view_x_to_wavelength(self, view_x: float) -> float:
        return linear(0, self.width, 0, self.horizontal_zoom, view_x)

    def spectral_radiance_to_view_y(self, radiance: float) -> float:
        """Model radiance (see body_model) to pixels above the horizontal axis."""
        return linear(0, self.vertical_zoom, 0, self.height, radiance * RADIANCE_TO_GRAPH_UNITS)

    def horizontal_ticks(self) -> List[Tuple[float, bool]]:
        """
        Tick positions along the horizontal axis as (view_x, is_major) pairs.

        A tick every WAVELENGTH_PER_TICK nm, every MINOR_TICKS_PER_MAJOR_TICK-th one major.
        Tick spacing widens with the zoom so the axis never carries more than ~60 ticks.
        """
        spacing = WAVELENGTH_PER_TICK
        while self.horizontal_zoom / spacing > 60:
            spacing *= 2
        ticks = []
        i = 0
        while i * spacing <= self.horizontal_zoom:
            ticks.append((self.wavelength_to_view_x(i * spacing), i % MINOR_TICKS_PER_MAJOR_TICK == 0))
            i += 1
        return ticks
