#!/usr/bin/env python3
"""
Top-level model for the Blackbody Spectrum screen.

Holds the live body whose temperature the user drags, a bounded history of saved
snapshot bodies for comparison, the maximum wavelength shown on the graph, and the
wavelength probe ("graph values point") that reads off the curve.

Saved history
- save() copies the live body at its current temperature and appends the copy.
- When more than history_capacity snapshots are held, the oldest is evicted first.
- Snapshots are frozen bodies and the history is exposed as a tuple, so neither can
  be changed from outside after save().
"""
import logging
import math
from collections import deque
from typing import Deque, List, Optional, Tuple

from .body_model import BlackbodyBody
from .constants import (
    DEFAULT_TEMPERATURE,
    DEFAULT_WAVELENGTH_MAX,
    GRAPH_NUMBER_POINTS,
    SAVED_HISTORY_CAPACITY,
)
from .data_models import ColorCalibration
from .math_utils import clamp

logger = logging.getLogger("blackbody_sim")


class GraphValuesPoint:
    """
    A draggable wavelength probe on the live body's curve.

    The probe sits at the peak wavelength until dragged and snaps back to the peak
    whenever the temperature changes or the model is reset. When the peak is not finite
    (temperature 0) the probe is parked at the right edge of the graph.
    """

    def __init__(self, model: "BlackbodySpectrumModel"):
        self.model = model
        self.wavelength = 0.0
        self.reset()

    def reset(self) -> None:
        peak = self.model.main_body.peak_wavelength
        if not math.isfinite(peak):
            peak = self.model.wavelength_max
        self.wavelength = peak

    def drag_to(self, wavelength: float) -> float:
        """Move the probe, clamped to the visible wavelength range. Returns the new wavelength."""
        self.wavelength = clamp(float(wavelength), 0.0, self.model.wavelength_max)
        return self.wavelength

    @property
    def spectral_radiance(self) -> float:
        return self.model.main_body.get_spectral_radiance_at(self.wavelength)


class BlackbodySpectrumModel:
    """
    Live body plus bounded saved history.

    Operations are total over any state; none of them raises.
    """

    def __init__(self,
                 temperature: float = DEFAULT_TEMPERATURE,
                 history_capacity: int = SAVED_HISTORY_CAPACITY,
                 calibration: Optional[ColorCalibration] = None):
        """
        Args:
            temperature: Initial temperature of the live body in kelvin
            history_capacity: Maximum number of saved snapshots kept (>= 0)
            calibration: Color-mapping calibration shared by all bodies
        """
        self.calibration = calibration or ColorCalibration()
        self.history_capacity = max(0, int(history_capacity))
        self.main_body = BlackbodyBody(temperature, self.calibration)
        self._saved_bodies: Deque[BlackbodyBody] = deque()
        self.wavelength_max = DEFAULT_WAVELENGTH_MAX
        self.graph_values_point = GraphValuesPoint(self)

    @property
    def saved_bodies(self) -> Tuple[BlackbodyBody, ...]:
        """Saved snapshots, oldest first."""
        return tuple(self._saved_bodies)

    @property
    def temperature(self) -> float:
        return self.main_body.temperature

    def set_temperature(self, temperature: float) -> None:
        """Change the live body's temperature and return the probe to the new peak."""
        self.main_body.temperature = temperature
        self.graph_values_point.reset()

    def save(self) -> BlackbodyBody:
        """
        Snapshot the live body and append it to the saved history.

        Returns:
            The new snapshot body
        """
        snapshot = self.main_body.copy(frozen=True)
        self._saved_bodies.append(snapshot)
        while len(self._saved_bodies) > self.history_capacity:
            evicted = self._saved_bodies.popleft()
            logger.debug("Evicted saved graph at %.0f K", evicted.temperature)
        logger.debug("Saved graph at %.0f K (%d held)", snapshot.temperature, len(self._saved_bodies))
        return snapshot

    def clear(self) -> None:
        """Erase all saved graphs."""
        self._saved_bodies.clear()
        logger.debug("Cleared saved graphs")

    def reset(self) -> None:
        """Restore the initial temperature and graph range, and erase saved graphs."""
        self.main_body.reset()
        self._saved_bodies.clear()
        self.wavelength_max = DEFAULT_WAVELENGTH_MAX
        self.graph_values_point.reset()
        logger.debug("Model reset to %.0f K", self.main_body.temperature)

    def saved_temperatures(self) -> List[float]:
        return [b.temperature for b in self._saved_bodies]

    def set_wavelength_max(self, wavelength_max: float) -> None:
        """Change the graph's horizontal range, keeping the probe inside it."""
        self.wavelength_max = float(wavelength_max)
        if self.graph_values_point.wavelength > self.wavelength_max:
            self.graph_values_point.drag_to(self.wavelength_max)

    def get_coordinates_x(self) -> List[float]:
        """The GRAPH_NUMBER_POINTS wavelengths (nm) the curve is evaluated at."""
        step = self.wavelength_max / GRAPH_NUMBER_POINTS
        return [i * step for i in range(GRAPH_NUMBER_POINTS)]

    def get_coordinates_y(self, body: Optional[BlackbodyBody] = None) -> List[float]:
        """
        Spectral radiance of a body sampled across the graph's wavelength range.

        Args:
            body: Body to sample; defaults to the live body

        Returns:
            GRAPH_NUMBER_POINTS radiance values matching get_coordinates_x()
        """
        body = body or self.main_body
        return [body.get_spectral_radiance_at(w) for w in self.get_coordinates_x()]
