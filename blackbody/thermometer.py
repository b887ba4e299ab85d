#!/usr/bin/env python3
"""
Thermometer slider: maps temperatures to positions along the thermometer tube.

Positions are measured in pixels upwards from the bottom of the tube (0) to the top
(tube_height). Dragging the thumb snaps the temperature to snap_interval and clamps it
to the display range.
"""
from typing import List, Tuple

from .constants import (
    EARTH_TEMPERATURE,
    LIGHT_BULB_TEMPERATURE,
    MAX_TEMPERATURE,
    MIN_TEMPERATURE,
    SIRIUS_A_TEMPERATURE,
    SUN_TEMPERATURE,
    THERMOMETER_SNAP_INTERVAL,
    THERMOMETER_TUBE_HEIGHT,
)
from .data_models import ReferencePreset
from .math_utils import clamp, linear, round_to_interval

DEFAULT_REFERENCE_PRESETS = (
    ReferencePreset("Sirius A", SIRIUS_A_TEMPERATURE),
    ReferencePreset("Sun", SUN_TEMPERATURE),
    ReferencePreset("Light Bulb", LIGHT_BULB_TEMPERATURE),
    ReferencePreset("Earth", EARTH_TEMPERATURE),
)


class Thermometer:
    def __init__(self,
                 min_temperature: float = MIN_TEMPERATURE,
                 max_temperature: float = MAX_TEMPERATURE,
                 tube_height: float = THERMOMETER_TUBE_HEIGHT,
                 snap_interval: float = THERMOMETER_SNAP_INTERVAL):
        self.min_temperature = min_temperature
        self.max_temperature = max_temperature
        self.tube_height = tube_height
        self.snap_interval = snap_interval

    def clamp_temperature(self, temperature: float) -> float:
        return clamp(temperature, self.min_temperature, self.max_temperature)

    def temperature_to_position(self, temperature: float) -> float:
        """Height of the fluid column for a temperature, clamped to the tube."""
        t = self.clamp_temperature(temperature)
        return linear(self.min_temperature, self.max_temperature, 0, self.tube_height, t)

    def position_to_temperature(self, position: float) -> float:
        """Snapped, clamped temperature for a thumb dragged to a height on the tube."""
        raw = linear(0, self.tube_height, self.min_temperature, self.max_temperature, position)
        return self.clamp_temperature(round_to_interval(raw, self.snap_interval))

    def labeled_ticks(self, presets=DEFAULT_REFERENCE_PRESETS) -> List[Tuple[float, str]]:
        """(position, label) pairs for presets inside the display range."""
        return [
            (self.temperature_to_position(p.temperature), p.name)
            for p in presets
            if self.min_temperature <= p.temperature <= self.max_temperature
        ]
