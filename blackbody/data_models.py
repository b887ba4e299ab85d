#!/usr/bin/env python3
"""
Data models for the Blackbody Spectrum simulation.

This module defines the small value types shared between the body model, the
spectrum model, rendering and UI.

Units and usage
- Color channels r, g, b are integers in 0..255; alpha is a float opacity in 0..1.
- ColorCalibration holds the visual-calibration parameters of the color mapping. They
  are tunable display settings, not physical quantities.
"""
from dataclasses import dataclass
from typing import Tuple

from .constants import (
    BLUE_WAVELENGTH,
    COLOR_SCALE_FACTOR,
    GLOWING_STAR_HALO_MAX_ALPHA,
    GLOWING_STAR_HALO_MAX_RADIUS,
    GLOWING_STAR_HALO_MIN_RADIUS,
    GREEN_WAVELENGTH,
    RED_WAVELENGTH,
    RENORMALIZATION_MAX_TEMPERATURE,
    RENORMALIZATION_MIN_TEMPERATURE,
    RENORMALIZATION_POWER_EXPONENT,
)
from .math_utils import clamp


@dataclass(frozen=True)
class Color:
    """
    Immutable RGBA color.

    Fields:
    - r, g, b: channel intensities, clamped to 0..255 on construction
    - a: opacity, clamped to 0..1 on construction
    """
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "r", int(clamp(int(self.r), 0, 255)))
        object.__setattr__(self, "g", int(clamp(int(self.g), 0, 255)))
        object.__setattr__(self, "b", int(clamp(int(self.b), 0, 255)))
        object.__setattr__(self, "a", float(clamp(float(self.a), 0.0, 1.0)))

    def with_alpha(self, alpha: float) -> "Color":
        """Return a copy of this color with a different opacity."""
        return Color(self.r, self.g, self.b, alpha)

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_rgba255(self) -> Tuple[int, int, int, int]:
        """RGBA tuple with alpha scaled to 0..255, as Pygame and Dear PyGui expect."""
        return (self.r, self.g, self.b, int(round(self.a * 255)))


@dataclass(frozen=True)
class ColorCalibration:
    """
    Visual-calibration parameters for mapping a temperature to display colors.

    Fields:
    - min_temperature: temperature (K) at which the star and circles start to glow
    - max_temperature: temperature (K) at which their brightness saturates
    - power_exponent: nonlinearity applied to the renormalized temperature
    - scale_factor: visibility multiplier applied before clamping brightness to 1
    - red/green/blue_wavelength: sampling wavelengths (nm) of the three channels
    - halo_min_radius, halo_max_radius: glowing halo radius range in pixels
    - halo_max_alpha: opacity of the halo at full brightness
    """
    min_temperature: float = RENORMALIZATION_MIN_TEMPERATURE
    max_temperature: float = RENORMALIZATION_MAX_TEMPERATURE
    power_exponent: float = RENORMALIZATION_POWER_EXPONENT
    scale_factor: float = COLOR_SCALE_FACTOR
    red_wavelength: float = RED_WAVELENGTH
    green_wavelength: float = GREEN_WAVELENGTH
    blue_wavelength: float = BLUE_WAVELENGTH
    halo_min_radius: float = GLOWING_STAR_HALO_MIN_RADIUS
    halo_max_radius: float = GLOWING_STAR_HALO_MAX_RADIUS
    halo_max_alpha: float = GLOWING_STAR_HALO_MAX_ALPHA

    def __post_init__(self):
        if self.max_temperature <= self.min_temperature:
            raise ValueError(
                f"max_temperature ({self.max_temperature}) must exceed min_temperature ({self.min_temperature})"
            )
        if self.power_exponent <= 0:
            raise ValueError(f"power_exponent must be positive, got {self.power_exponent}")
        if self.scale_factor < 0:
            raise ValueError(f"scale_factor must be >= 0, got {self.scale_factor}")
        for name in ("red_wavelength", "green_wavelength", "blue_wavelength"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if not 0.0 <= self.halo_max_alpha <= 1.0:
            raise ValueError(f"halo_max_alpha must lie in [0, 1], got {self.halo_max_alpha}")

    @property
    def reference_wavelengths(self) -> Tuple[float, float, float]:
        return (self.red_wavelength, self.green_wavelength, self.blue_wavelength)


@dataclass(frozen=True)
class ReferencePreset:
    """A named temperature shown as a thermometer label and offered as a quick preset."""
    name: str
    temperature: float
