#!/usr/bin/env python3
"""
Core Physics Engine for the Blackbody Spectrum simulation

Responsibilities
- Evaluate Planck's law for the spectral radiance of a blackbody at a wavelength.
- Provide the peak wavelength (Wien's displacement law) and the total radiated
  intensity (Stefan-Boltzmann law) for the current temperature.
- Map the temperature to display colors: per-channel intensities, the apparent star
  color, and the glowing halo around the star.

Units and conventions
- Wavelengths are in nanometers [nm].
- Temperatures are in kelvin [K].
- Spectral radiance is FIRST_RADIATION_CONSTANT / nm^5 scaled; multiply by
  RADIANCE_TO_GRAPH_UNITS to get MW / m^2 / um / sr.
- Total intensity is in watts per square meter [W/m^2].

Numerical notes
- Radiance is exactly 0 at wavelength 0 and at temperature 0; both would otherwise
  divide by zero. A non-finite wavelength also gives 0.
- Planck's law is evaluated in log space: lambda^5, lambda*T and exp(hc/(lambda k T))
  each overflow or underflow a double at extreme but finite inputs, their logs don't.
  Past MAX_EXPONENT, expm1(x) is replaced by exp(x) so the Wien tail keeps its tiny
  positive values instead of overflowing.
- expm1 keeps precision in the Rayleigh-Jeans regime where the exponent is tiny.
- Radiance and total intensity saturate to +inf when the true value is beyond the
  largest double. Color mapping never passes the inf on: intensities saturate at 255.
- Peak wavelength is +inf at temperature 0. Views must guard before drawing it.

Threading
- Everything here is pure compute on the body's single temperature value. Derived
  quantities are recomputed on every call; nothing is cached.
"""

import logging
import math
from typing import Optional, Tuple

from .constants import (
    FIRST_RADIATION_CONSTANT,
    MAX_EXPONENT,
    SECOND_RADIATION_CONSTANT,
    STEFAN_BOLTZMANN_CONSTANT,
    WIEN_CONSTANT,
)
from .data_models import Color, ColorCalibration
from .math_utils import clamp, linear

logger = logging.getLogger("blackbody_sim")

_LOG_FIRST_RADIATION_CONSTANT = math.log(FIRST_RADIATION_CONSTANT)
_LOG_SECOND_RADIATION_CONSTANT = math.log(SECOND_RADIATION_CONSTANT)


def spectral_radiance(wavelength: float, temperature: float) -> float:
    """
    Planck's law for a blackbody.

        B(lambda, T) = A / (lambda^5 * (exp(B / (lambda * T)) - 1))

    where A = 2hc^2 and B = hc/k with lambda in nanometers.

    Args:
        wavelength: Wavelength in nm (>= 0)
        temperature: Temperature in K (>= 0)

    Returns:
        Spectral radiance (>= 0, never NaN). 0.0 at zero wavelength or temperature,
        +inf only when the value exceeds the double range.
    """
    if not wavelength > 0 or not temperature > 0 or not math.isfinite(wavelength):
        return 0.0

    log_wavelength = math.log(wavelength)
    log_exponent = _LOG_SECOND_RADIATION_CONSTANT - log_wavelength - math.log(temperature)
    try:
        exponent = math.exp(log_exponent)
    except OverflowError:
        # exp(-exponent) is far below the smallest double
        return 0.0

    if exponent > MAX_EXPONENT:
        log_denominator = exponent
    elif exponent > 0:
        log_denominator = math.log(math.expm1(exponent))
    else:
        # exponent underflowed; expm1(x) == x to double precision there
        log_denominator = log_exponent

    try:
        return math.exp(_LOG_FIRST_RADIATION_CONSTANT - 5 * log_wavelength - log_denominator)
    except OverflowError:
        return math.inf


def peak_wavelength(temperature: float) -> float:
    """
    Wien's displacement law: lambda_max = b / T, converted from meters to nanometers.

    Returns math.inf when temperature is 0 (no finite peak).
    """
    if temperature <= 0:
        return math.inf
    return 1e9 * WIEN_CONSTANT / temperature


def total_intensity(temperature: float) -> float:
    """Stefan-Boltzmann law: sigma * T^4 in W/m^2; +inf past the double range."""
    try:
        return STEFAN_BOLTZMANN_CONSTANT * temperature ** 4
    except OverflowError:
        return math.inf


def renormalized_temperature(temperature: float, calibration: ColorCalibration) -> float:
    """
    Dimensionless brightness parameter used by the color mapping.

    0 at or below calibration.min_temperature, 1 at calibration.max_temperature, and
    above 1 past it. The power exponent makes the initial rise faster than linear.
    """
    span = calibration.max_temperature - calibration.min_temperature
    ratio = max(temperature - calibration.min_temperature, 0.0) / span
    try:
        return ratio ** calibration.power_exponent
    except OverflowError:
        return math.inf


class BlackbodyBody:
    """
    A blackbody at a single temperature.

    The temperature is the only state. Every other quantity (radiance, peak wavelength,
    total intensity, colors) is computed from it on demand.

    Saved snapshots are separate, frozen BlackbodyBody instances; nothing is shared with
    the body they were copied from, and their temperature can't be reassigned.
    """

    def __init__(self,
                 temperature: float,
                 calibration: Optional[ColorCalibration] = None,
                 frozen: bool = False):
        """
        Initialize a body.

        Args:
            temperature: Initial temperature in kelvin; negative values are clamped to 0
            calibration: Color-mapping calibration; defaults to ColorCalibration()
            frozen: If True, the temperature is fixed for the body's lifetime
        """
        self.calibration = calibration or ColorCalibration()
        self.initial_temperature = max(0.0, float(temperature))
        self._temperature = self.initial_temperature
        self._frozen = frozen

    def __repr__(self) -> str:
        return f"BlackbodyBody(temperature={self._temperature!r}, frozen={self._frozen!r})"

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def temperature(self) -> float:
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        if self._frozen:
            raise AttributeError("temperature of a frozen body cannot be changed")
        self._temperature = max(0.0, float(value))

    def reset(self) -> None:
        """Restore the temperature the body was created with."""
        self._temperature = self.initial_temperature

    def copy(self, frozen: bool = False) -> "BlackbodyBody":
        """Return an independent body at the current temperature."""
        return BlackbodyBody(self._temperature, self.calibration, frozen=frozen)

    # -----------------------
    # Physics
    # -----------------------

    def get_spectral_radiance_at(self, wavelength: float) -> float:
        """Spectral radiance at a wavelength (nm) for the current temperature."""
        return spectral_radiance(wavelength, self._temperature)

    @property
    def peak_wavelength(self) -> float:
        return peak_wavelength(self._temperature)

    @property
    def total_intensity(self) -> float:
        return total_intensity(self._temperature)

    @property
    def renormalized_temperature(self) -> float:
        return renormalized_temperature(self._temperature, self.calibration)

    # -----------------------
    # Colors
    # -----------------------

    def get_renormalized_color_intensity(self, wavelength: float) -> int:
        """
        Color intensity (integer 0..255) for a wavelength at the current temperature.

        The radiance at the wavelength is divided by the largest radiance among the
        three reference wavelengths, so the channel ratios follow the Planck curve.
        Overall brightness comes from the renormalized temperature, so cold bodies
        fade to black instead of glowing at full saturation.

        Args:
            wavelength: Wavelength in nm

        Returns:
            floor(255 * min(renormalized_T * scale_factor, 1) * radiance / largest),
            clamped to [0, 255]. 0 when all reference radiances are 0 or infinite.
        """
        largest = max(self.get_spectral_radiance_at(w) for w in self.calibration.reference_wavelengths)
        if not 0 < largest < math.inf:
            logger.debug("No usable reference radiance at T=%.1f K; color intensity is 0", self._temperature)
            return 0

        scale = self.calibration.scale_factor
        bounded = min(self.renormalized_temperature * scale, 1.0) if scale > 0 else 0.0
        if bounded <= 0:
            return 0
        # ratio first, so a reference channel at the maximum scales by exactly 1.0
        ratio = self.get_spectral_radiance_at(wavelength) / largest
        # an infinite ratio saturates like any other value above 255
        intensity = math.floor(min(255 * bounded * ratio, 255.0))
        return int(clamp(intensity, 0, 255))

    def get_rgb_intensities(self) -> Tuple[int, int, int]:
        """Renormalized intensities at the red, green and blue reference wavelengths."""
        return tuple(self.get_renormalized_color_intensity(w) for w in self.calibration.reference_wavelengths)

    @property
    def red_color(self) -> Color:
        return Color(self.get_renormalized_color_intensity(self.calibration.red_wavelength), 0, 0)

    @property
    def green_color(self) -> Color:
        return Color(0, self.get_renormalized_color_intensity(self.calibration.green_wavelength), 0)

    @property
    def blue_color(self) -> Color:
        return Color(0, 0, self.get_renormalized_color_intensity(self.calibration.blue_wavelength))

    @property
    def star_color(self) -> Color:
        """Approximate apparent color of the blackbody, fully opaque."""
        r, g, b = self.get_rgb_intensities()
        return Color(r, g, b)

    @property
    def glowing_star_halo_radius(self) -> float:
        """Halo radius in pixels, growing from the minimum to the maximum with brightness."""
        brightness = min(self.renormalized_temperature, 1.0)
        return linear(0, 1, self.calibration.halo_min_radius, self.calibration.halo_max_radius, brightness)

    @property
    def glowing_star_halo_color(self) -> Color:
        """Star color with opacity growing from 0 to halo_max_alpha with brightness."""
        brightness = min(self.renormalized_temperature, 1.0)
        alpha = linear(0, 1, 0, self.calibration.halo_max_alpha, brightness)
        return self.star_color.with_alpha(alpha)
