#!/usr/bin/env python3
"""
General utilities for the Blackbody Spectrum simulation: input parsing, readout
formatting and electromagnetic band lookup.
"""
import math
from typing import Optional

from .constants import (
    INFRARED_WAVELENGTH,
    RADIANCE_TO_GRAPH_UNITS,
    ULTRAVIOLET_WAVELENGTH,
    VISIBLE_WAVELENGTH,
    XRAY_WAVELENGTH,
)

METRIC_PREFIXES = (
    (1e12, "T"),
    (1e9, "G"),
    (1e6, "M"),
    (1e3, "k"),
    (1.0, ""),
)


def try_float(val) -> Optional[float]:
    try:
        result = float(val)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def format_temperature(temperature: float) -> str:
    """'5778 K'."""
    return f"{temperature:.0f} K"


def format_wavelength_microns(wavelength: float) -> str:
    """Wavelength given in nm, shown in microns with 3 decimals, e.g. '0.502 μm'."""
    if not math.isfinite(wavelength):
        return "-- μm"
    return f"{wavelength / 1000.0:.3f} μm"


def format_scientific(value: float, mantissa_decimals: int = 0) -> str:
    """'3 × 10^-4' style notation; plain '0' for zero."""
    if value == 0:
        return "0"
    exponent = int(math.floor(math.log10(abs(value))))
    mantissa = value / 10 ** exponent
    # rounding the mantissa can carry it to 10
    if round(abs(mantissa), mantissa_decimals) >= 10:
        mantissa /= 10
        exponent += 1
    return f"{mantissa:.{mantissa_decimals}f} × 10^{exponent}"


def format_spectral_radiance(radiance: float) -> str:
    """Model radiance in graph units (MW/m²/μm/sr); scientific notation when tiny."""
    value = radiance * RADIANCE_TO_GRAPH_UNITS
    if 0 < value < 0.01:
        return format_scientific(value)
    return f"{value:.2f}"


def format_metric(value: float, unit: str, decimals: int = 1) -> str:
    """Scale a value by the largest metric prefix that keeps it >= 1, e.g. '63.2 MW/m²'."""
    for factor, prefix in METRIC_PREFIXES:
        if abs(value) >= factor:
            return f"{value / factor:.{decimals}f} {prefix}{unit}"
    return f"{value:.{decimals}f} {unit}"


def band_for_wavelength(wavelength: float) -> str:
    """Name of the electromagnetic band a wavelength (nm) falls into."""
    if wavelength < XRAY_WAVELENGTH:
        return "X-Ray"
    if wavelength < ULTRAVIOLET_WAVELENGTH:
        return "Ultraviolet"
    if wavelength < VISIBLE_WAVELENGTH:
        return "Visible"
    if wavelength < INFRARED_WAVELENGTH:
        return "Infrared"
    return "Microwave"
