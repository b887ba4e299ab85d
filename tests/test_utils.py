import math

import pytest

from blackbody.math_utils import clamp, linear, round_to_interval
from blackbody.utils import (
    band_for_wavelength,
    format_metric,
    format_scientific,
    format_spectral_radiance,
    format_temperature,
    format_wavelength_microns,
    try_float,
)


@pytest.mark.parametrize("raw, expected", [
    ("12.5", 12.5),
    (" 300 ", 300.0),
    (7, 7.0),
    ("abc", None),
    ("", None),
    (None, None),
    ("nan", None),
    ("inf", None),
])
def test_try_float(raw, expected):
    assert try_float(raw) == expected


def test_clamp_and_linear():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert linear(0, 1, 5, 40, 0.5) == pytest.approx(22.5)
    assert linear(0, 10, 0, 100, 20) == pytest.approx(200.0)


def test_round_to_interval_rounds_half_away_from_zero():
    assert round_to_interval(125.0, 50.0) == 150.0
    assert round_to_interval(-125.0, 50.0) == -150.0
    assert round_to_interval(5635.0, 50.0) == 5650.0
    assert round_to_interval(12.3, 0.0) == 12.3


def test_format_temperature():
    assert format_temperature(5778.4) == "5778 K"


def test_format_wavelength_microns():
    assert format_wavelength_microns(966.0) == "0.966 μm"
    assert format_wavelength_microns(math.inf) == "-- μm"


def test_format_scientific():
    assert format_scientific(0.00034) == "3 × 10^-4"
    assert format_scientific(0.00096) == "1 × 10^-3"
    assert format_scientific(0.0) == "0"


def test_format_spectral_radiance():
    assert format_spectral_radiance(0.0) == "0.00"
    assert format_spectral_radiance(26.5e-33) == "26.50"
    assert format_spectral_radiance(3e-37) == "3 × 10^-4"


def test_format_metric():
    assert format_metric(5.670373e-8 * 5778 ** 4, "W/m²") == "63.2 MW/m²"
    assert format_metric(4593.0, "W/m²") == "4.6 kW/m²"
    assert format_metric(0.5, "W") == "0.5 W"


@pytest.mark.parametrize("wavelength, band", [
    (5.0, "X-Ray"),
    (200.0, "Ultraviolet"),
    (550.0, "Visible"),
    (1000.0, "Infrared"),
    (2e5, "Microwave"),
])
def test_band_for_wavelength(wavelength, band):
    assert band_for_wavelength(wavelength) == band
