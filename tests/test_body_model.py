import math

import pytest

from blackbody.body_model import (
    BlackbodyBody,
    peak_wavelength,
    renormalized_temperature,
    spectral_radiance,
    total_intensity,
)
from blackbody.data_models import Color, ColorCalibration


@pytest.mark.parametrize("temperature", [0.0, 1.0, 270.0, 5778.0, 11000.0])
def test_radiance_is_zero_at_zero_wavelength(temperature):
    assert BlackbodyBody(temperature).get_spectral_radiance_at(0) == 0.0


@pytest.mark.parametrize("temperature", [270.0, 5778.0, 11000.0])
@pytest.mark.parametrize("wavelength", [100.0, 500.0, 1000.0, 5000.0])
def test_radiance_positive_and_finite(temperature, wavelength):
    value = spectral_radiance(wavelength, temperature)
    assert value > 0
    assert math.isfinite(value)


def test_radiance_degrades_to_zero_when_exponent_overflows():
    # hc / (lambda k T) is astronomically large here; must not raise OverflowError
    assert spectral_radiance(1.0, 1e-3) == 0.0
    assert spectral_radiance(0.5, 1.0) == 0.0


def test_radiance_zero_at_zero_temperature():
    assert spectral_radiance(500.0, 0.0) == 0.0


EXTREME_INPUTS = [
    (0.5, 5e-324),
    (500.0, 1e-320),
    (5e-324, 1.0),
    (1e62, 5778.0),
    (1e-60, 1e300),
    (1e-300, 1e-300),
    (1e300, 1e300),
    (1.0, 1.7e308),
    (1e308, 1.7e308),
]


@pytest.mark.parametrize("wavelength, temperature", EXTREME_INPUTS)
def test_radiance_at_extreme_magnitudes_is_never_nan(wavelength, temperature):
    value = spectral_radiance(wavelength, temperature)
    assert not math.isnan(value)
    assert value >= 0


def test_radiance_at_extreme_magnitudes():
    # lambda * T and the denominator underflow to 0 here
    assert spectral_radiance(0.5, 5e-324) == 0.0
    # far Rayleigh-Jeans tail: tiny but representable
    far_infrared = spectral_radiance(1e62, 5778.0)
    assert 0 < far_infrared < 1e-250
    # beyond the largest double
    assert spectral_radiance(1e-60, 1e300) == math.inf
    assert math.isfinite(spectral_radiance(1.0, 1.7e308))


def test_radiance_stays_positive_in_wien_tail():
    # hc / (lambda k T) is about 702, just past the expm1 range
    value = spectral_radiance(1e-3, 2.05e7)
    assert 0 < value < 1e-300


def test_radiance_continuous_across_wien_tail_switch():
    wavelength = 1e-3
    below = spectral_radiance(wavelength, 1.438770e7 / (wavelength * 699.99))
    above = spectral_radiance(wavelength, 1.438770e7 / (wavelength * 700.01))
    assert below / above == pytest.approx(math.exp(0.02), rel=1e-6)


@pytest.mark.parametrize("temperature", [1e80, 1e200, 1.7e308])
def test_total_intensity_saturates_instead_of_overflowing(temperature):
    assert total_intensity(temperature) == math.inf
    assert BlackbodyBody(temperature).total_intensity == math.inf


@pytest.mark.parametrize("temperature, expected", [
    (5e-324, math.inf),
    (1e-305, math.inf),
])
def test_peak_wavelength_of_near_zero_temperature(temperature, expected):
    assert peak_wavelength(temperature) == expected


@pytest.mark.parametrize("temperature", [1e80, 1e300, 1.7e308])
def test_peak_wavelength_of_huge_temperature(temperature):
    value = peak_wavelength(temperature)
    assert 0 < value < 1e-60


@pytest.mark.parametrize("temperature", [5e-324, 1e-300, 1e80, 1e300, 1.7e308])
@pytest.mark.parametrize("calibration", [ColorCalibration(), ColorCalibration(power_exponent=3.0),
                                         ColorCalibration(scale_factor=0.0)])
def test_star_color_at_extreme_temperatures(temperature, calibration):
    body = BlackbodyBody(temperature, calibration)
    color = body.star_color
    for channel in color.to_rgb():
        assert 0 <= channel <= 255
    assert 0 <= body.glowing_star_halo_color.a <= 1
    assert math.isfinite(body.glowing_star_halo_radius)
    # a wavelength far brighter than every reference channel still maps into a byte
    assert 0 <= body.get_renormalized_color_intensity(1e-60) <= 255


def test_very_hot_star_is_blue():
    r, g, b = BlackbodyBody(1e80).get_rgb_intensities()
    assert b == 255
    assert r < g < b


def test_zero_temperature_guards():
    body = BlackbodyBody(0.0)
    assert body.total_intensity == 0.0
    assert body.peak_wavelength == math.inf
    assert not math.isnan(body.peak_wavelength)
    assert body.get_rgb_intensities() == (0, 0, 0)
    assert body.star_color == Color(0, 0, 0)


def test_peak_wavelength_decreases_with_temperature():
    temperatures = [270.0, 1000.0, 3000.0, 5778.0, 11000.0]
    peaks = [peak_wavelength(t) for t in temperatures]
    assert all(a > b for a, b in zip(peaks, peaks[1:]))


def test_total_intensity_increases_with_temperature():
    temperatures = [0.0, 270.0, 1000.0, 3000.0, 5778.0, 11000.0]
    values = [total_intensity(t) for t in temperatures]
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("temperature, start, stop", [(5778.0, 100, 3000), (3000.0, 200, 5000)])
def test_single_peak_near_wien_peak(temperature, start, stop):
    body = BlackbodyBody(temperature)
    wavelengths = list(range(start, stop + 1))
    values = [body.get_spectral_radiance_at(w) for w in wavelengths]
    top = values.index(max(values))

    rising = values[:top + 1]
    falling = values[top:]
    assert all(a < b for a, b in zip(rising, rising[1:]))
    assert all(a > b for a, b in zip(falling, falling[1:]))
    assert wavelengths[top] == pytest.approx(body.peak_wavelength, abs=1.0)


def test_sun():
    sun = BlackbodyBody(5778.0)
    assert sun.peak_wavelength == pytest.approx(501.5, abs=1.0)
    assert sun.peak_wavelength == pytest.approx(1e9 * 2.897773e-3 / 5778)
    assert sun.total_intensity == pytest.approx(5.670373e-8 * 5778 ** 4)
    assert sun.total_intensity == pytest.approx(6.32e7, rel=1e-2)


def test_incandescent_bulb():
    bulb = BlackbodyBody(3000.0)
    assert bulb.peak_wavelength == pytest.approx(966.0, abs=1.0)
    red, green, blue = bulb.get_rgb_intensities()
    assert red > blue
    assert red > green > blue


@pytest.mark.parametrize("temperature", [t * 250.0 for t in range(0, 49)])
def test_color_channels_are_bytes(temperature):
    body = BlackbodyBody(temperature)
    for wavelength in (450.0, 550.0, 650.0, 500.0, 966.0, 2000.0):
        value = body.get_renormalized_color_intensity(wavelength)
        assert isinstance(value, int)
        assert 0 <= value <= 255


@pytest.mark.parametrize("temperature", [1.0, 270.0, 500.0, 700.0])
def test_cold_objects_are_dark(temperature):
    body = BlackbodyBody(temperature)
    assert body.get_rgb_intensities() == (0, 0, 0)
    assert body.glowing_star_halo_color.a == 0.0


def test_renormalized_temperature():
    cal = ColorCalibration()
    assert renormalized_temperature(700.0, cal) == 0.0
    assert renormalized_temperature(200.0, cal) == 0.0
    assert renormalized_temperature(3000.0, cal) == pytest.approx(1.0)
    assert renormalized_temperature(1850.0, cal) == pytest.approx(0.5 ** 0.7)
    assert renormalized_temperature(11000.0, cal) > 1.0


def test_hottest_reference_channel_saturates_once_bright():
    body = BlackbodyBody(3000.0)
    # radiance still rising across the visible range, so red is the largest channel
    assert body.red_color == Color(255, 0, 0)
    assert body.green_color.r == 0 and body.green_color.b == 0
    assert body.blue_color.to_rgb()[:2] == (0, 0)


def test_color_intensity_clamped_above_reference_maximum():
    body = BlackbodyBody(3000.0)
    # radiance at the peak is larger than at any reference wavelength
    assert body.get_renormalized_color_intensity(966.0) == 255


def test_scale_factor_brightens_colors():
    default = BlackbodyBody(2000.0)
    boosted = BlackbodyBody(2000.0, ColorCalibration(scale_factor=1.5))
    assert default.red_color.r == 171
    assert boosted.red_color.r == 255


def test_halo_radius_and_alpha():
    assert BlackbodyBody(0.0).glowing_star_halo_radius == pytest.approx(5.0)
    assert BlackbodyBody(3000.0).glowing_star_halo_radius == pytest.approx(40.0)
    assert BlackbodyBody(11000.0).glowing_star_halo_radius == pytest.approx(40.0)

    halo = BlackbodyBody(3000.0).glowing_star_halo_color
    assert halo.a == pytest.approx(0.1)
    assert halo.to_rgb() == BlackbodyBody(3000.0).star_color.to_rgb()


def test_star_color_is_opaque():
    assert BlackbodyBody(5778.0).star_color.a == 1.0


def test_negative_temperature_clamped():
    body = BlackbodyBody(-50.0)
    assert body.temperature == 0.0
    body.temperature = -1
    assert body.temperature == 0.0


def test_reset_restores_initial_temperature():
    body = BlackbodyBody(4000.0)
    body.temperature = 9000.0
    body.reset()
    assert body.temperature == 4000.0


def test_frozen_copy_rejects_temperature_change():
    body = BlackbodyBody(4000.0)
    snapshot = body.copy(frozen=True)
    with pytest.raises(AttributeError):
        snapshot.temperature = 9000.0
    assert snapshot.temperature == 4000.0
    assert snapshot.frozen
    assert not body.frozen

    body.temperature = 9000.0
    assert snapshot.temperature == 4000.0


def test_copy_is_independent():
    body = BlackbodyBody(4000.0)
    snapshot = body.copy()
    body.temperature = 8000.0
    assert snapshot.temperature == 4000.0
    assert snapshot.calibration is body.calibration


def test_color_clamps_channels():
    c = Color(300, -5, 10, 2.0)
    assert c.to_rgb() == (255, 0, 10)
    assert c.a == 1.0
    assert c.with_alpha(0.5).to_rgba255() == (255, 0, 10, 128)


@pytest.mark.parametrize("kwargs", [
    {"min_temperature": 3000.0, "max_temperature": 700.0},
    {"power_exponent": 0.0},
    {"scale_factor": -1.0},
    {"red_wavelength": 0.0},
    {"halo_max_alpha": 1.5},
])
def test_invalid_calibration_rejected(kwargs):
    with pytest.raises(ValueError):
        ColorCalibration(**kwargs)
