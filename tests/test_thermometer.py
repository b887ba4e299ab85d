import pytest

from blackbody.thermometer import DEFAULT_REFERENCE_PRESETS, Thermometer


def test_temperature_to_position():
    therm = Thermometer()
    assert therm.temperature_to_position(270.0) == 0.0
    assert therm.temperature_to_position(11000.0) == pytest.approx(400.0)
    assert therm.temperature_to_position(20000.0) == pytest.approx(400.0)
    assert therm.temperature_to_position(0.0) == 0.0


def test_position_to_temperature_snaps_and_clamps():
    therm = Thermometer()
    assert therm.position_to_temperature(0.0) == 270.0
    assert therm.position_to_temperature(400.0) == pytest.approx(11000.0)
    assert therm.position_to_temperature(200.0) == pytest.approx(5650.0)
    assert therm.position_to_temperature(-50.0) == 270.0
    assert therm.position_to_temperature(1000.0) == 11000.0


def test_snapped_temperatures_are_multiples_of_interval():
    therm = Thermometer()
    for position in range(10, 390, 7):
        t = therm.position_to_temperature(float(position))
        assert t % 50 == pytest.approx(0.0)


def test_labeled_ticks():
    therm = Thermometer()
    ticks = therm.labeled_ticks()
    assert [name for _, name in ticks] == [p.name for p in DEFAULT_REFERENCE_PRESETS]
    sun = dict((name, pos) for pos, name in ticks)["Sun"]
    assert sun == pytest.approx((5778.0 - 270.0) / (11000.0 - 270.0) * 400.0)


def test_labeled_ticks_skip_out_of_range_presets():
    therm = Thermometer(min_temperature=1000.0, max_temperature=6000.0)
    names = [name for _, name in therm.labeled_ticks()]
    assert names == ["Sun", "Light Bulb"]
