import pytest

from calidadaire.climate import (
    ClimateData,
    climate_factor,
    default_climate_data,
    format_climate_table,
    get_climate,
    predict_with_climate,
)

NEUTRAL = ClimateData("X", temperature=20.0, pressure=1010.0, humidity=70.0)


def test_default_climate_data_zones():
    data = default_climate_data()
    assert [c.zone for c in data] == ["Centro", "Belisario", "Cotocollao", "El_Camal", "Tumbaco"]
    assert all((c.temperature, c.pressure, c.humidity) == (13.0, 1028.0, 87.0) for c in data)


def test_get_climate_found_and_default():
    custom = [ClimateData("Centro", 30.0, 990.0, 40.0)]
    assert get_climate("Centro", custom) == custom[0]
    fallback = get_climate("El Camal", custom)
    assert fallback.zone == "Desconocida"
    assert fallback.pressure == 1028.0


def test_climate_factor_default_conditions():
    assert climate_factor(get_climate("Centro")) == pytest.approx(1.1 * 1.2 * 1.1)


def test_climate_factor_neutral_is_one():
    assert climate_factor(NEUTRAL) == pytest.approx(1.0)


def test_climate_factor_favourable_below_one():
    warm = ClimateData("X", temperature=30.0, pressure=990.0, humidity=40.0)
    cold = ClimateData("X", temperature=5.0, pressure=1030.0, humidity=90.0)
    assert climate_factor(warm) < 0.9
    assert climate_factor(cold) > climate_factor(get_climate("Centro"))


def test_predict_with_climate_empty():
    assert predict_with_climate([], 3.0, NEUTRAL) == 0


def test_predict_with_climate_neutral():
    assert predict_with_climate([20, 18], 2.0, NEUTRAL) == 23


def test_predict_with_climate_capped_at_three_times():
    assert predict_with_climate([10], 100.0, get_climate("Centro")) == 30


def test_predict_with_climate_never_negative():
    assert predict_with_climate([5], -100.0, NEUTRAL) == 0


def test_predict_with_climate_zero_trend_neutral_keeps_value():
    for value in (0, 7, 40):
        assert predict_with_climate([value], 0.0, NEUTRAL) == value