import pytest

from calidadaire.evaluation import (
    Level,
    evaluate_pollutant,
    limits_table,
    overall_level,
    record_level,
    specific_recommendations,
)
from calidadaire.records import Record


@pytest.mark.parametrize(
    "pollutant, good, moderate",
    [
        ("PM2.5", 10, 15),
        ("PM10", 30, 45),
        ("O3", 60, 100),
        ("NO2", 15, 25),
        ("SO2", 25, 40),
        ("CO", 2, 4),
    ],
)
def test_evaluate_pollutant_boundaries(pollutant, good, moderate):
    assert evaluate_pollutant(good, pollutant) is Level.BUENO
    assert evaluate_pollutant(good + 1, pollutant) is Level.MODERADO
    assert evaluate_pollutant(moderate, pollutant) is Level.MODERADO
    assert evaluate_pollutant(moderate + 1, pollutant) is Level.ALTO


@pytest.mark.parametrize("label", ["CO2", "XYZ", ""])
def test_evaluate_pollutant_unknown_label(label):
    assert evaluate_pollutant(500, label) is Level.DESCONOCIDO


def test_level_values_are_strings():
    assert Level.ALTO.value == "ALTO"
    assert Level("MODERADO") is Level.MODERADO


def test_overall_level():
    assert overall_level([Level.BUENO, Level.ALTO, Level.MODERADO]) is Level.ALTO
    assert overall_level([Level.BUENO, Level.MODERADO]) is Level.MODERADO
    assert overall_level([Level.BUENO, Level.DESCONOCIDO]) is Level.BUENO
    assert overall_level([]) is Level.BUENO


def test_record_level():
    assert record_level(Record("Centro", "d", pm25=16)) is Level.ALTO
    assert record_level(Record("Centro", "d", o3=80)) is Level.MODERADO
    assert record_level(Record("Centro", "d", 5, 5, 5, 5, 5, 1)) is Level.BUENO


def test_record_level_ignores_co2():
    assert record_level(Record("Centro", "d", co2=50)) is Level.BUENO


def test_specific_recommendations_lists_exceeded_only():
    text = specific_recommendations(Record("Centro", "d", pm25=16, so2=41))
    assert "PM2.5 ALTO (16 μg/m³) - Particulas finas:" in text
    assert "SO2 ALTO (41 μg/m³) - Dioxido de azufre:" in text
    assert "PM10 ALTO" not in text
    assert "- Alertar a personas con asma o enfermedades pulmonares\n" in text


def test_specific_recommendations_none_exceeded():
    text = specific_recommendations(Record("Centro", "d", 15, 45, 100, 25, 40, 4))
    assert text == "\n=== RECOMENDACIONES ESPECIFICAS ===\n"


def test_specific_recommendations_co2_unit():
    text = specific_recommendations(Record("Centro", "d", co2=5))
    assert "CO2 ALTO (5 mg/m³) - Dioxido de carbono:" in text


def test_limits_table():
    table = limits_table()
    assert "PM2.5\t\t0-10\t\t11-15\t\t>15\t\tμg/m³\n" in table
    assert "CO2\t\t0-2\t\t3-4\t\t>4\t\tmg/m³\n" in table
    assert table.startswith("\n=== LIMITES ACEPTABLES DE CONTAMINANTES (OMS 2021) ===\n")