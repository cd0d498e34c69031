"""Trend analysis and 24-hour forecasts of pollutant levels."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise

from calidadaire.climate import ClimateData, climate_factor, get_climate, predict_with_climate
from calidadaire.evaluation import Level, evaluate_pollutant, overall_level, specific_recommendations
from calidadaire.records import Record

ANALYSIS_DAYS = 7

# Names shown in the forecast table; the last row is graded under "CO".
ROW_NAMES = ("PM2.5", "PM10", "O3", "NO2", "SO2", "CO")
# The overall verdict judges the last pollutant as "CO2", which is never graded.
_OVERALL_LABELS = ("PM2.5", "PM10", "O3", "NO2", "SO2", "CO2")

_RULE = "=" * 79


def calculate_trend(values: Sequence[int]) -> float:
    """Mean change between consecutive values, ignoring pairs with a non-positive value."""
    if len(values) < 2:
        return 0.0
    changes = [after - before for before, after in pairwise(values) if before > 0 and after > 0]
    return sum(changes) / len(changes) if changes else 0.0


def predict_next_value(values: Sequence[int], trend: float) -> int:
    """Last positive value moved by the trend, limited to a 50% change."""
    if not values:
        return 0
    last = next((value for value in reversed(values) if value > 0), 0)
    prediction = max(last + int(trend), 0)
    max_change = int(last * 0.5)
    if abs(prediction - last) > max_change:
        prediction = last + max_change if prediction > last else last - max_change
    return prediction


@dataclass(frozen=True)
class Forecast:
    """Predicted levels for the next 24 hours in one zone."""

    zone_name: str
    record_count: int
    climate: ClimateData
    factor: float
    current: tuple[int, ...]
    trends: tuple[float, ...]
    predictions: tuple[int, ...]
    levels: tuple[Level, ...]
    overall: Level


def forecast_zone(
    records: Sequence[Record], zone_name: str, climate: ClimateData | None = None
) -> Forecast:
    """Forecast a zone from its most recent records (newest first)."""
    if not records:
        raise ValueError(f"No hay datos para predecir en {zone_name}.")
    if climate is None:
        climate = get_climate(zone_name)
    recent = records[:ANALYSIS_DAYS]
    series = [list(column) for column in zip(*(record.pollutants for record in recent))]
    trends = tuple(calculate_trend(values) for values in series)
    predictions = tuple(
        predict_with_climate(values, trend, climate) for values, trend in zip(series, trends)
    )
    levels = tuple(evaluate_pollutant(value, label) for value, label in zip(predictions, ROW_NAMES))
    overall = overall_level(
        evaluate_pollutant(value, label) for value, label in zip(predictions, _OVERALL_LABELS)
    )
    return Forecast(
        zone_name=zone_name,
        record_count=len(records),
        climate=climate,
        factor=climate_factor(climate),
        current=tuple(values[0] for values in series),
        trends=trends,
        predictions=predictions,
        levels=levels,
        overall=overall,
    )


def _single_precision(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _factor_description(factor: float) -> str:
    factor = _single_precision(factor)
    if factor > 1.1:
        return "(Condiciones desfavorables - mayor acumulacion)"
    if factor < 0.9:
        return "(Condiciones favorables - mejor dispersion)"
    return "(Condiciones neutrales)"


def format_forecast(forecast: Forecast) -> str:
    """Text of a forecast with its table, verdict and recommendations."""
    climate = forecast.climate
    parts = [
        f"\n=== PREDICCION 24 HORAS - {forecast.zone_name} ===\n",
        "Basado en analisis de tendencias de los ultimos 30 dias "
        f"({forecast.record_count} registros)\n",
        f"Condiciones climaticas: Temp {climate.temperature:.1f}°C, "
        f"Presion {climate.pressure:.0f} hPa, Humedad {climate.humidity:.0f}%\n",
        f"{_RULE}\n",
        f"Factor climatico aplicado: {forecast.factor:.2f} {_factor_description(forecast.factor)}\n",
        f"{_RULE}\n",
        "Contaminante\tValor Actual\tTendencia\tPrediccion 24h\tEstado Futuro\n",
        f"{_RULE}\n",
    ]
    parts.extend(
        f"{name}\t\t{current}\t\t{trend:.1f}\t\t{prediction}\t\t{level.value}\n"
        for name, current, trend, prediction, level in zip(
            ROW_NAMES, forecast.current, forecast.trends, forecast.predictions, forecast.levels
        )
    )
    parts.append(f"{_RULE}\n")
    parts.append("\n=== PREDICCION GENERAL PARA MANANA ===\n")
    parts.append(f"Estado del aire predicho: {forecast.overall.value}\n")

    if forecast.overall is Level.ALTO:
        parts.append("\n=== MEDIDAS DE EMERGENCIA RECOMENDADAS ===\n")
        predicted = Record(forecast.zone_name, "PREDICCION", *forecast.predictions)
        parts.append(specific_recommendations(predicted))
        parts.append(
            "\nRECOMENDACIONES GENERALES ADICIONALES:\n"
            "- Evitar ejercicio al aire libre\n"
            "- Usar mascarilla si debe salir\n"
            "- Mantener ventanas cerradas\n"
            "- Personas con problemas respiratorios deben extremar precauciones\n"
        )
    elif forecast.overall is Level.MODERADO:
        parts.append(
            "RECOMENDACIONES:\n"
            "- Limitar actividades prolongadas al aire libre\n"
            "- Personas sensibles deben reducir ejercicio intenso\n"
            "- Considerar usar mascarilla en areas de mucho trafico\n"
        )
    else:
        parts.append(
            "RECOMENDACIONES:\n"
            "- Condiciones favorables para actividades al aire libre\n"
            "- Calidad del aire dentro de rangos saludables\n"
        )

    parts.append(
        "\nNOTA: Esta prediccion se basa en tendencias de los ultimos 30 dias\n"
        "y puede variar debido a factores meteorologicos y eventos imprevistos.\n"
    )
    return "".join(parts)