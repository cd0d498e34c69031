"""Current air quality over the most recent days of a zone."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from calidadaire.evaluation import Level, limits_table, record_level, specific_recommendations
from calidadaire.records import Record

CURRENT_DAYS = 3

_RULE = "=" * 101


@dataclass(frozen=True)
class CurrentSummary:
    """Day counts per level over the shown days and the latest day's level."""

    days_shown: int
    good: int
    moderate: int
    high: int
    current_level: Level | None
    current_date: str | None


def summarize_current(records: Sequence[Record]) -> CurrentSummary:
    """Summarize the most recent days (records are newest first)."""
    levels = [record_level(record) for record in records[:CURRENT_DAYS]]
    return CurrentSummary(
        days_shown=len(levels),
        good=levels.count(Level.BUENO),
        moderate=levels.count(Level.MODERADO),
        high=levels.count(Level.ALTO),
        current_level=levels[0] if levels else None,
        current_date=records[0].date if levels else None,
    )


def format_current(records: Sequence[Record], zone_name: str) -> str:
    """Text of the current monitoring table, summary and advice."""
    summary = summarize_current(records)
    shown = summary.days_shown
    parts = [
        limits_table(),
        f"\n=== DATOS DE CONTAMINACION ACTUAL - {zone_name} ===\n",
        f"Mostrando los ultimos {shown} dias de monitoreo\n",
        f"{_RULE}\n",
        "Fecha\t\tPM2.5\tPM10\tO3\tNO2\tSO2\tCO2\tEstado General\n",
        f"{_RULE}\n",
    ]
    for record in records[:shown]:
        readings = "\t".join(str(value) for value in record.pollutants)
        parts.append(f"{record.date:<12}\t{readings}\t{record_level(record).value}\n")
    parts.append(f"{_RULE}\n")
    parts.append(f"\n=== RESUMEN DE CALIDAD DEL AIRE ACTUAL - {zone_name} ===\n")
    parts.append(f"Dias con calidad BUENA: {summary.good} de {shown}\n")
    parts.append(f"Dias con calidad MODERADA: {summary.moderate} de {shown}\n")
    parts.append(f"Dias con calidad ALTA (Peligrosa): {summary.high} de {shown}\n")

    if summary.high > 0:
        parts.append(
            f"\n  ALERTA: Se detectaron {summary.high} dias con niveles ALTOS de contaminacion.\n"
            "   Recomendacion: Evitar actividades al aire libre.\n"
        )
    elif summary.moderate > 0:
        parts.append(
            f"\n  PRECAUCION: {summary.moderate} dias con calidad MODERADA detectados.\n"
            "   Recomendacion: Personas sensibles deben limitar actividades prolongadas al aire libre.\n"
        )
    else:
        parts.append(f"\n La calidad del aire en {zone_name} ha estado dentro de rangos aceptables.\n")

    if summary.current_level is not None:
        parts.append(f"\n=== ESTADO ACTUAL ({summary.current_date}) ===\n")
        parts.append(f"Calidad del aire: {summary.current_level.value}\n")
        if summary.current_level is Level.ALTO:
            parts.append(specific_recommendations(records[0]))

    parts.append("\n")
    return "".join(parts)