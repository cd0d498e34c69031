"""Per-zone air quality reports written to text files."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from calidadaire.records import Record, read_zone_file, zone_by_number

DETAIL_DAYS = 10
GENERATION_DATE = "07/07/2025"

_NAMES = ("PM2.5", "PM10", "O3", "NO2", "SO2", "CO2")
_UNITS = ("μg/m³", "μg/m³", "μg/m³", "μg/m³", "μg/m³", "mg/m³")
# A reading above its WHO limit makes the day high; above the warning
# level (and not high anywhere) it makes the day moderate.
WHO_LIMITS = (15, 45, 100, 25, 40, 4)
WARNING_LEVELS = (10, 30, 80, 20, 30, 3)


@dataclass(frozen=True)
class ReportSummary:
    """Plain averages of positive readings and day counts per quality level."""

    record_count: int
    averages: tuple[float, ...]
    counts: tuple[int, ...]
    good_days: int
    moderate_days: int
    high_days: int


def summarize_report(records: Sequence[Record]) -> ReportSummary:
    """Average each pollutant over its positive readings and grade every day."""
    sums = [0.0] * 6
    counts = [0] * 6
    good = moderate = high = 0
    for record in records:
        for index, value in enumerate(record.pollutants):
            if value > 0:
                sums[index] += value
                counts[index] += 1
        readings = record.pollutants
        if any(value > limit for value, limit in zip(readings, WHO_LIMITS)):
            high += 1
        elif any(value > level for value, level in zip(readings, WARNING_LEVELS)):
            moderate += 1
        else:
            good += 1
    averages = tuple(total / seen if seen > 0 else 0.0 for total, seen in zip(sums, counts))
    return ReportSummary(
        record_count=len(records),
        averages=averages,
        counts=tuple(counts),
        good_days=good,
        moderate_days=moderate,
        high_days=high,
    )


def render_report(records: Sequence[Record], zone_name: str) -> str:
    """Full text of a zone's report (records newest first)."""
    summary = summarize_report(records)
    parts = [
        "=== REPORTE DE CALIDAD DEL AIRE ===\n",
        f"Zona: {zone_name}\n",
        f"Fecha de generacion: {GENERATION_DATE}\n",
        "Periodo analizado: Ultimos 30 dias\n",
        "=" * 38 + "\n\n",
        "LIMITES OMS 2021 (24 horas):\n",
    ]
    parts.extend(
        f"- {name}: {limit} {unit}\n" for name, limit, unit in zip(_NAMES, WHO_LIMITS, _UNITS)
    )
    parts.append("\n")

    parts.append("PROMEDIOS DE 30 DIAS:\n")
    for name, unit, average, seen, limit in zip(
        _NAMES, _UNITS, summary.averages, summary.counts, WHO_LIMITS
    ):
        line = f"- {name}: {average:.1f} {unit}"
        if seen > 0:
            line += " (EXCEDE LIMITE OMS)" if average > limit else " (DENTRO DEL LIMITE)"
        parts.append(line + "\n")
    parts.append("\n")

    parts.append("RESUMEN DE CALIDAD DEL AIRE (30 DIAS):\n")
    parts.append(f"- Dias con calidad BUENA: {summary.good_days}\n")
    parts.append(f"- Dias con calidad MODERADA: {summary.moderate_days}\n")
    parts.append(f"- Dias con calidad ALTA/PELIGROSA: {summary.high_days}\n")
    parts.append(f"- Total de dias analizados: {summary.record_count}\n\n")

    parts.append(f"DATOS DETALLADOS (ULTIMOS {DETAIL_DAYS} DIAS):\n")
    parts.append("Fecha\t\tPM2.5\tPM10\tO3\tNO2\tSO2\tCO\n")
    parts.append("-" * 60 + "\n")
    for record in records[:DETAIL_DAYS]:
        readings = "\t".join(str(value) for value in record.pollutants)
        parts.append(f"{record.date}\t{readings}\n")

    parts.append("\nRECOMENDACIONES GENERALES:\n")
    if summary.high_days > 5:
        parts.append(
            "- ALERTA: La zona presenta frecuentes excesos de contaminantes\n"
            "- Se recomienda implementar medidas urgentes de control\n"
            "- Evitar actividades fisicas intensas al aire libre\n"
            "- Usar mascarillas en dias de alta contaminacion\n"
        )
    elif summary.moderate_days > 10:
        parts.append(
            "- La zona presenta contaminacion moderada frecuente\n"
            "- Se recomienda monitoreo continuo y medidas preventivas\n"
            "- Limitar actividades al aire libre en horas pico\n"
        )
    else:
        parts.append(
            "- La zona presenta buena calidad del aire en general\n"
            "- Continuar con el monitoreo regular\n"
            "- Mantener las medidas de control existentes\n"
        )
    parts.append("\n=== FIN DEL REPORTE ===\n")
    return "".join(parts)


def write_report(records: Sequence[Record], zone_name: str, path: str | Path) -> Path:
    """Write the report to a file; raises OSError when it cannot be created."""
    target = Path(path)
    with open(target, "w", encoding="utf-8") as handle:
        handle.write(render_report(records, zone_name))
    return target


def export_zone(number: int, data_dir: str | Path = ".") -> Path:
    """Read a zone's data file and write its report next to it.

    Raises ValueError for an unknown zone number or a file without records,
    and OSError when the data file cannot be read.
    """
    zone = zone_by_number(number)
    directory = Path(data_dir)
    records = read_zone_file(directory / zone.data_file)
    if not records:
        raise ValueError(f"No se pudieron leer los datos de la zona {zone.export_name}")
    return write_report(records, zone.export_name, directory / zone.report_file)