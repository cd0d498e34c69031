"""Weighted historical averages and comparison with WHO limits."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from calidadaire.evaluation import Level, evaluate_pollutant, record_level
from calidadaire.records import Record

_NAMES = ("PM2.5", "PM10", "O3", "NO2", "SO2", "CO2")
# The averages table grades the last pollutant under the "CO" label.
_GRADE_LABELS = ("PM2.5", "PM10", "O3", "NO2", "SO2", "CO")
WHO_LIMITS = (15, 45, 100, 25, 40, 4)

_RULE = "=" * 80


@dataclass(frozen=True)
class HistoricalAnalysis:
    """Recency-weighted averages and weighted day counts per level."""

    record_count: int
    averages: tuple[float, ...]
    counts: tuple[int, ...]
    weighted_good: int
    weighted_moderate: int
    weighted_high: int

    @property
    def percentages(self) -> tuple[float, float, float] | None:
        """Weighted share of good, moderate and high days, or None without data."""
        total = self.weighted_good + self.weighted_moderate + self.weighted_high
        if total <= 0:
            return None
        return (
            self.weighted_good / total * 100,
            self.weighted_moderate / total * 100,
            self.weighted_high / total * 100,
        )


def analyze_history(records: Sequence[Record]) -> HistoricalAnalysis:
    """Average each pollutant with linearly decaying weights (newest first)."""
    count = len(records)
    sums = [0.0] * 6
    counts = [0] * 6
    total_weight = 0.0
    weighted = {Level.BUENO: 0, Level.MODERADO: 0, Level.ALTO: 0}

    for age, record in enumerate(records):
        weight = (count - age) / count
        for index, value in enumerate(record.pollutants):
            if value > 0:
                sums[index] += value * weight
                counts[index] += 1
        total_weight += weight
        weighted[record_level(record)] += int(weight * 100)

    averages = tuple(
        total / total_weight if seen > 0 else 0.0 for total, seen in zip(sums, counts)
    )
    return HistoricalAnalysis(
        record_count=count,
        averages=averages,
        counts=tuple(counts),
        weighted_good=weighted[Level.BUENO],
        weighted_moderate=weighted[Level.MODERADO],
        weighted_high=weighted[Level.ALTO],
    )


def compare_with_who_limits(averages: Sequence[float]) -> list[str]:
    """Alert lines for every average above its WHO limit."""
    return [
        f"ALERTA: {name} promedio ({average:.1f}) supera limite OMS ({limit:.1f})"
        for name, average, limit in zip(_NAMES, averages, WHO_LIMITS)
        if average > limit
    ]


def format_history(analysis: HistoricalAnalysis, zone_name: str) -> str:
    """Text of the averages table, weighted summary and WHO comparison."""
    parts = [
        f"\n=== PROMEDIOS HISTORICOS (30 DIAS) - {zone_name} ===\n",
        f"{_RULE}\n",
        "Contaminante\tPromedio\tDias con datos\tEstado Promedio\tLimite OMS\n",
        f"{_RULE}\n",
    ]
    for name, label, average, seen, limit in zip(
        _NAMES, _GRADE_LABELS, analysis.averages, analysis.counts, WHO_LIMITS
    ):
        if seen > 0:
            level = evaluate_pollutant(int(average), label)
            parts.append(f"{name}\t\t{average:.1f}\t\t{seen}\t\t{level.value}\t\t{limit:.1f}\n")
    parts.append(f"{_RULE}\n")

    parts.append(f"\n=== RESUMEN HISTORICO (30 DIAS) - {zone_name} ===\n")
    parts.append(f"Total de dias analizados: {analysis.record_count}\n")
    shares = analysis.percentages
    if shares is None:
        parts.append("No hay datos suficientes para calcular porcentajes.\n")
    else:
        good, moderate, high = shares
        parts.append(f"Dias con calidad BUENA: {good:.1f}% (peso ponderado)\n")
        parts.append(f"Dias con calidad MODERADA: {moderate:.1f}% (peso ponderado)\n")
        parts.append(f"Dias con calidad ALTA: {high:.1f}% (peso ponderado)\n")

    parts.append("\n=== COMPARACION CON LIMITES OMS ===\n")
    alerts = compare_with_who_limits(analysis.averages)
    parts.extend(f"{alert}\n" for alert in alerts)
    if not alerts:
        parts.append(
            "BUENAS NOTICIAS: Todos los promedios estan dentro de los limites OMS\n"
            f"La calidad del aire en {zone_name} es generalmente aceptable.\n"
        )
    else:
        parts.append(
            f"\nSE DETECTARON {len(alerts)} PROBLEMAS DE CALIDAD DEL AIRE\n"
            f"Se recomienda implementar medidas de mitigacion en {zone_name}.\n"
        )
    return "".join(parts)