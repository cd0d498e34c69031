"""Classification of pollutant readings against WHO 2021 limits."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from calidadaire.records import Record


class Level(str, Enum):
    """Air quality level of a reading."""

    BUENO = "BUENO"
    MODERADO = "MODERADO"
    ALTO = "ALTO"
    DESCONOCIDO = "DESCONOCIDO"


# Upper bounds (inclusive) for BUENO and MODERADO.
_THRESHOLDS = {
    "PM2.5": (10, 15),
    "PM10": (30, 45),
    "O3": (60, 100),
    "NO2": (15, 25),
    "SO2": (25, 40),
    "CO": (2, 4),
}

# Labels under which a record's six readings are judged.  CO2 is judged
# under the "CO2" label, which has no thresholds and so is never graded.
_RECORD_LABELS = ("PM2.5", "PM10", "O3", "NO2", "SO2", "CO2")


def evaluate_pollutant(value: int, pollutant: str) -> Level:
    """Grade one reading; unknown pollutant labels give DESCONOCIDO."""
    limits = _THRESHOLDS.get(pollutant)
    if limits is None:
        return Level.DESCONOCIDO
    good, moderate = limits
    if value <= good:
        return Level.BUENO
    if value <= moderate:
        return Level.MODERADO
    return Level.ALTO


def overall_level(levels: Iterable[Level]) -> Level:
    """The worst of the given levels: ALTO, then MODERADO, else BUENO."""
    seen = set(levels)
    if Level.ALTO in seen:
        return Level.ALTO
    if Level.MODERADO in seen:
        return Level.MODERADO
    return Level.BUENO


def record_level(record: Record) -> Level:
    """Overall level of a day, decided by its worst pollutant."""
    return overall_level(
        evaluate_pollutant(value, label)
        for value, label in zip(record.pollutants, _RECORD_LABELS)
    )


_RECOMMENDATIONS = (
    (
        "pm25", 15, "PM2.5 ALTO ({} μg/m³) - Particulas finas:",
        (
            "Reducir el uso de vehiculos particulares; promover transporte publico",
            "Restringir el ingreso de vehiculos a ciertas zonas (pico y placa ambiental)",
            "Aumentar zonas verdes y barreras vegetales",
            "Suspender actividades fisicas al aire libre en escuelas",
            "Controlar quemas agricolas o fuegos a cielo abierto",
        ),
    ),
    (
        "pm10", 45, "PM10 ALTO ({} μg/m³) - Particulas gruesas:",
        (
            "Regar calles sin pavimentar o con polvo visible",
            "Detener temporalmente obras de construccion o usar barreras anti-polvo",
            "Restringir la circulacion de camiones pesados en zonas urbanas",
            "Uso obligatorio de mascarillas en areas expuestas",
        ),
    ),
    (
        "o3", 100, "O3 ALTO ({} μg/m³) - Ozono troposferico:",
        (
            "Evitar actividades fisicas intensas entre 11 a.m. y 5 p.m.",
            "Incentivar el teletrabajo para reducir desplazamientos",
            "Disminuir la actividad industrial y el uso de solventes volatiles",
            "Emitir alertas a traves de medios y redes sociales",
        ),
    ),
    (
        "no2", 25, "NO2 ALTO ({} μg/m³) - Dioxido de nitrogeno:",
        (
            "Prohibir temporalmente la circulacion de vehiculos diesel",
            "Fomentar el uso de bicicletas y transporte electrico",
            "Controlar emisiones de buses y taxis urbanos",
            "Reforzar la vigilancia ambiental en zonas escolares y hospitales",
        ),
    ),
    (
        "so2", 40, "SO2 ALTO ({} μg/m³) - Dioxido de azufre:",
        (
            "Suspender actividades industriales con altas emisiones de azufre",
            "Supervisar quemas y emisiones de calderas industriales",
            "Alertar a personas con asma o enfermedades pulmonares",
        ),
    ),
    (
        "co2", 4, "CO2 ALTO ({} mg/m³) - Dioxido de carbono:",
        (
            "Revision tecnica de vehiculos en mal estado",
            "Cierre de estacionamientos subterraneos mal ventilados",
            "Campanas de ventilacion en hogares e industrias con uso de combustibles",
        ),
    ),
)


def specific_recommendations(record: Record) -> str:
    """Text of measures for every pollutant above its WHO limit."""
    parts = ["\n=== RECOMENDACIONES ESPECIFICAS ===\n"]
    for attribute, limit, title, measures in _RECOMMENDATIONS:
        value = getattr(record, attribute)
        if value > limit:
            parts.append("\n" + title.format(value) + "\n")
            parts.extend(f"- {measure}\n" for measure in measures)
    return "".join(parts)


def limits_table() -> str:
    """Table of acceptable ranges for each pollutant."""
    rule = "=" * 64
    return (
        "\n=== LIMITES ACEPTABLES DE CONTAMINANTES (OMS 2021) ===\n"
        f"{rule}\n"
        "Contaminante\tBUENO\t\tMODERADO\tALTO\t\tUnidad\n"
        f"{rule}\n"
        "PM2.5\t\t0-10\t\t11-15\t\t>15\t\tμg/m³\n"
        "PM10\t\t0-30\t\t31-45\t\t>45\t\tμg/m³\n"
        "O3\t\t0-60\t\t61-100\t\t>100\t\tμg/m³\n"
        "NO2\t\t0-15\t\t16-25\t\t>25\t\tμg/m³\n"
        "SO2\t\t0-25\t\t26-40\t\t>40\t\tμg/m³\n"
        "CO2\t\t0-2\t\t3-4\t\t>4\t\tmg/m³\n"
        f"{rule}\n\n"
    )