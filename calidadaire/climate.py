"""Climate conditions per zone and their effect on predicted levels."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

ZONE_NAMES = ("Centro", "Belisario", "Cotocollao", "El_Camal", "Tumbaco")


@dataclass(frozen=True)
class ClimateData:
    """Temperature (°C), pressure (hPa) and relative humidity (%)."""

    zone: str
    temperature: float = 13.0
    pressure: float = 1028.0
    humidity: float = 87.0


DEFAULT_CLIMATE = ClimateData("Desconocida")


def default_climate_data() -> list[ClimateData]:
    """Current conditions for every monitored zone."""
    return [ClimateData(name) for name in ZONE_NAMES]


def get_climate(zone_name: str, data: Sequence[ClimateData] | None = None) -> ClimateData:
    """Conditions for a zone, or the defaults when the zone is not listed."""
    entries = default_climate_data() if data is None else data
    return next((entry for entry in entries if entry.zone == zone_name), DEFAULT_CLIMATE)


def climate_factor(climate: ClimateData) -> float:
    """Multiplier for pollutant build-up; above 1 means worse dispersion."""
    temp_factor = 1.0
    if climate.temperature < 10:
        temp_factor = 1.3
    elif climate.temperature < 15:
        temp_factor = 1.1
    elif climate.temperature > 25:
        temp_factor = 0.8

    if climate.humidity > 80:
        humidity_factor = 1.2
    elif climate.humidity > 60:
        humidity_factor = 1.0
    else:
        humidity_factor = 0.9

    pressure_factor = 1.0
    if climate.pressure > 1020:
        pressure_factor = 1.1
    elif climate.pressure < 1000:
        pressure_factor = 0.9

    return temp_factor * humidity_factor * pressure_factor


def predict_with_climate(values: Sequence[int], trend: float, climate: ClimateData) -> int:
    """Predict the next value from the latest one, the trend and the climate."""
    if not values:
        return 0
    base = values[0]
    prediction = int((base + int(trend * 1.5)) * climate_factor(climate))
    if prediction < 0:
        prediction = 0
    return min(prediction, base * 3)


def format_climate_table(data: Sequence[ClimateData] | None = None) -> str:
    """Table of current climate conditions for each zone."""
    entries = default_climate_data() if data is None else data
    rule = "=" * 48
    lines = [
        "\n=== DATOS CLIMATICOS ACTUALES ===\n",
        "Zona\t\tTemp(°C)\tPresion(hPa)\tHumedad(%)\n",
        f"{rule}\n",
    ]
    lines.extend(
        f"{entry.zone:<12}\t{entry.temperature:.1f}\t\t{entry.pressure:.0f}\t\t{entry.humidity:.0f}\n"
        for entry in entries
    )
    lines.append(f"{rule}\n")
    return "".join(lines)