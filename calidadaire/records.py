"""Monitoring zones and reading of per-zone pollution data files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

UNKNOWN_ZONE = "Desconocida"
DEFAULT_MAX_RECORDS = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Record:
    """One day of readings for a zone (µg/m³, CO2 in mg/m³)."""

    zone: str
    date: str
    pm25: int = 0
    pm10: int = 0
    o3: int = 0
    no2: int = 0
    so2: int = 0
    co2: int = 0

    @property
    def pollutants(self) -> tuple[int, int, int, int, int, int]:
        """Readings in the order PM2.5, PM10, O3, NO2, SO2, CO2."""
        return (self.pm25, self.pm10, self.o3, self.no2, self.so2, self.co2)


class Zone(Enum):
    """Urban zones of Quito with a monitoring station."""

    CENTRO = (1, "Centro", "Centro.txt", "Centro")
    BELISARIO = (2, "Belisario", "Belisario.txt", "Belisario")
    COTOCOLLAO = (3, "Cotocollao", "Cotocollao (2).txt", "Cotocollao")
    EL_CAMAL = (4, "El Camal", "El_Camal.txt", "El_Camal")
    TUMBACO = (5, "Tumbaco", "Tumbaco.txt", "Tumbaco")

    def __init__(self, number: int, display_name: str, data_file: str, export_name: str):
        self.number = number
        self.display_name = display_name
        self.data_file = data_file
        self.export_name = export_name

    @property
    def report_file(self) -> str:
        """Name of the report file written when exporting this zone."""
        return f"{self.export_name}_Reporte.txt"


def zone_by_number(number: int) -> Zone:
    """Return the zone numbered 1 to 5, or raise ValueError."""
    for zone in Zone:
        if zone.number == number:
            return zone
    raise ValueError(f"Numero de zona no valido: {number}. Debe estar entre 1 y 5.")


def zone_name_for_file(filename: str | Path) -> str:
    """Return the zone name that a data file belongs to."""
    name = Path(filename).name
    for zone in Zone:
        if zone.data_file == name:
            return zone.display_name
    return UNKNOWN_ZONE


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _parse_line(line: str, zone_name: str) -> Record | None:
    # Empty fields are skipped, so consecutive commas collapse into one.
    tokens = [token for token in line.split(",") if token]
    if not tokens:
        return None
    date = tokens[0].rstrip("\r\n")
    numbers = [_atoi(token) for token in tokens[1:7]]
    numbers += [0] * (6 - len(numbers))
    return Record(zone_name, date, *numbers)


def read_zone_file(path: str | Path, max_records: int = DEFAULT_MAX_RECORDS) -> list[Record]:
    """Read a comma separated data file, skipping its header line.

    Raises OSError (FileNotFoundError) when the file cannot be opened.
    """
    zone_name = zone_name_for_file(path)
    records: list[Record] = []
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        next(handle, None)
        for line in handle:
            if len(records) >= max_records:
                break
            record = _parse_line(line, zone_name)
            if record is not None:
                records.append(record)
    return records