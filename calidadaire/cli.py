"""Interactive menu for monitoring, forecasting and reporting air quality."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import TextIO

from calidadaire.climate import default_climate_data, format_climate_table, get_climate
from calidadaire.history import analyze_history, format_history
from calidadaire.monitoring import format_current
from calidadaire.prediction import forecast_zone, format_forecast
from calidadaire.records import Record, Zone, read_zone_file, zone_by_number
from calidadaire.report import export_zone

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ZONE_RULE = "=" * 40
_EXIT_OPTION = 6


class _EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


def main_menu_text() -> str:
    """Text of the main menu, ending with the prompt."""
    return (
        "\n=== SISTEMA DE GESTION Y PREDICCION DE CONTAMINACION DE AIRE ===\n"
        "1. Monitoreo actual de contaminacion (ultimos 3 dias)\n"
        "2. Prediccion de niveles futuros (24 horas con factores climaticos)\n"
        "3. Analisis historico (promedios de 30 dias)\n"
        "4. Exportar reportes y datos\n"
        "5. Ver datos climaticos actuales\n"
        "6. Salir\n"
        "Seleccione una opcion: "
    )


def _zones_table() -> str:
    rows = "".join(f"{zone.number}\t{zone.display_name}\n" for zone in Zone)
    return (
        "\n=== CIUDAD DE QUITO - ZONAS URBANAS MONITOREADAS ===\n"
        f"{_ZONE_RULE}\nNo.\tZona Urbana\n{_ZONE_RULE}\n{rows}{_ZONE_RULE}\n"
    )


def _export_menu() -> str:
    lines = ["\n=== MENU DE EXPORTACION ===\n"]
    lines.extend(f"{zone.number}. Exportar datos de {zone.display_name}\n" for zone in Zone)
    lines.append("6. Generar reporte completo de todas las zonas\n")
    lines.append("7. Volver al menu principal\n")
    return "".join(lines)


class _Session:
    def __init__(self, stdin: TextIO, stdout: TextIO, data_dir: Path):
        self.stdin = stdin
        self.stdout = stdout
        self.data_dir = data_dir
        self.climate = default_climate_data()

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line

    def read_int(self) -> int | None:
        match = _LEADING_INT.match(self.read_line())
        return int(match.group(1)) if match else None

    def choose_zone(self) -> Zone | None:
        self.write("Seleccione el numero de la zona urbana (1-5): ")
        number = self.read_int()
        if number is None or not 1 <= number <= 5:
            self.write("Numero de zona no valido. Debe estar entre 1 y 5.\n")
            return None
        return zone_by_number(number)

    def load(self, zone: Zone, preposition: str) -> list[Record]:
        try:
            records = read_zone_file(self.data_dir / zone.data_file)
        except OSError:
            self.write(f"Error: No se pudo abrir el archivo {zone.data_file}\n")
            records = []
        if not records:
            self.write(f"\nNo se pudieron cargar los datos {preposition} {zone.display_name}.\n")
            self.write(f"Asegurese de que el archivo {zone.data_file} existe en el directorio.\n")
        return records

    def current_monitoring(self) -> None:
        self.write("\n=== MONITOREO ACTUAL DE CONTAMINACION (ULTIMOS 3 DIAS) ===\n")
        self.write(_zones_table())
        zone = self.choose_zone()
        if zone is None:
            return
        records = self.load(zone, "de")
        if records:
            self.write(format_current(records, zone.display_name))

    def prediction(self) -> None:
        self.write("\n=== SISTEMA DE PREDICCION DE CONTAMINACION - PROXIMAS 24 HORAS ===\n")
        self.write("\n=== PREDICCION DE NIVELES FUTUROS ===\n")
        self.write("Seleccione la zona para generar prediccion:\n")
        self.write(_zones_table())
        zone = self.choose_zone()
        if zone is None:
            return
        records = self.load(zone, "para")
        if records:
            self.write("\n=== ANALISIS COMPLETADO ===\n")
            self.write(f"Datos de los ultimos 30 dias cargados: {len(records)} registros\n")
            climate = get_climate(zone.display_name, self.climate)
            self.write(format_forecast(forecast_zone(records, zone.display_name, climate)))

    def history(self) -> None:
        self.write("\n=== ANALISIS HISTORICO DE CONTAMINACION (30 DIAS) ===\n")
        self.write("\n=== ANALISIS HISTORICO ===\n")
        self.write("Seleccione la zona para analizar promedios de 30 dias:\n")
        self.write(_zones_table())
        zone = self.choose_zone()
        if zone is None:
            return
        records = self.load(zone, "para")
        if records:
            self.write("\n=== ANALISIS COMPLETADO ===\n")
            self.write(f"Datos historicos cargados: {len(records)} registros (ultimos 30 dias)\n")
            self.write(format_history(analyze_history(records), zone.display_name))

    def export_one(self, number: int) -> None:
        zone = zone_by_number(number)
        try:
            path = export_zone(number, self.data_dir)
        except OSError as error:
            self.write(f"Error: No se pudo abrir el archivo {Path(error.filename or zone.data_file).name}\n")
            self.write(f"No se pudieron leer los datos de la zona {zone.export_name}\n")
            return
        except ValueError:
            self.write(f"No se pudieron leer los datos de la zona {zone.export_name}\n")
            return
        self.write(f"\nGenerando reporte para la zona: {zone.export_name}\n")
        self.write(f"Reporte generado exitosamente: {path.name}\n")

    def export(self) -> None:
        self.write("\n=== EXPORTACION DE DATOS Y REPORTES ===\n")
        self.write(_export_menu())
        self.write("Seleccione una opcion: ")
        option = self.read_int()
        if option is not None and 1 <= option <= 5:
            self.export_one(option)
        elif option == 6:
            self.write("\nGenerando reporte completo de todas las zonas...\n")
            for zone in Zone:
                self.export_one(zone.number)
            self.write("\nReporte completo generado exitosamente!\n")
        elif option == 7:
            self.write("Volviendo al menu principal...\n")
        else:
            self.write("Opcion no valida. Intente de nuevo.\n")

    def run(self) -> None:
        actions = {
            1: self.current_monitoring,
            2: self.prediction,
            3: self.history,
            4: self.export,
            5: lambda: self.write(format_climate_table(self.climate)),
        }
        while True:
            self.write(main_menu_text())
            option = self.read_int()
            if option == _EXIT_OPTION:
                self.write("Saliendo del programa...\n")
                return
            action = actions.get(option) if option is not None else None
            if action is None:
                self.write("Opcion no valida. Intente de nuevo.\n")
            else:
                action()
            self.write("\nPresione Enter para continuar")
            self.read_line()


def run_interactive(
    stdin: TextIO | None = None, stdout: TextIO | None = None, data_dir: str | Path = "."
) -> None:
    """Run the menu loop until the exit option is chosen or input ends."""
    session = _Session(stdin or sys.stdin, stdout or sys.stdout, Path(data_dir))
    try:
        session.run()
    except _EndOfInput:
        session.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="calidadaire",
        description="Gestion y prediccion de contaminacion del aire en Quito.",
    )
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directorio con los archivos de datos de cada zona",
    )
    args = parser.parse_args(argv)
    run_interactive(sys.stdin, sys.stdout, args.data_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())