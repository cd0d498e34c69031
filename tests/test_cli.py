import io
import sys

from calidadaire.cli import main, main_menu_text, run_interactive

HEADER = "fecha,pm25,pm10,o3,no2,so2,co2\n"
ROWS = "03/07/2025,20,40,50,10,10,1\n02/07/2025,8,20,30,10,10,1\n01/07/2025,9,25,35,12,12,2\n"


def _run(text, data_dir):
    out = io.StringIO()
    run_interactive(io.StringIO(text), out, data_dir)
    return out.getvalue()


def _write_centro(tmp_path):
    (tmp_path / "Centro.txt").write_text(HEADER + ROWS, encoding="utf-8")


def test_menu_text_lists_options_and_prompt():
    text = main_menu_text()
    assert "6. Salir\n" in text
    assert text.endswith("Seleccione una opcion: ")


def test_exit_option(tmp_path):
    output = _run("6\n", tmp_path)
    assert output.endswith("Saliendo del programa...\n")
    assert output.count("Seleccione una opcion: ") == 1


def test_end_of_input_stops_loop(tmp_path):
    output = _run("5\n", tmp_path)
    assert "Saliendo del programa" not in output
    assert "=== DATOS CLIMATICOS ACTUALES ===" in output


def test_invalid_option(tmp_path):
    output = _run("9\n\n6\n", tmp_path)
    assert "Opcion no valida. Intente de nuevo.\n" in output
    assert output.count("Seleccione una opcion: ") == 2


def test_non_numeric_option(tmp_path):
    output = _run("abc\n\n6\n", tmp_path)
    assert "Opcion no valida. Intente de nuevo.\n" in output


def test_climate_table(tmp_path):
    output = _run("5\n\n6\n", tmp_path)
    assert "Centro      \t13.0\t\t1028\t\t87\n" in output


def test_current_monitoring(tmp_path):
    _write_centro(tmp_path)
    output = _run("1\n1\n\n6\n", tmp_path)
    assert "=== DATOS DE CONTAMINACION ACTUAL - Centro ===" in output
    assert "=== ESTADO ACTUAL (03/07/2025) ===" in output


def test_current_monitoring_missing_file(tmp_path):
    output = _run("1\n1\n\n6\n", tmp_path)
    assert "Error: No se pudo abrir el archivo Centro.txt\n" in output
    assert "No se pudieron cargar los datos de Centro." in output


def test_invalid_zone_number(tmp_path):
    output = _run("1\n9\n\n6\n", tmp_path)
    assert "Numero de zona no valido. Debe estar entre 1 y 5.\n" in output


def test_prediction(tmp_path):
    _write_centro(tmp_path)
    output = _run("2\n1\n\n6\n", tmp_path)
    assert "Datos de los ultimos 30 dias cargados: 3 registros\n" in output
    assert "=== PREDICCION 24 HORAS - Centro ===" in output


def test_prediction_missing_file(tmp_path):
    output = _run("2\n2\n\n6\n", tmp_path)
    assert "No se pudieron cargar los datos para Belisario." in output


def test_history(tmp_path):
    _write_centro(tmp_path)
    output = _run("3\n1\n\n6\n", tmp_path)
    assert "Datos historicos cargados: 3 registros (ultimos 30 dias)\n" in output
    assert "=== PROMEDIOS HISTORICOS (30 DIAS) - Centro ===" in output


def test_export_single_zone(tmp_path):
    _write_centro(tmp_path)
    output = _run("4\n1\n\n6\n", tmp_path)
    report = tmp_path / "Centro_Reporte.txt"
    assert report.read_text(encoding="utf-8").startswith("=== REPORTE DE CALIDAD DEL AIRE ===")
    assert "Reporte generado exitosamente: Centro_Reporte.txt\n" in output


def test_export_all_zones(tmp_path):
    _write_centro(tmp_path)
    output = _run("4\n6\n\n6\n", tmp_path)
    assert (tmp_path / "Centro_Reporte.txt").exists()
    assert not (tmp_path / "Tumbaco_Reporte.txt").exists()
    assert "No se pudieron leer los datos de la zona Tumbaco\n" in output
    assert "Reporte completo generado exitosamente!\n" in output


def test_export_back_to_menu(tmp_path):
    output = _run("4\n7\n\n6\n", tmp_path)
    assert "Volviendo al menu principal...\n" in output


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("6\n"))
    assert main(["--data-dir", str(tmp_path)]) == 0
    assert "Saliendo del programa...\n" in capsys.readouterr().out