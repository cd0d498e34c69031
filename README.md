# calidadaire

A console tool for air quality in five monitored urban zones of Quito:
Centro, Belisario, Cotocollao, El Camal and Tumbaco. Its menus and output
are in Spanish.

It reads one measurement file per zone. Each file holds daily values of
PM2.5, PM10, O3, NO2, SO2 and CO2, with the most recent day first. From
these files it can:

- show current monitoring for the last 3 days, with the state of each day
  (BUENO, MODERADO, ALTO) judged against WHO 2021 limits, and specific
  measures when the latest day is ALTO;
- forecast the next 24 hours from the trend over the last 7 records and a
  climate factor based on temperature, pressure and humidity;
- compute recency-weighted averages and compare them with WHO limits;
- export a text report for one zone or for all zones;
- show the climate data for each zone.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
calidadaire
```

By default the zone files are looked for in the working directory. Use
`--data-dir` to point to another directory:

```
calidadaire --data-dir path/to/data
```

The menu reads its choices from standard input and stops when option 6 is
chosen or input ends.

The expected files are:

| Zone       | File                 |
|------------|----------------------|
| Centro     | `Centro.txt`         |
| Belisario  | `Belisario.txt`      |
| Cotocollao | `Cotocollao (2).txt` |
| El Camal   | `El_Camal.txt`       |
| Tumbaco    | `Tumbaco.txt`        |

Each file starts with a header line, which is skipped. Every line after it
is comma separated:

```
fecha,pm25,pm10,o3,no2,so2,co2
```

Values are read as whole numbers. Empty fields are skipped, so the values
after them move one column to the left; columns missing at the end of a
line count as 0. At most 100 records are read per file.

Reports are written into the data directory as `<Zone>_Reporte.txt`, for
example `Centro_Reporte.txt` or `El_Camal_Reporte.txt`.

## Use as a library

```python
from calidadaire.records import read_zone_file, zone_by_number
from calidadaire.climate import default_climate_data, get_climate
from calidadaire.prediction import forecast_zone, format_forecast

zone = zone_by_number(1)
records = read_zone_file(zone.data_file)
climate = get_climate(zone.display_name, default_climate_data())
print(format_forecast(forecast_zone(records, zone.display_name, climate)))
```

Main entry points:

- `calidadaire.records`: `Record`, `Zone`, `zone_by_number`,
  `zone_name_for_file`, `read_zone_file` (raises `OSError` when the file
  cannot be opened).
- `calidadaire.evaluation`: `Level`, `evaluate_pollutant`, `overall_level`,
  `record_level`, `specific_recommendations`, `limits_table`.
- `calidadaire.climate`: `ClimateData`, `default_climate_data`,
  `get_climate`, `climate_factor`, `predict_with_climate`,
  `format_climate_table`.
- `calidadaire.prediction`: `calculate_trend`, `predict_next_value`,
  `forecast_zone`, `format_forecast`, `Forecast`.
- `calidadaire.monitoring`: `summarize_current`, `format_current`,
  `CurrentSummary`.
- `calidadaire.history`: `analyze_history`, `compare_with_who_limits`,
  `format_history`, `HistoricalAnalysis`.
- `calidadaire.report`: `summarize_report`, `render_report`,
  `write_report`, `export_zone`, `ReportSummary`.
- `calidadaire.cli`: `main_menu_text`, `run_interactive`, `main`.

## What it does not do

- Climate data is not measured or fetched: every zone uses fixed values
  (13.0 °C, 1028 hPa, 87 % humidity).
- Reports carry a fixed generation date (07/07/2025), not the current date.
- Measurements are only read from the local zone files; nothing is
  downloaded or stored elsewhere.

## Tests

```
pip install .[test]
pytest
```