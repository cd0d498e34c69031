"""Air quality monitoring, forecasting, historical analysis and reports for urban zones of Quito."""

__version__ = "0.1.0"