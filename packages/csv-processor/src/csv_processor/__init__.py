"""CSV processor: renders a stored CSV file as a static HTML table preview."""

from .config import CsvProcessorSettings, get_csv_settings
from .engine import CsvTableEngine, render_table

__all__ = ["CsvProcessorSettings", "CsvTableEngine", "get_csv_settings", "render_table"]
