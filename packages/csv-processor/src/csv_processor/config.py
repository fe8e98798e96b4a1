"""CSV processor config: the shared processor settings plus the cell escaping switch."""

from media_processor.config import ProcessorSettings


class CsvProcessorSettings(ProcessorSettings):
    # false inserts header and cell text verbatim (trusted uploads only)
    csv_escape_cells: bool = True


def get_csv_settings() -> CsvProcessorSettings:
    """Return validated settings from current environment."""
    return CsvProcessorSettings()
