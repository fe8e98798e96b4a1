"""
CSV -> HTML table engine.

The first row is the header; every following row becomes one table row with
its cells in header order. Missing cells render empty, extra cells are dropped,
and repeated header names collapse into one column.
"""

import csv
import html
import io
import logging

from dbox_shared import EmptyInput, InvalidInput, JobDescriptor, TransformResult
from media_processor.engine import HTML_MIME_TO_EXT, HTML_MIME_TYPE

logger = logging.getLogger(__name__)

# Default cap is 128 KiB per field; any cell that fits in the object is accepted
CSV_FIELD_SIZE_LIMIT = 2**31 - 1
csv.field_size_limit(CSV_FIELD_SIZE_LIMIT)

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <meta name="color-scheme" content="dark light" />
    <style>
      :root {
        --border-grey: lightGray;
        --bg-light: #eee;

        @media (prefers-color-scheme: dark) {
          --border-grey: oklch(from Canvas calc(l + 0.15) c h);
          --bg-light: oklch(from Canvas calc(l + 0.05) c h);
        }
      }
      body {
        font-family: system-ui;
        font-size: 14px
      }
      table {
        border-collapse: collapse;
      }
      th {
        text-align: left;
        background: var(--bg-light);
      }
      th, td {
        padding: 0.4em 0.5em;
        border: 1px solid var(--border-grey);
      }
    </style>
  </head>
  <body>
    <table>
      <thead>
        {thead}
      </thead>
      <tbody>
        {tbody}
      </tbody>
    </table>
  </body>
</html>
"""

# Split once; str.format would trip over the stylesheet braces
_PAGE_HEAD, _rest = _PAGE_TEMPLATE.split("{thead}")
_PAGE_MIDDLE, _PAGE_TAIL = _rest.split("{tbody}")


def _parse_rows(source: bytes) -> tuple[list[str], list[dict[str, str]]]:
    try:
        text = source.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidInput(f"CSV is not valid UTF-8: {e}") from e
    reader = csv.DictReader(io.StringIO(text, newline=""), restval="")
    try:
        rows = list(reader)
    except csv.Error as e:
        raise InvalidInput(f"CSV could not be parsed: {e}") from e
    headers = list(dict.fromkeys(reader.fieldnames or []))
    return headers, rows


def render_table(headers: list[str], rows: list[dict[str, str]], *, escape_cells: bool = True) -> str:
    """Render headers and rows into the preview page."""

    def cell(value: object) -> str:
        text = "" if value is None else str(value)
        return html.escape(text) if escape_cells else text

    thead = "".join(f"<th>{cell(h)}</th>" for h in headers)
    tbody = "".join(
        "<tr>" + "".join(f"<td>{cell(row.get(h))}</td>" for h in headers) + "</tr>\n"
        for row in rows
    )
    return _PAGE_HEAD + thead + _PAGE_MIDDLE + tbody + _PAGE_TAIL


class CsvTableEngine:
    """TransformationEngine for CSV sources."""

    name = "csv-processor"
    detail_type = "CsvProcStatus"
    descriptor_model = JobDescriptor
    mime_to_ext = HTML_MIME_TO_EXT

    def __init__(self, *, escape_cells: bool = True) -> None:
        self.escape_cells = escape_cells

    def transform(self, source: bytes, job: JobDescriptor) -> TransformResult:
        """
        Raises:
            EmptyInput: the CSV has no data rows.
            InvalidInput: the CSV is not UTF-8 or cannot be parsed.
        """
        headers, rows = _parse_rows(source)
        if not rows:
            raise EmptyInput("CSV is empty")
        logger.debug(
            "%s: inode_id=%s %s rows x %s columns", self.name, job.inode_id, len(rows), len(headers)
        )
        page = render_table(headers, rows, escape_cells=self.escape_cells)
        return TransformResult(body=page.encode("utf-8"), content_type=HTML_MIME_TYPE)
