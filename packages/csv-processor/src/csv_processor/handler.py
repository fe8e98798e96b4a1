"""
Lambda entrypoint for the CSV processor (SQS event source, batch size 1).

Env vars (set by the stack): SQS_QUEUE_MAX_RECEIVE_COUNT, BUCKET_NAME,
EVENT_BUS_NAME, EVENT_SOURCE, optional CSV_ESCAPE_CELLS and LOG_LEVEL.
"""

import logging
from functools import lru_cache

from dbox_shared import configure_logging
from media_processor.handler import build_worker_from_env, handle_sqs_event
from media_processor.worker import JobWorker

from .config import get_csv_settings
from .engine import CsvTableEngine

configure_logging()


@lru_cache(maxsize=1)
def _get_worker() -> JobWorker:
    settings = get_csv_settings()
    logging.getLogger().setLevel(settings.log_level)
    return build_worker_from_env(CsvTableEngine(escape_cells=settings.csv_escape_cells), settings)


def lambda_handler(event: dict, context: object) -> dict:
    """SQS handler: convert each record's CSV and report CsvProcStatus."""
    return handle_sqs_event(event, _get_worker())
