"""
Lambda entrypoint for the highlight processor (SQS event source, batch size 1).

Env vars (set by the stack): SQS_QUEUE_MAX_RECEIVE_COUNT, BUCKET_NAME,
EVENT_BUS_NAME, EVENT_SOURCE, optional LOG_LEVEL.
"""

import logging
from functools import lru_cache

from dbox_shared import configure_logging
from media_processor.config import get_settings
from media_processor.handler import build_worker_from_env, handle_sqs_event
from media_processor.worker import JobWorker

from .engine import HighlightEngine

configure_logging()


@lru_cache(maxsize=1)
def _get_worker() -> JobWorker:
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    return build_worker_from_env(HighlightEngine(), settings)


def lambda_handler(event: dict, context: object) -> dict:
    """SQS handler: highlight each record's source file and report HighlightProcStatus."""
    return handle_sqs_event(event, _get_worker())
