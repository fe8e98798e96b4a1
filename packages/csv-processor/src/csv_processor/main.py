"""
Entrypoint for running the CSV processor as a long-poll container worker.
Wires AWS adapters from env and processes PROCESSOR_QUEUE_URL until stopped.
"""

import logging

from dbox_aws_adapters.env_config import processor_queue_receiver_from_env
from dbox_shared import configure_logging
from media_processor.handler import build_worker_from_env
from media_processor.runner import run_loop

from .config import get_csv_settings
from .engine import CsvTableEngine

configure_logging()


def main() -> None:
    settings = get_csv_settings()
    logging.getLogger().setLevel(settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info(
        "csv-processor starting (max_receive_count=%s, escape_cells=%s)",
        settings.sqs_queue_max_receive_count,
        settings.csv_escape_cells,
    )
    worker = build_worker_from_env(CsvTableEngine(escape_cells=settings.csv_escape_cells), settings)
    run_loop(processor_queue_receiver_from_env(), worker)


if __name__ == "__main__":
    main()
