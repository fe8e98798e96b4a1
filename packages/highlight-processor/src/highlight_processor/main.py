"""
Entrypoint for running the highlight processor as a long-poll container worker.
Wires AWS adapters from env and processes PROCESSOR_QUEUE_URL until stopped.
"""

import logging

from dbox_aws_adapters.env_config import processor_queue_receiver_from_env
from dbox_shared import configure_logging
from media_processor.config import get_settings
from media_processor.handler import build_worker_from_env
from media_processor.runner import run_loop

from .engine import HighlightEngine

configure_logging()


def main() -> None:
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info(
        "highlight-processor starting (max_receive_count=%s)",
        settings.sqs_queue_max_receive_count,
    )
    run_loop(processor_queue_receiver_from_env(), build_worker_from_env(HighlightEngine(), settings))


if __name__ == "__main__":
    main()
