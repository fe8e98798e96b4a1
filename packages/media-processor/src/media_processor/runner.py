"""
Long-poll loop for running a processor as a container worker instead of Lambda.

Same contract as the Lambda path: a message is deleted when the worker returns
(success or reported permanent failure) and left in flight when it raises, so
the queue redelivers it after the visibility timeout and eventually
dead-letters it.
"""

import logging
import time

from dbox_shared import QueueMessage, QueueReceiver

from .worker import JobWorker

logger = logging.getLogger(__name__)


def process_one_message(msg: QueueMessage, receiver: QueueReceiver, worker: JobWorker) -> bool:
    """Process one queue message. Returns True if it was deleted from the queue."""
    try:
        worker.process(msg.body, msg.receive_count)
    except Exception as e:
        logger.warning(
            "%s: message left for redelivery (receive_count=%s): %s",
            worker.engine.name,
            msg.receive_count,
            e,
        )
        return False
    receiver.delete(msg.receipt_handle)
    return True


def run_loop(
    receiver: QueueReceiver,
    worker: JobWorker,
    *,
    poll_interval_sec: float = 5.0,
) -> None:
    """Long-running loop: receive messages, process each, delete when done."""
    logger.info("%s loop started", worker.engine.name)
    while True:
        messages = receiver.receive(max_messages=1)
        if messages:
            logger.debug("%s: received %s message(s)", worker.engine.name, len(messages))
        for msg in messages:
            process_one_message(msg, receiver, worker)
        if not messages:
            time.sleep(poll_interval_sec)
