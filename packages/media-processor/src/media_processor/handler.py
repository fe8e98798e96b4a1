"""
Lambda glue shared by every processor kind.

Each processor module builds one JobWorker per process (lazily, on the first
invocation) and forwards its SQS event here. The event source mapping runs
with batch size 1; larger batches are processed record by record and the
first transient failure aborts the invocation so the platform redelivers.
"""

import json
import logging
from typing import Any

from dbox_aws_adapters.env_config import object_storage_from_env, status_event_bus_from_env
from dbox_shared import receive_count_from_attributes

from .config import ProcessorSettings, get_settings
from .engine import TransformationEngine
from .publisher import ResultPublisher
from .reporter import StatusReporter
from .worker import JobWorker

logger = logging.getLogger(__name__)


def build_worker_from_env(
    engine: TransformationEngine,
    settings: ProcessorSettings | None = None,
) -> JobWorker:
    """Wire S3 storage and the EventBridge bus from env into a JobWorker for engine."""
    settings = settings or get_settings()
    storage = object_storage_from_env()
    reporter = StatusReporter(
        status_event_bus_from_env(),
        source=settings.event_source,
        detail_type=engine.detail_type,
    )
    return JobWorker(
        engine,
        storage,
        ResultPublisher(storage, settings.bucket_name),
        reporter,
        bucket=settings.bucket_name,
        max_receive_count=settings.sqs_queue_max_receive_count,
    )


def handle_sqs_event(event: dict[str, Any], worker: JobWorker) -> dict[str, Any]:
    """
    Process every record of an SQS Lambda event.

    Record shape: {"body": "<json>", "attributes": {"ApproximateReceiveCount": "1"}, ...}
    Transient failures propagate to the Lambda runtime.
    """
    records = event.get("Records") or []
    processed: list[str | None] = []
    for record in records:
        receive_count = receive_count_from_attributes(record.get("attributes"))
        detail = worker.process(record.get("body", ""), receive_count)
        processed.append(detail.inode_id)
    return {
        "statusCode": 200,
        "body": json.dumps({"processed_inode_ids": processed}),
    }
