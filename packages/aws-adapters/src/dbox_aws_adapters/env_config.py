"""
Build AWS adapter instances from environment variables.

Stack outputs (event bus name, queue URL) are passed into the
process as env vars. Clients are created once per process and only read
afterwards; they need no teardown.

Required env vars:
- EVENT_BUS_NAME
- PROCESSOR_QUEUE_URL (long-poll runner only; Lambda receives records directly)

Optional:
- AWS_REGION
- AWS_ENDPOINT_URL (e.g. for LocalStack)
- SQS_LONG_POLL_WAIT_SECONDS (default: 20, max 20) for receive long polling
"""

import os

from .eventbridge_bus import EventBridgeStatusBus
from .s3_storage import S3ObjectStorage
from .sqs_queues import SQSQueueReceiver


def _sqs_wait_time_seconds() -> int:
    """Long-poll wait time for SQS receive (0-20). Default 20 for responsive pickup."""
    val = os.environ.get("SQS_LONG_POLL_WAIT_SECONDS", "20")
    return min(20, max(0, int(val)))


def _get_region() -> str | None:
    return os.environ.get("AWS_REGION") or None


def _get_endpoint_url() -> str | None:
    return os.environ.get("AWS_ENDPOINT_URL") or None


def object_storage_from_env() -> S3ObjectStorage:
    """Build S3ObjectStorage (uses default credentials; bucket names come from callers)."""
    return S3ObjectStorage(
        region_name=_get_region(),
        endpoint_url=_get_endpoint_url(),
    )


def status_event_bus_from_env() -> EventBridgeStatusBus:
    """Build EventBridgeStatusBus from EVENT_BUS_NAME."""
    return EventBridgeStatusBus(
        os.environ["EVENT_BUS_NAME"],
        region_name=_get_region(),
        endpoint_url=_get_endpoint_url(),
    )


def processor_queue_receiver_from_env() -> SQSQueueReceiver:
    """Build SQSQueueReceiver for the processor's job queue from PROCESSOR_QUEUE_URL."""
    url = os.environ["PROCESSOR_QUEUE_URL"]
    return SQSQueueReceiver(
        url,
        region_name=_get_region(),
        endpoint_url=_get_endpoint_url(),
        wait_time_seconds=_sqs_wait_time_seconds(),
    )

