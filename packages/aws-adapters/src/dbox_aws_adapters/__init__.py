"""AWS implementations of dbox processor interfaces."""

from .eventbridge_bus import EventBridgeStatusBus
from .s3_storage import S3ObjectStorage
from .sqs_queues import SQSQueueReceiver

__all__ = [
    "EventBridgeStatusBus",
    "S3ObjectStorage",
    "SQSQueueReceiver",
]
