"""Shared types and conventions for the dbox media processors."""

from .errors import (
    EmptyInput,
    ErrorCategory,
    EventPublishError,
    InvalidInput,
    MalformedEnvelope,
    PermanentJobError,
    ProcessorError,
    StorageReadError,
    StorageWriteError,
    TransformError,
    UnknownLanguage,
    UnsupportedMimeType,
    is_permanent_error,
)
from .interfaces import (
    ObjectStorage,
    QueueMessage,
    QueueReceiver,
    StatusEventBus,
)
from .keys import (
    build_display_file_name,
    build_preview_file_name,
    build_preview_key,
)
from .logging_config import configure_logging
from .models import (
    DeliveryMetadata,
    JobDescriptor,
    ProcStatus,
    ResultDetail,
    TransformResult,
)
from .redelivery import is_final_attempt, receive_count_from_attributes

__version__ = "0.1.0"
__all__ = [
    "DeliveryMetadata",
    "EmptyInput",
    "ErrorCategory",
    "EventPublishError",
    "InvalidInput",
    "JobDescriptor",
    "MalformedEnvelope",
    "ObjectStorage",
    "PermanentJobError",
    "ProcStatus",
    "ProcessorError",
    "QueueMessage",
    "QueueReceiver",
    "ResultDetail",
    "StatusEventBus",
    "StorageReadError",
    "StorageWriteError",
    "TransformError",
    "TransformResult",
    "UnknownLanguage",
    "UnsupportedMimeType",
    "build_display_file_name",
    "build_preview_file_name",
    "build_preview_key",
    "configure_logging",
    "is_final_attempt",
    "is_permanent_error",
    "receive_count_from_attributes",
]
