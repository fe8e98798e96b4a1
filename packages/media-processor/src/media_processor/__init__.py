"""Generic job-processing core shared by every dbox media processor."""

from .codec import decode, encode_status, salvage_detail
from .config import ProcessorSettings, get_settings
from .engine import (
    HTML_MIME_TO_EXT,
    HTML_MIME_TYPE,
    TransformationEngine,
    resolve_output_extension,
)
from .publisher import PREVIEW_CACHE_CONTROL, ResultPublisher, build_content_disposition
from .reporter import StatusReporter, should_report
from .worker import JobWorker

__all__ = [
    "HTML_MIME_TO_EXT",
    "HTML_MIME_TYPE",
    "JobWorker",
    "PREVIEW_CACHE_CONTROL",
    "ProcessorSettings",
    "ResultPublisher",
    "StatusReporter",
    "TransformationEngine",
    "build_content_disposition",
    "decode",
    "encode_status",
    "get_settings",
    "resolve_output_extension",
    "salvage_detail",
    "should_report",
]
