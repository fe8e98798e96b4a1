"""
Transformation engine contract shared by every processor kind.

An engine is a pure conversion from source bytes to preview bytes. It declares
which target MIME types it can produce (and their file extensions), the
descriptor model its jobs parse into, and the DetailType of its status events.
Engine failures are raised as TransformError subclasses whose category decides
whether the worker reports immediately (PERMANENT) or waits for the final
delivery (TRANSIENT).
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from dbox_shared import JobDescriptor, TransformResult, UnsupportedMimeType

HTML_MIME_TYPE = "text/html"

# Only HTML previews are produced today
HTML_MIME_TO_EXT: Mapping[str, str] = {HTML_MIME_TYPE: "html"}


@runtime_checkable
class TransformationEngine(Protocol):
    """Per-kind conversion plugged into JobWorker."""

    name: str
    detail_type: str
    descriptor_model: type[JobDescriptor]
    mime_to_ext: Mapping[str, str]

    def transform(self, source: bytes, job: JobDescriptor) -> TransformResult:
        """Convert source bytes for job; raise TransformError on failure."""
        ...


def resolve_output_extension(engine: TransformationEngine, to_mime_type: str) -> str:
    """
    Return the preview file extension for to_mime_type.

    Raises:
        UnsupportedMimeType: the engine cannot produce to_mime_type.
    """
    ext = engine.mime_to_ext.get(to_mime_type)
    if not ext:
        raise UnsupportedMimeType(to_mime_type)
    return ext
