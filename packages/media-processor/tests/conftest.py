"""Pytest fixtures for media-processor tests (in-memory storage, bus, and engine)."""

import json

import pytest
from dbox_shared import (
    EmptyInput,
    JobDescriptor,
    TransformError,
    TransformResult,
)

from media_processor import (
    HTML_MIME_TO_EXT,
    JobWorker,
    ResultPublisher,
    StatusReporter,
)

BUCKET = "test-media-bucket"
SOURCE_KEY = "inodes/user-1/inode-1"


class InMemoryStorage:
    """ObjectStorage keeping objects and their headers in a dict."""

    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.headers: dict[tuple[str, str], dict] = {}
        self.uploads = 0
        self.fail_download: Exception | None = None
        self.fail_upload: Exception | None = None

    def download(self, bucket: str, key: str) -> bytes:
        if self.fail_download is not None:
            raise self.fail_download
        return self.objects[(bucket, key)]

    def upload(
        self,
        bucket: str,
        key: str,
        body: bytes,
        *,
        content_type: str | None = None,
        cache_control: str | None = None,
        content_disposition: str | None = None,
    ) -> None:
        if self.fail_upload is not None:
            raise self.fail_upload
        self.uploads += 1
        self.objects[(bucket, key)] = body
        self.headers[(bucket, key)] = {
            "ContentType": content_type,
            "CacheControl": cache_control,
            "ContentDisposition": content_disposition,
        }

    def has_object(self, bucket: str, key: str) -> bool:
        return (bucket, key) in self.objects


class RecordingEventBus:
    """StatusEventBus that records events; optionally fails every put."""

    def __init__(self) -> None:
        self.events: list[dict] = []
        self.fail: Exception | None = None

    def put_event(self, source: str, detail_type: str, detail: str) -> None:
        if self.fail is not None:
            raise self.fail
        self.events.append(
            {"Source": source, "DetailType": detail_type, "Detail": json.loads(detail)}
        )


class UppercaseEngine:
    """Engine stub: wraps upper-cased text in a <p>; failure injectable."""

    name = "upper-processor"
    detail_type = "UpperProcStatus"
    descriptor_model = JobDescriptor
    mime_to_ext = HTML_MIME_TO_EXT

    def __init__(self) -> None:
        self.fail: Exception | None = None
        self.calls = 0

    def transform(self, source: bytes, job: JobDescriptor) -> TransformResult:
        self.calls += 1
        if self.fail is not None:
            raise self.fail
        if not source:
            raise EmptyInput("input is empty")
        html = f"<p>{source.decode('utf-8').upper()}</p>"
        return TransformResult(body=html.encode("utf-8"), content_type="text/html")


class FlakyTransformError(TransformError):
    """Transient-class engine failure."""


@pytest.fixture
def storage() -> InMemoryStorage:
    s = InMemoryStorage()
    s.objects[(BUCKET, SOURCE_KEY)] = b"hello"
    return s


@pytest.fixture
def event_bus() -> RecordingEventBus:
    return RecordingEventBus()


@pytest.fixture
def engine() -> UppercaseEngine:
    return UppercaseEngine()


@pytest.fixture
def flaky_error() -> TransformError:
    return FlakyTransformError("renderer crashed")


@pytest.fixture
def make_worker(storage, event_bus, engine):
    """Factory: JobWorker over the in-memory fakes with a given max receive count."""

    def _make(max_receive_count: int = 3) -> JobWorker:
        return JobWorker(
            engine,
            storage,
            ResultPublisher(storage, BUCKET),
            StatusReporter(event_bus, "dbox.upper-processor", engine.detail_type),
            bucket=BUCKET,
            max_receive_count=max_receive_count,
        )

    return _make


@pytest.fixture
def job_body():
    """Factory: JSON message body with optional overrides."""

    def _body(**overrides) -> str:
        data = {
            "inodeId": "inode-1",
            "inodeS3Key": SOURCE_KEY,
            "inputFileName": "notes.txt",
            "toMimeType": "text/html",
            "appUrl": "https://app.example.com",
        }
        data.update(overrides)
        return json.dumps(data)

    return _body
