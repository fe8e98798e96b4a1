"""Pytest fixtures for highlight-processor tests: a JobWorker over mocked storage and bus."""

import json
from unittest.mock import MagicMock

import pytest
from media_processor import JobWorker, ResultPublisher, StatusReporter

from highlight_processor import HighlightEngine


@pytest.fixture
def storage() -> MagicMock:
    s = MagicMock()
    s.download.return_value = b"def greet(name):\n    return 'hi ' + name\n"
    return s


@pytest.fixture
def event_bus() -> MagicMock:
    return MagicMock()


@pytest.fixture
def make_worker(storage, event_bus):
    """Factory: highlight JobWorker on bucket "media"."""

    def _make(max_receive_count: int = 3) -> JobWorker:
        engine = HighlightEngine()
        return JobWorker(
            engine,
            storage,
            ResultPublisher(storage, "media"),
            StatusReporter(event_bus, "dbox.highlight-processor", engine.detail_type),
            bucket="media",
            max_receive_count=max_receive_count,
        )

    return _make


@pytest.fixture
def highlight_body():
    """Factory: message body for inode-7 with the given codeLang (omitted when None)."""

    def _body(code_lang: str | None = "python") -> str:
        data = {
            "inodeId": "inode-7",
            "inodeS3Key": "inodes/u1/inode-7",
            "inputFileName": "greet.py",
            "toMimeType": "text/html",
            "appUrl": "https://dbox.example.com",
        }
        if code_lang is not None:
            data["codeLang"] = code_lang
        return json.dumps(data)

    return _body


@pytest.fixture
def details():
    """Parsed Detail of every event put on a mocked bus."""

    def _details(event_bus: MagicMock) -> list[dict]:
        return [json.loads(c.args[2]) for c in event_bus.put_event.call_args_list]

    return _details
