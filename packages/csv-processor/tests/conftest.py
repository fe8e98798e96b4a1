"""Pytest fixtures for csv-processor tests: a JobWorker over mocked storage and bus."""

import json
from unittest.mock import MagicMock

import pytest
from media_processor import JobWorker, ResultPublisher, StatusReporter

from csv_processor import CsvTableEngine


@pytest.fixture
def storage() -> MagicMock:
    return MagicMock()


@pytest.fixture
def event_bus() -> MagicMock:
    return MagicMock()


@pytest.fixture
def make_worker(storage, event_bus):
    """Factory: csv JobWorker on bucket "media" with max receive count 3."""

    def _make(*, escape_cells: bool = True, max_receive_count: int = 3) -> JobWorker:
        engine = CsvTableEngine(escape_cells=escape_cells)
        return JobWorker(
            engine,
            storage,
            ResultPublisher(storage, "media"),
            StatusReporter(event_bus, "dbox.csv-processor", engine.detail_type),
            bucket="media",
            max_receive_count=max_receive_count,
        )

    return _make


@pytest.fixture
def csv_job_body() -> str:
    return json.dumps({
        "inodeId": "inode-42",
        "inodeS3Key": "inodes/u1/inode-42",
        "inputFileName": "people.csv",
        "toMimeType": "text/html",
        "appUrl": "https://dbox.example.com",
    })


def sent_details(event_bus: MagicMock) -> list[dict]:
    """Parsed Detail of every event put on the mocked bus."""
    return [json.loads(c.args[2]) for c in event_bus.put_event.call_args_list]


@pytest.fixture
def details():
    return sent_details
