"""
Cloud-agnostic interfaces for object storage, status event bus, and queues.

Implementations (e.g. AWS via S3, EventBridge, SQS) live in separate packages
(e.g. aws-adapters). Processor logic depends on these interfaces and receives
the implementation by config.
"""

from typing import Protocol, runtime_checkable


class QueueMessage:
    """A message received from a queue (body, receipt handle for delete, receive count)."""

    def __init__(
        self,
        receipt_handle: str,
        body: str | bytes,
        receive_count: int = 1,
    ) -> None:
        self.receipt_handle = receipt_handle
        self.body = body
        self.receive_count = receive_count


@runtime_checkable
class QueueReceiver(Protocol):
    """Receive and delete messages from a queue."""

    def receive(self, max_messages: int = 1) -> list[QueueMessage]:
        """Receive up to max_messages. Returns empty list if none available."""
        ...

    def delete(self, receipt_handle: str) -> None:
        """Delete a message by its receipt handle after processing."""
        ...


@runtime_checkable
class ObjectStorage(Protocol):
    """Object storage: read source objects and write previews with HTTP metadata."""

    def download(self, bucket: str, key: str) -> bytes:
        """Download object from bucket/key and return its body as bytes."""
        ...

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
        """Upload bytes to bucket/key, overwriting any existing object."""
        ...


@runtime_checkable
class StatusEventBus(Protocol):
    """Event bus receiving terminal status events."""

    def put_event(self, source: str, detail_type: str, detail: str) -> None:
        """Publish one event. Raises if the bus did not accept it."""
        ...
