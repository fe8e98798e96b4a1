"""EventBridge implementation of StatusEventBus."""

import logging
from typing import Any

import boto3
from dbox_shared import EventPublishError

logger = logging.getLogger(__name__)


class EventBridgeStatusBus:
    """StatusEventBus implementation using EventBridge PutEvents on a named bus."""

    def __init__(
        self,
        event_bus_name: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        client: Any = None,
    ) -> None:
        self._event_bus_name = event_bus_name
        self._client = client or boto3.client(
            "events",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

    @property
    def event_bus_name(self) -> str:
        return self._event_bus_name

    def put_event(self, source: str, detail_type: str, detail: str) -> None:
        """
        Publish one event.

        PutEvents reports per-entry failures in the response body instead of raising;
        a non-zero FailedEntryCount is raised as EventPublishError.
        """
        resp = self._client.put_events(
            Entries=[
                {
                    "EventBusName": self._event_bus_name,
                    "Source": source,
                    "DetailType": detail_type,
                    "Detail": detail,
                }
            ]
        )
        if resp.get("FailedEntryCount", 0):
            entries = resp.get("Entries") or [{}]
            error_code = entries[0].get("ErrorCode", "?")
            error_message = entries[0].get("ErrorMessage", "")
            raise EventPublishError(
                f"PutEvents rejected {detail_type} on {self._event_bus_name}: "
                f"{error_code} {error_message}".rstrip()
            )
        logger.debug("eventbridge: %s sent to %s", detail_type, self._event_bus_name)
