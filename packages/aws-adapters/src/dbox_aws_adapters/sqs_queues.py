"""SQS implementation of QueueReceiver."""

import boto3
from dbox_shared import receive_count_from_attributes
from dbox_shared.interfaces import QueueMessage


class SQSQueueReceiver:
    """QueueReceiver implementation using SQS."""

    def __init__(
        self,
        queue_url: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        wait_time_seconds: int = 0,
    ) -> None:
        self._queue_url = queue_url
        self._wait_time_seconds = wait_time_seconds
        self._client = boto3.client(
            "sqs",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

    def receive(self, max_messages: int = 1) -> list[QueueMessage]:
        """Receive up to max_messages with their receive counts. Returns empty list if none available."""
        resp = self._client.receive_message(
            QueueUrl=self._queue_url,
            MaxNumberOfMessages=min(max_messages, 10),
            WaitTimeSeconds=self._wait_time_seconds,
            AttributeNames=["ApproximateReceiveCount"],
        )
        messages = resp.get("Messages") or []
        result = []
        for msg in messages:
            result.append(
                QueueMessage(
                    receipt_handle=msg["ReceiptHandle"],
                    body=msg["Body"],
                    receive_count=receive_count_from_attributes(msg.get("Attributes")),
                )
            )
        return result

    def delete(self, receipt_handle: str) -> None:
        """Delete a message by its receipt handle after processing."""
        self._client.delete_message(
            QueueUrl=self._queue_url,
            ReceiptHandle=receipt_handle,
        )
