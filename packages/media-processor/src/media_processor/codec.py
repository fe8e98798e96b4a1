"""
Job envelope codec: queue message body -> JobDescriptor, ResultDetail -> event Detail.

The body is a JSON object with camelCase keys. Anything else is a
MalformedEnvelope, which is permanent: the same body fails the same way on
every redelivery.
"""

import json
from typing import Any, TypeVar

from dbox_shared import JobDescriptor, MalformedEnvelope, ResultDetail
from pydantic import ValidationError

JobT = TypeVar("JobT", bound=JobDescriptor)


def _load_object(raw_body: str | bytes) -> dict[str, Any]:
    if isinstance(raw_body, bytes):
        try:
            raw_body = raw_body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedEnvelope(f"Message body is not UTF-8: {e}") from e
    try:
        data = json.loads(raw_body)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedEnvelope(f"Message body is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedEnvelope("Message body must be a JSON object")
    return data


def _describe_validation_error(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "body"
        parts.append(f"{loc}: {item.get('msg', 'invalid')}")
    return "; ".join(parts)


def decode(raw_body: str | bytes, model: type[JobT] = JobDescriptor) -> JobT:
    """
    Parse a message body into the processor's descriptor model.

    Raises:
        MalformedEnvelope: body is not a JSON object or required fields are missing/invalid.
    """
    data = _load_object(raw_body)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MalformedEnvelope(f"Invalid job message: {_describe_validation_error(e)}") from e


def salvage_detail(raw_body: str | bytes) -> ResultDetail:
    """Detail with whatever identifiers a malformed body still carries (may be all None)."""
    try:
        data = _load_object(raw_body)
    except MalformedEnvelope:
        return ResultDetail()
    return ResultDetail.from_raw(data)


def encode_status(detail: ResultDetail) -> str:
    """
    Serialize a closed ResultDetail for the event bus (camelCase, None fields omitted).

    A detail without a status is a programming error, not a retryable failure.
    """
    if detail.status is None:
        raise ValueError("cannot encode a ResultDetail without status")
    return detail.model_dump_json(by_alias=True, exclude_none=True)
