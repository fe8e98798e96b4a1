"""Pydantic models for conversion jobs, delivery metadata, and status events."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .redelivery import is_final_attempt


class ProcStatus(str, Enum):
    """Terminal status of a logical conversion job."""

    COMPLETE = "COMPLETE"
    ERROR = "ERROR"


class JobDescriptor(BaseModel):
    """
    Conversion request parsed from a queue message body.

    Wire format uses camelCase keys (inodeId, inodeS3Key, ...). Processors that
    need extra fields (e.g. codeLang) subclass this model. Instances are frozen.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    inode_id: str = Field(..., alias="inodeId", description="Opaque id of the file node")
    inode_s3_key: str = Field(
        ..., alias="inodeS3Key", min_length=1, description="Storage key of the source object"
    )
    input_file_name: str = Field(
        ..., alias="inputFileName", description="Original display name, used for output naming"
    )
    to_mime_type: str = Field(..., alias="toMimeType", description="Requested output MIME type")
    app_url: str = Field(
        ..., alias="appUrl", description="Base URL of the consuming application"
    )


class DeliveryMetadata(BaseModel):
    """Redelivery counters for one delivery of a queue message."""

    model_config = ConfigDict(frozen=True)

    receive_count: int = Field(..., ge=1)
    max_receive_count: int = Field(..., ge=1)

    @property
    def is_final_attempt(self) -> bool:
        return is_final_attempt(self.receive_count, self.max_receive_count)


class ResultDetail(BaseModel):
    """
    Status event payload (EventBridge Detail).

    Built from the job identifiers first, then closed with exactly one of
    complete() or error(). A detail never carries both previewFileName and errorMsg.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    inode_id: str | None = Field(None, alias="inodeId")
    inode_s3_key: str | None = Field(None, alias="inodeS3Key")
    app_url: str | None = Field(None, alias="appUrl")
    status: ProcStatus | None = None
    preview_file_name: str | None = Field(None, alias="previewFileName")
    error_msg: str | None = Field(None, alias="errorMsg")

    @model_validator(mode="after")
    def _one_outcome(self) -> "ResultDetail":
        if self.preview_file_name is not None and self.error_msg is not None:
            raise ValueError("previewFileName and errorMsg are mutually exclusive")
        if self.status == ProcStatus.COMPLETE and self.preview_file_name is None:
            raise ValueError("COMPLETE detail requires previewFileName")
        if self.status == ProcStatus.ERROR and self.error_msg is None:
            raise ValueError("ERROR detail requires errorMsg")
        return self

    @classmethod
    def for_job(cls, job: JobDescriptor) -> "ResultDetail":
        return cls(
            inode_id=job.inode_id,
            inode_s3_key=job.inode_s3_key,
            app_url=job.app_url,
        )

    @classmethod
    def from_raw(cls, data: dict[str, Any]) -> "ResultDetail":
        """Best-effort detail from an unvalidated body; non-string ids are dropped."""

        def _str(key: str) -> str | None:
            val = data.get(key)
            return val if isinstance(val, str) else None

        return cls(
            inode_id=_str("inodeId"),
            inode_s3_key=_str("inodeS3Key"),
            app_url=_str("appUrl"),
        )

    def complete(self, preview_file_name: str) -> "ResultDetail":
        return self.model_copy(
            update={
                "status": ProcStatus.COMPLETE,
                "preview_file_name": preview_file_name,
                "error_msg": None,
            }
        )

    def error(self, error_msg: str) -> "ResultDetail":
        return self.model_copy(
            update={
                "status": ProcStatus.ERROR,
                "error_msg": error_msg,
                "preview_file_name": None,
            }
        )


class TransformResult(BaseModel):
    """Output of a transformation engine."""

    body: bytes
    content_type: str
