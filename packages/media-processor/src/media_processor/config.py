"""
Processor config from environment with defaults.
Uses pydantic-settings so all env vars are validated and documented in one model.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProcessorSettings(BaseSettings):
    """
    Environment variables shared by every processor kind.
    Env vars are read from os.environ (UPPER_SNAKE_CASE by default).
    Values are fixed at deploy time per processor instance.
    """

    model_config = SettingsConfigDict(extra="ignore")

    # Must match the queue's redrive policy maxReceiveCount
    sqs_queue_max_receive_count: int = Field(..., ge=1)

    # Bucket holding source objects and previews
    bucket_name: str

    event_bus_name: str

    # One tag per processor kind, e.g. dbox.csv-processor
    event_source: str

    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> str:
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
        return "INFO"


def get_settings() -> ProcessorSettings:
    """Return validated settings from current environment."""
    return ProcessorSettings()
