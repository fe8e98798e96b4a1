"""
Exception types and error classification for media processors.

Provides:
- ErrorCategory enum for report/retry decisions
- Typed exception hierarchy for job failures

PERMANENT failures recur on every identical attempt (bad input, unsupported
target format); they are reported immediately and never retried. TRANSIENT
failures may not recur; they are left to queue redelivery and reported only
once redelivery is exhausted. Exceptions outside this hierarchy are TRANSIENT.
"""

from enum import Enum


class ErrorCategory(Enum):
    """Classification of failures for report/retry decisions."""

    TRANSIENT = "transient"
    PERMANENT = "permanent"


class ProcessorError(Exception):
    """
    Base exception for all processor errors.

    Attributes:
        message: Human-readable error description (becomes errorMsg in ERROR events)
        category: Error classification
    """

    category: ErrorCategory = ErrorCategory.TRANSIENT

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def is_permanent(self) -> bool:
        return self.category == ErrorCategory.PERMANENT


def is_permanent_error(exc: BaseException) -> bool:
    """True if exc is a ProcessorError classified PERMANENT."""
    return isinstance(exc, ProcessorError) and exc.is_permanent


# =============================================================================
# Envelope / request errors (permanent)
# =============================================================================


class PermanentJobError(ProcessorError):
    """Input-determined failure; retrying the same message cannot succeed."""

    category = ErrorCategory.PERMANENT


class MalformedEnvelope(PermanentJobError):
    """Message body is not well-formed or lacks required fields."""


class UnsupportedMimeType(PermanentJobError):
    """Requested toMimeType has no output extension for this processor."""

    def __init__(self, mime_type: str) -> None:
        self.mime_type = mime_type
        super().__init__(f"Unsupported toMimeType value: {mime_type}")


# =============================================================================
# Transformation errors (engines declare the category per failure)
# =============================================================================


class TransformError(ProcessorError):
    """Base class for engine failures."""


class EmptyInput(TransformError):
    """Source produced no content to render."""

    category = ErrorCategory.PERMANENT


class InvalidInput(TransformError):
    """Source content cannot be parsed by the engine."""

    category = ErrorCategory.PERMANENT


class UnknownLanguage(TransformError):
    """No grammar is registered under the requested language name."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Unknown codeLang value: {language}")


# =============================================================================
# Environment errors (transient)
# =============================================================================


class StorageReadError(ProcessorError):
    """Source object could not be fetched."""


class StorageWriteError(ProcessorError):
    """Preview object could not be written."""


class EventPublishError(ProcessorError):
    """Event bus rejected a status event."""
