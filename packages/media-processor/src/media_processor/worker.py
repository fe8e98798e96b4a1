"""
Job worker: one delivery of a conversion request, start to finish.

decode -> resolve extension -> fetch source -> transform -> publish -> report

Every failure either produces a status event, is re-raised for queue
redelivery, or both (transient failure on the final delivery). Permanent
failures are reported and the delivery completes normally, so the message is
consumed instead of being retried.
"""

import logging

from dbox_shared import (
    DeliveryMetadata,
    ObjectStorage,
    ProcessorError,
    ResultDetail,
    StorageReadError,
    build_display_file_name,
    build_preview_file_name,
    build_preview_key,
    is_permanent_error,
)

from .codec import decode, salvage_detail
from .engine import TransformationEngine, resolve_output_extension
from .publisher import ResultPublisher
from .reporter import StatusReporter

logger = logging.getLogger(__name__)


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, ProcessorError):
        return exc.message
    return str(exc) or type(exc).__name__


class JobWorker:
    """Generic worker core; the engine supplies the per-kind conversion."""

    def __init__(
        self,
        engine: TransformationEngine,
        storage: ObjectStorage,
        publisher: ResultPublisher,
        reporter: StatusReporter,
        *,
        bucket: str,
        max_receive_count: int,
    ) -> None:
        self._engine = engine
        self._storage = storage
        self._publisher = publisher
        self._reporter = reporter
        self._bucket = bucket
        self._max_receive_count = max_receive_count

    @property
    def engine(self) -> TransformationEngine:
        return self._engine

    def _fetch_source(self, key: str) -> bytes:
        try:
            return self._storage.download(self._bucket, key)
        except Exception as e:
            raise StorageReadError(f"Failed to read s3://{self._bucket}/{key}: {e}") from e

    def process(self, body: str | bytes, receive_count: int = 1) -> ResultDetail:
        """
        Process one delivery.

        Returns the ResultDetail that was built (reported or not).

        Raises:
            Exception: transient failure; the delivery must be retried (or dead-lettered
                on the final attempt, after the ERROR event was sent).
        """
        name = self._engine.name
        delivery = DeliveryMetadata(
            receive_count=receive_count,
            max_receive_count=self._max_receive_count,
        )

        try:
            job = decode(body, self._engine.descriptor_model)
        except ProcessorError as e:
            detail = salvage_detail(body).error(e.message)
            logger.warning(
                "%s: inode_id=%s malformed message: %s", name, detail.inode_id, e.message
            )
            self._reporter.report_outcome(detail, permanent=True)
            return detail

        base = ResultDetail.for_job(job)
        logger.info(
            "%s: inode_id=%s receive_count=%s/%s start (to=%s)",
            name,
            job.inode_id,
            delivery.receive_count,
            delivery.max_receive_count,
            job.to_mime_type,
        )

        try:
            ext = resolve_output_extension(self._engine, job.to_mime_type)
        except ProcessorError as e:
            detail = base.error(e.message)
            logger.warning("%s: inode_id=%s %s", name, job.inode_id, e.message)
            self._reporter.report_outcome(detail, permanent=True)
            return detail

        output_key = build_preview_key(job.inode_s3_key, ext)
        try:
            source = self._fetch_source(job.inode_s3_key)
            result = self._engine.transform(source, job)
            self._publisher.publish(
                result.body,
                output_key,
                job.to_mime_type,
                build_display_file_name(job.input_file_name, ext),
            )
        except Exception as e:
            detail = base.error(_error_message(e))
            if is_permanent_error(e):
                logger.warning(
                    "%s: inode_id=%s permanent failure: %s", name, job.inode_id, detail.error_msg
                )
                self._reporter.report_outcome(detail, permanent=True)
                return detail
            logger.exception(
                "%s: inode_id=%s receive_count=%s/%s failed: %s",
                name,
                job.inode_id,
                delivery.receive_count,
                delivery.max_receive_count,
                e,
            )
            self._reporter.report_outcome(detail, final_attempt=delivery.is_final_attempt)
            raise

        detail = base.complete(build_preview_file_name(ext))
        self._reporter.report_outcome(detail)
        logger.info(
            "%s: inode_id=%s complete -> s3://%s/%s",
            name,
            job.inode_id,
            self._bucket,
            output_key,
        )
        return detail
