"""
Status reporter and report-suppression policy.

Policy per delivery:
- COMPLETE: always reported.
- ERROR from a permanent failure: always reported (retrying cannot help).
- ERROR from a transient failure: reported only on the final delivery; earlier
  deliveries stay silent and let queue redelivery retry.
"""

import logging

from dbox_shared import ProcStatus, ResultDetail, StatusEventBus

from .codec import encode_status

logger = logging.getLogger(__name__)


def should_report(status: ProcStatus, *, permanent: bool, final_attempt: bool) -> bool:
    """Whether a terminal status event is due for this delivery."""
    if status == ProcStatus.COMPLETE:
        return True
    return permanent or final_attempt


class StatusReporter:
    """Publishes ResultDetail events for one processor kind."""

    def __init__(self, event_bus: StatusEventBus, source: str, detail_type: str) -> None:
        self._event_bus = event_bus
        self._source = source
        self._detail_type = detail_type

    @property
    def detail_type(self) -> str:
        return self._detail_type

    def report(self, detail: ResultDetail) -> None:
        """Publish detail unconditionally. Event bus failures propagate."""
        self._event_bus.put_event(self._source, self._detail_type, encode_status(detail))
        logger.info(
            "reporter: inode_id=%s %s %s sent",
            detail.inode_id,
            self._detail_type,
            detail.status.value if detail.status else "?",
        )

    def report_outcome(
        self,
        detail: ResultDetail,
        *,
        permanent: bool = False,
        final_attempt: bool = False,
    ) -> bool:
        """Publish detail if the suppression policy allows it. Returns True if published."""
        if detail.status is None:
            raise ValueError("cannot report a ResultDetail without status")
        if not should_report(detail.status, permanent=permanent, final_attempt=final_attempt):
            logger.info(
                "reporter: inode_id=%s %s suppressed until final delivery",
                detail.inode_id,
                detail.status.value,
            )
            return False
        self.report(detail)
        return True
