"""
Redelivery tracking from queue delivery attributes.

The queue redelivers a failed message until its receive count reaches the
configured maximum, then routes it to the dead-letter queue. A processor only
needs to know whether the current delivery is that last chance.
"""

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

RECEIVE_COUNT_ATTRIBUTE = "ApproximateReceiveCount"


def is_final_attempt(receive_count: int, max_receive_count: int) -> bool:
    """True when this delivery is the last one before the message is dead-lettered."""
    return receive_count == max_receive_count


def receive_count_from_attributes(attributes: Mapping[str, Any] | None) -> int:
    """
    Parse ApproximateReceiveCount (string-encoded integer) from delivery attributes.

    A missing or unparseable attribute counts as the first delivery.
    """
    raw = (attributes or {}).get(RECEIVE_COUNT_ATTRIBUTE)
    if raw is None:
        return 1
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        logger.warning("redelivery: unparseable %s=%r, assuming 1", RECEIVE_COUNT_ATTRIBUTE, raw)
        return 1

