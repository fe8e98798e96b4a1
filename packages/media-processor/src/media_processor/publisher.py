"""Result publisher: write a preview object with fixed caching and download headers."""

import logging
from urllib.parse import quote

from dbox_shared import ObjectStorage, StorageWriteError

logger = logging.getLogger(__name__)

# Preview keys are content-addressed by source key; a rewrite carries identical bytes
PREVIEW_CACHE_CONTROL = "public, max-age=31536000, immutable"

# RFC 5987 attr-char minus ALPHA / DIGIT / "-" / "." / "_" / "~" (always safe for quote)
_RFC5987_SAFE = "!#$&+^`|"


def build_content_disposition(display_file_name: str) -> str:
    """inline Content-Disposition with an RFC 5987 UTF-8 percent-encoded filename*."""
    encoded = quote(display_file_name, safe=_RFC5987_SAFE, encoding="utf-8")
    return f"inline; filename*=UTF-8''{encoded}"


class ResultPublisher:
    """Writes preview bytes to the media bucket."""

    def __init__(self, storage: ObjectStorage, bucket: str) -> None:
        self._storage = storage
        self._bucket = bucket

    def publish(
        self,
        body: bytes,
        output_key: str,
        content_type: str,
        display_file_name: str,
    ) -> None:
        """
        Write body at output_key, overwriting any previous preview.

        Raises:
            StorageWriteError: the storage backend failed (transient).
        """
        try:
            self._storage.upload(
                self._bucket,
                output_key,
                body,
                content_type=content_type,
                cache_control=PREVIEW_CACHE_CONTROL,
                content_disposition=build_content_disposition(display_file_name),
            )
        except Exception as e:
            raise StorageWriteError(
                f"Failed to write s3://{self._bucket}/{output_key}: {e}"
            ) from e
        logger.debug("publisher: wrote s3://%s/%s (%s bytes)", self._bucket, output_key, len(body))
