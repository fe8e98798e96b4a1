"""S3 implementation of ObjectStorage."""

import boto3


class S3ObjectStorage:
    """ObjectStorage implementation using S3."""

    def __init__(
        self,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._client = boto3.client(
            "s3",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

    def upload(
        self,
        bucket: str,
        key: str,
        body: bytes,
        *,
        content_type: str | None = None,
        cache_control: str | None = None,
        content_disposition: str | None = None,
    ) -> None:
        """Upload bytes to the given bucket and key; optional HTTP headers are stored with the object."""
        params: dict = {"Bucket": bucket, "Key": key, "Body": body}
        if content_type is not None:
            params["ContentType"] = content_type
        if cache_control is not None:
            params["CacheControl"] = cache_control
        if content_disposition is not None:
            params["ContentDisposition"] = content_disposition
        self._client.put_object(**params)

    def download(self, bucket: str, key: str) -> bytes:
        """Download object from bucket/key and return its body as bytes."""
        resp = self._client.get_object(Bucket=bucket, Key=key)
        return resp["Body"].read()
