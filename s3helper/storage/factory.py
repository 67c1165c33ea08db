"""Factory for building storage instances from configuration."""

from __future__ import annotations

from urllib.parse import urlparse

from minio import Minio

from s3helper.core.config import Settings
from s3helper.storage.minio_impl import MinioStorage


def _normalize_endpoint(endpoint: str) -> tuple[str, bool]:
    """Extract host:port from endpoint URL and determine if secure (https).

    A bare ``host:port`` without scheme is treated as secure.

    Returns:
        Tuple of (host:port, secure_flag)
    """
    parsed = urlparse(endpoint)
    if not parsed.netloc:
        return endpoint.rstrip("/"), True
    return parsed.netloc, parsed.scheme == "https"


def build_storage(settings: Settings) -> MinioStorage:
    """Build MinioStorage from settings.

    Settings used:
        S3_ENDPOINT: Full URL to the S3/MinIO endpoint (e.g., http://localhost:9000)
        S3_REGION: Region, or None to let the SDK discover it
        AWS_ACCESS_KEY_ID: Access key for authentication
        AWS_SECRET_ACCESS_KEY: Secret key for authentication
    """
    host, secure = _normalize_endpoint(settings.S3_ENDPOINT)
    client = Minio(
        host,
        access_key=settings.AWS_ACCESS_KEY_ID,
        secret_key=settings.AWS_SECRET_ACCESS_KEY,
        region=settings.S3_REGION,
        secure=secure,
    )
    return MinioStorage(client)


__all__ = ["build_storage"]
