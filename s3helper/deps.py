"""Shared process-wide service instance."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from s3helper.services.s3_service import S3Service

_service: "S3Service | None" = None


def get_s3_service() -> "S3Service":
    """Get or lazily initialize the service singleton.

    Lazy initialization avoids reading credentials at import time.
    """
    global _service
    if _service is None:
        from s3helper.core.config import settings
        from s3helper.services.s3_service import S3Service
        from s3helper.storage.factory import build_storage

        _service = S3Service(build_storage(settings), settings)
    return _service


def reset_s3_service() -> None:
    """Drop the cached service so the next call rebuilds it."""
    global _service
    _service = None


__all__ = ["get_s3_service", "reset_s3_service"]
