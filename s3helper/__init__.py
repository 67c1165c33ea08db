"""Async convenience wrapper over S3-compatible object storage."""

from s3helper.services import S3Service

__all__ = ["S3Service"]
