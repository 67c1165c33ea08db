"""Async facade over an object storage backend.

Each operation is one backend request with the bucket resolved from the
call, then the service default. Blocking SDK calls run in a worker thread
so several operations can be awaited concurrently. Nothing is retried.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping

from s3helper.core.config import Settings
from s3helper.schemas.policy import PolicyCredentials
from s3helper.services.policy import build_policy, get_expiry_time, sign_policy
from s3helper.storage.contracts import (
    DeleteResult,
    InvalidArgumentError,
    PresigningStorage,
    StorageError,
    UploadResult,
)

logger = logging.getLogger(__name__)

DEFAULT_ACL = "private"
DEFAULT_URL_EXPIRATION_MINUTES = 20


class S3Service:
    """Bucket-defaulting wrapper around upload, download, delete and signing."""

    def __init__(
        self,
        storage: PresigningStorage,
        settings: Settings | None = None,
        *,
        bucket: str | None = None,
    ) -> None:
        """
        Args:
            storage: Backend with object and presigning operations.
            settings: Credentials and defaults. Read from the environment if omitted.
            bucket: Default bucket, takes precedence over ``settings.AWS_BUCKET``.
        """
        self._storage = storage
        self._settings = settings or Settings()
        self._bucket = bucket or self._settings.AWS_BUCKET or None

    @property
    def bucket(self) -> str | None:
        """Default bucket for calls that do not name one."""
        return self._bucket

    def _resolve_bucket(self, bucket: str | None) -> str:
        resolved = bucket or self._bucket
        if not resolved:
            raise InvalidArgumentError("no bucket given and no default bucket configured")
        return resolved

    def get_expiry_time(self) -> str:
        """Expiration timestamp for upload policies."""
        return get_expiry_time(legacy=self._settings.S3_POLICY_LEGACY_EXPIRY)

    async def create_policy(
        self,
        content_type: str | None = None,
        acl: str | None = None,
        bucket: str | None = None,
    ) -> PolicyCredentials:
        """Sign a policy allowing a browser to POST one file to the bucket.

        Args:
            content_type: Required Content-Type prefix. Empty allows any.
            acl: ACL the browser must send, ``private`` or ``public-read``.
            bucket: Target bucket, defaults to the service bucket.

        Raises:
            PolicySigningError: AWS_SECRET_ACCESS_KEY is not configured.
        """
        policy = build_policy(
            self._resolve_bucket(bucket),
            expiration=self.get_expiry_time(),
            content_type=content_type or "",
            acl=acl or DEFAULT_ACL,
        )
        return sign_policy(
            policy,
            secret_key=self._settings.AWS_SECRET_ACCESS_KEY,
            access_key_id=self._settings.AWS_ACCESS_KEY_ID,
        )

    async def delete_object(self, key: str | None, bucket: str | None = None) -> DeleteResult:
        """Delete one object with a batch delete request.

        Raises:
            InvalidArgumentError: ``key`` is empty. The backend is not called.
            StorageError: The backend request failed.
        """
        if not key:
            raise InvalidArgumentError("Error, no key")
        target = self._resolve_bucket(bucket)

        try:
            result = await asyncio.to_thread(self._storage.delete_objects, target, [key])
        except StorageError as exc:
            logger.error("Delete failed for %s/%s: %s", target, key, exc)
            raise

        logger.info("Deleted %s/%s", target, key)
        return result

    async def upload(
        self,
        body: bytes,
        key: str,
        bucket: str | None = None,
        acl: str | None = None,
    ) -> UploadResult:
        """Upload ``body`` to ``key`` in a single request."""
        target = self._resolve_bucket(bucket)
        result = await asyncio.to_thread(
            self._storage.put_bytes, target, key, body, acl=acl or DEFAULT_ACL
        )
        logger.info("Uploaded %d bytes to %s/%s", len(body), target, key)
        return result

    async def get_signed_url(
        self,
        key: str,
        expiration: int | None = None,
        bucket: str | None = None,
    ) -> str:
        """Time-limited GET URL for ``key``.

        Args:
            key: Object key, e.g. ``deliverables/myfile.docx``. Not validated.
            expiration: Lifetime in minutes, 20 when omitted.
            bucket: Bucket, defaults to the service bucket.
        """
        target = self._resolve_bucket(bucket)
        ttl_seconds = (expiration or DEFAULT_URL_EXPIRATION_MINUTES) * 60
        url = await asyncio.to_thread(self._storage.presign_get, target, key, ttl_seconds)
        logger.debug("Signed GET url for %s/%s valid %ds", target, key, ttl_seconds)
        return url

    async def download(
        self, key: str, bucket: str | None = None
    ) -> tuple[bytes, Mapping[str, str]]:
        """Fetch an object's bytes and response headers.

        Raises:
            StorageError: The object could not be fetched.
        """
        target = self._resolve_bucket(bucket)
        return await asyncio.to_thread(self._storage.get_bytes, target, key)


__all__ = ["S3Service", "DEFAULT_ACL", "DEFAULT_URL_EXPIRATION_MINUTES"]
