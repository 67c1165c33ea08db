"""Storage interfaces, result types and error types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence, runtime_checkable


class StorageError(Exception):
    """Wraps underlying storage exceptions with operation context."""

    def __init__(self, op: str, bucket: str | None, key: str | None, message: str):
        self.op = op
        self.bucket = bucket
        self.key = key
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        bucket_repr = self.bucket or "<unknown>"
        key_repr = self.key or "<unknown>"
        return f"{self.op} failed for bucket={bucket_repr} key={key_repr}: {self.message}"


class InvalidArgumentError(ValueError):
    """A required argument was missing; nothing was sent to the backend."""

    pass


@dataclass(frozen=True, slots=True)
class UploadResult:
    """Outcome of a single-request object upload."""

    bucket: str
    key: str
    etag: str | None
    version_id: str | None
    acl: str


@dataclass(frozen=True, slots=True)
class DeleteFailure:
    """One key the backend refused to delete."""

    key: str
    code: str
    message: str


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """Outcome of a batch delete request."""

    deleted: tuple[str, ...]
    errors: tuple[DeleteFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


@runtime_checkable
class ObjectStorage(Protocol):
    """Contract for object storage implementations."""

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        acl: str = "private",
        content_type: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> UploadResult:
        ...

    def get_bytes(self, bucket: str, key: str) -> tuple[bytes, Mapping[str, str]]:
        ...

    def delete_objects(self, bucket: str, keys: Sequence[str]) -> DeleteResult:
        ...


@runtime_checkable
class Presigner(Protocol):
    """Presigner interface for generating temporary URLs."""

    def presign_get(self, bucket: str, key: str, ttl_seconds: int = 900) -> str:
        ...


@runtime_checkable
class PresigningStorage(ObjectStorage, Presigner, Protocol):
    """Object storage that can also hand out temporary URLs."""

    pass


__all__ = [
    "StorageError",
    "InvalidArgumentError",
    "UploadResult",
    "DeleteFailure",
    "DeleteResult",
    "ObjectStorage",
    "Presigner",
    "PresigningStorage",
]
