"""Storage package: object storage abstraction."""

from s3helper.storage.contracts import (
    DeleteFailure,
    DeleteResult,
    InvalidArgumentError,
    ObjectStorage,
    Presigner,
    PresigningStorage,
    StorageError,
    UploadResult,
)
from s3helper.storage.minio_impl import MinioStorage

__all__ = [
    "DeleteFailure",
    "DeleteResult",
    "InvalidArgumentError",
    "ObjectStorage",
    "Presigner",
    "PresigningStorage",
    "StorageError",
    "UploadResult",
    "MinioStorage",
]
