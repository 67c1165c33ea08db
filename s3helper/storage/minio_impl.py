"""MinIO-backed implementation of the storage interfaces."""

from __future__ import annotations

import io
from datetime import timedelta
from typing import Mapping, Sequence

from minio import Minio
from minio.deleteobjects import DeleteObject
from minio.error import S3Error

from s3helper.storage.contracts import (
    DeleteFailure,
    DeleteResult,
    ObjectStorage,
    Presigner,
    StorageError,
    UploadResult,
)

ACL_HEADER = "x-amz-acl"


def _wrap_error(op: str, bucket: str | None, key: str | None, exc: Exception) -> StorageError:
    return StorageError(op=op, bucket=bucket, key=key, message=str(exc))


class MinioStorage(ObjectStorage, Presigner):
    """Object storage abstraction backed by MinIO SDK."""

    def __init__(self, client: Minio):
        self._client = client

    # --------------------
    # ObjectStorage methods
    # --------------------
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
        # x-amz-* keys are sent as plain headers, everything else as x-amz-meta-*
        headers = dict(metadata) if metadata else {}
        headers[ACL_HEADER] = acl
        try:
            # MinIO requires a file-like object with read() method
            result = self._client.put_object(
                bucket_name=bucket,
                object_name=key,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type or "application/octet-stream",
                metadata=headers,
            )
        except S3Error as exc:
            raise _wrap_error("put", bucket, key, exc) from exc
        except Exception as exc:
            raise _wrap_error("put", bucket, key, exc) from exc

        return UploadResult(
            bucket=result.bucket_name,
            key=result.object_name,
            etag=result.etag,
            version_id=result.version_id,
            acl=acl,
        )

    def get_bytes(self, bucket: str, key: str) -> tuple[bytes, Mapping[str, str]]:
        try:
            obj = self._client.get_object(bucket, key)
            try:
                data = obj.read()
                headers = obj.headers or {}
            finally:
                obj.close()
                obj.release_conn()
            return data, headers
        except S3Error as exc:
            raise _wrap_error("get", bucket, key, exc) from exc
        except Exception as exc:
            raise _wrap_error("get", bucket, key, exc) from exc

    def delete_objects(self, bucket: str, keys: Sequence[str]) -> DeleteResult:
        key_repr = keys[0] if len(keys) == 1 else None
        try:
            # remove_objects is lazy: the request is only sent while iterating
            errors = tuple(
                DeleteFailure(key=err.name, code=err.code, message=err.message)
                for err in self._client.remove_objects(
                    bucket, [DeleteObject(key) for key in keys]
                )
            )
        except S3Error as exc:
            raise _wrap_error("delete", bucket, key_repr, exc) from exc
        except Exception as exc:
            raise _wrap_error("delete", bucket, key_repr, exc) from exc

        failed = {err.key for err in errors}
        return DeleteResult(
            deleted=tuple(key for key in keys if key not in failed),
            errors=errors,
        )

    # -------------
    # Presigner API
    # -------------
    def presign_get(self, bucket: str, key: str, ttl_seconds: int = 900) -> str:
        try:
            return self._client.get_presigned_url(
                method="GET",
                bucket_name=bucket,
                object_name=key,
                expires=timedelta(seconds=ttl_seconds),
            )
        except S3Error as exc:
            raise _wrap_error("presign_get", bucket, key, exc) from exc
        except Exception as exc:
            raise _wrap_error("presign_get", bucket, key, exc) from exc


__all__ = ["MinioStorage"]
