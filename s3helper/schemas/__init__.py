"""Policy schemas."""

from s3helper.schemas.policy import (
    MAX_UPLOAD_BYTES,
    SUCCESS_ACTION_STATUS,
    PolicyCredentials,
    UploadPolicy,
)

__all__ = [
    "MAX_UPLOAD_BYTES",
    "SUCCESS_ACTION_STATUS",
    "PolicyCredentials",
    "UploadPolicy",
]
