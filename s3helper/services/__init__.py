"""Storage services."""

from s3helper.services.policy import (
    PolicySigningError,
    build_policy,
    get_expiry_time,
    sign_policy,
)
from s3helper.services.s3_service import S3Service

__all__ = [
    "PolicySigningError",
    "S3Service",
    "build_policy",
    "get_expiry_time",
    "sign_policy",
]
