"""Browser upload policy construction and signing.

Pure functions: no network I/O, only configuration and clock input.
Signatures follow the S3 POST form scheme, HMAC-SHA1 over the base64
encoded policy document.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from datetime import datetime, timedelta, timezone

from s3helper.schemas.policy import (
    MAX_UPLOAD_BYTES,
    SUCCESS_ACTION_STATUS,
    PolicyCredentials,
    UploadPolicy,
)

logger = logging.getLogger(__name__)


class PolicySigningError(Exception):
    """Policy cannot be signed, e.g. no secret key configured."""

    pass


def get_expiry_time(now: datetime | None = None, *, legacy: bool = False) -> str:
    """Return the policy expiration: tomorrow, three hours past the current hour.

    Args:
        now: Clock reading to start from. Defaults to the current UTC time
            (local time when ``legacy`` is set).
        legacy: Reproduce the old unpadded output, built by adding 1 to the
            day and 3 to the hour without calendar rollover, so that
            "2024-1-31T23:..." becomes "2024-1-32T26:00:00.000Z".

    Returns:
        Timestamp string ending in ``:00:00.000Z``.
    """
    if legacy:
        now = now or datetime.now()
        return f"{now.year}-{now.month}-{now.day + 1}T{now.hour + 3}:00:00.000Z"

    now = now or datetime.now(timezone.utc)
    expires = now.replace(minute=0, second=0, microsecond=0) + timedelta(days=1, hours=3)
    return f"{expires:%Y-%m-%dT%H}:00:00.000Z"


def build_policy(
    bucket: str,
    *,
    expiration: str,
    content_type: str = "",
    acl: str = "private",
) -> UploadPolicy:
    """Build the POST policy document for one bucket."""
    return UploadPolicy(
        expiration=expiration,
        conditions=[
            ["starts-with", "$key", ""],
            {"bucket": bucket},
            {"acl": acl},
            {"success_action_status": SUCCESS_ACTION_STATUS},
            ["starts-with", "$Content-Type", content_type],
            ["starts-with", "$filename", ""],
            ["content-length-range", 0, MAX_UPLOAD_BYTES],
        ],
    )


def sign_policy(
    policy: UploadPolicy,
    *,
    secret_key: str | None,
    access_key_id: str | None,
) -> PolicyCredentials:
    """Base64-encode the policy and sign it.

    Raises:
        PolicySigningError: No secret key to sign with.
    """
    if not secret_key:
        raise PolicySigningError("cannot sign upload policy: AWS_SECRET_ACCESS_KEY is not set")

    encoded = base64.b64encode(policy.to_json().encode("utf-8")).decode("ascii")
    digest = hmac.new(secret_key.encode("utf-8"), encoded.encode("utf-8"), hashlib.sha1).digest()
    signature = base64.b64encode(digest).decode("ascii")

    logger.debug("Signed upload policy expiring at %s", policy.expiration)
    return PolicyCredentials(policy=encoded, signature=signature, access_key_id=access_key_id)


__all__ = [
    "PolicySigningError",
    "get_expiry_time",
    "build_policy",
    "sign_policy",
]
