"""Browser upload policy models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
SUCCESS_ACTION_STATUS = "201"


class UploadPolicy(BaseModel):
    """POST policy document, serialized in field order."""

    expiration: str
    conditions: list[Any] = Field(default_factory=list)

    def to_json(self) -> str:
        """Compact JSON, no whitespace between tokens."""
        return self.model_dump_json()


class PolicyCredentials(BaseModel):
    """Signed policy handed to a browser for a direct form upload."""

    model_config = ConfigDict(frozen=True)

    policy: str
    signature: str
    access_key_id: Optional[str] = None

    def to_form_fields(self) -> dict[str, Optional[str]]:
        """Field names expected by existing browser upload forms."""
        return {
            "s3Policy": self.policy,
            "s3Signature": self.signature,
            "AWSAccessKeyId": self.access_key_id,
        }
