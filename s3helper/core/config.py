"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Storage settings loaded from environment variables."""

    # Bucket used when a call does not name one
    AWS_BUCKET: str | None = None

    # Credentials, also used to sign browser upload policies
    AWS_ACCESS_KEY_ID: str | None = None
    AWS_SECRET_ACCESS_KEY: str | None = None

    # Endpoint
    S3_ENDPOINT: str = "https://s3.amazonaws.com"
    S3_REGION: str | None = None

    # Emit policy expirations in the old unpadded "2024-3-7T14:00:00.000Z" shape
    S3_POLICY_LEGACY_EXPIRY: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore", frozen=True
    )


# Global settings instance
settings = Settings()
