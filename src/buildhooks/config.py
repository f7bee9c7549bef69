"""Application configuration using Pydantic settings."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Trigger API
    trigger_api_url: str = Field(
        "https://app.bitrise.io",
        description="Base URL of the build trigger API",
    )
    trigger_api_timeout_seconds: float = Field(
        30.0,
        description="Timeout for a single trigger API call",
    )
    send_request_to_url: str | None = Field(
        None,
        description="Send trigger API calls to this URL instead (debugging)",
    )

    # GitHub
    github_webhook_secret: str | None = Field(
        None,
        description="Webhook secret; signatures are only verified when set",
    )

    # Server
    host: str = Field("0.0.0.0")
    port: int = Field(4000)
    log_level: str = Field("INFO")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
