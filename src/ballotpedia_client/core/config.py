"""Client configuration via Pydantic Settings.

Values are loaded from environment variables (or a ``.env`` file) and are
only consulted by callers that opt in, such as the CLI.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Ballotpedia API
    ballotpedia_api_key: str | None = Field(
        default=None,
        description="Ballotpedia API key sent as the x-api-key header",
    )
    ballotpedia_timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds",
        gt=0,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )


def get_settings() -> Settings:
    """Create and return client settings."""
    return Settings()
