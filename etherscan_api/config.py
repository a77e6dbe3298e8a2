"""Client configuration and settings."""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from etherscan_api.constants import BASE_URL


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Read from ETHERSCANIO_API_TOKEN
    etherscanio_api_token: SecretStr | None = None

    etherscan_base_url: str = BASE_URL
    etherscan_timeout: float = Field(
        default=30.0, gt=0, description="Transport timeout in seconds"
    )
    etherscan_strict_status: bool = Field(
        default=False,
        description="Treat unrecognized envelope status codes as decode errors",
    )

    @field_validator("etherscanio_api_token")
    @classmethod
    def blank_token_is_missing(cls, v: SecretStr | None) -> SecretStr | None:
        """An empty or whitespace-only token counts as unset."""
        if v is None or not v.get_secret_value().strip():
            return None
        return v

    @field_validator("etherscan_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached client settings."""
    return Settings()
