"""Application configuration using pydantic-settings."""
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VIES_MODES = ("soap", "off")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = "local"
    app_name: str = "vatcheck-api"
    allowed_origins: str = "*"
    log_level: str = "INFO"

    # VIES (EU VAT Information Exchange System)
    vies_mode: str = Field("soap", validation_alias="VIES_MODE")  # soap | off
    vies_service_url: str = Field(
        "https://ec.europa.eu/taxation_customs/vies/services/checkVatService",
        validation_alias="VIES_SERVICE_URL",
    )
    vies_timeout_seconds: int = Field(10, validation_alias="VIES_TIMEOUT_SECONDS")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case and check against the stdlib level names."""
        level = (v or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return level

    @field_validator("vies_mode")
    @classmethod
    def normalize_vies_mode(cls, v: str) -> str:
        mode = (v or "soap").strip().lower()
        if mode not in VIES_MODES:
            raise ValueError(f"VIES_MODE must be one of: {', '.join(VIES_MODES)}")
        return mode

    @property
    def allowed_origins_list(self) -> list[str]:
        """Get allowed origins as a list."""
        if self.allowed_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
