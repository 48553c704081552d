"""Configuration management for feedwriter."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Serialization and logging settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="FEEDWRITER_", extra="ignore"
    )

    # Output
    encoding: str = "utf-8"
    pretty_print: bool = False
    xml_declaration: bool = True

    # Channel defaults
    generator: str = Field(default="feedwriter")  # empty string disables <generator>

    # Logging
    log_level: str = Field(default="INFO")

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
