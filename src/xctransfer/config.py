"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Export settings loaded from environment variables.

    Every field can be set with an ``XCTRANSFER_`` prefixed variable,
    e.g. ``XCTRANSFER_LOG_LEVEL=DEBUG``. Command-line flags win.
    """

    model_config = SettingsConfigDict(
        env_prefix="XCTRANSFER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output files are named <file_prefix>-<N>.kml
    file_prefix: str = "xctransfer"

    # Logging
    log_level: str = "INFO"

    # Echo SQL statements
    debug: bool = False


settings = Settings()
