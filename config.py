"""
ymldiff - Semantic YAML comparison
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="YMLDIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application Info
    APP_NAME: str = "ymldiff"
    APP_VERSION: str = "1.0.0"

    # Output defaults (CLI flags can only switch these on)
    DISABLE_COMMENTS: bool = False  # Hide comments collected from the documents
    NO_DOC_COMMENT: bool = False    # Plain "---" instead of "--- # YAML Document: i/N"
    NO_COLOR: bool = False

    # Indentation of nested YAML blocks in the report
    INDENT: int = 3

    # Logging goes to stderr
    LOG_LEVEL: str = "WARNING"


def load_settings() -> Settings:
    """Read settings from YMLDIFF_* environment variables and .env."""
    return Settings()
