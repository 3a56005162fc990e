# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to the wiki endpoint, export options and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="WIKIRIGHTS_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Wiki API Configuration
    api_url: str = Field(
        default="https://www.kolzchut.org.il/w/he/api.php", description="MediaWiki api.php endpoint to export from"
    )
    user_agent: str = Field(
        default="wikirights-export/1.0 (https://github.com/kolzchut/wikirights-export)",
        description="User-Agent header sent with every API request",
    )
    language: str = Field(default="he", description="Only pages in this content language are exported")

    # Paging Configuration
    batch_size: int = Field(default=50, ge=1, le=500, description="Number of pages requested per listing query")
    start_from: str | None = Field(default=None, description="Resume the page walk from this title")
    max_pages: int | None = Field(default=None, ge=1, description="Stop after this many listed pages")

    # Export Configuration
    include_html: bool = Field(default=False, description="Also write the cleaned HTML body to the export")
    output_dir: Path = Field(default=Path("."), description="Directory for the timestamped CSV export")
    on_fetch_error: Literal["abort", "skip"] = Field(
        default="abort", description="Abort the run on the first page fetch failure, or log it and continue"
    )

    # Transport Configuration
    verify_tls: bool = Field(
        default=True, description="Verify TLS certificates. Disabling is dangerous and meant for local dev only"
    )
    request_timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    request_attempts: int = Field(
        default=1, ge=1, le=10, description="Attempts per request on transport errors (1 disables retries)"
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
