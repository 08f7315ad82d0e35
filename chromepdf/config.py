"""
chromepdf Configuration Module

Browser launch and service settings loaded from environment variables
(prefix CHROMEPDF_) or a .env file, validated once at load time.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChromePDFSettings(BaseSettings):
    """
    Settings for launching Chromium and running the PDF service.

    All settings can be overridden via environment variables, e.g.
    CHROMEPDF_HEADLESS=false or CHROMEPDF_CDP_ENDPOINT=http://chrome:9222.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHROMEPDF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Browser ===
    headless: bool = Field(default=True, description="Run Chromium headless")
    executable_path: Optional[str] = Field(
        default=None,
        description="Custom Chromium/Chrome binary (defaults to Playwright's bundled build)"
    )
    launch_args: str = Field(
        default="--disable-dev-shm-usage",
        description="Comma-separated extra Chromium command-line switches"
    )
    cdp_endpoint: Optional[str] = Field(
        default=None,
        description="Attach to a running browser over the remote-debugging protocol instead of launching one"
    )

    # === Logging ===
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")
    log_format: str = Field(default="simple", description="simple or json")

    # === Service ===
    max_concurrent_renders: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Maximum concurrent PDF renders in the HTTP service (1-20)"
    )
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8001, ge=1, le=65535)

    @field_validator("cdp_endpoint")
    @classmethod
    def validate_cdp_endpoint(cls, v: Optional[str]) -> Optional[str]:
        """Remote-debugging endpoints are http(s) or ws(s) URLs."""
        if not v:
            return None
        if not v.startswith(("http://", "https://", "ws://", "wss://")):
            raise ValueError(f"Invalid CDP endpoint: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(allowed))}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in {"simple", "json"}:
            raise ValueError("log_format must be 'simple' or 'json'")
        return v_lower

    @property
    def launch_args_list(self) -> List[str]:
        """Parse launch args into a list."""
        if not self.launch_args:
            return []
        return [arg.strip() for arg in self.launch_args.split(",") if arg.strip()]


@lru_cache()
def get_settings() -> ChromePDFSettings:
    """
    Get cached settings instance.

    Settings are loaded once; call get_settings.cache_clear() to reload.
    """
    return ChromePDFSettings()
