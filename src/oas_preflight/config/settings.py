"""Preflight settings loaded from the environment (prefix ``OAS_PREFLIGHT_``)"""

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_RULESET = "preflight.spectral.yaml"


class Settings(BaseSettings):
    """Linter settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="OAS_PREFLIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upload limits of the downstream platform
    max_size_kb: float = 500.0

    # External rule engine (Spectral)
    ruleset_path: str | None = None  # None = packaged ruleset
    engine_command: list[str] = ["npx", "@stoplight/spectral-cli"]
    engine_timeout: float | None = None  # seconds, None waits forever

    # Reporting
    max_warnings_shown: int = 5
    log_level: str = "WARNING"

    def resolve_ruleset_path(self) -> Path:
        """Return the configured ruleset, falling back to the packaged one"""
        if self.ruleset_path:
            return Path(self.ruleset_path)
        return Path(str(resources.files("oas_preflight.rulesets").joinpath(DEFAULT_RULESET)))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
