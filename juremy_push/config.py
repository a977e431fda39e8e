"""Configuration management for the Juremy push client."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_preferences_path() -> str:
    return str(Path.home() / ".config" / "juremy-push" / "preferences.json")


@dataclass
class Config:
    """Application configuration."""

    # API settings
    app_token: str = field(default_factory=lambda: os.getenv("JUREMY_APP_TOKEN", ""))
    base_url: str = field(
        default_factory=lambda: os.getenv("JUREMY_BASE_URL", "https://juremy.com")
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("JUREMY_TIMEOUT", "10"))
    )

    # Local state
    preferences_path: str = field(
        default_factory=lambda: os.getenv("JUREMY_PREFERENCES_PATH", _default_preferences_path())
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("JUREMY_LOG_LEVEL", "WARNING").upper()
    )

    # Lookup limits
    max_text_length: int = 5000
    max_backoff: int = 6
    backoff_base_ms: int = 100

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.base_url.startswith(("http://", "https://")):
            errors.append(f"JUREMY_BASE_URL must be an http(s) URL, got '{self.base_url}'")
        if self.timeout <= 0:
            errors.append("JUREMY_TIMEOUT must be positive")
        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"JUREMY_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'"
            )
        return errors


# Global config instance
config = Config()
