# stationwx/settings.py
"""
Application settings.

Read from the environment (and a local .env file) when Settings() is
constructed, so every run sees the current environment.
"""

import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from .ingestion.nws_observations import DEFAULT_USER_AGENT

# Load .env file
from dotenv import load_dotenv
load_dotenv()

OUTPUT_FORMATS = ("svg", "text", "json")

_FORMAT_EXTENSIONS = {"svg": "svg", "text": "txt", "json": "json"}


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


class SettingsError(ValueError):
    """Raised when an environment value cannot be used."""
    pass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_number(name: str, default: str, cast: Callable[[str], float]):
    raw = _env(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise SettingsError(f"{name} must be a number, got {raw!r}")


@dataclass
class Settings:
    """Application configuration."""

    # Station and runways
    station: str = field(default_factory=lambda: _env("STATION", "KGOK").upper())
    runways: str = field(default_factory=lambda: _env("RUNWAYS", "").strip())  # e.g. "160,340"

    # Output
    output_format: str = field(default_factory=lambda: _env("OUTPUT_FORMAT", "svg").lower())
    output_dir: str = field(default_factory=lambda: _env("OUTPUT_DIR", "."))
    output_file: Optional[str] = field(default_factory=lambda: os.getenv("OUTPUT_FILE"))
    local_timezone: str = field(default_factory=lambda: _env("LOCAL_TIMEZONE", "America/Chicago"))

    # NWS API
    nws_user_agent: str = field(default_factory=lambda: _env("NWS_USER_AGENT", DEFAULT_USER_AGENT))
    http_timeout_seconds: float = field(default_factory=lambda: _env_number("HTTP_TIMEOUT", "10", float))
    fetch_max_attempts: int = field(default_factory=lambda: _env_number("FETCH_MAX_ATTEMPTS", "1", int))

    # Logging
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_json: bool = field(default_factory=lambda: _env_bool("LOG_JSON", True))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    def output_path(self) -> str:
        """
        Where the banner is written.

        OUTPUT_FILE wins; otherwise `{station}.{ext}` in OUTPUT_DIR.
        "-" means stdout.
        """
        if self.output_file:
            return self.output_file
        extension = _FORMAT_EXTENSIONS.get(self.output_format, self.output_format)
        return os.path.join(self.output_dir, f"{self.station.lower()}.{extension}")
