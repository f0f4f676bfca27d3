"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
application starts without any configuration at all.  Override them
via environment variables in a real deployment.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Calculation API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @classmethod
    def from_env(cls) -> "Settings":
        """Build a fresh ``Settings`` from the current environment.

        Dataclass defaults are evaluated once at import time, so this
        method re-reads every variable.  Use it when the environment
        changes after this module was imported (tests, launchers).
        """
        return cls(
            project_name=os.getenv("PROJECT_NAME", "Calculation API"),
            api_version=os.getenv("API_VERSION", "1.0.0"),
            debug=_env_bool("DEBUG"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", ""),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
