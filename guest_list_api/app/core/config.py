"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all, listening on port
5000.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Guest List API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  When empty only console logging is used.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Value of the ``Access-Control-Allow-Origin`` header added to every
    # response.
    cors_allow_origin: str = os.getenv("CORS_ALLOW_ORIGIN", "*")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# therefore be set before this module is imported.
settings = Settings()
