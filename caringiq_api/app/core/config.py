"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration, which is what the landing
page deployment relies on.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "CaringIQ Landing API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Turns on DEBUG records from the caringiq_api loggers.  Error
    # responses keep the JSON envelope either way.
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is attached.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the form endpoints are mounted.  The landing
    # page front end posts to ``/api/waitlist`` and ``/api/contact``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
