"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all.  Only the bind
address and the cross‑origin policy affect behaviour; the remaining
fields are cosmetic (title, version) or operational (log level).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Valentine Backend")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    # Bind address for the uvicorn listener.  ``run.py`` may override
    # both values from the command line.
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))

    # Comma‑separated lists.  ``*`` allows everything.
    cors_allowed_origins: str = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    cors_allowed_methods: str = os.getenv("CORS_ALLOWED_METHODS", "*")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
