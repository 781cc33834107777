"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via the
environment in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console output.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the v1 routes are mounted.  Empty by default so
    # that products are served at ``/products``; set to e.g. ``/api/v1``
    # when the service sits behind a shared gateway.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Path of the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "catalog.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Environment variables must be set before this module is imported:
# the dataclass defaults are evaluated once at class definition time.
settings = Settings()
