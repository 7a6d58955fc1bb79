"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
API starts with an empty in-memory product store when nothing is set.
Override values via environment variables before importing this
module, or pass an explicit ``Settings`` instance to ``create_app``.
"""

import os
from dataclasses import dataclass, field


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Northwind API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Name of the in-memory product store.  Contexts opened with the
    # same name share one store for as long as any of them is open.
    database_name: str = field(default_factory=lambda: os.getenv("DATABASE_NAME", "NorthwindDb"))

    # Optional path to a JSON array of products loaded into the store
    # when the application is created.  Empty means no seed data.
    seed_file: str = field(default_factory=lambda: os.getenv("SEED_FILE", ""))

    # Bind address for ``run.py``.
    host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
