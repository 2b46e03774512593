"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields, so the service starts
without any configuration at all and serves an empty product store on
port 3000.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Record Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Which entity profile the store serves: ``users`` or ``products``.
    record_type: str = os.getenv("RECORD_TYPE", "products")

    # Length of generated record ids.
    id_length: int = int(os.getenv("ID_LENGTH", "6"))

    # Pre‑load the store with the profile's demo records on startup.
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "false").lower() in {"1", "true", "yes"}

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  The default matches the local frontend dev server.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "http://localhost:3001"))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
