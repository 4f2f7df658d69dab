"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
match a local development setup: the GraphQL endpoint is served on
port 5000 with the GraphiQL explorer enabled and the store seeded
with sample authors and books.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Library Graph API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Where the GraphQL router is mounted and whether a browser hitting
    # that path gets the interactive GraphiQL explorer.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")
    graphiql: bool = _env_flag("GRAPHIQL", "true")

    # Seed the in‑memory store with the sample authors and books on
    # startup.  Disable to start from two empty collections.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
