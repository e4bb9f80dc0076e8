"""
Gateway Configuration
=====================
Settings loaded from environment variables (and a local .env file).

Built ONCE at startup and handed to the pieces that need it (the store and
the auth checks) through `app.state.config`. Nothing else reads os.environ.

Environment Variables:
    MONGO_CS:     MongoDB connection string (required)
    DB:           Database name (required)
    COLLECTION:   Collection holding the measurements (required)
    API_WRITE:    Bearer token for POST /sensor (required)
    API_DELETE:   Bearer token for DELETE /measures (required)
    PORT:         Port to listen on (default: 8080)
    CORS_ORIGINS: Comma-separated allowed origins
    LOG_LEVEL:    Logging level name (default: INFO)
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv


DEFAULT_PORT = 8080

# Frontends allowed to call the API from a browser
DEFAULT_CORS_ORIGINS = [
    "http://localhost:4321",        # Astro dev server
    "https://sjm00010.github.io",   # Published dashboard
]

CORS_METHODS = ["POST", "GET", "DELETE", "OPTIONS"]


class ConfigError(RuntimeError):
    """Raised when the environment is missing required settings."""


@dataclass(frozen=True)
class Config:
    """
    Immutable gateway settings.

    Fields:
        mongo_uri: MongoDB connection string
        database: Database name
        collection: Collection name
        token_write: Token required to save measurements
        token_delete: Token required to delete all measurements
        port: Listening port
        cors_origins: Origins allowed by the CORS middleware
        log_level: Root logging level
    """
    mongo_uri: str
    database: str
    collection: str
    token_write: str
    token_delete: str
    port: int = DEFAULT_PORT
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build the configuration from the environment.

        Args:
            environ: Mapping to read from. Defaults to os.environ after
                loading the .env file.

        Raises:
            ConfigError: If a required variable is unset or PORT is not a number
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        def get(name: str) -> str:
            return (environ.get(name) or "").strip()

        missing_db = [name for name in ("MONGO_CS", "DB", "COLLECTION") if not get(name)]
        if missing_db:
            raise ConfigError(
                f"Please define the {', '.join(missing_db)} environment variable(s) inside .env file"
            )

        missing_tokens = [name for name in ("API_WRITE", "API_DELETE") if not get(name)]
        if missing_tokens:
            raise ConfigError(
                f"Please define the API KEYs ({', '.join(missing_tokens)}) inside .env file"
            )

        raw_port = get("PORT")
        try:
            port = int(raw_port) if raw_port else DEFAULT_PORT
        except ValueError:
            raise ConfigError(f"PORT must be a number, got: {raw_port!r}")

        origins = [o.strip() for o in get("CORS_ORIGINS").split(",") if o.strip()]

        return cls(
            mongo_uri=get("MONGO_CS"),
            database=get("DB"),
            collection=get("COLLECTION"),
            token_write=get("API_WRITE"),
            token_delete=get("API_DELETE"),
            port=port,
            cors_origins=origins or list(DEFAULT_CORS_ORIGINS),
            log_level=(get("LOG_LEVEL") or "INFO").upper(),
        )
