"""Runtime configuration.

Settings come from GADGET_* environment variables and are read once at
startup by Settings.from_env().
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Mapping, cast

from gadget.errors import ConfigError

StoreKind = Literal["yaml", "sqlite", "memory"]
STORE_KINDS: tuple[str, ...] = ("yaml", "sqlite", "memory")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_STORE_PATH = Path("redirects.yaml")
DEFAULT_DB_PATH = Path("data/gadget.db")
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
UI_BASE_PATH = "/_gadget/ui/"
API_BASE_PATH = "/_gadget/api"
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",  # Vite dev server
    "http://127.0.0.1:5173",
)


@dataclass
class Settings:
    """Application settings."""

    store: StoreKind = "yaml"
    store_path: Path = DEFAULT_STORE_PATH
    db_path: Path = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    ui_dist: Path | None = None
    ui_location: str = UI_BASE_PATH
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Raises:
            ConfigError: If GADGET_STORE, GADGET_PORT or GADGET_LOG_LEVEL
                is invalid.
        """
        env = os.environ if environ is None else environ

        store = env.get("GADGET_STORE", "yaml").strip().lower()
        if store not in STORE_KINDS:
            raise ConfigError(f"GADGET_STORE must be one of {', '.join(STORE_KINDS)}, got {store!r}")

        raw_port = env.get("GADGET_PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigError(f"GADGET_PORT must be an integer, got {raw_port!r}") from e

        log_level = env.get("GADGET_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"GADGET_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        ui_dist = env.get("GADGET_UI_DIST")
        origins = env.get("GADGET_CORS_ORIGINS")

        return cls(
            store=cast(StoreKind, store),
            store_path=Path(env.get("GADGET_STORE_PATH", str(DEFAULT_STORE_PATH))),
            db_path=Path(env.get("GADGET_DB_PATH", str(DEFAULT_DB_PATH))),
            host=env.get("GADGET_HOST", DEFAULT_HOST),
            port=port,
            ui_dist=Path(ui_dist) if ui_dist else None,
            ui_location=env.get("GADGET_UI_LOCATION", UI_BASE_PATH),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins is not None
                else list(DEFAULT_CORS_ORIGINS)
            ),
            log_level=log_level,
        )
