"""
Runtime configuration.

Values come from the process environment, optionally seeded from
``~/.txwatch/.env``:

- TXWATCH_RPC_URL: node JSON-RPC endpoint
- TXWATCH_DB:      SQLite file for block events / storage state
- PRIVATE_KEY:     key used for authorization signatures
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Default config directory
TXWATCH_DIR = Path.home() / ".txwatch"
TXWATCH_ENV = TXWATCH_DIR / ".env"

DEFAULT_RPC_URL = "http://127.0.0.1:3030"


def load_env(env_path: Optional[Path] = None) -> None:
    """Load the .env file into the environment if it exists."""
    env_path = env_path or TXWATCH_ENV
    if env_path.exists():
        load_dotenv(env_path, override=False)


def get_rpc_url() -> str:
    """Get the RPC URL from environment or default."""
    load_env()
    return os.environ.get("TXWATCH_RPC_URL", DEFAULT_RPC_URL)


def get_db_path() -> Path:
    """Get the event database path from environment or default."""
    load_env()
    return Path(os.environ.get("TXWATCH_DB", str(TXWATCH_DIR / "events.db")))
