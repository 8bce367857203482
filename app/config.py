from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from env import load_env

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "./storage/todos.db"
DEFAULT_LOG_DIR = "./data/logs"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class Settings:
    db_path: Path
    log_dir: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False
    no_cache: bool = False


def _read_port(raw: str | None) -> int:
    raw = (raw or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        logger.warning("config.invalid_port value=%s fallback=%s", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning("config.invalid_port value=%s fallback=%s", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def load_settings() -> Settings:
    load_env()
    return Settings(
        db_path=Path((os.getenv("TODO_DB_PATH") or "").strip() or DEFAULT_DB_PATH),
        log_dir=Path((os.getenv("TODO_LOG_DIR") or "").strip() or DEFAULT_LOG_DIR),
        host=(os.getenv("TODO_HOST") or "").strip() or DEFAULT_HOST,
        port=_read_port(os.getenv("TODO_PORT")),
        debug=os.getenv("TODO_DEBUG") == "1",
        no_cache=(os.getenv("TODO_NO_CACHE") or "").strip() == "1",
    )
