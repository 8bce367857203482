from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

APP_PATH = Path(__file__).resolve().parents[1] / "app"
if str(APP_PATH) not in sys.path:
    sys.path.insert(0, str(APP_PATH))

from services.todos import TodoService
from store import TodoStore


FIXED_NOW = datetime(2024, 5, 17, 9, 30, 0)


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "storage" / "todos.db"


@pytest.fixture()
def store(db_path: Path):
    todo_store = TodoStore.open_at(db_path)
    yield todo_store
    todo_store.close()


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def service(store: TodoStore, fixed_now: datetime) -> TodoService:
    return TodoService(store, clock=lambda: fixed_now)


@pytest.fixture()
def failing_commit(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(self) -> None:
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "commit", _fail)
