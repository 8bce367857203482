from __future__ import annotations

import bisect
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, func, select

from data import TodoRecord, apply_todo, create_store_engine, record_from_todo, todo_from_record
from errors import StoreStateError, TodoNotFoundError, TodoStoreError, TodoWriteError
from models import Todo

logger = logging.getLogger(__name__)


class TodoStore:
    """Ordered, persistent collection of todo records in a SQLite file.

    Records are kept in insertion order and can be addressed by their current
    position (``put_at``/``delete_at``) or by todo id (``put``/``delete``).
    The id lookups go through an in-memory ``id -> storage key`` index that is
    rebuilt on open and kept in step with every successful write. When several
    records share an id, the earliest one is the one that gets resolved.
    """

    def __init__(self) -> None:
        self._engine: Optional[Engine] = None
        self._path: Optional[Path] = None
        self._closed = False
        self._keys_by_id: Dict[str, List[int]] = {}

    @classmethod
    def open_at(cls, path: Path | str) -> "TodoStore":
        store = cls()
        store.open(path)
        return store

    def __enter__(self) -> "TodoStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self, path: Path | str) -> None:
        if self._engine is not None:
            raise StoreStateError("Todo store is already open")
        if self._closed:
            raise StoreStateError("Todo store was closed and cannot be reopened")

        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            engine = create_store_engine(path)
        except (OSError, SQLAlchemyError) as exc:
            logger.exception("store.open_failed path=%s", path)
            raise TodoWriteError(f"Could not open todo store at {path}") from exc

        self._engine = engine
        self._path = path
        try:
            self._rebuild_index()
        except SQLAlchemyError as exc:
            self._engine = None
            engine.dispose()
            logger.exception("store.open_failed path=%s", path)
            raise TodoWriteError(f"Could not read todo store at {path}") from exc
        logger.info("store.opened path=%s records=%s", path, len(self))

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._closed = True
        self._keys_by_id.clear()
        logger.info("store.closed path=%s", self._path)

    # --- reads ---

    def __len__(self) -> int:
        with self._reading("count") as session:
            return int(session.exec(select(func.count()).select_from(TodoRecord)).one())

    def read_all(self) -> List[Todo]:
        with self._reading("read") as session:
            rows = session.exec(select(TodoRecord).order_by(TodoRecord.key)).all()
            return [todo_from_record(row) for row in rows]

    def contains(self, todo_id: str) -> bool:
        self._require_open()
        return todo_id in self._keys_by_id

    def index_of(self, todo_id: str) -> int:
        key = self._key_for(todo_id)
        with self._reading("locate") as session:
            return self._position_of(session, key)

    def get(self, todo_id: str) -> Todo:
        key = self._key_for(todo_id)
        with self._reading("read") as session:
            row = session.get(TodoRecord, key)
            if row is None:
                raise TodoNotFoundError(todo_id)
            return todo_from_record(row)

    # --- positional writes ---

    def append(self, todo: Todo) -> int:
        row = record_from_todo(todo)
        with self._writing("append") as session:
            session.add(row)
            session.commit()
            key = int(row.key)
            position = int(session.exec(select(func.count()).select_from(TodoRecord)).one()) - 1
        self._keys_by_id.setdefault(todo.id, []).append(key)
        logger.debug("store.appended id=%s key=%s position=%s", todo.id, key, position)
        return position

    def put_at(self, index: int, todo: Todo) -> None:
        with self._writing("update") as session:
            row = self._row_at(session, index)
            key, previous_id = int(row.key), row.id
            apply_todo(row, todo)
            session.add(row)
            session.commit()
        self._move_key(key, previous_id, todo.id)

    def delete_at(self, index: int) -> None:
        with self._writing("delete") as session:
            row = self._row_at(session, index)
            key, todo_id = int(row.key), row.id
            session.delete(row)
            session.commit()
        self._drop_key(key, todo_id)

    # --- writes by id ---

    def put(self, todo_id: str, todo: Todo) -> None:
        key = self._key_for(todo_id)
        with self._writing("update") as session:
            row = session.get(TodoRecord, key)
            if row is None:
                raise TodoNotFoundError(todo_id)
            apply_todo(row, todo)
            session.add(row)
            session.commit()
        self._move_key(key, todo_id, todo.id)

    def delete(self, todo_id: str) -> None:
        key = self._key_for(todo_id)
        with self._writing("delete") as session:
            row = session.get(TodoRecord, key)
            if row is None:
                raise TodoNotFoundError(todo_id)
            session.delete(row)
            session.commit()
        self._drop_key(key, todo_id)

    # --- internals ---

    def _require_open(self) -> Engine:
        if self._engine is None:
            raise StoreStateError("Todo store is not open")
        return self._engine

    @contextmanager
    def _reading(self, action: str) -> Iterator[Session]:
        engine = self._require_open()
        with Session(engine) as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                logger.exception("store.read_failed action=%s path=%s", action, self._path)
                raise TodoStoreError(f"Could not {action} todo records") from exc

    @contextmanager
    def _writing(self, action: str) -> Iterator[Session]:
        engine = self._require_open()
        with Session(engine) as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                session.rollback()
                logger.exception("store.write_failed action=%s path=%s", action, self._path)
                raise TodoWriteError(f"Could not {action} todo record") from exc

    def _row_at(self, session: Session, index: int) -> TodoRecord:
        if index < 0:
            raise IndexError(f"Todo index {index} out of range")
        row = session.exec(
            select(TodoRecord).order_by(TodoRecord.key).offset(index).limit(1)
        ).first()
        if row is None:
            raise IndexError(f"Todo index {index} out of range")
        return row

    @staticmethod
    def _position_of(session: Session, key: int) -> int:
        return int(
            session.exec(
                select(func.count()).select_from(TodoRecord).where(TodoRecord.key < key)
            ).one()
        )

    def _key_for(self, todo_id: str) -> int:
        self._require_open()
        keys = self._keys_by_id.get(todo_id)
        if not keys:
            raise TodoNotFoundError(todo_id)
        return keys[0]

    def _rebuild_index(self) -> None:
        self._keys_by_id.clear()
        with Session(self._require_open()) as session:
            rows = session.exec(
                select(TodoRecord.key, TodoRecord.id).order_by(TodoRecord.key)
            ).all()
        for key, todo_id in rows:
            self._keys_by_id.setdefault(todo_id, []).append(int(key))

    def _drop_key(self, key: int, todo_id: str) -> None:
        keys = self._keys_by_id.get(todo_id, [])
        if key in keys:
            keys.remove(key)
        if not keys:
            self._keys_by_id.pop(todo_id, None)

    def _move_key(self, key: int, previous_id: str, todo_id: str) -> None:
        if previous_id == todo_id:
            return
        self._drop_key(key, previous_id)
        bisect.insort(self._keys_by_id.setdefault(todo_id, []), key)
