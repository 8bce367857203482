from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import List, Optional, Tuple

from data import to_local_naive
from errors import TodoValidationError
from models import FilterMode, Todo
from store import TodoStore
from todo_viewmodel import filter_todos, local_today

logger = logging.getLogger(__name__)


def clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise TodoValidationError("Todo name cannot be empty.")
    return cleaned


class TodoService:
    """Todo operations on top of an open :class:`TodoStore`.

    Every mutation builds a new ``Todo`` from the stored one, writes it, and
    only returns it once the write went through. A failed write leaves both
    the store and the caller's view untouched.
    """

    def __init__(self, store: TodoStore, clock: Callable[[], datetime] = datetime.now) -> None:
        self._store = store
        self._clock = clock
        self._last_id = 0

    @property
    def store(self) -> TodoStore:
        return self._store

    def _next_id(self) -> str:
        # Epoch milliseconds; bumped past ids issued or stored already.
        candidate = max(int(self._clock().timestamp() * 1000), self._last_id + 1)
        while self._store.contains(str(candidate)):
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    def add(self, name: str, created_time: Optional[datetime] = None) -> Todo:
        name = clean_name(name)
        todo = Todo(
            id=self._next_id(),
            name=name,
            completed=False,
            created_time=to_local_naive(created_time or self._clock()),
        )
        self._store.append(todo)
        logger.info("todo.added id=%s", todo.id)
        return todo

    def toggle(self, todo_id: str) -> Todo:
        current = self._store.get(todo_id)
        updated = current.model_copy(update={"completed": not current.completed})
        self._store.put(todo_id, updated)
        logger.info("todo.toggled id=%s completed=%s", todo_id, updated.completed)
        return updated

    def edit(self, todo_id: str, new_name: str) -> Todo:
        name = clean_name(new_name)
        current = self._store.get(todo_id)
        updated = current.model_copy(update={"name": name})
        self._store.put(todo_id, updated)
        logger.info("todo.edited id=%s", todo_id)
        return updated

    def delete(self, todo_id: str) -> Todo:
        current = self._store.get(todo_id)
        self._store.delete(todo_id)
        logger.info("todo.deleted id=%s", todo_id)
        return current

    def list(self, mode: FilterMode | str = FilterMode.ALL) -> List[Todo]:
        return filter_todos(self._store.read_all(), mode, local_today(self._clock))

    def counts(self) -> Tuple[int, int]:
        todos = self._store.read_all()
        today = filter_todos(todos, FilterMode.TODAY, local_today(self._clock))
        return len(todos), len(today)
