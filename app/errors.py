from __future__ import annotations


class TodoError(Exception):
    pass


class TodoValidationError(TodoError, ValueError):
    pass


class TodoStoreError(TodoError):
    pass


class TodoWriteError(TodoStoreError):
    """The storage medium failed while opening or writing."""


class StoreStateError(TodoStoreError):
    """The store was used before open, after close, or opened twice."""


class TodoNotFoundError(TodoError, LookupError):
    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo with id '{todo_id}' not found")
        self.todo_id = todo_id
