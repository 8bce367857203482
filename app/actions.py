from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple, TypeVar

from errors import TodoError, TodoNotFoundError, TodoValidationError
from models import FilterMode, Todo
from services.todos import TodoService

logger = logging.getLogger(__name__)

T = TypeVar("T")

MSG_EMPTY_NAME = "Please enter a todo item"
MSG_NOT_FOUND = "Todo not found. It may have been deleted."
MSG_ADD_FAILED = "Failed to add todo. Please try again."
MSG_UPDATE_FAILED = "Failed to update todo. Please try again."
MSG_DELETE_FAILED = "Failed to delete todo. Please try again."
MSG_LOAD_FAILED = "Failed to load todos."
MSG_UNKNOWN_FILTER = "Unknown filter."


def _run(action: str, operation: Callable[[], T], failure_message: str) -> Tuple[Optional[T], str]:
    try:
        return operation(), ""
    except TodoValidationError:
        return None, MSG_EMPTY_NAME
    except (TodoNotFoundError, IndexError) as exc:
        logger.warning("todo.%s_missing error=%s", action, exc)
        return None, MSG_NOT_FOUND
    except TodoError:
        logger.exception("todo.%s_failed", action)
        return None, failure_message


def add_todo(service: TodoService, name: str, created_time: Optional[datetime] = None):
    return _run("add", lambda: service.add(name, created_time), MSG_ADD_FAILED)


def toggle_todo(service: TodoService, todo_id: str):
    return _run("toggle", lambda: service.toggle(todo_id), MSG_UPDATE_FAILED)


def edit_todo(service: TodoService, todo_id: str, new_name: str):
    return _run("edit", lambda: service.edit(todo_id, new_name), MSG_UPDATE_FAILED)


def delete_todo(service: TodoService, todo_id: str):
    return _run("delete", lambda: service.delete(todo_id), MSG_DELETE_FAILED)


def list_todos(service: TodoService, mode: FilterMode | str = FilterMode.ALL) -> Tuple[List[Todo], str]:
    try:
        mode = FilterMode(mode)
    except ValueError:
        logger.warning("todo.list_unknown_filter mode=%s", mode)
        return [], MSG_UNKNOWN_FILTER
    todos, error = _run("list", lambda: service.list(mode), MSG_LOAD_FAILED)
    return todos or [], error


def count_todos(service: TodoService) -> Tuple[Tuple[int, int], str]:
    counts, error = _run("count", service.counts, MSG_LOAD_FAILED)
    return counts or (0, 0), error
