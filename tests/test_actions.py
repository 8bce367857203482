from __future__ import annotations

from datetime import datetime

import pytest

import actions
from models import FilterMode
from services.todos import TodoService
from store import TodoStore


def test_add_todo_returns_todo_and_empty_error(service: TodoService) -> None:
    todo, error = actions.add_todo(service, "Buy milk", datetime(2024, 5, 17, 8, 0))

    assert error == ""
    assert todo is not None
    assert todo.name == "Buy milk"


def test_add_todo_with_blank_name_returns_message(service: TodoService, store: TodoStore) -> None:
    todo, error = actions.add_todo(service, "   ")

    assert todo is None
    assert error == actions.MSG_EMPTY_NAME
    assert store.read_all() == []


def test_add_todo_write_failure_is_reported_not_raised(
    service: TodoService, store: TodoStore, failing_commit
) -> None:
    todo, error = actions.add_todo(service, "Buy milk")

    assert todo is None
    assert error == actions.MSG_ADD_FAILED
    assert store.read_all() == []


def test_toggle_edit_delete_round_trip(service: TodoService) -> None:
    todo, _ = actions.add_todo(service, "Buy milk")

    toggled, error = actions.toggle_todo(service, todo.id)
    assert error == ""
    assert toggled.completed is True

    edited, error = actions.edit_todo(service, todo.id, "Buy oat milk")
    assert error == ""
    assert edited.name == "Buy oat milk"

    deleted, error = actions.delete_todo(service, todo.id)
    assert error == ""
    assert deleted == edited

    todos, error = actions.list_todos(service)
    assert todos == []
    assert error == ""


def test_edit_with_blank_name_returns_message(service: TodoService) -> None:
    todo, _ = actions.add_todo(service, "Buy milk")

    edited, error = actions.edit_todo(service, todo.id, "")

    assert edited is None
    assert error == actions.MSG_EMPTY_NAME
    assert service.list() == [todo]


@pytest.mark.parametrize(
    "action",
    [actions.toggle_todo, actions.delete_todo],
)
def test_missing_todo_returns_not_found_message(service: TodoService, action) -> None:
    result, error = action(service, "gone")

    assert result is None
    assert error == actions.MSG_NOT_FOUND


def test_list_and_count_report_failures_on_closed_store(service: TodoService, store: TodoStore) -> None:
    store.close()

    todos, error = actions.list_todos(service, FilterMode.TODAY)
    assert todos == []
    assert error == actions.MSG_LOAD_FAILED

    counts, error = actions.count_todos(service)
    assert counts == (0, 0)
    assert error == actions.MSG_LOAD_FAILED


def test_count_todos(service: TodoService, fixed_now: datetime) -> None:
    actions.add_todo(service, "Today")
    actions.add_todo(service, "Long ago", datetime(2020, 1, 1))

    counts, error = actions.count_todos(service)

    assert error == ""
    assert counts == (2, 1)


def test_list_todos_with_unknown_filter_returns_message(service: TodoService) -> None:
    actions.add_todo(service, "Buy milk")

    todos, error = actions.list_todos(service, "week")

    assert todos == []
    assert error == actions.MSG_UNKNOWN_FILTER
