from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from models import FilterMode, Todo
from todo_viewmodel import TodoViewModel, filter_todos

NOW = datetime(2024, 5, 17, 18, 45)


def _todos() -> list[Todo]:
    return [
        Todo(id="1", name="Yesterday", created_time=NOW - timedelta(days=1)),
        Todo(id="2", name="Morning", created_time=NOW.replace(hour=7)),
        Todo(id="3", name="Undated", created_time=None),
        Todo(id="4", name="Evening", completed=True, created_time=NOW),
        Todo(id="5", name="Last year", created_time=NOW.replace(year=2023)),
    ]


def test_all_filter_returns_snapshot_unchanged() -> None:
    view = TodoViewModel(_todos(), clock=lambda: NOW)

    assert view.mode is FilterMode.ALL
    assert view.filtered() == _todos()


def test_today_filter_keeps_only_records_from_the_current_date() -> None:
    view = TodoViewModel(_todos(), clock=lambda: NOW)

    view.set_filter(FilterMode.TODAY)

    assert [todo.name for todo in view.filtered()] == ["Morning", "Evening"]


def test_counts_are_recomputed_from_the_current_snapshot() -> None:
    view = TodoViewModel(_todos(), clock=lambda: NOW)
    assert view.counts() == (5, 2)

    view.load(_todos()[:2])

    assert view.counts() == (2, 1)


def test_counts_follow_the_clock() -> None:
    current = {"now": NOW}
    view = TodoViewModel(_todos(), clock=lambda: current["now"])

    current["now"] = NOW + timedelta(days=1)

    assert view.counts() == (5, 0)


def test_set_filter_accepts_string_values() -> None:
    view = TodoViewModel(_todos(), clock=lambda: NOW)

    view.set_filter("today")
    assert view.mode is FilterMode.TODAY

    view.set_filter("all")
    assert len(view.filtered()) == 5


def test_set_filter_rejects_unknown_mode() -> None:
    view = TodoViewModel()

    with pytest.raises(ValueError):
        view.set_filter("tomorrow")


def test_load_copies_the_given_sequence() -> None:
    todos = _todos()
    view = TodoViewModel(clock=lambda: NOW)

    view.load(todos)
    todos.clear()

    assert len(view.todos) == 5


def test_filter_todos_compares_aware_timestamps_in_local_time() -> None:
    local_noon = datetime(2024, 5, 17, 12, 0).astimezone()
    todo = Todo(id="1", name="Aware", created_time=local_noon.astimezone(timezone.utc))

    assert filter_todos([todo], FilterMode.TODAY, local_noon.date()) == [todo]
