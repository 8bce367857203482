from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date, datetime

from models import FilterMode, Todo


def local_today(clock: Callable[[], datetime] = datetime.now) -> date:
    now = clock()
    if now.tzinfo is not None:
        now = now.astimezone()
    return now.date()


def filter_todos(todos: Iterable[Todo], mode: FilterMode | str, today: date) -> list[Todo]:
    if FilterMode(mode) is FilterMode.TODAY:
        return [todo for todo in todos if todo.created_on(today)]
    return list(todos)


class TodoViewModel:
    """Snapshot of the stored todos plus the selected filter tab.

    The filter is UI state only and is never written to the store. Counts are
    computed from the snapshot on every call.
    """

    def __init__(
        self,
        todos: Iterable[Todo] = (),
        mode: FilterMode | str = FilterMode.ALL,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._todos: list[Todo] = list(todos)
        self._mode = FilterMode(mode)
        self._clock = clock

    @property
    def mode(self) -> FilterMode:
        return self._mode

    @property
    def todos(self) -> list[Todo]:
        return list(self._todos)

    def set_filter(self, mode: FilterMode | str) -> None:
        self._mode = FilterMode(mode)

    def load(self, todos: Iterable[Todo]) -> None:
        self._todos = list(todos)

    def filtered(self) -> list[Todo]:
        return filter_todos(self._todos, self._mode, local_today(self._clock))

    def counts(self) -> tuple[int, int]:
        today = filter_todos(self._todos, FilterMode.TODAY, local_today(self._clock))
        return len(self._todos), len(today)
