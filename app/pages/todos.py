from __future__ import annotations

from datetime import datetime

from nicegui import ui

from actions import add_todo, delete_todo, edit_todo, list_todos, toggle_todo
from models import FilterMode, Todo
from services.todos import TodoService
from styles import C_CONTAINER, C_PAGE_TITLE, STYLE_TODO_NAME, STYLE_TODO_NAME_DONE, STYLE_TODO_ROW
from todo_viewmodel import TodoViewModel
from ui_components import (
    ask_todo_name,
    confirm_delete,
    empty_state,
    notify_error,
    notify_success,
    tab_button,
    todo_card,
)


def render_todos(service: TodoService, title: str = "Todo Manager") -> None:
    view = TodoViewModel()

    def load() -> None:
        todos, error = list_todos(service, FilterMode.ALL)
        if error:
            notify_error(error)
        view.load(todos)

    def reload() -> None:
        load()
        todo_list.refresh()

    def select_tab(mode: FilterMode) -> None:
        view.set_filter(mode)
        todo_list.refresh()

    async def handle_add() -> None:
        with dialog_host:
            name = await ask_todo_name("Add a todo", "Type your todo", "Add")
        if name is None:
            return
        _todo, error = add_todo(service, name, datetime.now())
        if error:
            notify_error(error)
            return
        notify_success("Todo added successfully!")
        reload()

    def handle_toggle(todo_id: str) -> None:
        _todo, error = toggle_todo(service, todo_id)
        if error:
            notify_error(error)
        # Re-read even on failure so the checkbox shows what was persisted.
        reload()

    async def handle_edit(todo: Todo) -> None:
        with dialog_host:
            name = await ask_todo_name("Edit Todo", "Edit your todo", "Save", value=todo.name)
        if name is None:
            return
        _todo, error = edit_todo(service, todo.id, name)
        if error:
            notify_error(error)
            return
        notify_success("Todo updated successfully!")
        reload()

    async def handle_delete(todo: Todo) -> None:
        with dialog_host:
            confirmed = await confirm_delete(todo.name)
        if not confirmed:
            return
        _todo, error = delete_todo(service, todo.id)
        if error:
            notify_error(error)
        else:
            notify_success("Todo deleted successfully")
        reload()

    def todo_row(todo: Todo) -> None:
        with ui.row().classes(STYLE_TODO_ROW):
            ui.checkbox(
                value=todo.completed,
                on_change=lambda _e, todo_id=todo.id: handle_toggle(todo_id),
            ).props("dense")
            ui.label(todo.name).classes(STYLE_TODO_NAME_DONE if todo.completed else STYLE_TODO_NAME)
            with ui.button(icon="more_vert", color=None).props("flat round dense size=sm"):
                with ui.menu():
                    ui.menu_item("Delete", on_click=lambda t=todo: handle_delete(t))
                    ui.menu_item("Edit", on_click=lambda t=todo: handle_edit(t))

    @ui.refreshable
    def todo_list() -> None:
        all_count, today_count = view.counts()
        with ui.row().classes("w-full gap-0 border-b border-slate-200"):
            tab_button(
                f"All ({all_count})",
                view.mode is FilterMode.ALL,
                lambda: select_tab(FilterMode.ALL),
            )
            tab_button(
                f"Today ({today_count})",
                view.mode is FilterMode.TODAY,
                lambda: select_tab(FilterMode.TODAY),
            )

        todos = view.filtered()
        if not todos:
            empty_state()
            return
        with ui.column().classes("w-full px-4 py-2 gap-0"):
            for todo in todos:
                todo_row(todo)

    load()
    with ui.column().classes(C_CONTAINER):
        with ui.row().classes("w-full items-center justify-between"):
            ui.label(title).classes(C_PAGE_TITLE)
            ui.button(icon="add", on_click=handle_add, color=None).props("flat round")
        with todo_card():
            todo_list()
        # Dialog host, outside the refreshable list.
        dialog_host = ui.element("div")
