from contextlib import contextmanager

from nicegui import ui

from styles import (
    C_BTN_PRIM,
    C_BTN_SEC,
    C_CARD,
    C_INPUT,
    C_SECTION_TITLE,
    STYLE_BTN_DANGER,
    STYLE_TAB,
    STYLE_TAB_ACTIVE,
    STYLE_TEXT_MUTED,
)

TODO_NAME_MAX_LENGTH = 100


def notify_success(message: str) -> None:
    ui.notify(message, color="green", timeout=2000)


def notify_error(message: str) -> None:
    ui.notify(message, color="red", timeout=3000)


@contextmanager
def todo_card(classes: str = ""):
    with ui.card().classes(f"{C_CARD} p-0 w-full gap-0 {classes}".strip()) as card:
        yield card


def tab_button(label: str, active: bool, on_click) -> None:
    (
        ui.button(label, on_click=on_click, color=None)
        .props("flat no-caps")
        .classes(STYLE_TAB_ACTIVE if active else STYLE_TAB)
    )


def empty_state(text: str = "No todos yet!") -> None:
    with ui.column().classes("w-full items-center justify-center py-16 gap-4"):
        ui.icon("checklist").classes("text-6xl text-slate-400")
        ui.label(text).classes("text-xl font-bold text-slate-400")


async def ask_todo_name(
    title: str,
    placeholder: str,
    submit_label: str,
    value: str = "",
) -> str | None:
    """Open a modal with one text field; resolves to the entered text or None on cancel."""
    with ui.dialog().props("persistent") as dialog, ui.card().classes(f"{C_CARD} p-6 w-96 gap-4"):
        ui.label(title).classes(C_SECTION_TITLE)
        name_input = (
            ui.input(placeholder=placeholder, value=value)
            .props(f"outlined autofocus maxlength={TODO_NAME_MAX_LENGTH} counter")
            .classes(C_INPUT)
        )
        name_input.on("keydown.enter", lambda: dialog.submit(name_input.value or ""))
        with ui.row().classes("w-full justify-end gap-2"):
            ui.button("Cancel", on_click=lambda: dialog.submit(None), color=None).classes(C_BTN_SEC)
            ui.button(submit_label, on_click=lambda: dialog.submit(name_input.value or ""), color=None).classes(
                C_BTN_PRIM
            )
    result = await dialog
    dialog.delete()
    return result


async def confirm_delete(name: str) -> bool:
    with ui.dialog() as dialog, ui.card().classes(f"{C_CARD} p-6 w-96 gap-4"):
        ui.label("Delete Todo").classes(C_SECTION_TITLE)
        ui.label(f'Are you sure you want to delete "{name}"?').classes(STYLE_TEXT_MUTED)
        with ui.row().classes("w-full justify-end gap-2"):
            ui.button("Cancel", on_click=lambda: dialog.submit(False), color=None).classes(C_BTN_SEC)
            ui.button("Delete", on_click=lambda: dialog.submit(True), color=None).classes(STYLE_BTN_DANGER)
    result = await dialog
    dialog.delete()
    return result is True
