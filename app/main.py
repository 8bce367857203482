"""Run the Todo Manager NiceGUI app."""

import logging

from nicegui import app, ui

from config import load_settings
from logging_setup import setup_logging
from pages import render_todos
from services.todos import TodoService
from store import TodoStore
from ui_theme import apply_global_ui_theme

APP_TITLE = "Todo Manager"

logger = logging.getLogger(__name__)

settings = load_settings()
setup_logging(settings.log_dir, debug=settings.debug)

# The one store handle for this process: opened here, closed on shutdown.
store = TodoStore.open_at(settings.db_path)
service = TodoService(store)
app.on_shutdown(store.close)


@ui.page("/")
def index() -> None:
    apply_global_ui_theme(no_cache=settings.no_cache)
    render_todos(service, title=APP_TITLE)


def run() -> None:
    logger.info("app.start host=%s port=%s db=%s", settings.host, settings.port, settings.db_path)
    ui.run(
        title=APP_TITLE,
        host=settings.host,
        port=settings.port,
        language="en-US",
        favicon="✅",
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
