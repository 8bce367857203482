from nicegui import ui

from styles import APP_FONT_CSS

_THEME_APPLIED = False


def apply_global_ui_theme(no_cache: bool = False) -> None:
    global _THEME_APPLIED
    # Quasar token colors are set per page; head html is shared across clients.
    ui.colors(primary="#0284c7", secondary="#64748b", accent="#f59e0b", dark="#0f172a")
    if _THEME_APPLIED:
        return
    # Force browser revalidation (TODO_NO_CACHE=1, e.g. after design changes)
    if no_cache:
        ui.add_head_html(
            '<meta http-equiv="Cache-Control" content="no-cache, no-store, must-revalidate">'
            '<meta http-equiv="Pragma" content="no-cache">'
            '<meta http-equiv="Expires" content="0">',
            shared=True,
        )
    ui.add_head_html(APP_FONT_CSS, shared=True)
    _THEME_APPLIED = True
