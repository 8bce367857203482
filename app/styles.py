# =========================
# APP/STYLES.PY
# =========================

from __future__ import annotations

"""
Design tokens for the todo page (light slate, Tailwind classes).

Rules:
- No Quasar elevation shadows.
- Pages use STYLE_* constants or wrappers in `ui_components.py` instead of long inline class strings.
"""

C_FONT_STACK = '"Inter", system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'

# CSS braces are doubled for the f-string.
APP_FONT_CSS = f"""
<style>
  :root, body, .q-body {{
    font-family: {C_FONT_STACK};
    letter-spacing: -0.01em;
    color-scheme: light;
    --todo-bg: #f8fafc;
    --todo-text: #0f172a;
  }}

  body, .q-body, .nicegui-content {{
    background: var(--todo-bg) !important;
    color: var(--todo-text) !important;
  }}

  [class*="q-elevation--"], .q-card, .q-menu {{
    box-shadow: none !important;
  }}
</style>
"""

# -------------------------
# Design system class tokens
# -------------------------

STYLE_CONTAINER = "w-full max-w-2xl mx-auto px-6 py-6 gap-4"

STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"

STYLE_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_SECTION_TITLE = "text-sm font-semibold text-slate-900"
STYLE_TEXT_MUTED = "text-sm text-slate-600"

STYLE_BTN_PRIMARY = (
    "bg-slate-900 text-white hover:bg-slate-800 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-amber-400/40"
)
STYLE_BTN_SECONDARY = (
    "bg-white text-slate-900 border border-slate-200 hover:bg-slate-50 active:scale-[0.99] rounded-lg px-4 py-2 "
    "text-sm font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)
STYLE_BTN_DANGER = (
    "bg-rose-600 text-white hover:bg-rose-700 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-rose-500/30"
)

STYLE_INPUT = "w-full text-sm"

STYLE_TAB = "flex-1 rounded-none border-b-2 border-transparent py-3 text-sm text-slate-700"
STYLE_TAB_ACTIVE = "flex-1 rounded-none border-b-2 border-sky-600 py-3 text-sm font-bold text-sky-700"

STYLE_TODO_ROW = "w-full items-start gap-2 py-1.5 flex-nowrap"
STYLE_TODO_NAME = "flex-1 text-base text-slate-900"
STYLE_TODO_NAME_DONE = "flex-1 text-base text-slate-400 line-through"

# -------------------------
# Short aliases
# -------------------------

C_CONTAINER = STYLE_CONTAINER
C_CARD = STYLE_CARD
C_PAGE_TITLE = STYLE_PAGE_TITLE
C_SECTION_TITLE = STYLE_SECTION_TITLE
C_BTN_PRIM = STYLE_BTN_PRIMARY
C_BTN_SEC = STYLE_BTN_SECONDARY
C_INPUT = STYLE_INPUT
