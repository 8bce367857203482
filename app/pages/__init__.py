from __future__ import annotations

from .todos import render_todos
