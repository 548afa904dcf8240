"""Textual in-process test harness for column-options.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, panel_text, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import (
    press_and_settle,
    press_sequence,
    move_cursor_to,
)
from tests.harness.assertions import (
    get_panel,
    panel_text,
    open_categories,
    cursor_row,
)

__all__ = [
    "run_app",
    "press_and_settle",
    "press_sequence",
    "move_cursor_to",
    "get_panel",
    "panel_text",
    "open_categories",
    "cursor_row",
]
