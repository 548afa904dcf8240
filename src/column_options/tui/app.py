"""Demo TUI hosting one ColumnOptionsPanel over an in-memory ColumnStore.

// [LAW:one-way-deps] The app wires store → controller → panel. The store is
//   the only thing the panel's edits mutate; the app pushes each fresh read
//   into the controller's observables and the panel's reaction redraws.
"""

from __future__ import annotations

import logging

from snarfx import transaction
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Static

from column_options.app.column_store import ColumnStore
from column_options.app.panel_controller import (
    DEFAULT_EXPANDED_HEIGHT_THRESHOLD,
    PanelController,
    PanelParams,
)
from column_options.core.column import Column
from column_options.tui.options_panel import ColumnOptionsPanel

logger = logging.getLogger(__name__)

PANEL_ID = "column-options"


def sample_columns() -> list[Column]:
    return [
        Column("notifications", "notifications", {}),
        Column("activity", "activity", {"activity": {"actions": {"starred": False}}}),
        Column("issues", "issue_or_pr", {"subjectTypes": {"Issue": True}}),
    ]


class ColumnOptionsApp(App):
    """Shows the options panel of one column; n cycles between columns."""

    TITLE = "Column options"

    BINDINGS = [
        Binding("n", "next_column", "Next column"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: ColumnStore | None = None,
        *,
        column_id: str | None = None,
        available_height: int = 0,
        force_open_all: bool = False,
        full_height: bool = False,
        start_expanded: bool | None = None,
        expanded_height_threshold: int = DEFAULT_EXPANDED_HEIGHT_THRESHOLD,
    ):
        super().__init__()
        self.store = store if store is not None else ColumnStore(sample_columns())
        ids = self.store.column_ids
        self._column_id = column_id if column_id in ids else (ids[0] if ids else None)
        self._available_height = available_height
        self._force_open_all = force_open_all
        self._full_height = full_height
        self._start_expanded = start_expanded
        self._threshold = expanded_height_threshold
        self.store.on_change = self._on_store_change

    @property
    def column_id(self) -> str | None:
        return self._column_id

    def compose(self) -> ComposeResult:
        controller = self._make_controller(self._column_id)
        if controller is not None:
            yield ColumnOptionsPanel(controller, id=PANEL_ID)
        yield Static("No columns", id="empty-message")
        yield Footer()

    def on_mount(self) -> None:
        panel = self.get_panel()
        self.query_one("#empty-message", Static).display = panel is None
        if panel is not None:
            panel.focus()

    # ─── Panel lifecycle ──────────────────────────────────────────────

    def _params(self, column_id: str) -> PanelParams:
        return PanelParams(
            available_height=self._available_height or self.size.height,
            force_open_all=self._force_open_all,
            full_height=self._full_height,
            start_expanded=self._start_expanded,
            column_index=self.store.index_of(column_id),
            column_count=len(self.store.column_ids),
        )

    def _make_controller(self, column_id: str | None) -> PanelController | None:
        column = self.store.get(column_id) if column_id is not None else None
        if column is None:
            return None
        return PanelController(
            column,
            self.store,
            self._params(column_id),
            expanded_height_threshold=self._threshold,
        )

    def get_panel(self) -> ColumnOptionsPanel | None:
        panels = list(self.query(ColumnOptionsPanel))
        return panels[0] if panels else None

    def _show_column(self, column_id: str | None) -> None:
        """Point the panel at another column; its disclosure state starts over."""
        self._column_id = column_id
        panel = self.get_panel()
        controller = self._make_controller(column_id)
        if panel is None:
            return
        panel.display = controller is not None
        self.query_one("#empty-message", Static).display = controller is None
        if controller is not None:
            panel.set_controller(controller)
            logger.debug("showing options for column %s", column_id)

    def _on_store_change(self) -> None:
        column = self.store.get(self._column_id) if self._column_id else None
        if column is None:
            ids = self.store.column_ids
            self._show_column(ids[0] if ids else None)
            return
        panel = self.get_panel()
        if panel is None:
            return
        # One transaction so the panel re-renders once per store change.
        with transaction():
            panel.controller.set_params(self._params(column.id))
            panel.controller.set_column(column)

    # ─── Actions ──────────────────────────────────────────────────────

    def action_next_column(self) -> None:
        ids = self.store.column_ids
        if not ids:
            return
        index = ids.index(self._column_id) if self._column_id in ids else -1
        self._show_column(ids[(index + 1) % len(ids)])
