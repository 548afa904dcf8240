"""Column options panel — Textual widget rendering PanelController view-models.

The widget owns only a cursor position. Everything it draws comes from the
controller's `view_state` computed; key presses are routed to controller
methods and a single snarfx reaction re-renders when that state changes.

// [LAW:single-enforcer] The view_state reaction is the only re-render path
//   for controller state; cursor moves repaint directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text
from snarfx import textual as stx
from textual.binding import Binding
from textual.widgets import Static

from column_options.app.panel_controller import CategoryView, PanelController, PanelViewState
from column_options.core import filter_state as _fs
from column_options.core.categories import CategoryId

_CHECK_MARKERS = {True: "[x]", False: "[ ]", None: "[-]"}
_RADIO_MARKERS = {True: "(o)", False: "( )"}
_OPEN_ARROW = "▾"
_CLOSED_ARROW = "▸"


@dataclass(frozen=True)
class PanelRow:
    """One cursor stop: a category header, an option checkbox, or a footer button."""

    kind: str  # "header" | "option" | "footer"
    category: CategoryId | None = None
    option: str | int | None = None
    action: str | None = None


def _option_rows(view: CategoryView) -> list[PanelRow]:
    body = view.body
    if isinstance(body, _fs.SavedView):
        return [PanelRow("option", view.category, 0)]
    if isinstance(body, _fs.PairView):
        return [PanelRow("option", view.category, i) for i in range(2)]
    return [PanelRow("option", view.category, option.key) for option in body.options]


def build_rows(state: PanelViewState) -> list[PanelRow]:
    rows: list[PanelRow] = []
    for view in state.categories:
        rows.append(PanelRow("header", view.category))
        if view.is_open:
            rows.extend(_option_rows(view))
    footer = state.footer
    if footer.can_move_left:
        rows.append(PanelRow("footer", action="move_left"))
    if footer.can_move_right:
        rows.append(PanelRow("footer", action="move_right"))
    if footer.show_expand_toggle:
        rows.append(PanelRow("footer", action="toggle_expand_all"))
    rows.append(PanelRow("footer", action="delete"))
    return rows


class ColumnOptionsPanel(Static, can_focus=True):
    """Filter options for one column."""

    DEFAULT_CSS = """
    ColumnOptionsPanel {
        width: 1fr;
        height: auto;
        padding: 0 1;
        border: round $accent;
    }

    ColumnOptionsPanel.-full-height {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("up,k", "cursor(-1)", "Up", show=False),
        Binding("down,j", "cursor(1)", "Down", show=False),
        Binding("enter,space", "activate", "Toggle"),
        Binding("e", "toggle_expand_all", "Expand/collapse"),
        Binding("left_square_bracket", "move_left", "Move left"),
        Binding("right_square_bracket", "move_right", "Move right"),
        Binding("d", "delete_column", "Remove"),
    ]

    def __init__(self, controller: PanelController, *, id: str | None = None):
        super().__init__("", id=id)
        self._controller = controller
        self._view_reaction = None
        self._cursor = 0
        self._rows: list[PanelRow] = []
        self._rendered = Text()
        self.set_class(controller.params.full_height, "-full-height")

    @property
    def controller(self) -> PanelController:
        return self._controller

    @property
    def rows(self) -> list[PanelRow]:
        return list(self._rows)

    @property
    def cursor_row(self) -> PanelRow | None:
        return self._rows[self._cursor] if self._rows else None

    @property
    def rendered_text(self) -> Text:
        """The text most recently pushed to the screen."""
        return self._rendered

    def on_mount(self) -> None:
        self._bind_controller()

    def on_unmount(self) -> None:
        self._dispose_reaction()

    def set_controller(self, controller: PanelController) -> None:
        """Switch to another column's controller; the cursor starts over."""
        self._controller = controller
        self._cursor = 0
        self._rows = []
        self.set_class(controller.params.full_height, "-full-height")
        if self.is_mounted:
            self._bind_controller()

    def _bind_controller(self) -> None:
        self._dispose_reaction()
        controller = self._controller
        self._view_reaction = stx.reaction(
            self.app,
            lambda: controller.view_state.get(),
            self.show_state,
        )
        self.show_state(controller.view_state.get())

    def _dispose_reaction(self) -> None:
        if self._view_reaction is not None:
            self._view_reaction.dispose()
            self._view_reaction = None

    def show_state(self, state: PanelViewState) -> None:
        """Rebuild cursor stops for ``state`` and re-render; the cursor keeps its row."""
        current = self.cursor_row
        self._rows = build_rows(state)
        if current in self._rows:
            self._cursor = self._rows.index(current)
        else:
            self._cursor = max(0, min(self._cursor, len(self._rows) - 1))
        self._paint(self.render_text(state))

    def _paint(self, text: Text) -> None:
        self._rendered = text
        self.update(text)

    # ─── Rendering ────────────────────────────────────────────────────

    def render_text(self, state: PanelViewState | None = None) -> Text:
        state = state if state is not None else self._controller.view_state.get()
        text = Text()
        views = {view.category: view for view in state.categories}
        for i, row in enumerate(self._rows):
            selected = i == self._cursor
            if row.kind == "header":
                self._render_header(text, views[row.category], selected)
            elif row.kind == "option":
                self._render_option(text, views[row.category], row.option, selected)
            else:
                self._render_footer(text, row.action, state.footer.expand_toggle_label, selected)
            text.append("\n")
        return text

    @staticmethod
    def _render_header(text: Text, view: CategoryView, selected: bool) -> None:
        arrow = _OPEN_ARROW if view.is_open else _CLOSED_ARROW
        style = "reverse bold" if selected else "bold"
        text.append(f"{arrow} {view.title}", style=style)
        text.append("  ")
        text.append(view.subtitle, style="bold" if view.has_changed else "dim")

    @staticmethod
    def _render_option(text: Text, view: CategoryView, option, selected: bool) -> None:
        body = view.body
        disabled, color, description = False, None, None
        text.append("    ")
        if isinstance(body, _fs.SavedView):
            marker, label = _CHECK_MARKERS[body.checked], "Saved for later"
        elif isinstance(body, _fs.PairView):
            pair_option = body.options[option]
            markers = _RADIO_MARKERS if view.category is CategoryId.INBOX else _CHECK_MARKERS
            marker, label, disabled = markers[pair_option.checked], pair_option.label, pair_option.disabled
        else:
            checkbox = next(o for o in body.options if o.key == option)
            marker, label = _CHECK_MARKERS[checkbox.displayed_state], checkbox.label
            color, description = checkbox.item.color, checkbox.item.description
        style = "dim" if disabled else ""
        if selected:
            style = f"{style} reverse".strip()
        text.append(marker, style=f"{style} {color}".strip() if color else style)
        text.append(f" {label}", style=style)
        if selected and description:
            text.append(f"  {description}", style="dim italic")

    @staticmethod
    def _render_footer(text: Text, action: str, expand_label: str, selected: bool) -> None:
        labels = {
            "move_left": "← Move left",
            "move_right": "Move right →",
            "toggle_expand_all": expand_label,
            "delete": "Remove column",
        }
        style = "reverse italic" if selected else "italic"
        text.append(labels[action], style=style)

    # ─── Actions ──────────────────────────────────────────────────────

    def action_cursor(self, delta: int) -> None:
        if self._rows:
            self._cursor = (self._cursor + delta) % len(self._rows)
            self._paint(self.render_text())

    def action_activate(self) -> None:
        row = self.cursor_row
        if row is None:
            return
        if row.kind == "header":
            self._controller.toggle_category(row.category)
        elif row.kind == "option":
            self._controller.activate(row.category, row.option)
        else:
            getattr(self._controller, row.action)()

    def action_toggle_expand_all(self) -> None:
        self._controller.toggle_expand_all()

    def action_move_left(self) -> None:
        self._controller.move_left()

    def action_move_right(self) -> None:
        self._controller.move_right()

    def action_delete_column(self) -> None:
        self._controller.delete()
