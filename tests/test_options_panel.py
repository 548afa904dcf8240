"""Options panel tests using Textual in-process harness."""

import pytest

from column_options.app.column_store import ColumnStore
from column_options.app.panel_controller import PanelController, PanelParams
from column_options.core.categories import CategoryId
from column_options.core.column import Column
from column_options.tui.options_panel import PanelRow, build_rows
from tests.harness import (
    cursor_row,
    get_panel,
    move_cursor_to,
    open_categories,
    panel_text,
    press_and_settle,
    run_app,
)

pytestmark = pytest.mark.textual


def _header(category):
    return lambda row: row == PanelRow("header", category)


def _option(category, option):
    return lambda row: row == PanelRow("option", category, option)


def test_build_rows_collapsed_notifications():
    store = ColumnStore([Column("n", "notifications", {})])
    controller = PanelController(store.get("n"), store, PanelParams(column_index=0, column_count=2))
    rows = build_rows(controller.view_state.get())
    assert [r.category for r in rows if r.kind == "header"] == list(controller.categories)
    assert [r.action for r in rows if r.kind == "footer"] == [
        "move_right",
        "toggle_expand_all",
        "delete",
    ]


async def test_initial_render_collapsed():
    async with run_app() as (pilot, app):
        text = panel_text(app)
        assert "Inbox  All" in text
        assert "Saved for later  Included" in text
        assert "Subscription reason  All" in text
        assert "Expand filters" in text
        assert open_categories(app) == frozenset()
        assert cursor_row(app) == PanelRow("header", CategoryId.INBOX)


async def test_enter_on_header_opens_one_category():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "enter")
        assert open_categories(app) == {CategoryId.INBOX}

        await move_cursor_to(pilot, _header(CategoryId.UNREAD))
        await press_and_settle(pilot, "enter")
        assert open_categories(app) == {CategoryId.UNREAD}
        assert "[x] Read" in panel_text(app)


async def test_checkbox_edit_updates_store_and_subtitle():
    async with run_app() as (pilot, app):
        await move_cursor_to(pilot, _header(CategoryId.UNREAD))
        await press_and_settle(pilot, "enter")
        await move_cursor_to(pilot, _option(CategoryId.UNREAD, 0))
        await press_and_settle(pilot, "space")

        assert app.store.get("notifications").filters == {"unread": True}
        text = panel_text(app)
        assert "Read status  Unread" in text
        assert "[ ] Read" in text
        # Cursor stays on the edited checkbox
        assert cursor_row(app) == PanelRow("option", CategoryId.UNREAD, 0)

        # Unread is now the last checked option and can't be unchecked
        await press_and_settle(pilot, "down", "enter")
        assert app.store.get("notifications").filters == {"unread": True}


async def test_subject_type_cycle():
    async with run_app() as (pilot, app):
        await move_cursor_to(pilot, _header(CategoryId.SUBJECT_TYPES))
        await press_and_settle(pilot, "enter")
        await move_cursor_to(pilot, _option(CategoryId.SUBJECT_TYPES, "Issue"))
        await press_and_settle(pilot, "enter")
        assert app.store.get("notifications").filters == {"subjectTypes": {"Issue": True}}
        assert "Subject type  1/6" in panel_text(app)


async def test_expand_all_and_collapse_all():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "e")
        panel = get_panel(app)
        assert panel.controller.all_open
        assert "Collapse filters" in panel_text(app)

        await press_and_settle(pilot, "e")
        assert open_categories(app) == frozenset()
        assert panel.controller.disclosure.exclusive_mode is True


async def test_start_expanded_from_height():
    async with run_app(available_height=1200) as (pilot, app):
        assert get_panel(app).controller.all_open


async def test_force_open_all_ignores_header_toggle():
    async with run_app(force_open_all=True) as (pilot, app):
        await press_and_settle(pilot, "enter")
        assert get_panel(app).controller.all_open
        assert "Expand filters" not in panel_text(app)
        assert "Collapse filters" not in panel_text(app)


async def test_next_column_resets_disclosure():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "enter")
        await press_and_settle(pilot, "n")
        assert app.column_id == "activity"
        assert open_categories(app) == frozenset()
        assert "Event action" in panel_text(app)
        assert "Inbox" not in panel_text(app)


async def test_move_column_right():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "right_square_bracket")
        assert app.store.column_ids == ["activity", "notifications", "issues"]
        footer = get_panel(app).controller.footer_view()
        assert footer.can_move_left and footer.can_move_right


async def test_delete_column_shows_next():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "d")
        assert app.store.column_ids == ["activity", "issues"]
        assert app.column_id == "activity"
        assert get_panel(app).controller.column.id == "activity"


async def test_delete_last_column_shows_empty_message():
    store = ColumnStore([Column("only", "issue_or_pr", {})])
    async with run_app(store=store) as (pilot, app):
        await press_and_settle(pilot, "d")
        assert store.column_ids == []
        assert get_panel(app).display is False
        assert app.query_one("#empty-message").display is True


async def test_strict_allow_list_draws_unset_options_unchecked():
    store = ColumnStore([Column("n", "notifications", {"subjectTypes": {"Issue": True}})])
    async with run_app(store=store) as (pilot, app):
        await move_cursor_to(pilot, _header(CategoryId.SUBJECT_TYPES))
        await press_and_settle(pilot, "enter")
        text = panel_text(app)
        assert "[x] Issue" in text
        assert "[ ] Commit" in text
        assert "[-]" not in text


async def test_deny_list_draws_unset_options_indeterminate():
    store = ColumnStore([Column("n", "notifications", {"subjectTypes": {"Commit": False}})])
    async with run_app(store=store) as (pilot, app):
        await move_cursor_to(pilot, _header(CategoryId.SUBJECT_TYPES))
        await press_and_settle(pilot, "enter")
        text = panel_text(app)
        assert "[ ] Commit" in text
        assert "[-] Issue" in text


async def test_selected_reason_shows_description():
    async with run_app() as (pilot, app):
        await move_cursor_to(pilot, _header(CategoryId.NOTIFICATION_REASON))
        await press_and_settle(pilot, "enter")
        description = "You were specifically @mentioned in the content"
        assert description not in panel_text(app)
        await move_cursor_to(pilot, _option(CategoryId.NOTIFICATION_REASON, "mention"))
        assert description in panel_text(app)


async def test_disclosure_change_repaints_without_manual_refresh():
    async with run_app() as (pilot, app):
        panel = get_panel(app)
        panel.controller.toggle_category(CategoryId.PRIVACY)
        await pilot.pause()
        assert "[x] Public" in panel_text(app)
        assert PanelRow("option", CategoryId.PRIVACY, 1) in panel.rows
