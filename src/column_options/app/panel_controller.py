"""Panel controller — composes registry, catalogs, filter engine and disclosure.

// [LAW:one-way-deps] No widget imports. The TUI renders the view-models
//   produced here and routes user input back through the public methods.
// [LAW:single-enforcer] Disabled affordances and force-open mode are
//   enforced here; refused edits never reach ColumnActions.

One controller per panel instance. Its state is three snarfx observables
(column, params, disclosure); `view_state` is the single computed the panel
reacts to. Filter values are always re-read from the current Column.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from snarfx import Observable, computed, transaction

from column_options.core import catalogs as _catalogs
from column_options.core import column as _column
from column_options.core import disclosure as _disclosure
from column_options.core import filter_state as _fs
from column_options.core.categories import CATEGORY_SPECS, CategoryId, applicable_categories
from column_options.core.column import Column

logger = logging.getLogger(__name__)

DEFAULT_EXPANDED_HEIGHT_THRESHOLD = 1000


class ColumnActions(Protocol):
    """Mutation callbacks owned by the external column store.

    Fire-and-forget: return values are ignored.
    """

    def set_participating(self, column_id: str, participating: bool) -> None: ...

    def set_saved(self, column_id: str, saved: bool | None) -> None: ...

    def set_unread(self, column_id: str, unread: bool | None) -> None: ...

    def set_privacy(self, column_id: str, private: bool | None) -> None: ...

    def set_subject_type(self, column_id: str, subject_type: str, value: bool | None) -> None: ...

    def set_notification_reason(self, column_id: str, reason: str, value: bool | None) -> None: ...

    def set_activity_action(self, column_id: str, action: str, value: bool | None) -> None: ...

    def move_column(self, column_id: str, column_index: int) -> None: ...

    def delete_column(self, column_id: str) -> None: ...


@dataclass(frozen=True)
class PanelParams:
    """Instantiation parameters; configuration, not controller state."""

    available_height: int = 0
    force_open_all: bool = False
    full_height: bool = False
    start_expanded: bool | None = None
    column_index: int = 0
    column_count: int = 1

    def resolve_start_expanded(
        self, threshold: int = DEFAULT_EXPANDED_HEIGHT_THRESHOLD
    ) -> bool:
        if self.start_expanded is not None:
            return self.start_expanded
        return self.available_height >= threshold


CategoryBody = _fs.PairView | _fs.SavedView | _fs.MultiOptionView


@dataclass(frozen=True)
class CategoryView:
    category: CategoryId
    title: str
    icon: str
    subtitle: str
    has_changed: bool
    is_open: bool
    can_toggle: bool
    body: CategoryBody


@dataclass(frozen=True)
class FooterView:
    can_move_left: bool
    can_move_right: bool
    show_expand_toggle: bool
    all_open: bool
    expand_toggle_label: str


@dataclass(frozen=True)
class PanelViewState:
    """Everything the panel draws, as one comparable value."""

    categories: tuple[CategoryView, ...]
    footer: FooterView


# ─── Category bodies ─────────────────────────────────────────────────────────
# [LAW:dataflow-not-control-flow] One entry per category; consulted per render.


def _inbox_body(column: Column):
    return _fs.inbox_view(_column.participating_filter(column.filters))


def _saved_body(column: Column):
    return _fs.saved_view(_column.saved_filter(column.filters))


def _unread_body(column: Column):
    return _fs.unread_view(_column.unread_filter(column.filters))


def _privacy_body(column: Column):
    return _fs.privacy_view(_column.private_filter(column.filters))


def _subject_types_body(column: Column):
    return _fs.multi_option_view(
        _column.subject_types_filter(column.filters),
        _catalogs.subject_type_catalog(column.type),
    )


def _notification_reason_body(column: Column):
    return _fs.multi_option_view(
        _column.notification_reasons_filter(column.filters),
        _catalogs.notification_reason_options(),
    )


def _event_action_body(column: Column):
    return _fs.multi_option_view(
        _column.activity_actions_filter(column.filters),
        _catalogs.event_action_options(),
    )


_BODY_BUILDERS: dict[CategoryId, Callable[[Column], CategoryBody | None]] = {
    CategoryId.INBOX: _inbox_body,
    CategoryId.SAVED_FOR_LATER: _saved_body,
    CategoryId.UNREAD: _unread_body,
    CategoryId.PRIVACY: _privacy_body,
    CategoryId.SUBJECT_TYPES: _subject_types_body,
    CategoryId.NOTIFICATION_REASON: _notification_reason_body,
    CategoryId.EVENT_ACTION: _event_action_body,
}


def _unread_icon(column: Column, default: str) -> str:
    return "mail" if _column.unread_filter(column.filters) is True else default


def _privacy_icon(column: Column, default: str) -> str:
    return "globe" if _column.private_filter(column.filters) is False else default


_ICON_OVERRIDES: dict[CategoryId, Callable[[Column, str], str]] = {
    CategoryId.UNREAD: _unread_icon,
    CategoryId.PRIVACY: _privacy_icon,
}


# ─── Controller ──────────────────────────────────────────────────────────────


class PanelController:
    """Per-panel coordinator: view-models out, mutations forwarded."""

    def __init__(
        self,
        column: Column,
        actions: ColumnActions,
        params: PanelParams | None = None,
        *,
        expanded_height_threshold: int = DEFAULT_EXPANDED_HEIGHT_THRESHOLD,
    ):
        params = params or PanelParams()
        self._actions = actions
        self._column = Observable(column)
        self._params = Observable(params)
        self._disclosure = Observable(
            _disclosure.initial_state(
                applicable_categories(column.type),
                force_open_all=params.force_open_all,
                start_expanded=params.resolve_start_expanded(expanded_height_threshold),
            )
        )

        # [LAW:one-source-of-truth] The panel renders from this computed only.
        @computed
        def view_state():
            return PanelViewState(
                categories=tuple(self.category_views()),
                footer=self.footer_view(),
            )

        self.view_state = view_state

    # ─── State ────────────────────────────────────────────────────────

    @property
    def column(self) -> Column:
        return self._column.get()

    @property
    def params(self) -> PanelParams:
        return self._params.get()

    @property
    def disclosure(self) -> _disclosure.DisclosureState:
        return self._disclosure.get()

    @property
    def categories(self) -> tuple[CategoryId, ...]:
        return applicable_categories(self.column.type)

    @property
    def can_toggle_categories(self) -> bool:
        return not self.params.force_open_all

    def set_column(self, column: Column) -> None:
        """Swap in a fresh read of the column (e.g. after a store update)."""
        type_changed = column.type != self.column.type
        with transaction():
            self._column.set(column)
            if not type_changed:
                return
            if self.params.force_open_all:
                state = _disclosure.expand_all(self.disclosure, self.categories)
            else:
                state = _disclosure.restrict(self.disclosure, self.categories)
            self._disclosure.set(state)
        logger.debug(
            "column %s type changed to %s, open=%s",
            column.id,
            column.type,
            sorted(c.value for c in state.open_categories),
        )

    def set_params(self, params: PanelParams) -> None:
        self._params.set(params)

    # ─── View-models ──────────────────────────────────────────────────

    def category_view(self, category: CategoryId) -> CategoryView | None:
        """View-model for one category, or None when it does not render."""
        if category not in self.categories:
            return None
        column = self.column
        body = _BODY_BUILDERS[category](column)
        if body is None:
            return None
        spec = CATEGORY_SPECS[category]
        icon_override = _ICON_OVERRIDES.get(category)
        icon = icon_override(column, spec.icon) if icon_override else spec.icon
        return CategoryView(
            category=category,
            title=spec.title,
            icon=icon,
            subtitle=body.subtitle,
            has_changed=body.has_changed,
            is_open=self.disclosure.is_open(category),
            can_toggle=self.can_toggle_categories,
            body=body,
        )

    def category_views(self) -> list[CategoryView]:
        views = (self.category_view(category) for category in self.categories)
        return [view for view in views if view is not None]

    def footer_view(self) -> FooterView:
        params = self.params
        all_open = self.all_open
        return FooterView(
            can_move_left=params.column_index > 0,
            can_move_right=params.column_index < params.column_count - 1,
            show_expand_toggle=self.can_toggle_categories,
            all_open=all_open,
            expand_toggle_label="Collapse filters" if all_open else "Expand filters",
        )

    @property
    def all_open(self) -> bool:
        return _disclosure.all_open(self.disclosure, self.categories)

    # ─── Disclosure transitions ───────────────────────────────────────

    def _accepts_disclosure_change(self, action: str) -> bool:
        if self.can_toggle_categories:
            return True
        logger.debug("ignoring %s: categories are forced open", action)
        return False

    def toggle_category(self, category: CategoryId) -> None:
        if not self._accepts_disclosure_change("toggle"):
            return
        if category not in self.categories:
            logger.debug("ignoring toggle of %s: not applicable to %s", category, self.column.type)
            return
        self._disclosure.set(_disclosure.toggle(self.disclosure, category))

    def expand_all(self) -> None:
        if self._accepts_disclosure_change("expand_all"):
            self._disclosure.set(_disclosure.expand_all(self.disclosure, self.categories))

    def collapse_all(self) -> None:
        if self._accepts_disclosure_change("collapse_all"):
            self._disclosure.set(_disclosure.collapse_all(self.disclosure))

    def toggle_expand_all(self) -> None:
        """Footer button: collapse when everything is open, else expand."""
        if self.all_open:
            self.collapse_all()
        else:
            self.expand_all()

    # ─── Filter edits ─────────────────────────────────────────────────

    def set_option(self, category: CategoryId, key: str, value: bool | None) -> None:
        """Write one option of a multi-option category; no other key is touched."""
        setter = {
            CategoryId.SUBJECT_TYPES: self._actions.set_subject_type,
            CategoryId.NOTIFICATION_REASON: self._actions.set_notification_reason,
            CategoryId.EVENT_ACTION: self._actions.set_activity_action,
        }.get(category)
        view = self.category_view(category)
        if setter is None or view is None:
            logger.debug("ignoring option edit for %s", category)
            return
        if not any(option.key == key for option in view.body.options):
            logger.debug("ignoring unknown %s option %r", category.value, key)
            return
        column_id = self.column.id
        logger.debug("column %s: %s[%s] = %r", column_id, category.value, key, value)
        setter(column_id, key, value)

    def set_pair_option(self, category: CategoryId, index: int, checked: bool) -> None:
        """Set one side of a two-option category (inbox, read status, privacy)."""
        view = self.category_view(category)
        if view is None or not isinstance(view.body, _fs.PairView):
            logger.debug("ignoring pair edit for %s", category)
            return
        if index not in (0, 1):
            logger.debug("ignoring %s edit: no option at index %r", category.value, index)
            return
        option = view.body.options[index]
        if option.disabled and not checked:
            logger.debug("refusing to uncheck %s: last checked option", option.label)
            return

        column = self.column
        if category is CategoryId.INBOX:
            self._actions.set_participating(
                column.id, _fs.participating_after_toggle(index, checked)
            )
            return

        stored = (
            _column.unread_filter(column.filters)
            if category is CategoryId.UNREAD
            else _column.private_filter(column.filters)
        )
        value = _fs.pair_value_after_toggle(stored, index, checked)
        logger.debug("column %s: %s = %r", column.id, category.value, value)
        if category is CategoryId.UNREAD:
            self._actions.set_unread(column.id, value)
        else:
            self._actions.set_privacy(column.id, value)

    def set_saved(self, saved: bool | None) -> None:
        if CategoryId.SAVED_FOR_LATER not in self.categories:
            return
        self._actions.set_saved(self.column.id, saved)

    def activate(self, category: CategoryId, option: str | int) -> None:
        """Click/enter on a rendered checkbox: compute its next value and write it.

        ``option`` is an option key for multi-option categories, the pair index
        for two-option categories, and ignored for saved-for-later.
        """
        view = self.category_view(category)
        if view is None:
            return
        body = view.body
        if isinstance(body, _fs.SavedView):
            self.set_saved(_fs.next_checkbox_value(body.checked))
        elif isinstance(body, _fs.PairView):
            if option not in (0, 1):
                logger.debug("ignoring %s activation: no option %r", category.value, option)
                return
            self.set_pair_option(category, option, not body.options[option].checked)
        else:
            checkbox = next((o for o in body.options if o.key == option), None)
            if checkbox is None:
                logger.debug("ignoring unknown %s option %r", category.value, option)
                return
            self.set_option(
                category,
                checkbox.key,
                _fs.next_checkbox_value(
                    checkbox.checked, checkbox.default_value, checkbox.indeterminate_enabled
                ),
            )

    # ─── Column operations ────────────────────────────────────────────

    def move_left(self) -> None:
        if self.footer_view().can_move_left:
            self._actions.move_column(self.column.id, self.params.column_index - 1)

    def move_right(self) -> None:
        if self.footer_view().can_move_right:
            self._actions.move_column(self.column.id, self.params.column_index + 1)

    def delete(self) -> None:
        logger.debug("deleting column %s", self.column.id)
        self._actions.delete_column(self.column.id)
