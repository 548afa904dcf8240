"""Column store — in-memory owner of columns and their filter mappings.

// [LAW:one-source-of-truth] Column order and filters live here.
// [LAW:one-way-deps] No widget imports.

Implements the ColumnActions callbacks the panel controller dispatches to.
Nothing is persisted; the store lives for the lifetime of the app.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable

from column_options.core.column import Column

logger = logging.getLogger(__name__)


class ColumnStore:
    """Ordered columns. All mutations go through public methods; on_change fires after."""

    def __init__(self, columns: Iterable[Column] = ()):
        self._order: list[str] = []
        self._types: dict[str, str] = {}
        self._filters: dict[str, dict] = {}
        self.on_change: Callable[[], None] | None = None
        for column in columns:
            self.add_column(column)

    # ─── Reads ────────────────────────────────────────────────────────

    @property
    def column_ids(self) -> list[str]:
        return list(self._order)

    def get(self, column_id: str) -> Column | None:
        if column_id not in self._types:
            return None
        # Callers get a snapshot; the store's dict stays private.
        return Column(column_id, self._types[column_id], copy.deepcopy(self._filters[column_id]))

    def index_of(self, column_id: str) -> int:
        return self._order.index(column_id)

    # ─── Column operations ────────────────────────────────────────────

    def add_column(self, column: Column) -> None:
        if column.id in self._types:
            raise ValueError(f"duplicate column id: {column.id}")
        self._order.append(column.id)
        self._types[column.id] = column.type
        self._filters[column.id] = copy.deepcopy(dict(column.filters or {}))

    def move_column(self, column_id: str, column_index: int) -> None:
        if column_id not in self._types:
            logger.warning("move_column: unknown column %s", column_id)
            return
        index = max(0, min(len(self._order) - 1, column_index))
        self._order.remove(column_id)
        self._order.insert(index, column_id)
        self._changed()

    def delete_column(self, column_id: str) -> None:
        if column_id not in self._types:
            logger.warning("delete_column: unknown column %s", column_id)
            return
        self._order.remove(column_id)
        del self._types[column_id]
        del self._filters[column_id]
        self._changed()

    # ─── Filter setters ───────────────────────────────────────────────

    def set_participating(self, column_id: str, participating: bool) -> None:
        self._set(column_id, ("notifications", "participating"), bool(participating))

    def set_saved(self, column_id: str, saved: bool | None) -> None:
        self._set(column_id, ("saved",), saved)

    def set_unread(self, column_id: str, unread: bool | None) -> None:
        self._set(column_id, ("unread",), unread)

    def set_privacy(self, column_id: str, private: bool | None) -> None:
        self._set(column_id, ("private",), private)

    def set_subject_type(self, column_id: str, subject_type: str, value: bool | None) -> None:
        self._set(column_id, ("subjectTypes", subject_type), value)

    def set_notification_reason(self, column_id: str, reason: str, value: bool | None) -> None:
        self._set(column_id, ("notifications", "reasons", reason), value)

    def set_activity_action(self, column_id: str, action: str, value: bool | None) -> None:
        self._set(column_id, ("activity", "actions", action), value)

    # ─── Internals ────────────────────────────────────────────────────

    def _set(self, column_id: str, path: tuple[str, ...], value) -> None:
        filters = self._filters.get(column_id)
        if filters is None:
            logger.warning("filter update for unknown column %s", column_id)
            return
        node = filters
        for key in path[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        # None clears the key: absent and None mean the same thing
        if value is None:
            node.pop(path[-1], None)
        else:
            node[path[-1]] = value
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
