"""Category registry — which filter categories a column type exposes.

// [LAW:one-source-of-truth] Single table of category ids, presentation data,
//   and per-column-type applicability.

This module is pure data — safe for `from` imports. No dependencies on other
project modules.
"""

from dataclasses import dataclass
from enum import Enum


class CategoryId(str, Enum):
    """Filter category shown as one collapsible row in the options panel."""

    INBOX = "inbox"
    SAVED_FOR_LATER = "saved_for_later"
    UNREAD = "unread"
    EVENT_ACTION = "event_action"
    SUBJECT_TYPES = "subject_types"
    NOTIFICATION_REASON = "notification_reason"
    PRIVACY = "privacy"


class ColumnType(str, Enum):
    NOTIFICATIONS = "notifications"
    ACTIVITY = "activity"
    ISSUE_OR_PR = "issue_or_pr"


@dataclass(frozen=True)
class CategorySpec:
    """Static presentation data for a category row."""

    category: CategoryId
    title: str
    icon: str
    analytics_label: str


CATEGORY_SPECS: dict[CategoryId, CategorySpec] = {
    spec.category: spec
    for spec in (
        CategorySpec(CategoryId.INBOX, "Inbox", "inbox", "inbox"),
        CategorySpec(CategoryId.SAVED_FOR_LATER, "Saved for later", "bookmark", "saved_for_later"),
        CategorySpec(CategoryId.UNREAD, "Read status", "mail-read", "read_status"),
        CategorySpec(CategoryId.EVENT_ACTION, "Event action", "note", "event_action"),
        CategorySpec(CategoryId.SUBJECT_TYPES, "Subject type", "file", "subject_types"),
        CategorySpec(CategoryId.NOTIFICATION_REASON, "Subscription reason", "rss", "notification_reason"),
        CategorySpec(CategoryId.PRIVACY, "Privacy", "lock", "privacy"),
    )
}

# [LAW:one-source-of-truth] Ordered categories per column type.
_CATEGORIES_BY_TYPE: dict[str, tuple[CategoryId, ...]] = {
    ColumnType.NOTIFICATIONS.value: (
        CategoryId.INBOX,
        CategoryId.SAVED_FOR_LATER,
        CategoryId.UNREAD,
        CategoryId.SUBJECT_TYPES,
        CategoryId.NOTIFICATION_REASON,
        CategoryId.PRIVACY,
    ),
    ColumnType.ACTIVITY.value: (
        CategoryId.SAVED_FOR_LATER,
        CategoryId.UNREAD,
        CategoryId.EVENT_ACTION,
        CategoryId.SUBJECT_TYPES,
    ),
}

# Unknown column types resolve to this subset
_DEFAULT_CATEGORIES: tuple[CategoryId, ...] = (
    CategoryId.SAVED_FOR_LATER,
    CategoryId.UNREAD,
    CategoryId.SUBJECT_TYPES,
)


def applicable_categories(column_type) -> tuple[CategoryId, ...]:
    """Return the ordered categories a column of ``column_type`` exposes.

    Never raises: anything that is not a known column type (including None)
    gets the minimal common subset.
    """
    key = column_type.value if isinstance(column_type, Enum) else column_type
    return _CATEGORIES_BY_TYPE.get(key, _DEFAULT_CATEGORIES)
