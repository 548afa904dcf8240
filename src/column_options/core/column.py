"""Column read model and null-safe accessors into its filters mapping.

The filters mapping is owned by an external store; these helpers only read.
Any level of the nesting may be missing, None, or the wrong type.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Column:
    id: str
    type: str
    filters: Mapping | None = field(default=None)


def _get(mapping, *path):
    current = mapping
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _record(value) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def participating_filter(filters):
    return _get(filters, "notifications", "participating")


def saved_filter(filters):
    return _get(filters, "saved")


def unread_filter(filters):
    return _get(filters, "unread")


def private_filter(filters):
    return _get(filters, "private")


def subject_types_filter(filters) -> Mapping:
    return _record(_get(filters, "subjectTypes"))


def notification_reasons_filter(filters) -> Mapping:
    return _record(_get(filters, "notifications", "reasons"))


def activity_actions_filter(filters) -> Mapping:
    return _record(_get(filters, "activity", "actions"))
