"""Option catalogs — immutable, label-sorted option lists per category family.

// [LAW:one-source-of-truth] Catalogs are built once from core.metadata and
//   shared process-wide as tuples. Nothing mutates them after construction.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cache

import column_options.core.metadata as _meta
from column_options.core.categories import ColumnType


@dataclass(frozen=True)
class OptionItem:
    """One selectable option under a multi-option category."""

    key: str
    label: str
    color: str | None = None
    description: str | None = None


def build_catalog(
    values: Iterable[str],
    lookup: Callable[[str], _meta.Metadata],
) -> tuple[OptionItem, ...]:
    """Map raw values through ``lookup`` and sort by label.

    Ordinal, case-sensitive comparison. ``sorted`` is stable, so equal labels
    keep their input order and re-sorting a catalog returns it unchanged.
    """
    items = []
    for value in values:
        meta = lookup(value)
        items.append(OptionItem(value, meta.label, meta.color, meta.description))
    return tuple(sorted(items, key=lambda item: item.label))


@cache
def event_action_options() -> tuple[OptionItem, ...]:
    return build_catalog(_meta.event_actions, _meta.event_action_metadata)


@cache
def event_subject_type_options() -> tuple[OptionItem, ...]:
    return build_catalog(_meta.event_subject_types, _meta.subject_type_metadata)


@cache
def issue_or_pull_request_subject_type_options() -> tuple[OptionItem, ...]:
    return build_catalog(
        _meta.issue_or_pull_request_subject_types, _meta.subject_type_metadata
    )


@cache
def notification_subject_type_options() -> tuple[OptionItem, ...]:
    return build_catalog(_meta.notification_subject_types, _meta.subject_type_metadata)


@cache
def notification_reason_options() -> tuple[OptionItem, ...]:
    return build_catalog(_meta.notification_reasons, _meta.notification_reason_metadata)


# [LAW:dataflow-not-control-flow] Column type → subject type catalog as data.
_SUBJECT_TYPE_CATALOGS: dict[str, Callable[[], tuple[OptionItem, ...]]] = {
    ColumnType.ACTIVITY.value: event_subject_type_options,
    ColumnType.ISSUE_OR_PR.value: issue_or_pull_request_subject_type_options,
    ColumnType.NOTIFICATIONS.value: notification_subject_type_options,
}


def subject_type_catalog(column_type) -> tuple[OptionItem, ...]:
    """Subject type options for a column type; empty for unknown types."""
    key = getattr(column_type, "value", column_type)
    factory = _SUBJECT_TYPE_CATALOGS.get(key)
    return factory() if factory is not None else ()
