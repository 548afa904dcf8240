"""Filter state engine — tri-state filter records to checkbox view-models.

// [LAW:dataflow-not-control-flow] Every function here is pure: stored filter
//   values in, frozen view-model out. Nothing raises on malformed input.

Two families:

- Two-option pairs (read status, privacy, inbox) derive a pair of booleans
  from one stored scalar and fold an edited pair back into a scalar.
- Multi-option catalogs (subject types, notification reasons, event actions)
  read a ``{option_key: bool | None}`` record over an OptionItem catalog.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from column_options.core.catalogs import OptionItem

FilterRecord = Mapping[str, bool | None]

ALL_SUBTITLE = "All"


def _as_bool(value) -> bool | None:
    """Stored value → True/False, anything else is "no preference"."""
    return value if isinstance(value, bool) else None


# ─── Two-option exclusive pairs ──────────────────────────────────────────────


def decompose(value) -> tuple[bool, bool]:
    """Stored scalar → (first checked, second checked).

    True selects only the second option, False only the first, unset both.
    """
    value = _as_bool(value)
    if value is None:
        return True, True
    return (False, True) if value else (True, False)


def combine(first: bool, second: bool) -> bool | None:
    """Checked pair → stored scalar. Inverse of decompose().

    (False, False) is never produced by the panel because the last checked
    box is disabled; it folds to None like (True, True).
    """
    if first and second:
        return None
    if first:
        return False
    if second:
        return True
    return None


@dataclass(frozen=True)
class PairOption:
    label: str
    checked: bool
    disabled: bool


@dataclass(frozen=True)
class PairView:
    first: PairOption
    second: PairOption
    subtitle: str
    has_changed: bool

    @property
    def options(self) -> tuple[PairOption, PairOption]:
        return (self.first, self.second)


def exclusive_pair_view(value, first_label: str, second_label: str) -> PairView:
    """View-model for a pair where at least one option must stay checked."""
    first, second = decompose(value)
    if first and not second:
        subtitle = first_label
    elif second and not first:
        subtitle = second_label
    else:
        subtitle = ALL_SUBTITLE
    return PairView(
        first=PairOption(first_label, first, disabled=first and not second),
        second=PairOption(second_label, second, disabled=second and not first),
        subtitle=subtitle,
        has_changed=_as_bool(value) is not None,
    )


def pair_value_after_toggle(value, index: int, checked: bool) -> bool | None:
    """New stored scalar after setting option ``index`` (0 or 1) to ``checked``."""
    pair = list(decompose(value))
    pair[index] = bool(checked)
    return combine(pair[0], pair[1])


def unread_view(value) -> PairView:
    return exclusive_pair_view(value, "Read", "Unread")


def privacy_view(value) -> PairView:
    return exclusive_pair_view(value, "Public", "Private")


def inbox_view(participating) -> PairView:
    """Radio-style pair: All vs Participating. Neither option is disabled."""
    is_participating = bool(participating)
    return PairView(
        first=PairOption("All", not is_participating, disabled=False),
        second=PairOption("Participating", is_participating, disabled=False),
        subtitle="Participating" if is_participating else ALL_SUBTITLE,
        has_changed=is_participating,
    )


def participating_after_toggle(index: int, checked: bool) -> bool:
    """Checking All (0) clears participating; checking Participating (1) sets it."""
    return bool(checked) if index == 1 else not checked


# ─── Saved for later (single tri-state checkbox) ─────────────────────────────


_SAVED_SUBTITLES = {True: "Saved only", False: "Excluded", None: "Included"}


@dataclass(frozen=True)
class SavedView:
    checked: bool | None
    subtitle: str
    has_changed: bool


def saved_view(value) -> SavedView:
    saved = _as_bool(value)
    return SavedView(
        checked=saved,
        subtitle=_SAVED_SUBTITLES[saved],
        has_changed=saved is not None,
    )


# ─── Multi-option catalogs ───────────────────────────────────────────────────


@dataclass(frozen=True)
class CountMetadata:
    checked: int
    total: int

    @property
    def unchecked(self) -> int:
        return self.total - self.checked


@dataclass(frozen=True)
class OptionCheckbox:
    item: OptionItem
    checked: bool | None
    indeterminate_enabled: bool
    default_value: bool

    @property
    def key(self) -> str:
        return self.item.key

    @property
    def label(self) -> str:
        return self.item.label

    @property
    def displayed_state(self) -> bool | None:
        """What the box draws: unset and not eligible for indeterminate reads as unchecked."""
        if self.checked is None and not self.indeterminate_enabled:
            return False
        return self.checked


@dataclass(frozen=True)
class MultiOptionView:
    options: tuple[OptionCheckbox, ...]
    count: CountMetadata
    is_filter_strict: bool
    has_any_forced_value: bool
    subtitle: str

    @property
    def has_changed(self) -> bool:
        return self.has_any_forced_value


def _catalog_values(record: FilterRecord | None, catalog: Sequence[OptionItem]) -> list[bool | None]:
    if not isinstance(record, Mapping):
        return [None] * len(catalog)
    return [_as_bool(record.get(item.key)) for item in catalog]


def filter_record_with_value_count(
    record: FilterRecord | None, catalog: Sequence[OptionItem], value: bool
) -> int:
    """Number of catalog keys whose stored value is exactly ``value``."""
    return sum(1 for stored in _catalog_values(record, catalog) if stored is value)


def filter_record_has_any_forced_value(
    record: FilterRecord | None, catalog: Sequence[OptionItem]
) -> bool:
    return any(stored is not None for stored in _catalog_values(record, catalog))


def filter_count_metadata(
    record: FilterRecord | None,
    catalog: Sequence[OptionItem],
    default_value: bool = True,
) -> CountMetadata:
    """checked/total summary; with no forced values everything counts as checked."""
    total = len(catalog)
    if not filter_record_has_any_forced_value(record, catalog):
        return CountMetadata(checked=total, total=total)
    return CountMetadata(
        checked=filter_record_with_value_count(record, catalog, default_value),
        total=total,
    )


def multi_option_view(
    record: FilterRecord | None,
    catalog: Sequence[OptionItem],
    default_value: bool = True,
) -> MultiOptionView | None:
    """View-model for a multi-option category, or None when the catalog is empty."""
    if not catalog:
        return None

    values = _catalog_values(record, catalog)
    is_strict = filter_record_with_value_count(record, catalog, default_value) > 0
    has_forced = filter_record_has_any_forced_value(record, catalog)
    count = filter_count_metadata(record, catalog, default_value)

    options = tuple(
        OptionCheckbox(
            item=item,
            checked=stored,
            indeterminate_enabled=(not is_strict) or stored is default_value,
            default_value=default_value,
        )
        for item, stored in zip(catalog, values)
    )
    return MultiOptionView(
        options=options,
        count=count,
        is_filter_strict=is_strict,
        has_any_forced_value=has_forced,
        subtitle=f"{count.checked}/{count.total}" if has_forced else ALL_SUBTITLE,
    )


def next_checkbox_value(
    checked: bool | None, default_value: bool = True, indeterminate_enabled: bool = True
) -> bool | None:
    """Value written when a tri-state checkbox is activated.

    unset → default → not default → unset; when indeterminate is disabled the
    cycle skips unset and returns to default.
    """
    checked = _as_bool(checked)
    if checked is None:
        return default_value
    if checked is default_value:
        return not default_value
    return None if indeterminate_enabled else default_value


def record_with(record: FilterRecord | None, key: str, value: bool | None) -> dict:
    """Copy of ``record`` with exactly ``key`` set (or removed when None)."""
    updated = dict(record) if isinstance(record, Mapping) else {}
    if value is None:
        updated.pop(key, None)
    else:
        updated[key] = bool(value)
    return updated
