"""Disclosure state machine — which category rows are expanded.

Adaptive accordion: while ``exclusive_mode`` is set, opening a category closes
every other one. expand_all() drops exclusivity so several rows stay open;
the first manual toggle after that collapses back to a single row, and once
nothing is open exclusivity is re-armed.

// [LAW:one-source-of-truth] DisclosureState is the whole state — no side flags.
// [LAW:dataflow-not-control-flow] Transitions are pure and return new values.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from column_options.core.categories import CategoryId


@dataclass(frozen=True)
class DisclosureState:
    open_categories: frozenset[CategoryId] = frozenset()
    exclusive_mode: bool = True

    def is_open(self, category: CategoryId) -> bool:
        return category in self.open_categories


def initial_state(
    categories: Iterable[CategoryId],
    *,
    force_open_all: bool = False,
    start_expanded: bool = False,
) -> DisclosureState:
    if force_open_all or start_expanded:
        return DisclosureState(frozenset(categories), exclusive_mode=False)
    return DisclosureState()


def toggle(state: DisclosureState, category: CategoryId) -> DisclosureState:
    was_open = category in state.open_categories
    opened = set() if state.exclusive_mode else set(state.open_categories)
    if was_open:
        opened.discard(category)
    else:
        opened.add(category)
    # Empty set re-arms exclusivity
    return DisclosureState(frozenset(opened), state.exclusive_mode or not opened)


def expand_all(state: DisclosureState, categories: Iterable[CategoryId]) -> DisclosureState:
    return DisclosureState(frozenset(categories), exclusive_mode=False)


def collapse_all(state: DisclosureState) -> DisclosureState:
    return DisclosureState()


def restrict(state: DisclosureState, categories: Iterable[CategoryId]) -> DisclosureState:
    """Re-intersect the open set with a (possibly changed) applicable set."""
    opened = state.open_categories & frozenset(categories)
    return DisclosureState(opened, state.exclusive_mode or not opened)


def all_open(state: DisclosureState, categories: Iterable[CategoryId]) -> bool:
    wanted = frozenset(categories)
    return bool(wanted) and wanted <= state.open_categories
