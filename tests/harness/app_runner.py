"""App lifecycle management for Textual in-process tests.

Creates ColumnOptionsApp instances wired for testing and manages run_test() lifecycle.
State isolation: every call creates a fresh store and app.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from textual.pilot import Pilot

from column_options.app.column_store import ColumnStore
from column_options.tui.app import ColumnOptionsApp, sample_columns


@asynccontextmanager
async def run_app(
    *,
    store: ColumnStore | None = None,
    size: tuple[int, int] = (80, 40),
    **app_kwargs,
) -> AsyncIterator[tuple[Pilot, ColumnOptionsApp]]:
    """Create and run a ColumnOptionsApp in test mode.

    Yields (pilot, app) tuple.

    Args:
        store: Column store; defaults to a fresh store over sample_columns().
        size: Terminal dimensions (width, height).
        **app_kwargs: Forwarded to ColumnOptionsApp (force_open_all, start_expanded, ...).
    """
    # [LAW:no-shared-mutable-globals] Fresh state for every test
    store = store if store is not None else ColumnStore(sample_columns())
    app = ColumnOptionsApp(store, **app_kwargs)

    async with app.run_test(size=size) as pilot:
        await pilot.pause()
        yield pilot, app
