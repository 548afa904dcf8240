"""CLI entry point for column-options."""

import argparse
import logging

import column_options.io.logging_setup
import column_options.io.settings
from column_options.app.column_store import ColumnStore
from column_options.core.categories import ColumnType
from column_options.core.column import Column
from column_options.tui.app import ColumnOptionsApp, sample_columns

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Per-column filter options panel")
    parser.add_argument(
        "--type",
        dest="column_type",
        type=str,
        default=None,
        help="Show a single column of this type (notifications, activity, issue_or_pr, ...)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=0,
        help="Available height used for the start-expanded policy (default: terminal height)",
    )
    parser.add_argument(
        "--force-open-all",
        action="store_true",
        default=None,
        help="Open every category and disable collapsing",
    )
    parser.add_argument(
        "--full-height", action="store_true", help="Let the panel fill the screen"
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Height at which the panel starts expanded (default: from settings)",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist --threshold and --force-open-all to the settings file",
    )
    expanded = parser.add_mutually_exclusive_group()
    expanded.add_argument(
        "--expanded", dest="start_expanded", action="store_const", const=True, default=None,
        help="Start with every category open",
    )
    expanded.add_argument(
        "--collapsed", dest="start_expanded", action="store_const", const=False,
        help="Start with every category closed",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    log_file = column_options.io.logging_setup.configure()
    stored = column_options.io.settings.load_panel_settings()
    panel_settings = column_options.io.settings.PanelSettings(
        expanded_height_threshold=stored.expanded_height_threshold
        if args.threshold is None
        else max(0, args.threshold),
        force_open_all=stored.force_open_all if args.force_open_all is None else True,
    )
    if args.save_defaults:
        column_options.io.settings.save_panel_settings(panel_settings)

    if args.column_type:
        known = {t.value for t in ColumnType}
        if args.column_type not in known:
            logger.info("unknown column type %r, showing the common categories", args.column_type)
        store = ColumnStore([Column("column", args.column_type, {})])
    else:
        store = ColumnStore(sample_columns())

    logger.info(
        "starting: %d column(s), log file %s", len(store.column_ids), log_file
    )
    app = ColumnOptionsApp(
        store,
        available_height=args.height,
        force_open_all=panel_settings.force_open_all,
        full_height=args.full_height,
        start_expanded=args.start_expanded,
        expanded_height_threshold=panel_settings.expanded_height_threshold,
    )
    app.run()


if __name__ == "__main__":
    main()
