"""CLI argument parsing and app wiring tests (app.run patched out)."""

from unittest.mock import patch

import column_options.cli as cli
import column_options.io.logging_setup as logging_setup
from column_options.io.settings import PanelSettings, load_panel_settings, save_panel_settings


def run_main(argv):
    captured = {}

    def fake_run(app):
        captured["app"] = app

    logging_setup.reset()
    try:
        with patch("column_options.tui.app.ColumnOptionsApp.run", fake_run):
            cli.main(argv)
    finally:
        logging_setup.reset()
    return captured["app"]


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.column_type is None
    assert args.height == 0
    assert args.force_open_all is None
    assert args.start_expanded is None
    assert args.full_height is False
    assert args.threshold is None
    assert args.save_defaults is False


def test_expanded_flags():
    parser = cli.build_parser()
    assert parser.parse_args(["--expanded"]).start_expanded is True
    assert parser.parse_args(["--collapsed"]).start_expanded is False


def test_default_store_has_sample_columns():
    app = run_main([])
    assert app.store.column_ids == ["notifications", "activity", "issues"]
    assert app.column_id == "notifications"


def test_single_column_of_type():
    app = run_main(["--type", "activity", "--height", "1200", "--force-open-all"])
    column = app.store.get(app.column_id)
    assert column.type == "activity"
    assert app._force_open_all is True
    assert app._available_height == 1200


def test_settings_supply_panel_defaults():
    save_panel_settings(PanelSettings(expanded_height_threshold=10, force_open_all=True))
    app = run_main(["--type", "mystery"])
    assert app._force_open_all is True
    assert app._threshold == 10


def test_threshold_flag_overrides_settings_without_saving():
    save_panel_settings(PanelSettings(expanded_height_threshold=10))
    app = run_main(["--threshold", "700"])
    assert app._threshold == 700
    assert load_panel_settings().expanded_height_threshold == 10


def test_save_defaults_persists_effective_settings():
    run_main(["--threshold", "700", "--force-open-all", "--save-defaults"])
    assert load_panel_settings() == PanelSettings(expanded_height_threshold=700, force_open_all=True)
