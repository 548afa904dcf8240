"""Settings file I/O for column-options.

Manages a JSON settings file at XDG_CONFIG_HOME/column-options/settings.json.
Only panel defaults live here; column filters are owned by the column store.
"""

import dataclasses
import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / column-options / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "column-options" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Atomic write of settings dict to JSON file."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


@dataclasses.dataclass(frozen=True)
class PanelSettings:
    expanded_height_threshold: int = 1000
    force_open_all: bool = False


def load_panel_settings() -> PanelSettings:
    """Panel defaults from the settings file; bad values fall back with a warning."""
    data = load_settings()
    defaults = PanelSettings()

    threshold = data.get("expanded_height_threshold", defaults.expanded_height_threshold)
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
        logger.warning("invalid expanded_height_threshold %r, using %d", threshold, defaults.expanded_height_threshold)
        threshold = defaults.expanded_height_threshold

    force_open_all = data.get("force_open_all", defaults.force_open_all)
    if not isinstance(force_open_all, bool):
        logger.warning("invalid force_open_all %r, using %s", force_open_all, defaults.force_open_all)
        force_open_all = defaults.force_open_all

    return PanelSettings(expanded_height_threshold=threshold, force_open_all=force_open_all)


def save_panel_settings(settings: PanelSettings) -> None:
    """Persist panel defaults, keeping any other keys already in the file."""
    data = load_settings()
    data.update(dataclasses.asdict(settings))
    save_settings(data)
    logger.info("saved panel defaults to %s", get_config_path())
