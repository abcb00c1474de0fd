"""Configuration loading for the tennis match journal."""

import logging
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "tennisjournal"
CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_JOURNAL_PATH = CONFIG_DIR / "journal.json"


def load_config(config_path: Path = CONFIG_PATH) -> dict:
    """Load the TOML config file.

    Returns:
        Parsed config, or an empty dict if the file is missing or unreadable.
    """
    if not config_path.exists():
        return {}

    try:
        return toml.load(config_path)
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return {}


def get_journal_path(config: dict, override: Optional[Path] = None) -> Path:
    """Resolve the journal file from an explicit override or the config."""
    if override is not None:
        return override

    configured = config.get("journal", {}).get("path")
    if configured:
        return Path(configured).expanduser()
    return DEFAULT_JOURNAL_PATH
