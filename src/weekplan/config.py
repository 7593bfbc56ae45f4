"""Configuration management for weekplan."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.plan import DAY_NAMES

logger = logging.getLogger(__name__)

WEEKPLAN_HOME = Path(os.environ.get("WEEKPLAN_HOME", Path.home() / "weekplan"))
CONFIG_FILE = WEEKPLAN_HOME / "config" / "weekplan.conf"
DATA_DIR = WEEKPLAN_HOME / "data"


@dataclass
class Config:
    """weekplan configuration."""

    data_dir: str = ""
    user_id: str = "default"
    week_start_day: str = "Sunday"

    def resolve_data_dir(self) -> Path:
        """Configured data directory, or the default under WEEKPLAN_HOME."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR

    def week_start_index(self) -> int:
        return DAY_NAMES.index(self.week_start_day)


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from weekplan.conf file."""
    path = path or CONFIG_FILE
    config = Config()

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "user_id":
                if value:
                    config.user_id = value
            case "week_start_day":
                day = value.capitalize()
                if day in DAY_NAMES:
                    config.week_start_day = day
                else:
                    logger.warning(f"Ignoring invalid WEEK_START_DAY: {value!r}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
