"""Configuration for Task CLI.

Settings are resolved in this order (later wins):
- dataclass defaults
- TASK_CLI_HOME for the data directory
- config.json inside the data directory
- TASK_CLI_HOST / PORT / TASK_CLI_PORT / TASK_CLI_LOG_LEVEL
- an explicit data_dir argument (the CLI's --data-dir)
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union
from dataclasses import dataclass, field

from .storage import DEFAULT_DATA_DIR


logger = logging.getLogger(__name__)

ENV_PREFIX = "TASK_CLI"
CONFIG_FILENAME = "config.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _first_env(*names: str) -> Optional[str]:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v.strip()
    return None


def _as_int(name: str, raw, default: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s=%r, using %d", name, raw, default)
        return default


@dataclass
class TaskConfig:
    """Resolved settings for the CLI and the HTTP server."""

    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "WARNING"
    max_title_display: int = 60  # 0 = never truncate

    @property
    def config_file(self) -> Path:
        return self.data_dir / CONFIG_FILENAME


def _read_config_file(config_file: Path) -> dict:
    if not config_file.exists():
        return {}
    try:
        with open(config_file, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_file)
        return {}
    return data


def load_config(data_dir: Optional[Union[str, Path]] = None) -> TaskConfig:
    """Load configuration from the data directory and the environment.

    Args:
        data_dir: Explicit data directory; overrides TASK_CLI_HOME.

    Returns:
        TaskConfig with every source applied.
    """
    config = TaskConfig()

    home = data_dir or _first_env(_k("HOME"))
    if home:
        config.data_dir = Path(home).expanduser()

    file_data = _read_config_file(config.config_file)
    if "host" in file_data:
        config.host = str(file_data["host"])
    if "port" in file_data:
        config.port = _as_int("port", file_data["port"], config.port)
    if "log_level" in file_data:
        config.log_level = str(file_data["log_level"]).upper()
    if "max_title_display" in file_data:
        config.max_title_display = _as_int(
            "max_title_display", file_data["max_title_display"], config.max_title_display
        )

    host = _first_env(_k("HOST"))
    if host:
        config.host = host
    port = _first_env(_k("PORT"), "PORT")
    if port:
        config.port = _as_int("port", port, config.port)
    level = _first_env(_k("LOG_LEVEL"))
    if level:
        config.log_level = level.upper()

    return config
