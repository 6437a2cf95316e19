"""File-backed persistence for Task CLI.

The whole TaskStore lives in a single JSON document (tasks.json). Every
load reads the full file and every save replaces it. There is no locking:
two processes saving at once resolve as last-save-wins.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .errors import StorageError
from .models import TaskStore


logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".task-cli"
TASKS_FILENAME = "tasks.json"


class FileTaskStorage:
    """Loads and saves the task store as one JSON file."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        """Initialize with the directory holding tasks.json."""
        self.data_dir = Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR
        self.data_file = self.data_dir / TASKS_FILENAME

    def _ensure_data_dir(self):
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create data directory %s: %s", self.data_dir, e)
            raise StorageError(f"Failed to create data directory: {e}") from e

    def load(self) -> TaskStore:
        """Read the store, or return an empty one if the file is absent."""
        self._ensure_data_dir()

        try:
            with open(self.data_file, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug("No task file at %s, starting empty", self.data_file)
            return TaskStore()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Invalid JSON in %s: %s", self.data_file, e)
            raise StorageError(f"Failed to load tasks: invalid JSON ({e})") from e
        except OSError as e:
            logger.error("Cannot read %s: %s", self.data_file, e)
            raise StorageError(f"Failed to load tasks: {e}") from e

        try:
            store = TaskStore.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Malformed task file %s: %s", self.data_file, e)
            raise StorageError(f"Failed to load tasks: malformed task file ({e})") from e

        logger.debug("Loaded %d task(s) from %s", len(store.tasks), self.data_file)
        return store

    def save(self, store: TaskStore):
        """Replace the task file with the serialized store."""
        self._ensure_data_dir()

        content = json.dumps(store.to_dict(), indent=2, ensure_ascii=False)

        # Write next to the target and rename over it so readers never see a partial file
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.data_dir), prefix=".tasks-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.write("\n")
            os.replace(tmp_name, self.data_file)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            logger.error("Cannot write %s: %s", self.data_file, e)
            raise StorageError(f"Failed to save tasks: {e}") from e

        logger.debug("Saved %d task(s) to %s", len(store.tasks), self.data_file)
