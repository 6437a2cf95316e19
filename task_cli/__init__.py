"""Task CLI - simple personal task tracking.

Add, list, toggle, delete and clear tasks from:
- the `task` command line tool
- a small JSON HTTP API (`task serve`)

Both front ends share one JSON file (~/.task-cli/tasks.json by default).
"""

__version__ = "1.0.0"

from .errors import (
    TaskError,
    ValidationError,
    NotFoundError,
    StorageError,
)
from .models import (
    Task,
    TaskStore,
    TaskFilter,
)
from .result import Ok, Err, Result
from .storage import FileTaskStorage
from .task_manager import TaskManager, get_task_manager

__all__ = [
    # Errors
    "TaskError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    # Data model
    "Task",
    "TaskStore",
    "TaskFilter",
    # Results
    "Ok",
    "Err",
    "Result",
    # Core
    "FileTaskStorage",
    "TaskManager",
    "get_task_manager",
]
