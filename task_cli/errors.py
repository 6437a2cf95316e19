"""Error taxonomy for Task CLI."""


class TaskError(Exception):
    """Base class for every failure a task operation can report."""

    @property
    def message(self) -> str:
        return str(self)

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(TaskError):
    """Input rejected before any mutation (bad title, bad filter)."""


class NotFoundError(TaskError):
    """No task carries the requested id."""


class StorageError(TaskError):
    """The task file could not be read, parsed, or written."""
