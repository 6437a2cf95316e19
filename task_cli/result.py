"""Tagged success/failure values returned by TaskManager operations."""

from dataclasses import dataclass
from typing import Any, Union

from .errors import TaskError


@dataclass(frozen=True)
class Ok:
    """Successful outcome carrying a value."""

    value: Any

    is_ok = True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error that caused it."""

    error: TaskError

    is_ok = False

    @property
    def kind(self) -> str:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Ok, Err]
