"""Task records for Task CLI.

Defines the persisted data model:
- Task: a single to-do item
- TaskStore: the full collection plus the next-id counter
- TaskFilter: which slice of the collection a read returns

Timestamps are stored on disk as ISO-8601 UTC strings and revived into
timezone-aware datetimes on load.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .errors import ValidationError


MIN_TITLE_LENGTH = 1
MAX_TITLE_LENGTH = 500


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime as ISO-8601 UTC with millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Revive an ISO-8601 string into an aware datetime.

    Accepts a trailing ``Z``, an explicit offset, or no offset at all
    (treated as UTC).
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class TaskFilter(str, Enum):
    """Filter applied when reading the task collection."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, value) -> "TaskFilter":
        """Convert a filter name (or a TaskFilter) into a TaskFilter."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(f.value for f in cls)
        raise ValidationError(f"Invalid filter: {value!r} (expected one of: {choices})")

    def matches(self, task: "Task") -> bool:
        if self is TaskFilter.COMPLETED:
            return task.completed
        if self is TaskFilter.PENDING:
            return not task.completed
        return True


@dataclass
class Task:
    """A task being tracked."""

    id: int
    title: str
    completed: bool = False
    created_at: datetime = field(default_factory=utc_now)
    completed_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "createdAt": format_timestamp(self.created_at),
        }
        # completedAt only exists while the task is completed
        if self.completed_at is not None:
            data["completedAt"] = format_timestamp(self.completed_at)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        completed = bool(data.get("completed", False))
        created_at = parse_timestamp(data["createdAt"])
        completed_at = None
        if completed:
            raw = data.get("completedAt")
            # completed records without a completion time fall back to creation time
            completed_at = parse_timestamp(raw) if raw else created_at
        return cls(
            id=int(data["id"]),
            title=data["title"],
            completed=completed,
            created_at=created_at,
            completed_at=completed_at,
        )

    def toggle(self, now: Optional[datetime] = None):
        """Flip completion, keeping completed_at in step with completed."""
        self.completed = not self.completed
        self.completed_at = (now or utc_now()) if self.completed else None


@dataclass
class TaskStore:
    """The persisted unit: every task plus the next id to hand out."""

    tasks: List[Task] = field(default_factory=list)
    next_id: int = 1

    def to_dict(self) -> dict:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "nextId": self.next_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TaskStore":
        tasks = [Task.from_dict(t) for t in data.get("tasks", [])]
        next_id = data.get("nextId")
        if next_id is None:
            next_id = max((t.id for t in tasks), default=0) + 1
        return cls(tasks=tasks, next_id=int(next_id))

    def find(self, task_id: int) -> Optional[Task]:
        """Return the task with the given id, if present."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self.tasks if t.completed)
