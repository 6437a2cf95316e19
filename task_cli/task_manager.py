"""Task management for Task CLI.

Every operation runs one full cycle against the injected storage:
load the store, apply the change in memory, save (for mutations), and
return a Result. TaskError failures come back as Err values and never
propagate to the caller; a failed call leaves the file untouched.
"""

import logging
from typing import List, Union

from .errors import TaskError, ValidationError, NotFoundError
from .models import (
    Task,
    TaskFilter,
    MIN_TITLE_LENGTH,
    MAX_TITLE_LENGTH,
    utc_now,
)
from .result import Ok, Err, Result


logger = logging.getLogger(__name__)


class TaskManager:
    """Applies task operations to a storage object.

    The storage is any object with ``load() -> TaskStore`` and
    ``save(TaskStore)``.
    """

    def __init__(self, storage):
        self.storage = storage

    def _failed(self, operation: str, error: TaskError) -> Err:
        if isinstance(error, (ValidationError, NotFoundError)):
            logger.info("%s rejected: %s", operation, error)
        else:
            logger.error("%s failed: %s", operation, error)
        return Err(error)

    @staticmethod
    def _validate_title(title: str) -> str:
        title = title.strip() if isinstance(title, str) else ""
        if not MIN_TITLE_LENGTH <= len(title) <= MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Task title must be between {MIN_TITLE_LENGTH} and "
                f"{MAX_TITLE_LENGTH} characters"
            )
        return title

    # --- Public Methods ---

    def add_task(self, title: str) -> Result:
        """Add a new pending task."""
        try:
            clean_title = self._validate_title(title)
            store = self.storage.load()

            task = Task(id=store.next_id, title=clean_title, created_at=utc_now())
            store.tasks.append(task)
            store.next_id += 1

            self.storage.save(store)
        except TaskError as e:
            return self._failed("add_task", e)

        logger.info("Added task %d", task.id)
        return Ok(task)

    def get_all_tasks(self, task_filter: Union[TaskFilter, str] = TaskFilter.ALL) -> Result:
        """List tasks matching the filter, in insertion order."""
        try:
            task_filter = TaskFilter.parse(task_filter)
            store = self.storage.load()
        except TaskError as e:
            return self._failed("get_all_tasks", e)

        tasks: List[Task] = [t for t in store.tasks if task_filter.matches(t)]
        return Ok(tasks)

    def get_task(self, task_id: int) -> Result:
        """Get a specific task by ID."""
        try:
            store = self.storage.load()
            task = store.find(task_id)
            if task is None:
                raise NotFoundError(f"Task with ID {task_id} not found")
        except TaskError as e:
            return self._failed("get_task", e)

        return Ok(task)

    def toggle_task(self, task_id: int) -> Result:
        """Flip a task between completed and pending."""
        try:
            store = self.storage.load()
            task = store.find(task_id)
            if task is None:
                raise NotFoundError(f"Task with ID {task_id} not found")

            task.toggle(utc_now())
            self.storage.save(store)
        except TaskError as e:
            return self._failed("toggle_task", e)

        logger.info("Toggled task %d (completed=%s)", task.id, task.completed)
        return Ok(task)

    def delete_task(self, task_id: int) -> Result:
        """Remove a task."""
        try:
            store = self.storage.load()
            for index, task in enumerate(store.tasks):
                if task.id == task_id:
                    store.tasks.pop(index)
                    break
            else:
                raise NotFoundError(f"Task with ID {task_id} not found")

            self.storage.save(store)
        except TaskError as e:
            return self._failed("delete_task", e)

        logger.info("Deleted task %d", task_id)
        return Ok(True)

    def clear_completed(self) -> Result:
        """Remove every completed task and return how many were removed."""
        try:
            store = self.storage.load()
            before = len(store.tasks)
            store.tasks = [t for t in store.tasks if not t.completed]
            removed = before - len(store.tasks)

            self.storage.save(store)
        except TaskError as e:
            return self._failed("clear_completed", e)

        logger.info("Cleared %d completed task(s)", removed)
        return Ok(removed)


def get_task_manager(data_dir=None) -> TaskManager:
    """Get a task manager backed by the task file in data_dir."""
    from .storage import FileTaskStorage

    return TaskManager(FileTaskStorage(data_dir))
