"""Error kinds raised by the todo core"""
from typing import Optional


class TodoError(Exception):
    """Base class for all todo errors"""


class DuplicateIdError(TodoError):
    """A task with the same id is already stored"""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task with the same ID already exists: {task_id}")


class TaskNotFoundError(TodoError):
    """No task with the given id"""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Cannot find task with ID {task_id}")


class InvalidTransitionError(TodoError):
    """start/complete called out of order"""


class PersistenceError(TodoError):
    """The task file could not be written"""

    def __init__(self, path, reason: Optional[str] = None):
        self.path = path
        message = f"Cannot save tasks to {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigurationError(TodoError):
    """The task file location cannot be resolved"""
