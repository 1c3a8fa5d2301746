"""Core module for todo"""
__version__ = "1.0.0"

from core.errors import (
    TodoError,
    DuplicateIdError,
    TaskNotFoundError,
    InvalidTransitionError,
    PersistenceError,
    ConfigurationError,
)
from core.tags import extract_tags, highlight_tags
from core.models import Task, TaskStatus, parse_priority
from core.task_list import TaskList, TaskFilter
from core.storage import TaskStorage
from core.api import TodoAPI

__all__ = [
    # Errors
    'TodoError',
    'DuplicateIdError',
    'TaskNotFoundError',
    'InvalidTransitionError',
    'PersistenceError',
    'ConfigurationError',
    # Tags
    'extract_tags',
    'highlight_tags',
    # Models
    'Task',
    'TaskStatus',
    'parse_priority',
    'TaskList',
    'TaskFilter',
    # Storage
    'TaskStorage',
    # API
    'TodoAPI',
]
