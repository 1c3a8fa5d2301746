"""JSON persistence for the task list"""
import json
from pathlib import Path
from typing import Union

from core.errors import DuplicateIdError, PersistenceError
from core.task_list import TaskList
from utils.logging_config import get_logger

logger = get_logger('storage')


class TaskStorage:
    """Reads and rewrites one task file"""

    def __init__(self, path: Union[str, Path]):
        self.tasks_file = Path(path)

    def load(self) -> TaskList:
        """
        Load the task list.

        A missing, unreadable or malformed file yields an empty list;
        the problem is logged and never surfaced.
        """
        if not self.tasks_file.exists():
            logger.debug(f"No task file at {self.tasks_file}, starting fresh")
            return TaskList()

        try:
            with open(self.tasks_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict) or not isinstance(data.get('task_list') or {}, dict):
                raise ValueError("document is not a task list object")
            return TaskList.from_dict(data)
        except (OSError, ValueError, TypeError, DuplicateIdError) as e:
            logger.info(
                f"Ignoring unreadable task file {self.tasks_file}: {e}",
                extra={'path': str(self.tasks_file)}
            )
            return TaskList()

    def save(self, task_list: TaskList) -> None:
        """
        Rewrite the task file with the whole list.

        Raises:
            PersistenceError: the file could not be written
        """
        try:
            self.tasks_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.tasks_file, 'w', encoding='utf-8') as f:
                json.dump(task_list.to_dict(), f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise PersistenceError(self.tasks_file, e.strerror or str(e)) from e

        logger.info(
            f"Saved {task_list.count} tasks to {self.tasks_file}",
            extra={'path': str(self.tasks_file)}
        )
