"""Functional API for todo - programmatic access to task management"""
from typing import Any, List, Optional

from core.models import Task
from core.storage import TaskStorage
from core.task_list import TaskFilter, TaskList
from utils.logging_config import get_logger, LogTimer

logger = get_logger('api')


class TodoAPI:
    """
    Functional API for todo.

    Every mutating call loads the task file, applies exactly one change
    and rewrites the file. Errors are raised before anything is written.

    Usage:
        api = TodoAPI(TaskStorage(Config.get_tasks_file()))

        task = api.add_task("Review PR #work", priority=4)
        api.start_task(task.id)
        api.complete_task(task.id)

        tasks = api.list_tasks(TaskFilter(done=True))
    """

    def __init__(self, storage: TaskStorage):
        """
        Initialize the API.

        Args:
            storage: Storage bound to the task file
        """
        self._storage = storage

    def load(self) -> TaskList:
        return self._storage.load()

    # ==================== Task CRUD Operations ====================

    def add_task(self, title: str, desc: str = "", priority: Optional[Any] = None) -> Task:
        """
        Create a task under the next free id.

        Args:
            title: Task title, may contain #tags
            desc: Optional description, may contain #tags
            priority: 1-5; missing or unparsable means 3, others are clamped

        Returns:
            Created Task
        """
        with LogTimer(logger, f"add_task: {title}"):
            task_list = self.load()
            task = task_list.add(title, desc, priority)
            self._storage.save(task_list)
            logger.info(f"Task created: {task.id} - {task.title}", extra={'task_id': task.id})
            return task

    def remove_task(self, task_id: int) -> Task:
        """
        Delete a task.

        Raises:
            TaskNotFoundError: no task with this id
        """
        with LogTimer(logger, f"remove_task: {task_id}", task_id=task_id):
            task_list = self.load()
            task = task_list.remove(task_id)
            self._storage.save(task_list)
            logger.info(f"Task deleted: {task_id}", extra={'task_id': task_id})
            return task

    # ==================== Status Operations ====================

    def start_task(self, task_id: int) -> Task:
        """Set task IN_PROGRESS"""
        with LogTimer(logger, f"start_task: {task_id}", task_id=task_id):
            task_list = self.load()
            task = task_list.get(task_id)
            task.start()
            self._storage.save(task_list)
            return task

    def complete_task(self, task_id: int) -> Task:
        """Set an IN_PROGRESS task COMPLETED"""
        with LogTimer(logger, f"complete_task: {task_id}", task_id=task_id):
            task_list = self.load()
            task = task_list.get(task_id)
            task.complete()
            self._storage.save(task_list)
            return task

    # ==================== Queries ====================

    def list_tasks(self, task_filter: Optional[TaskFilter] = None) -> List[Task]:
        """
        Get tasks in display order.

        Args:
            task_filter: Which tasks to show; default shows tasks that are
                neither started nor completed

        Returns:
            List of matching tasks
        """
        return self.load().select(task_filter)
