"""Ordered in-memory collection of tasks"""
import bisect
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from core.errors import DuplicateIdError, TaskNotFoundError
from core.models import Task, TaskStatus
from utils.logging_config import get_logger

logger = get_logger('task_list')


@dataclass
class TaskFilter:
    """Which tasks a listing shows"""
    show_all: bool = False
    done: bool = False
    started: bool = False

    def matches(self, task: Task) -> bool:
        if self.show_all:
            return True
        if self.done or self.started:
            return (self.done and task.is_completed()) or (self.started and task.is_in_progress())
        return task.status == TaskStatus.NOT_STARTED


class TaskList:
    """
    All tasks of one task file.

    `task_ids` holds the ids in display order (priority descending,
    id ascending) and is kept sorted on every insert and remove.
    `max_id` always equals the highest live id, or 0 when empty.
    """

    def __init__(self):
        self.max_id: int = 0
        self.count: int = 0
        self.task_ids: List[int] = []
        self.tasks: Dict[int, Task] = {}

    def __len__(self) -> int:
        return self.count

    def __contains__(self, task_id: int) -> bool:
        return self.contains(task_id)

    def contains(self, task_id: int) -> bool:
        return task_id in self.tasks

    def get(self, task_id: int) -> Task:
        """Return the stored task, raising TaskNotFoundError if absent"""
        try:
            return self.tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def next_id(self) -> int:
        return self.max_id + 1

    def insert(self, task: Task) -> None:
        """
        Store a task and slot its id into display order.

        Raises:
            DuplicateIdError: a task with the same id is already stored;
                the list is left untouched
        """
        if task.id in self.tasks:
            raise DuplicateIdError(task.id)

        self.tasks[task.id] = task
        # Lands after every id that ranks before the new task
        bisect.insort_right(self.task_ids, task.id, key=lambda tid: self.tasks[tid].sort_key())
        self.count += 1
        self.max_id = max(self.max_id, task.id)
        logger.debug(f"Inserted task {task.id}", extra={'task_id': task.id})

    def add(self, title: str, desc: str = "", priority: Optional[Any] = None) -> Task:
        """Create a task under the next free id and insert it"""
        task = Task(id=self.next_id(), title=title, desc=desc, priority=priority)
        self.insert(task)
        return task

    def remove(self, task_id: int) -> Task:
        """
        Delete a task.

        Raises:
            TaskNotFoundError: no task with this id
        """
        if task_id not in self.tasks:
            raise TaskNotFoundError(task_id)

        task = self.tasks.pop(task_id)
        self.task_ids.remove(task_id)
        self.count -= 1

        while self.max_id > 0 and self.max_id not in self.tasks:
            self.max_id -= 1

        logger.debug(f"Removed task {task_id}", extra={'task_id': task_id})
        return task

    def ordered(self) -> List[Task]:
        """All tasks in display order"""
        return [self.tasks[tid] for tid in self.task_ids]

    def select(self, task_filter: Optional[TaskFilter] = None) -> List[Task]:
        """Tasks passing the filter, in display order"""
        task_filter = task_filter or TaskFilter()
        return [task for task in self.ordered() if task_filter.matches(task)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'max_id': self.max_id,
            'count': self.count,
            'task_ids': list(self.task_ids),
            'task_list': {str(tid): self.tasks[tid].to_dict() for tid in self.task_ids},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskList':
        """
        Rebuild a task list from its document form.

        Bookkeeping (`max_id`, `count`, `task_ids`) is recomputed from the
        tasks themselves; stored values that disagree are only logged.

        Raises:
            DuplicateIdError: two entries carry the same task id
            pydantic.ValidationError: an entry is not a valid task
        """
        task_list = cls()
        for raw in (data.get('task_list') or {}).values():
            task_list.insert(Task.from_dict(raw))

        stored_max_id = data.get('max_id', task_list.max_id)
        stored_count = data.get('count', task_list.count)
        if stored_max_id != task_list.max_id or stored_count != task_list.count:
            logger.info(
                f"Stored bookkeeping (max_id={stored_max_id}, count={stored_count}) "
                f"does not match tasks (max_id={task_list.max_id}, count={task_list.count})"
            )
        return task_list
