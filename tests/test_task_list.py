"""Unit tests for core/task_list.py"""
import pytest

from core.errors import DuplicateIdError, TaskNotFoundError
from core.models import Task
from core.task_list import TaskFilter, TaskList


def make_list(*specs):
    """Build a TaskList from (id, priority) pairs"""
    task_list = TaskList()
    for task_id, priority in specs:
        task_list.insert(Task(id=task_id, title=f"Task {task_id}", priority=priority))
    return task_list


class TestInsert:
    """Tests for TaskList.insert"""

    def test_empty_list(self):
        task_list = TaskList()
        assert task_list.max_id == 0
        assert task_list.count == 0
        assert task_list.next_id() == 1
        assert task_list.ordered() == []

    def test_insert_updates_bookkeeping(self):
        task_list = make_list((3, 3), (1, 3))
        assert task_list.count == 2
        assert len(task_list) == 2
        assert task_list.max_id == 3
        assert 1 in task_list and 3 in task_list
        assert not task_list.contains(2)

    def test_order_by_priority_then_id(self):
        task_list = make_list((1, 2), (2, 5), (3, 2), (4, 5), (5, 3))
        assert task_list.task_ids == [2, 4, 5, 1, 3]

    def test_order_independent_of_insert_order(self):
        task_list = make_list((4, 5), (3, 2), (5, 3), (2, 5), (1, 2))
        assert task_list.task_ids == [2, 4, 5, 1, 3]

    def test_duplicate_id_leaves_list_unchanged(self):
        task_list = make_list((1, 3), (2, 4))
        original = task_list.get(1)

        with pytest.raises(DuplicateIdError):
            task_list.insert(Task(id=1, title="Intruder", priority=5))

        assert task_list.count == 2
        assert task_list.max_id == 2
        assert task_list.task_ids == [2, 1]
        assert task_list.get(1) is original


class TestRemove:
    """Tests for TaskList.remove"""

    def test_remove_returns_task(self):
        task_list = make_list((1, 3), (2, 3))
        removed = task_list.remove(1)
        assert removed.id == 1
        assert task_list.count == 1
        assert task_list.task_ids == [2]
        assert 1 not in task_list

    def test_remove_unknown_id(self):
        task_list = make_list((1, 3))
        with pytest.raises(TaskNotFoundError):
            task_list.remove(42)
        assert task_list.count == 1

    def test_remove_max_id_lowers_to_next_live(self):
        task_list = make_list((1, 3), (2, 3), (5, 3))
        task_list.remove(5)
        assert task_list.max_id == 2
        assert task_list.next_id() == 3

    def test_remove_non_max_keeps_max(self):
        task_list = make_list((1, 3), (2, 3), (5, 3))
        task_list.remove(2)
        assert task_list.max_id == 5

    def test_remove_last_task_resets_max_id(self):
        task_list = make_list((4, 3))
        task_list.remove(4)
        assert task_list.max_id == 0
        assert task_list.count == 0
        assert task_list.next_id() == 1


class TestLookup:
    """Tests for get/add"""

    def test_get_unknown_id(self):
        with pytest.raises(TaskNotFoundError):
            TaskList().get(1)

    def test_add_allocates_next_id(self):
        task_list = TaskList()
        first = task_list.add("First")
        second = task_list.add("Second #tag", "desc", "5")
        assert (first.id, second.id) == (1, 2)
        assert second.priority == 5
        assert second.tags == {"tag"}

    def test_ids_not_reused_below_max(self):
        task_list = TaskList()
        for title in ("a", "b", "c"):
            task_list.add(title)
        task_list.remove(2)
        assert task_list.add("d").id == 4


class TestSelect:
    """Tests for TaskList.select"""

    @pytest.fixture
    def task_list(self):
        task_list = make_list((1, 3), (2, 3), (3, 3))
        task_list.get(1).start()
        task_list.get(1).complete()
        task_list.get(2).start()
        return task_list

    def test_default_shows_only_untouched(self, task_list):
        assert [t.id for t in task_list.select()] == [3]
        assert [t.id for t in task_list.select(TaskFilter())] == [3]

    def test_all(self, task_list):
        assert [t.id for t in task_list.select(TaskFilter(show_all=True))] == [1, 2, 3]

    def test_done(self, task_list):
        assert [t.id for t in task_list.select(TaskFilter(done=True))] == [1]

    def test_started(self, task_list):
        assert [t.id for t in task_list.select(TaskFilter(started=True))] == [2]

    def test_status_predicates(self, task_list):
        assert task_list.get(1).is_completed() and not task_list.get(1).is_in_progress()
        assert task_list.get(2).is_in_progress() and not task_list.get(2).is_completed()

    def test_done_and_started(self, task_list):
        result = task_list.select(TaskFilter(done=True, started=True))
        assert [t.id for t in result] == [1, 2]

    def test_selection_in_priority_order(self):
        task_list = make_list((1, 1), (2, 5), (3, 3))
        assert [t.id for t in task_list.select()] == [2, 3, 1]


class TestDocument:
    """Tests for to_dict/from_dict"""

    def test_to_dict(self):
        task_list = make_list((1, 2), (2, 4))
        data = task_list.to_dict()
        assert data["max_id"] == 2
        assert data["count"] == 2
        assert data["task_ids"] == [2, 1]
        assert set(data["task_list"]) == {"1", "2"}
        assert data["task_list"]["2"]["priority"] == 4

    def test_from_dict(self, sample_tasks_data):
        task_list = TaskList.from_dict(sample_tasks_data)
        assert task_list.count == 3
        assert task_list.max_id == 3
        assert task_list.task_ids == [2, 1, 3]
        assert task_list.get(2).in_progress is True
        assert task_list.get(1).tags == {"milk", "store"}

    def test_from_dict_recomputes_bookkeeping(self, sample_tasks_data):
        sample_tasks_data["max_id"] = 99
        sample_tasks_data["count"] = 1
        sample_tasks_data["task_ids"] = [3, 2, 1]
        task_list = TaskList.from_dict(sample_tasks_data)
        assert task_list.max_id == 3
        assert task_list.count == 3
        assert task_list.task_ids == [2, 1, 3]
