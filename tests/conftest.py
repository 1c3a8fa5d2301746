"""Pytest configuration and fixtures"""
import pytest
import os
import sys
import json

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for tests"""
    return str(tmp_path)


@pytest.fixture
def sample_tasks_data():
    """Sample todo.json document for testing"""
    return {
        "max_id": 3,
        "count": 3,
        "task_ids": [2, 1, 3],
        "task_list": {
            "1": {
                "id": 1,
                "title": "Buy #milk",
                "desc": "From the #Store",
                "tags": ["milk", "store"],
                "priority": 3,
                "completed": False,
                "in_progress": False
            },
            "2": {
                "id": 2,
                "title": "Fix #bug in parser",
                "desc": "",
                "tags": ["bug"],
                "priority": 5,
                "completed": False,
                "in_progress": True
            },
            "3": {
                "id": 3,
                "title": "Water plants",
                "desc": "",
                "tags": [],
                "priority": 1,
                "completed": True,
                "in_progress": False
            }
        }
    }


@pytest.fixture
def temp_tasks_file(temp_dir, sample_tasks_data):
    """Create a temporary todo.json file"""
    file_path = os.path.join(temp_dir, "todo.json")
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(sample_tasks_data, f, ensure_ascii=False, indent=2)
    return file_path


@pytest.fixture
def mock_env_vars(monkeypatch, temp_dir):
    """Point the task file into the temporary directory"""
    file_path = os.path.join(temp_dir, "todo.json")
    monkeypatch.setenv("TODO_FILE", file_path)
    return file_path
