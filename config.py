"""Configuration for the todo command"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from core.errors import ConfigurationError

load_dotenv()


class Config:
    """Settings resolved from the environment"""

    TASKS_FILE_NAME = "todo.json"
    DEFAULT_LOG_LEVEL = "WARNING"

    @classmethod
    def get_tasks_file(cls) -> Path:
        """
        Path to the task file: $TODO_FILE, else $HOME/todo.json.

        Raises:
            ConfigurationError: neither variable is set
        """
        todo_file = os.getenv("TODO_FILE")
        if todo_file:
            return Path(todo_file).expanduser()

        home = os.getenv("HOME")
        if not home:
            raise ConfigurationError(
                "Cannot locate the task file: set TODO_FILE or HOME."
            )
        return Path(home) / cls.TASKS_FILE_NAME

    @classmethod
    def get_log_level(cls) -> str:
        return os.getenv("TODO_LOG_LEVEL", cls.DEFAULT_LOG_LEVEL)

    @classmethod
    def get_log_file(cls) -> Optional[Path]:
        log_file = os.getenv("TODO_LOG_FILE")
        return Path(log_file).expanduser() if log_file else None

    @classmethod
    def validate(cls):
        """Fail early when the task file cannot be located"""
        cls.get_tasks_file()
