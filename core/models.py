"""Task model for todo with Pydantic validation"""
from enum import Enum
from typing import Any, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from core.errors import InvalidTransitionError
from core.tags import extract_tags

PRIORITY_MIN = 1
PRIORITY_MAX = 5
PRIORITY_DEFAULT = 3


class TaskStatus(Enum):
    """Lifecycle state of a task"""
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    COMPLETED = "completed"


def parse_priority(value: Any) -> int:
    """
    Turn user or file input into a priority in [PRIORITY_MIN, PRIORITY_MAX].

    Missing or unparsable input falls back to PRIORITY_DEFAULT,
    out-of-range numbers are clamped.
    """
    if value is None:
        return PRIORITY_DEFAULT
    try:
        priority = int(value)
    except (TypeError, ValueError, OverflowError):
        return PRIORITY_DEFAULT
    return max(PRIORITY_MIN, min(PRIORITY_MAX, priority))


class Task(BaseModel):
    """A single task with its lifecycle flags"""
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., ge=1, frozen=True)
    title: str = Field(..., min_length=1)
    desc: str = Field(default="")
    tags: Set[str] = Field(default_factory=set)
    priority: int = Field(default=PRIORITY_DEFAULT)
    completed: bool = False
    in_progress: bool = False

    @model_validator(mode='before')
    @classmethod
    def derive_tags(cls, data: Any) -> Any:
        # Tags come from the text only when the caller did not supply them
        if isinstance(data, dict) and data.get('tags') is None:
            data = dict(data)
            texts = [data.get(key) for key in ('title', 'desc')]
            # Non-text fields are left for field validation to reject
            data['tags'] = set().union(*(extract_tags(t) for t in texts if isinstance(t, str)))
        return data

    @field_validator('title')
    @classmethod
    def validate_title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Title cannot be only whitespace')
        return v

    @field_validator('priority', mode='before')
    @classmethod
    def clamp_priority(cls, v: Any) -> int:
        return parse_priority(v)

    @model_validator(mode='after')
    def check_state(self) -> 'Task':
        if self.completed and self.in_progress:
            raise ValueError('A task cannot be completed and in progress at the same time')
        return self

    @field_serializer('tags')
    def serialize_tags(self, tags: Set[str]):
        return sorted(tags)

    @property
    def status(self) -> TaskStatus:
        if self.completed:
            return TaskStatus.COMPLETED
        if self.in_progress:
            return TaskStatus.IN_PROGRESS
        return TaskStatus.NOT_STARTED

    def is_completed(self) -> bool:
        return self.completed

    def is_in_progress(self) -> bool:
        return self.in_progress

    def start(self) -> None:
        """Move a task from NOT_STARTED to IN_PROGRESS"""
        if self.in_progress:
            raise InvalidTransitionError("Cannot start a task that is already in progress")
        if self.completed:
            raise InvalidTransitionError("Cannot start a completed task")
        self.in_progress = True

    def complete(self) -> None:
        """Move a task from IN_PROGRESS to COMPLETED"""
        if self.completed:
            raise InvalidTransitionError("Cannot complete a task which is already completed")
        if not self.in_progress:
            raise InvalidTransitionError("Cannot complete a task before starting it")
        self.in_progress = False
        self.completed = True

    def sort_key(self) -> Tuple[int, int]:
        """Display order key: higher priority first, then lower id"""
        return (-self.priority, self.id)

    def ranks_before(self, other: 'Task') -> bool:
        return self.sort_key() < other.sort_key()

    def to_dict(self) -> dict:
        """Serialize to a JSON-ready dict"""
        return self.model_dump(mode='json')

    @classmethod
    def from_dict(cls, data: dict) -> 'Task':
        return cls(**data)

    def __str__(self) -> str:
        return f"#{self.id} {self.title} ({self.status.value})"
