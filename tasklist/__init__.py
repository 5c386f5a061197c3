"""Personal task list persisted as lines in a flat text file."""

from .errors import HomeNotFoundError, ParseError, StoreIOError, TaskListError
from .models import Task, TaskStatus
from .store import TaskStore

__all__ = [
    "HomeNotFoundError",
    "ParseError",
    "StoreIOError",
    "Task",
    "TaskListError",
    "TaskStatus",
    "TaskStore",
]
