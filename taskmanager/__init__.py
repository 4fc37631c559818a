"""In-memory task records and a CRUD/query service over them."""
import logging

from .config import LOG_LEVEL
from .errors import InvalidArgumentError, TaskManagerError, TaskNotFoundError, ValidationError
from .models import Task, TaskPriority, TaskStatus
from .services import InMemoryTaskService, TaskService

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
if LOG_LEVEL:
    _logger.setLevel(LOG_LEVEL)

__version__ = "1.0.0"

__all__ = [
    "Task",
    "TaskStatus",
    "TaskPriority",
    "TaskService",
    "InMemoryTaskService",
    "TaskManagerError",
    "InvalidArgumentError",
    "TaskNotFoundError",
    "ValidationError",
]
