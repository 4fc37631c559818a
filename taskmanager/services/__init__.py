from .task_service import TaskService
from .in_memory import InMemoryTaskService

__all__ = ["TaskService", "InMemoryTaskService"]
