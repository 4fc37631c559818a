import logging
from typing import Dict, List, Optional, Type, TypeVar

from .. import config
from ..errors import InvalidArgumentError, TaskNotFoundError
from ..models import Task, TaskPriority, TaskStatus
from ..models.task import next_timestamp, utcnow
from .task_service import TaskService

logger = logging.getLogger(__name__)

E = TypeVar("E", TaskStatus, TaskPriority)


def _require(value: Optional[str], label: str) -> str:
    if not value:
        raise InvalidArgumentError(f"{label} must not be None or empty")
    return value


def _coerce(enum_cls: Type[E], value, label: str) -> E:
    if value is None or value == "":
        raise InvalidArgumentError(f"{label} must not be None or empty")
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid {label.lower()}: {value!r}") from exc


class InMemoryTaskService(TaskService):
    """Task store backed by a dict keyed by task id.

    Insertion order of the dict is the order of `get_all_tasks` and
    `find_tasks`. Not safe for concurrent mutation; wrap the instance in a
    lock if several threads share it.
    """

    def __init__(self) -> None:
        self._tasks: Dict[str, Task] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, str) and task_id in self._tasks

    def _get_existing(self, task_id: str) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("Task %s not found", task_id)
            raise TaskNotFoundError(task_id)
        return task

    def _store(self, task: Task) -> Task:
        self._tasks[task.id] = task
        return task

    # -------------------- create / read --------------------
    def create_task(self, task: Task) -> Task:
        if task is None:
            raise InvalidArgumentError("Task must not be None")

        # fresh id and timestamps; everything else is carried over
        data = task.model_dump(exclude={"id", "created_at", "updated_at"})
        new_task = self._store(Task(**data))
        logger.debug("Created task %s", new_task.id)
        return new_task

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        _require(task_id, "Task ID")
        return self._tasks.get(task_id)

    # -------------------- update --------------------
    def update_task(self, task: Task) -> Task:
        if task is None:
            raise InvalidArgumentError("Task must not be None")

        existing = self._get_existing(task.id)
        data = task.model_dump()
        data["created_at"] = existing.created_at
        data["updated_at"] = next_timestamp(existing.updated_at)
        updated = self._store(Task(**data))
        logger.debug("Updated task %s", updated.id)
        return updated

    def update_task_status(self, task_id: str, status: TaskStatus) -> Task:
        _require(task_id, "Task ID")
        status = _coerce(TaskStatus, status, "Status")

        updated = self._store(self._get_existing(task_id).with_status(status))
        logger.debug("Task %s status -> %s", task_id, status.value)
        return updated

    def update_task_priority(self, task_id: str, priority: TaskPriority) -> Task:
        _require(task_id, "Task ID")
        priority = _coerce(TaskPriority, priority, "Priority")

        updated = self._store(self._get_existing(task_id).with_priority(priority))
        logger.debug("Task %s priority -> %s", task_id, priority.value)
        return updated

    def assign_task(self, task_id: str, user_id: str) -> Task:
        _require(task_id, "Task ID")
        _require(user_id, "User ID")

        updated = self._store(self._get_existing(task_id).with_assignee(user_id))
        logger.debug("Task %s assigned to %s", task_id, user_id)
        return updated

    def unassign_task(self, task_id: str) -> Task:
        _require(task_id, "Task ID")

        updated = self._store(self._get_existing(task_id).with_assignee(None))
        logger.debug("Task %s unassigned", task_id)
        return updated

    # -------------------- delete --------------------
    def delete_task(self, task_id: str) -> bool:
        _require(task_id, "Task ID")
        removed = self._tasks.pop(task_id, None) is not None
        if removed:
            logger.debug("Deleted task %s", task_id)
        return removed

    # -------------------- queries --------------------
    def get_all_tasks(self) -> List[Task]:
        return list(self._tasks.values())

    def find_tasks(self, page: int = 0, page_size: Optional[int] = None) -> List[Task]:
        if page_size is None:
            page_size = config.DEFAULT_PAGE_SIZE
        if page < 0:
            raise InvalidArgumentError("Page must be non-negative")
        if page_size <= 0:
            raise InvalidArgumentError("Page size must be positive")

        all_tasks = self.get_all_tasks()
        start = page * page_size
        if start >= len(all_tasks):
            return []
        return all_tasks[start:start + page_size]

    def find_tasks_by_status(self, status: TaskStatus) -> List[Task]:
        status = _coerce(TaskStatus, status, "Status")
        return [task for task in self._tasks.values() if task.status == status]

    def find_tasks_by_priority(self, priority: TaskPriority) -> List[Task]:
        priority = _coerce(TaskPriority, priority, "Priority")
        return [task for task in self._tasks.values() if task.priority == priority]

    def find_tasks_by_assigned_user(self, user_id: str) -> List[Task]:
        _require(user_id, "User ID")
        return [task for task in self._tasks.values() if task.assigned_to == user_id]

    def find_tasks_by_project(self, project_id: str) -> List[Task]:
        _require(project_id, "Project ID")
        return [task for task in self._tasks.values() if task.project_id == project_id]

    def find_overdue_tasks(self) -> List[Task]:
        now = utcnow()
        return [task for task in self._tasks.values() if task.is_overdue(now)]

    def count_tasks(self) -> int:
        return len(self._tasks)

    def count_tasks_by_status(self, status: TaskStatus) -> int:
        return len(self.find_tasks_by_status(status))
