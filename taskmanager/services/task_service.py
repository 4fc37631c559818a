from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Task, TaskPriority, TaskStatus


class TaskService(ABC):
    """
    Abstraction over a task store.

    Lookups (`get_task_by_id`, `delete_task`) report absence through their
    return value; the update family raises TaskNotFoundError instead.
    Missing or out-of-range arguments raise InvalidArgumentError before
    any state is touched.
    """

    @abstractmethod
    def create_task(self, task: Task) -> Task:
        """
        Store a copy of `task` under a fresh id and timestamps; return it.
        """
        raise NotImplementedError

    @abstractmethod
    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        """
        Return task by id or None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    def update_task(self, task: Task) -> Task:
        """
        Replace the stored task with the same id, keeping its created_at.
        """
        raise NotImplementedError

    @abstractmethod
    def update_task_status(self, task_id: str, status: TaskStatus) -> Task:
        raise NotImplementedError

    @abstractmethod
    def update_task_priority(self, task_id: str, priority: TaskPriority) -> Task:
        raise NotImplementedError

    @abstractmethod
    def assign_task(self, task_id: str, user_id: str) -> Task:
        raise NotImplementedError

    @abstractmethod
    def unassign_task(self, task_id: str) -> Task:
        raise NotImplementedError

    @abstractmethod
    def delete_task(self, task_id: str) -> bool:
        """
        Remove the task; return True if it existed.
        """
        raise NotImplementedError

    @abstractmethod
    def get_all_tasks(self) -> List[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_tasks(self, page: int = 0, page_size: Optional[int] = None) -> List[Task]:
        """
        Return a zero-indexed page of tasks. Pages past the end are empty.
        """
        raise NotImplementedError

    @abstractmethod
    def find_tasks_by_status(self, status: TaskStatus) -> List[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_tasks_by_priority(self, priority: TaskPriority) -> List[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_tasks_by_assigned_user(self, user_id: str) -> List[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_tasks_by_project(self, project_id: str) -> List[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_overdue_tasks(self) -> List[Task]:
        raise NotImplementedError

    @abstractmethod
    def count_tasks(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def count_tasks_by_status(self, status: TaskStatus) -> int:
        raise NotImplementedError
