"""Error types raised by the task service."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError


class TaskManagerError(Exception):
    """Base error with a standardized code/message shape."""

    code = "task_manager_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.payload: Dict[str, Any] = {"error": {"code": self.code, "message": message}}
        if details is not None:
            self.payload["error"]["details"] = details


class InvalidArgumentError(TaskManagerError, ValueError):
    """A required argument was missing, empty or out of range."""

    code = "invalid_argument"


class TaskNotFoundError(TaskManagerError, LookupError):
    """No stored task has the requested id."""

    code = "not_found"

    def __init__(self, task_id: str):
        super().__init__(f"Task with ID {task_id} does not exist", {"task_id": task_id})
        self.task_id = task_id


__all__ = [
    "TaskManagerError",
    "InvalidArgumentError",
    "TaskNotFoundError",
    "ValidationError",
]
