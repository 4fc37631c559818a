from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import uuid4
import enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 5000

_TICK = timedelta(microseconds=1)


class TaskStatus(str, enum.Enum):
    """Lifecycle stage of a task.

    Documented flow is PENDING -> IN_PROGRESS -> COMPLETED, IN_PROGRESS -> PENDING
    and any -> CANCELLED, but transitions are not enforced.
    """
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


CLOSED_STATUSES = frozenset({TaskStatus.COMPLETED, TaskStatus.CANCELLED})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def next_timestamp(previous: datetime) -> datetime:
    """Current UTC time, nudged forward so it is strictly after `previous`."""
    now = utcnow()
    previous = as_utc(previous)
    return now if now > previous else previous + _TICK


class Task(BaseModel):
    """Immutable task record.

    Every change goes through a derived copy (`with_status`, `with_priority`,
    `with_assignee`) that keeps `id` and `created_at` and refreshes `updated_at`.
    """
    model_config = ConfigDict(frozen=True)

    # id, created_at and updated_at are filled in by _fill_defaults
    id: str
    title: str
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_to: Optional[str] = None
    project_id: Optional[str] = None
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("id"):
            data["id"] = str(uuid4())
        if data.get("description") is None:
            data["description"] = ""
        if data.get("created_at") is None:
            data["created_at"] = utcnow()
        # updated_at starts out equal to created_at
        if data.get("updated_at") is None:
            data["updated_at"] = data["created_at"]
        return data

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title must not be empty")
        if len(value) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title must not exceed {TITLE_MAX_LENGTH} characters")
        return value

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def _normalize_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Task":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self

    # -------------------- queries --------------------
    def is_assigned(self) -> bool:
        return self.assigned_to is not None

    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        """True if the due date has passed and the task is still open."""
        if self.due_date is None:
            return False
        if self.status in CLOSED_STATUSES:
            return False
        now = as_utc(now) if now is not None else utcnow()
        return self.due_date < now

    # -------------------- derived copies --------------------
    def with_status(self, new_status: TaskStatus) -> "Task":
        return self._derive(status=new_status)

    def with_priority(self, new_priority: TaskPriority) -> "Task":
        return self._derive(priority=new_priority)

    def with_assignee(self, user_id: Optional[str]) -> "Task":
        """Copy assigned to `user_id`, or unassigned when it is None."""
        return self._derive(assigned_to=user_id)

    def _derive(self, **changes: Any) -> "Task":
        data = self.model_dump()
        data.update(changes)
        data["updated_at"] = next_timestamp(self.updated_at)
        return Task(**data)

    def __str__(self) -> str:
        return (f"Task[id={self.id}, title={self.title}, "
                f"status={self.status.value}, priority={self.priority.value}]")
