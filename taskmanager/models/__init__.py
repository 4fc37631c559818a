from .task import Task, TaskPriority, TaskStatus

# Export all models for easy importing
__all__ = ["Task", "TaskPriority", "TaskStatus"]
