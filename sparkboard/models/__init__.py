from .user import User, UserRole
from .idea import Idea, IdeaStatus, IdeaPriority
from .project import Project, ProjectStatus
from .task import Task, TaskStatus

__all__ = [
    "User", "UserRole",
    "Idea", "IdeaStatus", "IdeaPriority",
    "Project", "ProjectStatus",
    "Task", "TaskStatus",
]
