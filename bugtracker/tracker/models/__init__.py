# All models exposed under tracker.models
from .mixins import TimeStampedModel

from .user import Role, User
from .project import ProjectPriority, Project
from .ticket import Ticket

__all__ = [
    "TimeStampedModel",
    "Role", "User",
    "ProjectPriority", "Project",
    "Ticket",
]
