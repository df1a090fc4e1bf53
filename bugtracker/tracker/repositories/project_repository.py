# -*- coding: utf-8 -*-
"""
Repository layer for Project (DB only):
- Every read takes a ProjectScope: all projects, or only those the user is a member of
- Mutations keep the owner inside the member set
- No authorization rules here, the service decides who may call what.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction
from django.db.models import Count, QuerySet

from tracker.models import Project, User


@dataclass(frozen=True)
class ProjectScope:
    """Visibility boundary: member_id=None means every project."""
    member_id: Optional[int] = None

    @classmethod
    def everything(cls) -> "ProjectScope":
        return cls(member_id=None)

    @classmethod
    def member_of(cls, user_id: int) -> "ProjectScope":
        return cls(member_id=user_id)

    @classmethod
    def for_user(cls, user: User) -> "ProjectScope":
        return cls.everything() if user.is_admin else cls.member_of(user.id)

    @property
    def is_everything(self) -> bool:
        return self.member_id is None


# ============================
# Base queries
# ============================
def base_qs() -> QuerySet[Project]:
    return Project.objects.select_related("owner")

def scoped_qs(scope: ProjectScope) -> QuerySet[Project]:
    qs = base_qs()
    if not scope.is_everything:
        qs = qs.filter(members__id=scope.member_id)
    return qs

def get_by_id(project_id) -> Project:
    return base_qs().get(id=project_id)

def get_or_none(project_id) -> Optional[Project]:
    return base_qs().filter(id=project_id).first()

def get_for_update(project_id) -> Optional[Project]:
    """Row-locked read; must run inside a transaction."""
    return Project.objects.select_for_update().filter(id=project_id).first()

def list_projects(scope: ProjectScope) -> QuerySet[Project]:
    return scoped_qs(scope)

def count_projects(scope: ProjectScope) -> int:
    return scoped_qs(scope).count()

def count_by_priority(scope: ProjectScope) -> List[Dict[str, Any]]:
    rows = (
        scoped_qs(scope)
        .order_by()
        .values("priority")
        .annotate(count=Count("id"))
        .order_by("priority")
    )
    return [{"priority": r["priority"], "count": r["count"]} for r in rows]

def list_deadline_between(scope: ProjectScope, start: date, end: date, limit: int) -> List[Project]:
    qs = scoped_qs(scope).filter(deadline__gte=start, deadline__lte=end).order_by("deadline", "created_at")
    return list(qs[:limit])

def is_member(project_id, user_id: int) -> bool:
    return Project.members.through.objects.filter(project_id=project_id, user_id=user_id).exists()


# ============================
# Mutations (DB only)
# ============================
def _with_owner(owner: User, members: Iterable[User]) -> List[User]:
    by_id = {u.id: u for u in members}
    by_id[owner.id] = owner
    return list(by_id.values())

@transaction.atomic
def create(data: Dict[str, Any], *, owner: User, members: Iterable[User]) -> Project:
    project = Project.objects.create(owner=owner, **data)
    project.members.set(_with_owner(owner, members))
    return project

@transaction.atomic
def replace(project: Project, data: Dict[str, Any], *, owner: User, members: Iterable[User]) -> Project:
    for k, v in data.items():
        setattr(project, k, v)
    project.owner = owner
    project.save(update_fields=list(data.keys()) + ["owner", "updated_at"])
    project.members.set(_with_owner(owner, members))
    return project
