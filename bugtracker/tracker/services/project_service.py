# -*- coding: utf-8 -*-
"""
Service for Project:
- Authorization (role for writes, membership-or-admin for a single project)
- Orchestrates the project store, the user directory and the ticket summary
- Builds the response views handed to the serializers
"""
from __future__ import annotations
import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID
import logging

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from tracker.exceptions import MemberHasAssignedTickets, ProjectNotFound, UserActionForbidden
from tracker.models import Project, ProjectPriority, User
from tracker.repositories import project_repository as repo
from tracker.selectors import project_selector
from tracker.services import ticket_service, user_service

logger = logging.getLogger(__name__)

# Hard ceiling for the deadline widget; the setting can only lower it.
DEADLINE_WINDOW_MAX = 5


# ====== Response views ======
@dataclass(frozen=True)
class UserNameView:
    id: int
    full_name: str

@dataclass(frozen=True)
class UserView:
    id: int
    full_name: str
    role: str

@dataclass(frozen=True)
class ProjectNameView:
    project_id: UUID
    full_name: str

@dataclass(frozen=True)
class ProjectPreviewView:
    id: UUID
    project_name: str
    priority: str
    start_date: date
    deadline: Optional[date]
    owner_user: UserView
    users: List[UserNameView] = field(default_factory=list)

@dataclass(frozen=True)
class ProjectDeadlineView:
    id: UUID
    project_name: str
    priority: str
    start_date: date
    deadline: date
    owner_user: UserView

@dataclass(frozen=True)
class ProjectDetailView:
    id: UUID
    project_name: str
    description: str
    priority: str
    start_date: date
    deadline: Optional[date]
    owner_user: UserView
    users: List[UserView] = field(default_factory=list)
    tickets: List[Dict[str, Any]] = field(default_factory=list)


def _user_view(user: User) -> UserView:
    return UserView(id=user.id, full_name=user.full_name, role=user.role)

def _user_name_view(user: User) -> UserNameView:
    return UserNameView(id=user.id, full_name=user.full_name)


# ====== Helpers ======
def _require_manager_role(user: User) -> None:
    if not user.can_manage_projects:
        logger.warning("[project] user=%s role=%s denied write access", user.id, user.role)
        raise UserActionForbidden("Only admins and managers can manage projects")

def _require_member_or_admin(user: User, project_id) -> None:
    if user.is_admin:
        return
    if not user_service.is_user_in_project(project_id, user.id):
        logger.warning("[project] user=%s denied access to project=%s", user.id, project_id)
        raise UserActionForbidden()

def _get_project(project_id) -> Project:
    project = project_selector.get_project_or_none(project_id)
    if project is None:
        raise ProjectNotFound(project_id)
    return project

def add_one_month(day: date) -> date:
    """Same day next month, clamped to the last day of that month (31 Jan -> 28/29 Feb)."""
    year, month = (day.year + 1, 1) if day.month == 12 else (day.year, day.month + 1)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


# ====== Business services ======
@transaction.atomic
def create_project(*, data: Dict[str, Any], owner_id: int, actor: User) -> Project:
    _require_manager_role(actor)

    owner = user_service.find_by_id(owner_id)
    members = user_service.find_all_by_id(data.get("users") or [])

    project = repo.create(
        {
            "title": data["title"],
            "description": data.get("description") or "",
            "priority": ProjectPriority.from_input(data.get("priority")),
            "start_date": timezone.localdate(),
            "deadline": data.get("deadline"),
        },
        owner=owner,
        members=members,
    )
    logger.info("[project] created id=%s owner=%s by=%s", project.id, owner.id, actor.id)
    return project

def get_projects_that_user_is_part_of(user: User) -> List[ProjectNameView]:
    return [
        ProjectNameView(project_id=p.id, full_name=p.title)
        for p in project_selector.list_visible_projects(user)
    ]

def get_all_projects_with_user_name_only(user: User) -> List[ProjectPreviewView]:
    response = []
    for project in project_selector.list_visible_projects(user):
        top_users = user_service.get_top3_users_of_project(project.id)
        response.append(
            ProjectPreviewView(
                id=project.id,
                project_name=project.title,
                priority=project.get_priority_display(),
                start_date=project.start_date,
                deadline=project.deadline,
                owner_user=_user_view(project.owner),
                users=[_user_name_view(u) for u in top_users],
            )
        )
    return response

def get_project_by_id(user: User, project_id) -> ProjectDetailView:
    _require_member_or_admin(user, project_id)
    project = _get_project(project_id)

    # owner is shown separately
    members = [
        _user_view(u)
        for u in project.members.order_by("id")
        if u.id != project.owner_id
    ]

    return ProjectDetailView(
        id=project.id,
        project_name=project.title,
        description=project.description,
        priority=project.get_priority_display(),
        start_date=project.start_date,
        deadline=project.deadline,
        owner_user=_user_view(project.owner),
        users=members,
        tickets=ticket_service.get_all_project_tickets_by_status(project.id),
    )

def get_number_of_projects(user: User) -> int:
    return project_selector.count_visible_projects(user)

def get_projects_count_by_priority(user: User) -> List[Dict[str, Any]]:
    return project_selector.count_visible_by_priority(user)

def deadline_window_limit() -> int:
    configured = int(getattr(settings, "TRACKER_DEADLINE_WINDOW_LIMIT", DEADLINE_WINDOW_MAX))
    return max(0, min(configured, DEADLINE_WINDOW_MAX))

def get_5_projects_with_deadline_close(user: User) -> List[ProjectDeadlineView]:
    today = timezone.localdate()
    projects = project_selector.list_visible_with_deadline_between(
        user, today, add_one_month(today), deadline_window_limit()
    )
    return [
        ProjectDeadlineView(
            id=p.id,
            project_name=p.title,
            priority=p.get_priority_display(),
            start_date=p.start_date,
            deadline=p.deadline,
            owner_user=_user_view(p.owner),
        )
        for p in projects
    ]

@transaction.atomic
def update_project(*, data: Dict[str, Any], user: User, project_id) -> Project:
    _require_manager_role(user)
    _require_member_or_admin(user, project_id)
    # locked until commit so the open-ticket check and the member swap see the same rows
    project = project_selector.get_project_for_update(project_id)
    if project is None:
        raise ProjectNotFound(project_id)

    owner = user_service.find_by_id(data["owner_id"])
    members = user_service.find_all_by_id(data.get("users") or [])
    priority = ProjectPriority.from_input(data.get("priority"))

    kept_ids = {u.id for u in members} | {owner.id}
    removed_ids = set(project.members.values_list("id", flat=True)) - kept_ids
    blocked = ticket_service.open_assignees(project.id, removed_ids)
    if blocked:
        raise MemberHasAssignedTickets(blocked)

    project = repo.replace(
        project,
        {
            "title": data["title"],
            "description": data.get("description") or "",
            "priority": priority,
            "deadline": data.get("deadline"),
        },
        owner=owner,
        members=members,
    )
    logger.info("[project] updated id=%s owner=%s by=%s", project.id, owner.id, user.id)
    return project
