# -*- coding: utf-8 -*-
"""
Selector for Project:
- Turns the calling user into a visibility scope
- Delegates to the repository
"""
from __future__ import annotations
from datetime import date
from typing import Any, Dict, List

from django.db.models import QuerySet

from tracker.models import Project, User
from tracker.repositories import project_repository as repo
from tracker.repositories.project_repository import ProjectScope


def scope_for(user: User) -> ProjectScope:
    return ProjectScope.for_user(user)

def list_visible_projects(user: User) -> QuerySet[Project]:
    return repo.list_projects(scope_for(user))

def count_visible_projects(user: User) -> int:
    return repo.count_projects(scope_for(user))

def count_visible_by_priority(user: User) -> List[Dict[str, Any]]:
    return repo.count_by_priority(scope_for(user))

def list_visible_with_deadline_between(user: User, start: date, end: date, limit: int) -> List[Project]:
    return repo.list_deadline_between(scope_for(user), start, end, limit)

# Quick delegates
get_project_or_none = repo.get_or_none
get_project_for_update = repo.get_for_update
