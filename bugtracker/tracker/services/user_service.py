# -*- coding: utf-8 -*-
"""
User directory: lookups the project service (and the login backend) depend on.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from tracker.exceptions import UserNotFound
from tracker.models import User
from tracker.repositories import project_repository, user_repository as repo


TOP_MEMBERS_LIMIT = 3


def find_by_id(user_id) -> User:
    user = repo.get_or_none(user_id)
    if user is None:
        raise UserNotFound(user_id)
    return user

def find_by_email(email: str) -> Optional[User]:
    return repo.get_by_email(email)

def find_all_by_id(user_ids: Iterable[int]) -> List[User]:
    """Unknown ids are dropped, not reported."""
    return repo.list_by_ids(user_ids)

def is_user_in_project(project_id, user_id: int) -> bool:
    return project_repository.is_member(project_id, user_id)

def get_top3_users_of_project(project_id) -> List[User]:
    return repo.list_top_members(project_id, limit=TOP_MEMBERS_LIMIT)
