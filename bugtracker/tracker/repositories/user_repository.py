# -*- coding: utf-8 -*-
"""
Repository layer for User (DB only).
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from django.db.models import Count, Q, QuerySet

from tracker.models import User


def base_qs() -> QuerySet[User]:
    return User.objects.all()

def get_or_none(user_id) -> Optional[User]:
    return base_qs().filter(id=user_id).first()

def get_by_email(email: str) -> Optional[User]:
    return base_qs().filter(email__iexact=(email or "").strip()).first()

def list_by_ids(user_ids: Iterable[int]) -> List[User]:
    ids = {int(i) for i in user_ids or [] if i is not None}
    if not ids:
        return []
    return list(base_qs().filter(id__in=ids))

def list_top_members(project_id, limit: int = 3) -> List[User]:
    """Members ordered by how many of the project's tickets they are assigned to."""
    qs = (
        base_qs()
        .filter(projects__id=project_id)
        .annotate(assigned=Count("assigned_tickets", filter=Q(assigned_tickets__project_id=project_id)))
        .order_by("-assigned", "id")
    )
    return list(qs[:limit])
