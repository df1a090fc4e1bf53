# -*- coding: utf-8 -*-
"""
Repository layer for Ticket (read-only from the project side).
"""
from __future__ import annotations
from typing import Iterable, Set

from django.db.models import QuerySet

from tracker.models import Ticket


def base_qs() -> QuerySet[Ticket]:
    return Ticket.objects.all()

def list_for_project(project_id) -> QuerySet[Ticket]:
    return base_qs().filter(project_id=project_id).order_by("created_at", "id")

def assignees_with_open_tickets(project_id, user_ids: Iterable[int]) -> Set[int]:
    ids = set(user_ids)
    if not ids:
        return set()
    rows = (
        base_qs()
        .filter(project_id=project_id, assignee_id__in=ids, status__in=Ticket.OPEN_STATUSES)
        .values_list("assignee_id", flat=True)
        .distinct()
    )
    return set(rows)
