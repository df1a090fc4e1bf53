# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Any, Dict, List

from tracker.models import Ticket
from tracker.repositories import ticket_repository as repo


def _ticket_preview(ticket: Ticket) -> Dict[str, Any]:
    return {
        "id": ticket.id,
        "title": ticket.title,
        "priority": ticket.get_priority_display(),
        "assignee_id": ticket.assignee_id,
    }

def get_all_project_tickets_by_status(project_id) -> List[Dict[str, Any]]:
    """
    One group per ticket status, in declaration order, empty groups included:
    [{"status": "NEW", "label": "New", "count": 2, "tickets": [...]}, ...]
    """
    groups = {
        status: {"status": status.value, "label": status.label, "count": 0, "tickets": []}
        for status in Ticket.Status
    }
    for ticket in repo.list_for_project(project_id):
        group = groups[Ticket.Status(ticket.status)]
        group["tickets"].append(_ticket_preview(ticket))
        group["count"] += 1
    return list(groups.values())

def open_assignees(project_id, user_ids) -> set:
    return repo.assignees_with_open_tickets(project_id, user_ids)
