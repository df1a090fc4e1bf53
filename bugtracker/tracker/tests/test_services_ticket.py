import pytest

from tracker.models import Ticket
from tracker.services import ticket_service


@pytest.mark.django_db
def test_tickets_grouped_by_status_with_empty_groups(manager, dev_a, make_project, make_ticket):
    project = make_project(manager, [dev_a])
    make_ticket(project, manager, assignee=dev_a, status=Ticket.Status.RESOLVED, title="Fixed login")
    make_ticket(project, manager, status=Ticket.Status.NEW, title="Crash on save")
    make_ticket(project, manager, status=Ticket.Status.NEW, title="Typo")

    groups = ticket_service.get_all_project_tickets_by_status(project.id)

    assert [g["status"] for g in groups] == ["NEW", "IN_PROGRESS", "RESOLVED", "CLOSED"]
    assert [g["count"] for g in groups] == [2, 0, 1, 0]
    assert groups[1]["tickets"] == []
    assert groups[2]["label"] == "Resolved"
    assert groups[2]["tickets"][0] == {
        "id": groups[2]["tickets"][0]["id"],
        "title": "Fixed login",
        "priority": "Medium",
        "assignee_id": dev_a.id,
    }

@pytest.mark.django_db
def test_open_assignees_ignores_closed_tickets(manager, dev_a, dev_b, make_project, make_ticket):
    project = make_project(manager, [dev_a, dev_b])
    make_ticket(project, manager, assignee=dev_a, status=Ticket.Status.IN_PROGRESS)
    make_ticket(project, manager, assignee=dev_b, status=Ticket.Status.CLOSED)

    assert ticket_service.open_assignees(project.id, {dev_a.id, dev_b.id}) == {dev_a.id}
    assert ticket_service.open_assignees(project.id, set()) == set()
