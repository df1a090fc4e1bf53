import uuid
import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient

from tracker.models import Project, ProjectPriority, Ticket


def _client(user=None):
    client = APIClient()
    if user is not None:
        client.force_authenticate(user=user)
    return client

def _body(**overrides):
    body = {
        "title": "Checkout revamp",
        "description": "Rewrite the payment step",
        "priority": "HIGH",
        "deadline": str(timezone.localdate() + timedelta(days=10)),
        "users": [],
    }
    body.update(overrides)
    return body


@pytest.mark.django_db
def test_anonymous_is_rejected():
    resp = _client().get("/api/projects/")
    assert resp.status_code in (401, 403)

@pytest.mark.django_db
def test_manager_creates_project(manager, dev_a, dev_b):
    resp = _client(manager).post("/api/projects/", _body(users=[dev_a.id, dev_b.id]), format="json")
    assert resp.status_code == 201, resp.content

    project = Project.objects.get(id=resp.json()["id"])
    assert project.owner_id == manager.id
    assert set(project.members.values_list("id", flat=True)) == {manager.id, dev_a.id, dev_b.id}

@pytest.mark.django_db
def test_developer_cannot_create_project(dev_a):
    resp = _client(dev_a).post("/api/projects/", _body(), format="json")
    assert resp.status_code == 403
    assert Project.objects.count() == 0

@pytest.mark.django_db
def test_create_with_bad_priority_is_400(manager):
    resp = _client(manager).post("/api/projects/", _body(priority="whenever"), format="json")
    assert resp.status_code == 400
    assert "priority" in resp.json()

@pytest.mark.django_db
def test_create_with_unknown_owner_is_404(manager):
    resp = _client(manager).post("/api/projects/", _body(owner_id=999999), format="json")
    assert resp.status_code == 404

@pytest.mark.django_db
def test_list_and_names_are_scoped(manager, dev_a, make_project):
    mine = make_project(manager, [dev_a], title="Mine", priority=ProjectPriority.HIGH)
    make_project(manager, [], title="Not mine")

    resp = _client(dev_a).get("/api/projects/")
    assert resp.status_code == 200
    data = resp.json()
    assert [p["project_name"] for p in data] == ["Mine"]
    assert data[0]["priority"] == "High"
    assert data[0]["owner_user"] == {"id": manager.id, "full_name": "Max Manager", "role": "MANAGER"}

    resp = _client(dev_a).get("/api/projects/names/")
    assert resp.status_code == 200
    assert resp.json() == [{"project_id": str(mine.id), "full_name": "Mine"}]

@pytest.mark.django_db
def test_retrieve_detail(manager, dev_a, make_project, make_ticket):
    project = make_project(manager, [dev_a], title="Detail")
    make_ticket(project, manager, assignee=dev_a, status=Ticket.Status.IN_PROGRESS)

    resp = _client(dev_a).get(f"/api/projects/{project.id}/")
    assert resp.status_code == 200, resp.content
    data = resp.json()
    assert data["project_name"] == "Detail"
    assert data["owner_user"]["id"] == manager.id
    assert [u["id"] for u in data["users"]] == [dev_a.id]
    assert {g["status"]: g["count"] for g in data["tickets"]}["IN_PROGRESS"] == 1

@pytest.mark.django_db
def test_retrieve_forbidden_for_outsider(manager, outsider, make_project):
    project = make_project(manager, [])
    assert _client(outsider).get(f"/api/projects/{project.id}/").status_code == 403
    assert _client(outsider).get(f"/api/projects/{uuid.uuid4()}/").status_code == 403

@pytest.mark.django_db
def test_retrieve_missing_for_admin_is_404(admin):
    assert _client(admin).get(f"/api/projects/{uuid.uuid4()}/").status_code == 404

@pytest.mark.django_db
def test_update_project(manager, dev_a, dev_b, make_project):
    project = make_project(manager, [dev_a], title="Old")
    resp = _client(manager).put(
        f"/api/projects/{project.id}/",
        _body(title="New", priority="Low", users=[dev_b.id], owner_id=manager.id),
        format="json",
    )
    assert resp.status_code == 204, resp.content

    project.refresh_from_db()
    assert project.title == "New"
    assert project.priority == ProjectPriority.LOW
    assert set(project.members.values_list("id", flat=True)) == {manager.id, dev_b.id}

@pytest.mark.django_db
def test_update_requires_owner_id(manager, make_project):
    project = make_project(manager, [])
    resp = _client(manager).put(f"/api/projects/{project.id}/", _body(), format="json")
    assert resp.status_code == 400
    assert "owner_id" in resp.json()

@pytest.mark.django_db
def test_update_missing_project_is_404(admin):
    resp = _client(admin).put(f"/api/projects/{uuid.uuid4()}/", _body(owner_id=admin.id), format="json")
    assert resp.status_code == 404

@pytest.mark.django_db
def test_update_blocked_by_open_tickets_is_400(manager, dev_a, make_project, make_ticket):
    project = make_project(manager, [dev_a], title="Keep")
    make_ticket(project, manager, assignee=dev_a)

    resp = _client(manager).put(f"/api/projects/{project.id}/", _body(owner_id=manager.id), format="json")
    assert resp.status_code == 400
    assert "open tickets" in resp.json()["detail"]
    project.refresh_from_db()
    assert project.title == "Keep"


# ============== dashboard ==============
@pytest.mark.django_db
def test_dashboard_endpoints(admin, manager, dev_a, make_project):
    make_project(manager, [dev_a], priority=ProjectPriority.HIGH, deadline_in_days=5)
    make_project(manager, [], priority=ProjectPriority.LOW, deadline_in_days=3)

    resp = _client(dev_a).get("/api/dashboard/projects/count/")
    assert resp.status_code == 200
    assert resp.json() == {"count": 1}
    assert _client(admin).get("/api/dashboard/projects/count/").json() == {"count": 2}

    resp = _client(admin).get("/api/dashboard/projects/by-priority/")
    assert resp.status_code == 200
    rows = {r["priority"]: r for r in resp.json()}
    assert rows["HIGH"]["count"] == 1
    assert rows["LOW"]["priority_display"] == "Low"

    resp = _client(admin).get("/api/dashboard/projects/deadlines/")
    assert resp.status_code == 200
    deadlines = [p["deadline"] for p in resp.json()]
    assert deadlines == sorted(deadlines)
    assert len(deadlines) == 2

@pytest.mark.django_db
def test_dashboard_deadlines_payload(dev_a, manager, make_project):
    project = make_project(manager, [dev_a], title="Launch", priority=ProjectPriority.HIGH, deadline_in_days=2)

    resp = _client(dev_a).get("/api/dashboard/projects/deadlines/")
    assert resp.status_code == 200
    assert resp.json() == [{
        "id": str(project.id),
        "project_name": "Launch",
        "priority": "High",
        "start_date": str(project.start_date),
        "deadline": str(project.deadline),
        "owner_user": {"id": manager.id, "full_name": "Max Manager", "role": "MANAGER"},
    }]

@pytest.mark.django_db
def test_dashboard_deadlines_capped_at_five(settings, admin, manager, make_project):
    settings.TRACKER_DEADLINE_WINDOW_LIMIT = 10
    for days in range(8):
        make_project(manager, [], deadline_in_days=days)

    resp = _client(admin).get("/api/dashboard/projects/deadlines/")
    assert resp.status_code == 200
    assert len(resp.json()) == 5
