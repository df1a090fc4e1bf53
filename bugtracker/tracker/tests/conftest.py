import pytest
from datetime import timedelta
from django.contrib.auth import get_user_model
from django.utils import timezone

from tracker.models import ProjectPriority, Role, Ticket
from tracker.repositories import project_repository

User = get_user_model()


def _user(username, role, full_name):
    return User.objects.create_user(
        username=username, email=f"{username}@example.com", password="pass12345",
        full_name=full_name, role=role,
    )

@pytest.fixture
def admin(db):
    return _user("admin", Role.ADMIN, "Ada Admin")

@pytest.fixture
def manager(db):
    return _user("manager", Role.MANAGER, "Max Manager")

@pytest.fixture
def dev_a(db):
    return _user("dev_a", Role.DEVELOPER, "Dev A")

@pytest.fixture
def dev_b(db):
    return _user("dev_b", Role.DEVELOPER, "Dev B")

@pytest.fixture
def outsider(db):
    return _user("outsider", Role.DEVELOPER, "Olly Outsider")

@pytest.fixture
def make_project(db):
    def _make(owner, members=(), title="Project", priority=ProjectPriority.MEDIUM, deadline_in_days=30):
        today = timezone.localdate()
        deadline = today + timedelta(days=deadline_in_days) if deadline_in_days is not None else None
        return project_repository.create(
            {
                "title": title,
                "description": f"{title} description",
                "priority": priority,
                "start_date": today,
                "deadline": deadline,
            },
            owner=owner,
            members=list(members),
        )
    return _make

@pytest.fixture
def make_ticket(db):
    def _make(project, submitter, assignee=None, status=Ticket.Status.NEW, title="Ticket"):
        return Ticket.objects.create(
            project=project, submitter=submitter, assignee=assignee, status=status, title=title,
        )
    return _make
