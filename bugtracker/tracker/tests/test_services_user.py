import pytest
from django.contrib.auth import authenticate

from tracker.backends import EmailBackend
from tracker.exceptions import UserNotFound
from tracker.services import user_service


@pytest.mark.django_db
def test_find_by_id(dev_a):
    assert user_service.find_by_id(dev_a.id) == dev_a
    with pytest.raises(UserNotFound):
        user_service.find_by_id(123456)

@pytest.mark.django_db
def test_find_by_email_is_case_insensitive(dev_a):
    assert user_service.find_by_email("DEV_A@Example.com") == dev_a
    assert user_service.find_by_email("nobody@example.com") is None

@pytest.mark.django_db
def test_is_user_in_project(manager, dev_a, outsider, make_project):
    project = make_project(manager, [dev_a])
    assert user_service.is_user_in_project(project.id, manager.id)
    assert user_service.is_user_in_project(project.id, dev_a.id)
    assert not user_service.is_user_in_project(project.id, outsider.id)

@pytest.mark.django_db
def test_top3_prefers_members_with_most_assigned_tickets(manager, dev_a, dev_b, outsider, make_project, make_ticket):
    project = make_project(manager, [dev_a, dev_b, outsider])
    other = make_project(manager, [dev_a])
    make_ticket(project, manager, assignee=outsider)
    make_ticket(project, manager, assignee=outsider)
    make_ticket(project, manager, assignee=dev_b)
    # tickets in another project do not count
    for _ in range(3):
        make_ticket(other, manager, assignee=dev_a)

    top = user_service.get_top3_users_of_project(project.id)
    assert [u.id for u in top] == [outsider.id, dev_b.id, manager.id]

@pytest.mark.django_db
def test_email_backend_login(dev_a):
    assert EmailBackend().authenticate(None, username="dev_a@example.com", password="pass12345") == dev_a
    assert EmailBackend().authenticate(None, email="dev_a@example.com", password="wrong") is None
    assert EmailBackend().authenticate(None, username="ghost@example.com", password="pass12345") is None
    assert authenticate(username="dev_a@example.com", password="pass12345") == dev_a
