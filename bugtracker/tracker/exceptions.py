# -*- coding: utf-8 -*-
"""
Typed errors raised by the service layer.
DRF's default exception handler maps Http404 -> 404 and PermissionDenied -> 403;
ValidationError is turned into 400 by the views.
"""
from __future__ import annotations
from django.core.exceptions import PermissionDenied, ValidationError
from django.http import Http404


class ProjectNotFound(Http404):
    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"Project not found with id: {project_id}")


class UserNotFound(Http404):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User not found with id: {user_id}")


class UserActionForbidden(PermissionDenied):
    def __init__(self, message: str = "User is not allowed to perform this action"):
        super().__init__(message)


class MemberHasAssignedTickets(ValidationError):
    def __init__(self, user_ids):
        self.user_ids = sorted(user_ids)
        super().__init__(
            f"Cannot remove members with open tickets assigned: {', '.join(str(i) for i in self.user_ids)}"
        )
