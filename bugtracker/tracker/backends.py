# -*- coding: utf-8 -*-
"""
Login by email: the user directory resolves the account, Django checks the password.
"""
from __future__ import annotations
import logging

from django.contrib.auth.backends import ModelBackend

from tracker.services import user_service

logger = logging.getLogger(__name__)


class EmailBackend(ModelBackend):

    def authenticate(self, request, username=None, password=None, email=None, **kwargs):
        email = email or username
        if not email or password is None:
            return None
        user = user_service.find_by_email(email)
        if user is None:
            logger.debug("User not found with email: %s", email)
            return None
        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
