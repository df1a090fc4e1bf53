# -*- coding: utf-8 -*-
from __future__ import annotations
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from tracker.views.dashboard_view import DashboardViewSet
from tracker.views.project_view import ProjectViewSet

app_name = "tracker"

router = DefaultRouter()
router.register(r"projects", ProjectViewSet, basename="projects")
router.register(r"dashboard", DashboardViewSet, basename="dashboard")

urlpatterns = [
    path("", include(router.urls)),
]
