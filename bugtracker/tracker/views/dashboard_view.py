# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import viewsets, permissions, serializers
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer

from tracker.serializers.project_serializer import PriorityCountSerializer, ProjectDeadlineSerializer
from tracker.services.project_service import (
    get_number_of_projects,
    get_projects_count_by_priority,
    get_5_projects_with_deadline_close,
)
from tracker.views.utils import ok_response

ProjectCountSerializer = inline_serializer(name="ProjectCount", fields={"count": serializers.IntegerField()})


class DashboardViewSet(viewsets.ViewSet):
    """
    Dashboard widgets. Admins see every project, everyone else only projects they are a member of.
    """
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        tags=["Dashboard"],
        summary="Number of visible projects",
        responses=ok_response(ProjectCountSerializer),
    )
    @action(detail=False, methods=["get"], url_path="projects/count")
    def project_count(self, request):
        return Response({"count": get_number_of_projects(request.user)})

    @extend_schema(
        tags=["Dashboard"],
        summary="Visible projects grouped by priority",
        responses=ok_response(PriorityCountSerializer, many=True),
    )
    @action(detail=False, methods=["get"], url_path="projects/by-priority")
    def projects_by_priority(self, request):
        rows = get_projects_count_by_priority(request.user)
        return Response(PriorityCountSerializer(rows, many=True).data)

    @extend_schema(
        tags=["Dashboard"],
        summary="Up to 5 projects with a deadline within the next month",
        responses=ok_response(ProjectDeadlineSerializer, many=True),
    )
    @action(detail=False, methods=["get"], url_path="projects/deadlines")
    def projects_deadlines(self, request):
        projects = get_5_projects_with_deadline_close(request.user)
        return Response(ProjectDeadlineSerializer(projects, many=True).data)
