# -*- coding: utf-8 -*-
from __future__ import annotations
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import viewsets, permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiExample, OpenApiResponse, inline_serializer
from rest_framework import serializers

from tracker.permissions import IsAdminOrManager
from tracker.serializers.project_serializer import (
    ProjectCreateSerializer,
    ProjectUpdateSerializer,
    ProjectNameSerializer,
    ProjectPreviewSerializer,
    ProjectDetailSerializer,
)
from tracker.services.project_service import (
    create_project as svc_create_project,
    update_project as svc_update_project,
    get_project_by_id as svc_get_project_by_id,
    get_projects_that_user_is_part_of,
    get_all_projects_with_user_name_only,
)
from tracker.views.utils import error_responses, ok_response, project_id_param

UUID_REGEX = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

ProjectCreatedSerializer = inline_serializer(name="ProjectCreated", fields={"id": serializers.UUIDField()})


def _validation_error(e: DjangoValidationError) -> Response:
    return Response({"detail": " ".join(e.messages)}, status=status.HTTP_400_BAD_REQUEST)


@extend_schema_view(
    list=extend_schema(
        tags=["Projects"],
        summary="Projects visible to the caller, with owner and top 3 members",
        responses=ok_response(ProjectPreviewSerializer, many=True),
    ),
    retrieve=extend_schema(
        tags=["Projects"],
        summary="Project detail (members except owner, tickets grouped by status)",
        parameters=[project_id_param()],
        responses=ok_response(ProjectDetailSerializer, errors=(403, 404)),
    ),
    create=extend_schema(
        tags=["Projects"],
        summary="Create project (admin / manager)",
        description="`owner_id` defaults to the caller. The owner is always added to `users`.",
        request=ProjectCreateSerializer,
        responses=ok_response(ProjectCreatedSerializer, status=201, errors=(400, 403, 404)),
        examples=[
            OpenApiExample(
                "New project",
                value={
                    "title": "Checkout revamp",
                    "description": "Rewrite the payment step",
                    "priority": "HIGH",
                    "deadline": "2026-11-30",
                    "users": [4, 7],
                },
                request_only=True,
            )
        ],
    ),
    update=extend_schema(
        tags=["Projects"],
        summary="Replace project fields and member set (admin / manager, member of the project)",
        parameters=[project_id_param()],
        request=ProjectUpdateSerializer,
        responses={204: OpenApiResponse(description="Updated"), **error_responses(400, 403, 404)},
    ),
)
class ProjectViewSet(viewsets.ViewSet):
    permission_classes = [permissions.IsAuthenticated, IsAdminOrManager]
    lookup_value_regex = UUID_REGEX

    def list(self, request):
        data = get_all_projects_with_user_name_only(request.user)
        return Response(ProjectPreviewSerializer(data, many=True).data)

    def retrieve(self, request, pk=None):
        obj = svc_get_project_by_id(request.user, pk)
        return Response(ProjectDetailSerializer(obj).data)

    def create(self, request):
        ser = ProjectCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = dict(ser.validated_data)
        owner_id = data.pop("owner_id", request.user.id)
        try:
            project = svc_create_project(data=data, owner_id=owner_id, actor=request.user)
        except DjangoValidationError as e:
            return _validation_error(e)
        return Response({"id": str(project.id)}, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        ser = ProjectUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            svc_update_project(data=dict(ser.validated_data), user=request.user, project_id=pk)
        except DjangoValidationError as e:
            return _validation_error(e)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        tags=["Projects"],
        summary="Names of the projects the caller is part of (all projects for admins)",
        responses=ok_response(ProjectNameSerializer, many=True),
    )
    @action(detail=False, methods=["get"], url_path="names")
    def names(self, request):
        data = get_projects_that_user_is_part_of(request.user)
        return Response(ProjectNameSerializer(data, many=True).data)
