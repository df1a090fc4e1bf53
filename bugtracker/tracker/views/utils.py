# -*- coding: utf-8 -*-
"""
OpenAPI building blocks for the tracker endpoints.

Every failure leaves the API as ``{"detail": "..."}`` (DRF's exception handler
for PermissionDenied / Http404, and ``_validation_error`` in the project view),
so one error schema covers all of them.
"""
from __future__ import annotations
from typing import Dict, Optional

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, inline_serializer
from rest_framework import serializers

TrackerErrorSerializer = inline_serializer(
    name="TrackerError",
    fields={"detail": serializers.CharField()},
)

ERROR_DESCRIPTIONS: Dict[int, str] = {
    400: "Invalid payload, unknown priority or a removed member still has open tickets",
    401: "Not authenticated",
    403: "Caller lacks the role or is not a member of the project",
    404: "Project or user does not exist",
}


def project_id_param(name: str = "pk") -> OpenApiParameter:
    return OpenApiParameter(name, OpenApiTypes.UUID, OpenApiParameter.PATH, description="Project UUID")


def error_responses(*codes: int) -> Dict[int, OpenApiResponse]:
    """Error entries for ``responses=``; 401 is always included since every endpoint needs a login."""
    wanted = sorted({401, *codes})
    return {code: OpenApiResponse(TrackerErrorSerializer, description=ERROR_DESCRIPTIONS[code]) for code in wanted}


def ok_response(serializer, *, many: bool = False, status: int = 200,
                description: Optional[str] = None, errors: tuple = ()) -> Dict[int, OpenApiResponse]:
    if isinstance(serializer, type):
        serializer = serializer(many=many)
    responses = {status: OpenApiResponse(response=serializer, description=description or "")}
    responses.update(error_responses(*errors))
    return responses
