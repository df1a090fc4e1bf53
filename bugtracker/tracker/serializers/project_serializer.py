# -*- coding: utf-8 -*-
from __future__ import annotations
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from tracker.models import ProjectPriority
from tracker.serializers.ticket_serializer import TicketStatusGroupSerializer
from tracker.serializers.user_serializer import UserNameSerializer, UserSerializer


# ===== Writes =====
class ProjectCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    priority = serializers.CharField(max_length=32)
    deadline = serializers.DateField()
    users = serializers.ListField(child=serializers.IntegerField(), required=False, default=list)
    owner_id = serializers.IntegerField(required=False)  # mặc định là người gọi

    def validate_priority(self, value):
        try:
            return ProjectPriority.from_input(value).value
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)


class ProjectUpdateSerializer(ProjectCreateSerializer):
    owner_id = serializers.IntegerField()


# ===== Reads =====
class ProjectNameSerializer(serializers.Serializer):
    project_id = serializers.UUIDField()
    full_name = serializers.CharField()


class ProjectPreviewSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    project_name = serializers.CharField()
    priority = serializers.CharField()
    start_date = serializers.DateField()
    deadline = serializers.DateField(allow_null=True)
    owner_user = UserSerializer()
    users = UserNameSerializer(many=True)


class ProjectDetailSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    project_name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    priority = serializers.CharField()
    start_date = serializers.DateField()
    deadline = serializers.DateField(allow_null=True)
    owner_user = UserSerializer()
    users = UserSerializer(many=True)
    tickets = TicketStatusGroupSerializer(many=True)


class ProjectDeadlineSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    project_name = serializers.CharField()
    priority = serializers.CharField()
    start_date = serializers.DateField()
    deadline = serializers.DateField()
    owner_user = UserSerializer()


class PriorityCountSerializer(serializers.Serializer):
    priority = serializers.CharField()
    priority_display = serializers.SerializerMethodField()
    count = serializers.IntegerField()

    def get_priority_display(self, obj):
        return ProjectPriority(obj["priority"]).label
