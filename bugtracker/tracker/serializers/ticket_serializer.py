# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers


class TicketPreviewSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    priority = serializers.CharField()
    assignee_id = serializers.IntegerField(allow_null=True)


class TicketStatusGroupSerializer(serializers.Serializer):
    status = serializers.CharField()
    label = serializers.CharField()
    count = serializers.IntegerField()
    tickets = TicketPreviewSerializer(many=True)
