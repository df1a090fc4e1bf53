# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers


class UserNameSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    full_name = serializers.CharField()


class UserSerializer(UserNameSerializer):
    role = serializers.CharField()
