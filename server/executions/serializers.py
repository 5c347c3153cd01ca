from __future__ import annotations

from rest_framework import serializers

from vacuum_core.domain.models import FIELD_LIMIT, Command, Direction, PathRequest, Position
from vacuum_core.services.report import format_duration, format_timestamp

MAX_COMMANDS = 10000
MAX_STEPS = 100000


class PositionSerializer(serializers.Serializer):
    x = serializers.IntegerField(min_value=-FIELD_LIMIT, max_value=FIELD_LIMIT)
    y = serializers.IntegerField(min_value=-FIELD_LIMIT, max_value=FIELD_LIMIT)


class DirectionField(serializers.ChoiceField):
    """Direction tokens are matched case-insensitively, like ``Direction.parse``."""

    def __init__(self, **kwargs):
        super().__init__(choices=[d.value for d in Direction], **kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.strip().lower()
        return super().to_internal_value(data)


class CommandSerializer(serializers.Serializer):
    direction = DirectionField()
    steps = serializers.IntegerField(min_value=0, max_value=MAX_STEPS)


class PathRequestSerializer(serializers.Serializer):
    start = PositionSerializer(required=False)
    commands = CommandSerializer(many=True, allow_empty=True, max_length=MAX_COMMANDS)

    def to_path_request(self) -> PathRequest:
        data = self.validated_data
        commands = tuple(
            Command(direction=Direction(item["direction"]), steps=item["steps"])
            for item in data["commands"]
        )
        start = data.get("start")
        if start is None:
            return PathRequest(commands=commands)
        return PathRequest(commands=commands, start=Position(x=start["x"], y=start["y"]))


class SavedExecutionSerializer(serializers.Serializer):
    """
    Renders a SavedExecution. The response time zone must be passed in the
    serializer context as ``response_tz``.
    """

    id = serializers.IntegerField(read_only=True)
    timestamp = serializers.SerializerMethodField()
    commands = serializers.IntegerField(read_only=True)
    result = serializers.IntegerField(read_only=True)
    duration = serializers.SerializerMethodField()

    def get_timestamp(self, obj) -> str:
        return format_timestamp(obj.timestamp, self.context["response_tz"])

    def get_duration(self, obj) -> str:
        return format_duration(obj.duration)
