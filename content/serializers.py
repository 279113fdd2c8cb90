from rest_framework import serializers

from . import services
from .models import Content


class StrictCharField(serializers.CharField):
    """CharField that keeps input verbatim and refuses non-string values."""

    def __init__(self, **kwargs):
        kwargs.setdefault("trim_whitespace", False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class StringOrListField(serializers.Field):
    """Accepts a non-empty string or a non-empty list of strings."""

    default_error_messages = {
        "invalid": "Must be a string or a list of strings.",
        "blank": "This field may not be blank.",
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            if not data:
                self.fail("blank")
            return data
        if isinstance(data, list) and all(isinstance(item, str) for item in data):
            if not data:
                self.fail("blank")
            return data
        self.fail("invalid")

    def to_representation(self, value):
        return value


class ContentSerializer(serializers.ModelSerializer):
    title = StrictCharField()
    body = StringOrListField()
    type = StrictCharField()
    tags = serializers.ListField(child=StrictCharField(allow_blank=True), required=False)
    link = serializers.URLField(
        max_length=2048,
        required=False,
        allow_blank=True,
        allow_null=True,
    )

    class Meta:
        model = Content
        fields = ["id", "title", "body", "type", "tags", "link", "user", "created_at", "updated_at"]
        read_only_fields = ["id", "user", "created_at", "updated_at"]

    def validate_link(self, value):
        return value or None

    def create(self, validated_data):
        return services.create_content(**validated_data)
