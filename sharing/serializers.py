from rest_framework import serializers

from .models import ShareLink


class ShareToggleSerializer(serializers.Serializer):
    share = serializers.BooleanField()


class ShareLinkSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShareLink
        fields = ["hash"]
