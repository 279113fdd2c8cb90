from rest_framework import serializers

from . import services


class SignupSerializer(serializers.Serializer):
    username = serializers.CharField(
        min_length=services.USERNAME_MIN_LENGTH,
        max_length=150,
        trim_whitespace=False,
    )
    password = serializers.CharField(
        write_only=True,
        min_length=services.PASSWORD_MIN_LENGTH,
        trim_whitespace=False,
    )

    def create(self, validated_data):
        return services.register(
            username=validated_data["username"],
            password=validated_data["password"],
        )


class SigninSerializer(serializers.Serializer):
    username = serializers.CharField(trim_whitespace=False)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
