# apps/core/serializers.py

from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from apps.core.models import Role

User = get_user_model()


# ------------------------------------
# User Base
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    created_at = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "role",
            "profile_image",
            "created_at",
        ]
        read_only_fields = fields


# ------------------------------------
# Register
# ------------------------------------

class RegisterSerializer(serializers.ModelSerializer):
    """가입은 항상 praktikan. aslab 승격은 admin에서."""
    password = serializers.CharField(write_only=True, min_length=8)

    class Meta:
        model = User
        fields = ["id", "username", "email", "password"]

    def validate_password(self, value):
        validate_password(value)
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data["username"],
            email=validated_data["email"],
            password=validated_data["password"],
            role=Role.PRAKTIKAN,
        )


# ------------------------------------
# Profile
# ------------------------------------

class ProfileSerializer(serializers.ModelSerializer):
    image = serializers.FileField(write_only=True, required=False)

    class Meta:
        model = User
        fields = ["id", "username", "email", "profile_image", "image"]
        read_only_fields = ["id", "profile_image"]
