"""
Serializers for authentication endpoints.
"""

from collections.abc import Mapping

from rest_framework import serializers

from accounts.domain.principal import IMMUTABLE_FIELDS, MIN_SECRET_LENGTH
from api.v1.brands.serializers import BrandDTOSerializer, BrandProfileSerializer


class SignUpRequestSerializer(serializers.Serializer):
    """Serializer for sign-up request."""

    kind = serializers.ChoiceField(choices=["client", "brand_owner"], default="client")
    email = serializers.EmailField(required=True)
    password = serializers.CharField(required=True, min_length=MIN_SECRET_LENGTH, write_only=True)
    full_name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)
    brand_name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    brand = BrandProfileSerializer(required=False)

    def validate(self, attrs):
        """A brand owner must name their brand."""
        if attrs.get("kind") == "brand_owner" and not (attrs.get("brand_name") or "").strip():
            raise serializers.ValidationError({"brand_name": "Brand name is required"})
        return attrs


class SignInRequestSerializer(serializers.Serializer):
    """Serializer for sign-in request."""

    email = serializers.CharField(required=True)
    password = serializers.CharField(required=True, write_only=True)


class PrincipalDTOSerializer(serializers.Serializer):
    """Serializer for PrincipalDTO."""

    id = serializers.UUIDField()
    email = serializers.EmailField()
    role = serializers.CharField()
    full_name = serializers.CharField()
    phone = serializers.CharField(allow_null=True)
    brand_id = serializers.UUIDField(allow_null=True)
    created_at = serializers.DateTimeField()


class SignUpResponseSerializer(serializers.Serializer):
    """Serializer for sign-up response."""

    user = PrincipalDTOSerializer(source="principal")
    token = serializers.CharField()
    brand = BrandDTOSerializer(allow_null=True)


class SignInResponseSerializer(serializers.Serializer):
    """Serializer for sign-in response."""

    user = PrincipalDTOSerializer(source="principal")
    token = serializers.CharField()


class CurrentPrincipalSerializer(serializers.Serializer):
    """Serializer for CurrentPrincipalDTO."""

    user = PrincipalDTOSerializer(source="principal")
    brand = BrandDTOSerializer(allow_null=True)


class UpdateProfileRequestSerializer(serializers.Serializer):
    """
    Serializer for a profile edit.

    Attempts to set role or the brand binding are passed through so the
    handler can refuse them.
    """

    full_name = serializers.CharField(required=False, max_length=255)
    email = serializers.EmailField(required=False)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)

    def to_internal_value(self, data):
        values = super().to_internal_value(data)
        if isinstance(data, Mapping):
            values.update({key: data[key] for key in IMMUTABLE_FIELDS if key in data})
        return values


class ChangePasswordRequestSerializer(serializers.Serializer):
    """Serializer for a password change."""

    current_password = serializers.CharField(required=True, write_only=True)
    new_password = serializers.CharField(required=True, min_length=MIN_SECRET_LENGTH, write_only=True)
