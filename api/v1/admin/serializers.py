"""
Serializers for admin back-office endpoints.
"""

from rest_framework import serializers

from core.domain.value_objects import BrandStatus, Role


class TransitionBrandStatusRequestSerializer(serializers.Serializer):
    """Serializer for brand status change request."""

    status = serializers.ChoiceField(choices=[s.value for s in BrandStatus])
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)


class BrandStatusFilterSerializer(serializers.Serializer):
    """Query parameters for the admin brand list."""

    status = serializers.ChoiceField(choices=[s.value for s in BrandStatus], required=False)


class RoleFilterSerializer(serializers.Serializer):
    """Query parameters for the admin user list."""

    role = serializers.ChoiceField(choices=[r.value for r in Role], required=False)
