"""
Serializers for favorites endpoints.
"""

from rest_framework import serializers


class AddFavoriteRequestSerializer(serializers.Serializer):
    """Serializer for add favorite request."""

    product_id = serializers.UUIDField(required=True)


class FavoriteStatusSerializer(serializers.Serializer):
    """Serializer for FavoriteStatusDTO."""

    product_id = serializers.UUIDField()
    is_favorite = serializers.BooleanField()
