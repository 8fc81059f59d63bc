"""
Serializers for product endpoints.
"""

from rest_framework import serializers

from api.v1.brands.serializers import ProductImageSerializer


class CreateProductRequestSerializer(serializers.Serializer):
    """Serializer for create product request."""

    name = serializers.CharField(required=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    images = serializers.ListField(child=ProductImageSerializer(), min_length=1)
    purchase_link = serializers.CharField(required=True, max_length=500)
    brand_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text="Target brand; admins only, brand owners always use their own brand",
    )


class UpdateProductRequestSerializer(serializers.Serializer):
    """Serializer for update product request."""

    name = serializers.CharField(required=False, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price = serializers.DecimalField(required=False, max_digits=12, decimal_places=2, min_value=0)
    images = serializers.ListField(child=ProductImageSerializer(), required=False, min_length=1)
    purchase_link = serializers.CharField(required=False, max_length=500)
