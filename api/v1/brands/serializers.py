"""
Serializers for brand endpoints.
"""

from rest_framework import serializers


class BrandDTOSerializer(serializers.Serializer):
    """Serializer for BrandDTO."""

    id = serializers.UUIDField()
    owner_id = serializers.UUIDField()
    name = serializers.CharField()
    status = serializers.CharField()
    is_featured = serializers.BooleanField()
    category = serializers.CharField(allow_null=True)
    description = serializers.CharField(allow_null=True)
    logo_url = serializers.CharField(allow_null=True)
    location = serializers.CharField(allow_null=True)
    website = serializers.CharField(allow_null=True)
    instagram = serializers.CharField(allow_null=True)
    facebook = serializers.CharField(allow_null=True)
    phone = serializers.CharField(allow_null=True)
    email = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ProductImageSerializer(serializers.Serializer):
    """Serializer for one product image reference."""

    public_id = serializers.CharField()
    image_url = serializers.CharField()


class ProductDTOSerializer(serializers.Serializer):
    """Serializer for ProductDTO."""

    id = serializers.UUIDField()
    brand_id = serializers.UUIDField()
    brand_name = serializers.CharField(allow_null=True)
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    images = ProductImageSerializer(many=True)
    purchase_link = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class BrandWithProductsSerializer(serializers.Serializer):
    """Serializer for OwnBrandDTO and PublicBrandDTO."""

    brand = BrandDTOSerializer()
    products = ProductDTOSerializer(many=True)


class BrandProfileSerializer(serializers.Serializer):
    """
    Descriptive brand fields.

    Used for the optional brand block at sign-up and for profile edits.
    URL and e-mail formats are checked by the Brand entity.
    """

    name = serializers.CharField(required=False, max_length=255)
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    logo_url = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    location = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    website = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    instagram = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    facebook = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=254)

    def to_internal_value(self, data):
        """Reject any attempt to set status through the profile."""
        if isinstance(data, dict) and "status" in data:
            raise serializers.ValidationError(
                {"status": "Brand status can only be changed by an admin"}
            )
        return super().to_internal_value(data)
