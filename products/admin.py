"""
Django admin configuration for products app.
"""

from django.contrib import admin

from products.infrastructure.models import Favorite, Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "brand", "price", "favorite_count", "created_at"]
    list_filter = ["brand__status", "created_at", "updated_at"]
    search_fields = ["name", "description", "brand__name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "brand", "name", "description", "price"),
            },
        ),
        (
            "Listing",
            {
                "fields": ("images", "purchase_link"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def favorite_count(self, obj):
        """Display number of clients who saved this product."""
        return obj.favorites.count()

    favorite_count.short_description = "Favorites"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("brand").prefetch_related("favorites")


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    """Admin interface for Favorite model."""

    list_display = ["principal", "product", "created_at"]
    search_fields = ["principal__email", "product__name"]
    readonly_fields = ["id", "principal", "product", "created_at"]

    def has_add_permission(self, request):
        """Favorites are only created by clients."""
        return False

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("principal", "product")
