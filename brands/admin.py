"""
Django admin configuration for brands app.

Status is read-only here: brands change status only through the
admin API, which runs the lifecycle rules.
"""

from django.contrib import admin
from django.utils.html import format_html

from brands.infrastructure.models import Brand

STATUS_COLORS = {
    "pending": "#b58900",
    "approved": "green",
    "rejected": "#999",
    "banned": "red",
}


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    """Admin interface for Brand model."""

    list_display = ["name", "status_display", "category", "is_featured", "product_count", "created_at"]
    list_filter = ["status", "is_featured", "category", "created_at"]
    search_fields = ["name", "category", "location", "email"]
    readonly_fields = ["id", "owner_id", "status", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "owner_id", "name", "status", "is_featured"),
            },
        ),
        (
            "Profile",
            {
                "fields": ("category", "description", "logo_url", "location"),
            },
        ),
        (
            "Contact",
            {
                "fields": ("website", "instagram", "facebook", "phone", "email"),
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

    def status_display(self, obj):
        """Display lifecycle status with color."""
        return format_html(
            '<span style="color: {};">{}</span>',
            STATUS_COLORS.get(obj.status, "inherit"),
            obj.get_status_display(),
        )

    status_display.short_description = "Status"

    def product_count(self, obj):
        """Display number of products for this brand."""
        return obj.products.count()

    product_count.short_description = "Products"

    def has_add_permission(self, request):
        """Brands are created together with their owner at sign-up."""
        return False

    def has_delete_permission(self, request, obj=None):
        """Brands go away with their owner's account."""
        return False

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).prefetch_related("products")
