"""
Django admin configuration for accounts app.
"""

from django.contrib import admin

from accounts.infrastructure.models import Principal


@admin.register(Principal)
class PrincipalAdmin(admin.ModelAdmin):
    """
    Admin interface for Principal model.

    Accounts are read-only here. Clients and brand owners sign up through
    the API and admins are created with ``manage.py create_admin``.
    """

    list_display = ["email", "role", "full_name", "owned_brand", "created_at"]
    list_filter = ["role", "created_at"]
    search_fields = ["email", "full_name", "owned_brand__name"]
    exclude = ["secret_hash"]
    readonly_fields = [
        "id",
        "email",
        "role",
        "owned_brand",
        "full_name",
        "phone",
        "created_at",
        "updated_at",
    ]

    def has_add_permission(self, request):
        """Accounts are never created from the admin site."""
        return False

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("owned_brand")
