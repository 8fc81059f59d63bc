"""
URL configuration for admin back-office endpoints.
"""

from django.urls import path

from api.v1.admin import views

urlpatterns = [
    path("auth/signin", views.AdminSignInView.as_view(), name="admin-sign-in"),
    path("brands", views.AdminBrandListView.as_view(), name="admin-list-brands"),
    path(
        "brands/<uuid:brand_id>/status",
        views.AdminBrandStatusView.as_view(),
        name="admin-transition-brand-status",
    ),
    path("users", views.AdminUserListView.as_view(), name="admin-list-users"),
    path("users/<uuid:principal_id>", views.AdminUserDetailView.as_view(), name="admin-user-detail"),
]
