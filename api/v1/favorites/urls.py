"""
URL configuration for favorites endpoints.
"""

from django.urls import path

from api.v1.favorites import views

urlpatterns = [
    path("", views.FavoriteListView.as_view(), name="list-favorites"),
    path("<uuid:product_id>", views.FavoriteDetailView.as_view(), name="remove-favorite"),
    path("check/<uuid:product_id>", views.FavoriteCheckView.as_view(), name="check-favorite"),
]
