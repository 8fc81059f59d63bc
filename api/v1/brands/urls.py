"""
URL configuration for brand endpoints.
"""

from django.urls import path

from api.v1.brands import views

urlpatterns = [
    path("", views.ListBrandsView.as_view(), name="list-brands"),
    path("featured", views.ListFeaturedBrandsView.as_view(), name="list-featured-brands"),
    path("me", views.OwnBrandView.as_view(), name="own-brand"),
    path("me/products", views.OwnBrandProductsView.as_view(), name="own-brand-products"),
    path("<uuid:brand_id>", views.BrandDetailView.as_view(), name="brand-detail"),
    path("<uuid:brand_id>/products", views.BrandProductsView.as_view(), name="brand-products"),
]
