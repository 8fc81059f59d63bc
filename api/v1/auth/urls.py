"""
URL configuration for authentication endpoints.
"""

from django.urls import path

from api.v1.auth import views

urlpatterns = [
    path("signup", views.SignUpView.as_view(), name="sign-up"),
    path("signin", views.SignInView.as_view(), name="sign-in"),
    path("signout", views.SignOutView.as_view(), name="sign-out"),
    path("me", views.CurrentPrincipalView.as_view(), name="current-principal"),
    path("me/password", views.ChangePasswordView.as_view(), name="change-password"),
]
