"""Admin API authentication URL configuration."""

from django.urls import path

from . import views

app_name = "accounts"

urlpatterns = [
    path("login/", views.AdminLoginView.as_view(), name="admin_login"),
    path("verify/", views.AdminVerifyView.as_view(), name="admin_verify"),
]
