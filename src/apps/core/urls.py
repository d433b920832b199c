"""Core app URL configuration."""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("", views.IndexView.as_view(), name="index"),
    path("robots.txt", views.RobotsTxtView.as_view(), name="robots_txt"),
    # API
    path("api/", views.ApiStatusView.as_view(), name="api_status"),
    path("api/content/", views.ContentView.as_view(), name="content"),
    path("api/admin/content/", views.AdminContentUpdateView.as_view(), name="admin_content"),
]
