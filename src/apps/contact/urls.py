"""Contact app URL configuration."""

from django.urls import path

from . import views

app_name = "contact"

urlpatterns = [
    path("api/contact/", views.ContactSubmitView.as_view(), name="submit"),
    path("api/admin/messages/", views.AdminMessageListView.as_view(), name="admin_messages"),
    path("api/admin/messages/read/", views.AdminMessageMarkReadView.as_view(), name="admin_message_read"),
    path("api/admin/messages/<int:pk>/", views.AdminMessageDeleteView.as_view(), name="admin_message_delete"),
]
