"""Core app admin configuration."""

from django.contrib import admin

from .models import SiteContent


@admin.register(SiteContent)
class SiteContentAdmin(admin.ModelAdmin):
    """Admin interface for landing page content sections."""

    list_display = ("section", "updated_at")
    readonly_fields = ("updated_at",)
