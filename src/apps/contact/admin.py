"""Contact app admin configuration."""

from django.contrib import admin

from .models import ContactSubmission


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    """Admin interface for contact form submissions."""

    list_display = ("name", "email", "subject", "client_address", "is_read", "created_at")
    list_filter = ("is_read", "created_at")
    search_fields = ("name", "email", "subject", "message")
    readonly_fields = ("name", "email", "subject", "message", "client_address", "created_at", "updated_at")
    ordering = ("-created_at",)
    actions = ("mark_as_read",)

    @admin.action(description="Mark selected submissions as read")
    def mark_as_read(self, request, queryset):
        updated = queryset.update(is_read=True)
        self.message_user(request, f"Marked {updated} submission(s) as read.")
