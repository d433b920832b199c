from django.apps import AppConfig
from django.conf import settings


class ContactConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.contact"
    verbose_name = "Contact"

    def ready(self) -> None:
        # One pipeline per process; its rate limiter state lives as long as the worker.
        self.pipeline = self.build_pipeline()

    def build_pipeline(self):
        from .notifications import EmailNotifier
        from .pipeline import ContactPipeline
        from .rate_limiting import FixedWindowRateLimiter
        from .store import SubmissionStore

        return ContactPipeline(
            rate_limiter=FixedWindowRateLimiter(
                max_requests=settings.CONTACT_RATE_LIMIT_MAX_REQUESTS,
                window=settings.CONTACT_RATE_LIMIT_WINDOW,
                max_entries=settings.CONTACT_RATE_LIMIT_MAX_ENTRIES,
            ),
            store=SubmissionStore(),
            notifier=EmailNotifier(),
            notification_timeout=settings.CONTACT_NOTIFICATION_TIMEOUT,
        )
