from django.apps import AppConfig
from django.conf import settings


class AccountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.accounts"
    verbose_name = "Accounts"

    def ready(self) -> None:
        from apps.contact.rate_limiting import FixedWindowRateLimiter

        self.login_rate_limiter = FixedWindowRateLimiter(
            max_requests=settings.ADMIN_LOGIN_MAX_ATTEMPTS,
            window=settings.CONTACT_RATE_LIMIT_WINDOW,
            max_entries=settings.CONTACT_RATE_LIMIT_MAX_ENTRIES,
        )
