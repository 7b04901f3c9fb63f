import pytest


def _configure_django_if_needed() -> None:
    """Configure a minimal Django setup (once per test run)."""
    from django.conf import settings

    if settings.configured:
        return

    settings.configure(
        SECRET_KEY="test",
        INSTALLED_APPS=[],
        DATABASES={
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": ":memory:",
            }
        },
        EMAIL_BACKEND="django.core.mail.backends.locmem.EmailBackend",
        DEFAULT_FROM_EMAIL="warehouse@example.com",
        TIME_ZONE="UTC",
        USE_TZ=True,
    )

    import django

    django.setup()


@pytest.fixture
def django_settings() -> None:
    _configure_django_if_needed()
