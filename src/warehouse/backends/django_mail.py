from __future__ import annotations

import logging

from django.core.mail import send_mail

from ..conf import MIN_STOCK_THRESHOLD, get_setting

logger = logging.getLogger(__name__)


class DjangoEmailNotifier:
    """
    Sends low-stock notifications through Django's configured email backend.

    Subject and body default to the WAREHOUSE_EMAIL_SUBJECT and
    WAREHOUSE_EMAIL_MESSAGE settings. The sender defaults to
    settings.DEFAULT_FROM_EMAIL (Django's own fallback for from_email=None).

    Delivery errors raised by the email backend propagate to the caller.
    """

    def __init__(
        self,
        subject: str | None = None,
        message: str | None = None,
        from_email: str | None = None,
    ) -> None:
        self.subject = subject
        self.message = message
        self.from_email = from_email

    def send_email(self, to: str) -> None:
        subject = self.subject or get_setting("WAREHOUSE_EMAIL_SUBJECT")
        message = self.message or get_setting("WAREHOUSE_EMAIL_MESSAGE")

        send_mail(
            subject,
            message.format(threshold=MIN_STOCK_THRESHOLD),
            self.from_email,
            [to],
        )
        logger.debug(f"Low stock email sent to {to}")
