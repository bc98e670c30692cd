"""Domain service: Notification Dispatcher.

Hands a finished order summary to whatever can compose mail in the user's
environment.  Delivery is fire-and-forget: the dispatcher never learns
whether the message was actually sent.
"""

from __future__ import annotations

import logging

from coffee_order.domain.exceptions import NoHandlerAvailableError
from coffee_order.domain.port.mail_composer import MailComposer

logger = logging.getLogger(__name__)


class NotificationDispatcher:

    def __init__(self, mail_composer: MailComposer) -> None:
        self._mail_composer = mail_composer

    def dispatch(self, subject: str, body: str) -> None:
        """Open a composer with *subject* and *body*.

        Raises NoHandlerAvailableError when nothing can compose mail.  There
        is no retry: a missing mail client will not appear by asking again.
        """
        if not self._mail_composer.is_available():
            logger.warning("No mail handler available for %r", subject)
            raise NoHandlerAvailableError("No application available to send email")

        self._mail_composer.compose(subject, body)
        logger.info("Handed order %r to the mail composer", subject)
