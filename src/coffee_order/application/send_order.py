"""Application service: Send Order use case.

Submits the order first so the summary is always computed and shown,
then hands it to the notification dispatcher.  A missing mail client is
reported to the user and otherwise ignored; the summary stands.
"""

from __future__ import annotations

from coffee_order.application.dto import SendOrderResult
from coffee_order.application.submit_order import SubmitOrderHandler
from coffee_order.domain.exceptions import NoHandlerAvailableError
from coffee_order.domain.port.message_catalog import MessageCatalog
from coffee_order.domain.port.notifier import Notifier
from coffee_order.domain.service.notification_dispatcher import (
    NotificationDispatcher,
)


class SendOrderHandler:

    def __init__(
        self,
        submit_handler: SubmitOrderHandler,
        dispatcher: NotificationDispatcher,
        notifier: Notifier,
        messages: MessageCatalog,
    ) -> None:
        self._submit_handler = submit_handler
        self._dispatcher = dispatcher
        self._notifier = notifier
        self._messages = messages

    def handle(self, customer_name: str | None = None) -> SendOrderResult:
        summary = self._submit_handler.handle(customer_name)

        try:
            self._dispatcher.dispatch(self._messages.text("email_subject"), summary.text)
        except NoHandlerAvailableError:
            self._notifier.error(self._messages.text("no_email_app"))
            return SendOrderResult(summary=summary, dispatched=False)

        return SendOrderResult(summary=summary, dispatched=True)
