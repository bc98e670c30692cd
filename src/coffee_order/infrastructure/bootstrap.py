"""Composition root: wires concrete adapters to the domain ports.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from coffee_order.application.change_quantity import (
    DecrementQuantityHandler,
    IncrementQuantityHandler,
)
from coffee_order.application.send_order import SendOrderHandler
from coffee_order.application.set_topping import SetToppingHandler
from coffee_order.application.submit_order import SubmitOrderHandler
from coffee_order.domain.port.currency_formatter import CurrencyFormatter
from coffee_order.domain.port.message_catalog import MessageCatalog
from coffee_order.domain.service.notification_dispatcher import (
    NotificationDispatcher,
)
from coffee_order.domain.service.order_calculator import OrderCalculator
from coffee_order.infrastructure.adapters.click_notifier import ClickNotifier
from coffee_order.infrastructure.adapters.mailto_composer import MailtoComposer
from coffee_order.infrastructure.config import Settings
from coffee_order.infrastructure.localization.babel_currency_formatter import (
    BabelCurrencyFormatter,
)
from coffee_order.infrastructure.localization.template_message_catalog import (
    TemplateMessageCatalog,
)


def currency_formatter(settings: Settings) -> BabelCurrencyFormatter:
    return BabelCurrencyFormatter(settings.locale, settings.currency)


def message_catalog(settings: Settings) -> TemplateMessageCatalog:
    return TemplateMessageCatalog(settings.locale)


def notifier() -> ClickNotifier:
    return ClickNotifier()


def mail_composer(settings: Settings) -> MailtoComposer:
    return MailtoComposer(recipient=settings.mail_to)


@dataclass
class OrderSession:
    """One order form: a fresh calculator plus the handlers that drive it."""

    calculator: OrderCalculator
    formatter: CurrencyFormatter
    messages: MessageCatalog
    increment: IncrementQuantityHandler
    decrement: DecrementQuantityHandler
    set_topping: SetToppingHandler
    submit: SubmitOrderHandler
    send: SendOrderHandler


def order_session(settings: Settings) -> OrderSession:
    formatter = currency_formatter(settings)
    messages = message_catalog(settings)
    notices = notifier()
    composer = mail_composer(settings)

    calculator = OrderCalculator()
    submit = SubmitOrderHandler(calculator, formatter, messages)
    return OrderSession(
        calculator=calculator,
        formatter=formatter,
        messages=messages,
        increment=IncrementQuantityHandler(calculator),
        decrement=DecrementQuantityHandler(calculator, notices, messages),
        set_topping=SetToppingHandler(calculator, notices, messages, formatter),
        submit=submit,
        send=SendOrderHandler(
            submit, NotificationDispatcher(composer), notices, messages
        ),
    )
