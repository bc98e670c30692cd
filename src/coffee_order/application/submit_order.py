"""Application service: Submit Order use case.

Takes the customer name from the form, then asks the calculator for the
price and a fresh summary.  Nothing is stored; submitting again simply
recomputes from the current state.
"""

from __future__ import annotations

import logging

from coffee_order.application.dto import OrderSummaryDTO
from coffee_order.domain.model.value_objects import Money
from coffee_order.domain.port.currency_formatter import CurrencyFormatter
from coffee_order.domain.port.message_catalog import MessageCatalog
from coffee_order.domain.service.order_calculator import OrderCalculator

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(
        self,
        calculator: OrderCalculator,
        formatter: CurrencyFormatter,
        messages: MessageCatalog,
    ) -> None:
        self._calculator = calculator
        self._formatter = formatter
        self._messages = messages

    def handle(self, customer_name: str | None = None) -> OrderSummaryDTO:
        if customer_name is not None:
            self._calculator.set_customer_name(customer_name)

        price = self._calculator.calculate_price()
        logger.debug("The total cost is %d", price)

        summary = self._calculator.create_order_summary(self._formatter, self._messages)
        state = self._calculator.state
        return OrderSummaryDTO(
            customer_name=state.customer_name,
            quantity=state.quantity,
            whipped_cream=state.has_whipped_cream,
            chocolate=state.has_chocolate,
            price=price,
            formatted_price=self._formatter.format(Money.of(price, self._formatter.currency)),
            lines=summary.lines,
        )
