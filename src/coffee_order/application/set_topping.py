"""Application service: Set Topping use case."""

from __future__ import annotations

from coffee_order.domain.model.topping import Topping
from coffee_order.domain.model.value_objects import Money
from coffee_order.domain.port.currency_formatter import CurrencyFormatter
from coffee_order.domain.port.message_catalog import MessageCatalog
from coffee_order.domain.port.notifier import Notifier
from coffee_order.domain.service.order_calculator import OrderCalculator


class SetToppingHandler:

    def __init__(
        self,
        calculator: OrderCalculator,
        notifier: Notifier,
        messages: MessageCatalog,
        formatter: CurrencyFormatter,
    ) -> None:
        self._calculator = calculator
        self._notifier = notifier
        self._messages = messages
        self._formatter = formatter

    def handle(self, topping: Topping, enabled: bool) -> bool:
        """Tick or untick a topping.

        Each switch from off to on tells the user, once, what the topping
        costs per cup.  Returns the topping's new state.
        """
        if self._calculator.set_topping(topping, enabled):
            unit_price = Money.of(topping.unit_price, self._formatter.currency)
            self._notifier.notify(
                self._messages.text(
                    "topping_added",
                    topping=self._messages.text(f"topping.{topping.value}"),
                    price=self._formatter.format(unit_price),
                )
            )
        return enabled
