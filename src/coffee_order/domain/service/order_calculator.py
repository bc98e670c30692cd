"""Domain service: Order Calculator.

Owns the session's OrderState, enforces its invariant through the state's
own mutators, and derives the two outputs the form displays: the price and
the order summary.  It never looks at widget state; UI events pass raw
values (a bool, a +1/-1 step) into the mutators.
"""

from __future__ import annotations

from coffee_order.domain.model.order_state import OrderState
from coffee_order.domain.model.order_summary import OrderSummary
from coffee_order.domain.model.topping import Topping
from coffee_order.domain.model.value_objects import Money
from coffee_order.domain.port.currency_formatter import CurrencyFormatter
from coffee_order.domain.port.message_catalog import MessageCatalog

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
BASE_PRICE = 5


class OrderCalculator:

    def __init__(self, state: OrderState | None = None) -> None:
        self._state = state if state is not None else OrderState()

    @property
    def state(self) -> OrderState:
        return self._state

    # --- Mutators -------------------------------------------------------------

    def increment_quantity(self) -> int:
        return self._state.increment()

    def decrement_quantity(self) -> int:
        """Raises InvalidOperationError at zero; the state is left untouched."""
        return self._state.decrement()

    def set_whipped_cream(self, enabled: bool) -> bool:
        return self._state.set_topping(Topping.WHIPPED_CREAM, enabled)

    def set_chocolate(self, enabled: bool) -> bool:
        return self._state.set_topping(Topping.CHOCOLATE, enabled)

    def set_topping(self, topping: Topping, enabled: bool) -> bool:
        """Returns True when the topping was just switched on."""
        return self._state.set_topping(topping, enabled)

    def set_customer_name(self, name: str) -> None:
        # Blank names are accepted as-is.
        self._state.customer_name = name

    # --- Queries --------------------------------------------------------------

    def calculate_price(self) -> int:
        """Total price in whole currency units.

        Toppings are charged per cup, so an empty order is free whatever
        toppings are ticked.
        """
        quantity = self._state.quantity
        price = quantity * BASE_PRICE
        for topping in Topping:
            if self._state.has_topping(topping):
                price += quantity * topping.unit_price
        return price

    def create_order_summary(
        self,
        formatter: CurrencyFormatter,
        messages: MessageCatalog,
    ) -> OrderSummary:
        """Compose the summary for the current state.

        The result depends only on the state, the formatter's locale and the
        catalog, so the same inputs always give the same text.
        """
        state = self._state
        price = Money.of(self.calculate_price(), formatter.currency)
        return OrderSummary(
            greeting=self._greeting(messages),
            whipped_cream_line=self._topping_line(Topping.WHIPPED_CREAM, messages),
            chocolate_line=self._topping_line(Topping.CHOCOLATE, messages),
            quantity_line=messages.text("quantity_line", quantity=state.quantity),
            total_line=messages.text("total_line", price=formatter.format(price)),
            closing_line=messages.text("thank_you"),
        )

    # --- Internal helpers -----------------------------------------------------

    def _greeting(self, messages: MessageCatalog) -> str:
        name = self._state.customer_name
        if name:
            return messages.text("greeting", name=name)
        # Only the separator left dangling by a blank name is dropped.
        return messages.text("greeting", name="").rstrip()

    def _topping_line(self, topping: Topping, messages: MessageCatalog) -> str:
        answer = "yes" if self._state.has_topping(topping) else "no"
        return messages.text(
            "topping_question",
            topping=messages.text(f"topping.{topping.value}"),
            answer=messages.text(answer),
        )
