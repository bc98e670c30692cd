"""Application services: Increment / Decrement Quantity use cases."""

from __future__ import annotations

import logging

from coffee_order.domain.exceptions import InvalidOperationError
from coffee_order.domain.port.message_catalog import MessageCatalog
from coffee_order.domain.port.notifier import Notifier
from coffee_order.domain.service.order_calculator import OrderCalculator

logger = logging.getLogger(__name__)


class IncrementQuantityHandler:

    def __init__(self, calculator: OrderCalculator) -> None:
        self._calculator = calculator

    def handle(self) -> int:
        """Add one cup and return the new quantity for display."""
        return self._calculator.increment_quantity()


class DecrementQuantityHandler:

    def __init__(
        self,
        calculator: OrderCalculator,
        notifier: Notifier,
        messages: MessageCatalog,
    ) -> None:
        self._calculator = calculator
        self._notifier = notifier
        self._messages = messages

    def handle(self) -> int:
        """Remove one cup and return the quantity to display.

        Going below zero is rejected by the domain.  That is recovered here:
        the user gets a notice and the unchanged quantity comes back.
        """
        try:
            return self._calculator.decrement_quantity()
        except InvalidOperationError as exc:
            logger.warning("Decrement rejected: %s", exc)
            self._notifier.error(self._messages.text("negative_cups"))
            return self._calculator.state.quantity
