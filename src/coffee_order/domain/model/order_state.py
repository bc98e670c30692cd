"""OrderState: the in-memory record behind the order form.

There is exactly one OrderState per session.  It is created empty and only
ever changed through the mutators below; nothing else writes to it.
"""

from __future__ import annotations

from dataclasses import dataclass

from coffee_order.domain.exceptions import InvalidOperationError
from coffee_order.domain.model.topping import Topping


@dataclass
class OrderState:
    """Quantity, topping selections and customer name for the current form.

    Invariants:
    - ``quantity`` is never negative
    """

    quantity: int = 0
    has_whipped_cream: bool = False
    has_chocolate: bool = False
    customer_name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int):
            raise InvalidOperationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise InvalidOperationError("Cannot order a negative number of coffees")

    # --- Mutators -------------------------------------------------------------

    def increment(self) -> int:
        self.quantity += 1
        return self.quantity

    def decrement(self) -> int:
        """Remove one cup.

        Raises InvalidOperationError at zero and leaves the state unchanged.
        """
        if self.quantity == 0:
            raise InvalidOperationError("Cannot order a negative number of coffees")
        self.quantity -= 1
        return self.quantity

    def set_topping(self, topping: Topping, enabled: bool) -> bool:
        """Set a topping flag.

        Returns True only when the topping went from disabled to enabled.
        """
        was_enabled = self.has_topping(topping)
        if topping is Topping.WHIPPED_CREAM:
            self.has_whipped_cream = enabled
        else:
            self.has_chocolate = enabled
        return enabled and not was_enabled

    def has_topping(self, topping: Topping) -> bool:
        if topping is Topping.WHIPPED_CREAM:
            return self.has_whipped_cream
        return self.has_chocolate
