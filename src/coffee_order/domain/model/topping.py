"""Toppings that can be added to every cup on the order."""

from __future__ import annotations

from enum import Enum


class Topping(Enum):
    WHIPPED_CREAM = "whipped_cream"
    CHOCOLATE = "chocolate"

    @property
    def unit_price(self) -> int:
        """Extra charge per cup, in whole currency units."""
        return _UNIT_PRICES[self]


_UNIT_PRICES = {
    Topping.WHIPPED_CREAM: 1,
    Topping.CHOCOLATE: 2,
}
