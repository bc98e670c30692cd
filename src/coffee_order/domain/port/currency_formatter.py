"""Abstract locale-aware currency formatting."""

from __future__ import annotations

from abc import ABC, abstractmethod

from coffee_order.domain.model.value_objects import Money


class CurrencyFormatter(ABC):

    @property
    @abstractmethod
    def currency(self) -> str:
        """ISO 4217 code that amounts are expressed in."""

    @abstractmethod
    def format(self, money: Money) -> str:
        """Return *money* rendered in the user's local currency convention."""
