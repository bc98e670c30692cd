"""Babel-backed implementation of CurrencyFormatter."""

from __future__ import annotations

from babel import Locale
from babel.numbers import format_currency

from coffee_order.domain.model.value_objects import Money
from coffee_order.domain.port.currency_formatter import CurrencyFormatter


class BabelCurrencyFormatter(CurrencyFormatter):

    def __init__(self, locale: str, currency: str) -> None:
        # Fails early with babel.UnknownLocaleError / ValueError
        self._locale = Locale.parse(locale)
        self._currency = currency.upper()

    @property
    def currency(self) -> str:
        return self._currency

    def format(self, money: Money) -> str:
        return format_currency(money.amount, money.currency, locale=self._locale)
