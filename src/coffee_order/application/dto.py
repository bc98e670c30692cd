"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: a submitted order as displayed to the user."""

    customer_name: str
    quantity: int
    whipped_cream: bool
    chocolate: bool
    price: int
    formatted_price: str  # e.g. "$12.00"
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class SendOrderResult:
    """Output: the summary that was shown, and whether it reached a mail client."""

    summary: OrderSummaryDTO
    dispatched: bool
