"""OrderSummary: the human-readable description of an order.

Derived on demand from an OrderState and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderSummary:
    greeting: str
    whipped_cream_line: str
    chocolate_line: str
    quantity_line: str
    total_line: str
    closing_line: str

    @property
    def lines(self) -> tuple[str, ...]:
        """The summary lines in display order."""
        return (
            self.greeting,
            self.whipped_cream_line,
            self.chocolate_line,
            self.quantity_line,
            self.total_line,
            self.closing_line,
        )

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return self.text
