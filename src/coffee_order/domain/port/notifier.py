"""Abstract notifier for transient, user-visible notices.

Injected into the handlers that need it so nothing reaches for a global
UI handle.  Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a short-lived informational notice."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show a short-lived error notice."""
