"""Abstract lookup of localized user-facing text."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MessageCatalog(ABC):

    @abstractmethod
    def text(self, key: str, **params: object) -> str:
        """Return the template for *key* with *params* substituted."""
