"""Abstract mail-composition capability provided by the environment."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MailComposer(ABC):

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if something can compose a message right now."""

    @abstractmethod
    def compose(self, subject: str, body: str) -> None:
        """Open a composer pre-filled with *subject* and *body*.

        Returns as soon as the composer has been handed the message; whether
        the mail is actually sent is out of our hands.
        """
