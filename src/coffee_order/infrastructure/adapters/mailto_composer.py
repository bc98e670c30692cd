"""MailComposer that opens the desktop's default mail client via ``mailto:``.

Availability mirrors what ``click.launch`` needs to open a URL: ``open`` on
macOS, ``xdg-open`` on other POSIX systems; Windows always has a handler
for ``mailto:``.
"""

from __future__ import annotations

import shutil
import sys
from urllib.parse import quote

import click

from coffee_order.domain.port.mail_composer import MailComposer


def mailto_uri(recipient: str, subject: str, body: str) -> str:
    """Build a ``mailto:`` URI with RFC 6068 percent-encoding."""
    query = f"subject={quote(subject, safe='')}&body={quote(body, safe='')}"
    return f"mailto:{quote(recipient, safe='@')}?{query}"


class MailtoComposer(MailComposer):

    def __init__(self, recipient: str = "") -> None:
        self._recipient = recipient

    def is_available(self) -> bool:
        if sys.platform.startswith("win"):
            return True
        opener = "open" if sys.platform == "darwin" else "xdg-open"
        return shutil.which(opener) is not None

    def compose(self, subject: str, body: str) -> None:
        click.launch(mailto_uri(self._recipient, subject, body), wait=False)
