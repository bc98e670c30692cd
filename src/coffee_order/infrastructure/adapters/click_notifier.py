"""Terminal implementation of Notifier: one styled line on stderr per notice."""

from __future__ import annotations

import click

from coffee_order.domain.port.notifier import Notifier


class ClickNotifier(Notifier):

    def notify(self, message: str) -> None:
        click.secho(message, fg="cyan", err=True)

    def error(self, message: str) -> None:
        click.secho(message, fg="red", err=True)
