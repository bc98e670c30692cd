"""One-shot CLI command: fill in the whole form from options."""

from __future__ import annotations

import click

from coffee_order.domain.exceptions import DomainException
from coffee_order.domain.model.topping import Topping
from coffee_order.infrastructure.bootstrap import order_session
from coffee_order.infrastructure.config import Settings


@click.command("order")
@click.option("--name", default="", help="Customer name for the greeting.")
@click.option(
    "--quantity",
    default=0,
    type=click.IntRange(min=0),
    show_default=True,
    help="Number of coffees.",
)
@click.option("--whipped-cream", is_flag=True, default=False, help="Add whipped cream.")
@click.option("--chocolate", is_flag=True, default=False, help="Add chocolate.")
@click.option("--send", is_flag=True, default=False, help="Open a mail client with the summary.")
@click.pass_obj
def order(
    settings: Settings,
    name: str,
    quantity: int,
    whipped_cream: bool,
    chocolate: bool,
    send: bool,
) -> None:
    """Price an order and print its summary."""
    try:
        session = order_session(settings)

        # Replay the form events the options stand for.
        for _ in range(quantity):
            session.increment.handle()
        session.set_topping.handle(Topping.WHIPPED_CREAM, whipped_cream)
        session.set_topping.handle(Topping.CHOCOLATE, chocolate)

        if send:
            summary = session.send.handle(name).summary
        else:
            summary = session.submit.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(summary.text)
