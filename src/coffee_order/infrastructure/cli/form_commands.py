"""Interactive CLI command: an order form driven by typed events.

Each line typed is one UI event.  Events carry raw values into the
handlers, which own all the rules; this module only parses and renders.
"""

from __future__ import annotations

import click

from coffee_order.domain.exceptions import DomainException
from coffee_order.domain.model.topping import Topping
from coffee_order.domain.model.value_objects import Money
from coffee_order.infrastructure.bootstrap import OrderSession, order_session
from coffee_order.infrastructure.config import Settings

HELP_TEXT = """\
Commands:
  +                      add a coffee
  -                      remove a coffee
  cream on|off           whipped cream topping
  chocolate on|off       chocolate topping
  name <text>            customer name
  price                  show the current total
  submit                 show the order summary
  send                   show the summary and open a mail client
  help                   show this help
  quit                   leave the form"""

_TOPPING_WORDS = {
    "cream": Topping.WHIPPED_CREAM,
    "whipped-cream": Topping.WHIPPED_CREAM,
    "chocolate": Topping.CHOCOLATE,
}

_SWITCH_WORDS = {"on": True, "yes": True, "off": False, "no": False}


def _show_price(session: OrderSession) -> None:
    price = Money.of(session.calculator.calculate_price(), session.formatter.currency)
    click.echo(session.formatter.format(price))


def _show_quantity(session: OrderSession, quantity: int) -> None:
    click.echo(session.messages.text("quantity_display", quantity=quantity))


def _handle_event(session: OrderSession, line: str) -> bool:
    """Apply one typed event.  Returns False when the user asked to leave."""
    command, _, argument = line.strip().partition(" ")
    command = command.lower()
    argument = argument.strip()

    if command in ("quit", "exit", "q"):
        return False
    if command == "":
        return True
    if command == "help":
        click.echo(HELP_TEXT)
    elif command == "+":
        _show_quantity(session, session.increment.handle())
    elif command == "-":
        _show_quantity(session, session.decrement.handle())
    elif command in _TOPPING_WORDS:
        enabled = _SWITCH_WORDS.get(argument.lower())
        if enabled is None:
            raise click.UsageError(f"Expected 'on' or 'off' after '{command}'")
        session.set_topping.handle(_TOPPING_WORDS[command], enabled)
    elif command == "name":
        session.calculator.set_customer_name(argument)
    elif command == "price":
        _show_price(session)
    elif command == "submit":
        click.echo(session.submit.handle().text)
    elif command == "send":
        click.echo(session.send.handle().summary.text)
    else:
        raise click.UsageError(f"Unknown command '{command}' (type 'help')")
    return True


@click.command("form")
@click.pass_obj
def form(settings: Settings) -> None:
    """Fill in an order interactively."""
    try:
        session = order_session(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    # An empty order is shown priced at zero in the local currency.
    _show_price(session)

    while True:
        try:
            line = click.prompt(
                "order", default="", show_default=False, prompt_suffix="> "
            )
        except click.Abort:
            # End of input closes the form like 'quit'.
            click.echo()
            break

        try:
            if not _handle_event(session, line):
                break
        except click.UsageError as exc:
            click.secho(exc.format_message(), fg="red", err=True)
        except DomainException as exc:
            click.secho(str(exc), fg="red", err=True)
