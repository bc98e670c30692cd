import click
from babel import Locale, UnknownLocaleError
from babel.numbers import UnknownCurrencyError, validate_currency

from coffee_order.infrastructure.cli.form_commands import form
from coffee_order.infrastructure.cli.order_commands import order
from coffee_order.infrastructure.config import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
    Settings,
    env_var,
)
from coffee_order.infrastructure.logging_config import setup_logging


def _validate_locale(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        Locale.parse(value)
    except (UnknownLocaleError, ValueError) as exc:
        raise click.BadParameter(f"Unknown locale '{value}'") from exc
    return value


def _validate_currency(ctx: click.Context, param: click.Parameter, value: str) -> str:
    code = value.strip().upper()
    try:
        validate_currency(code)
    except UnknownCurrencyError as exc:
        raise click.BadParameter(f"Unknown currency '{value}'") from exc
    return code


@click.group()
@click.option(
    "--locale",
    default=DEFAULT_LOCALE,
    show_default=True,
    envvar=env_var("locale"),
    callback=_validate_locale,
    help="Locale for labels and currency formatting.",
)
@click.option(
    "--currency",
    default=DEFAULT_CURRENCY,
    show_default=True,
    envvar=env_var("currency"),
    callback=_validate_currency,
    help="ISO 4217 currency code prices are shown in.",
)
@click.option(
    "--mail-to",
    default="",
    envvar=env_var("mail_to"),
    help="Recipient pre-filled when sending an order.",
)
@click.option(
    "--log-level",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    envvar=env_var("log_level"),
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (logs go to stderr).",
)
@click.pass_context
def cli(
    ctx: click.Context, locale: str, currency: str, mail_to: str, log_level: str
) -> None:
    """Coffee order form"""
    ctx.obj = Settings(
        locale=locale,
        currency=currency,
        mail_to=mail_to,
        log_level=log_level.upper(),
    )
    setup_logging(ctx.obj.log_level)


# Register subcommands
cli.add_command(order)
cli.add_command(form)
