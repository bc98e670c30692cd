"""Runtime settings for the order form.

Settings are assembled by the CLI from command-line options, each of which
falls back to a ``COFFEE_ORDER_*`` environment variable.
"""

from __future__ import annotations

from dataclasses import dataclass

ENV_PREFIX = "COFFEE_ORDER"

DEFAULT_LOCALE = "en_US"
DEFAULT_CURRENCY = "USD"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    locale: str = DEFAULT_LOCALE
    currency: str = DEFAULT_CURRENCY
    mail_to: str = ""  # blank lets the mail client ask for a recipient
    log_level: str = DEFAULT_LOG_LEVEL


def env_var(name: str) -> str:
    """Environment variable backing the setting *name*."""
    return f"{ENV_PREFIX}_{name.upper()}"
