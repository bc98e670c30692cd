"""Dictionary-backed implementation of MessageCatalog.

Each language has a table of ``str.format`` templates.  Lookups use the
language part of the locale (``de_AT`` -> ``de``) and fall back to English
for any key a table does not define.
"""

from __future__ import annotations

from coffee_order.domain.port.message_catalog import MessageCatalog

FALLBACK_LANGUAGE = "en"

_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {
        "greeting": "Welcome {name}",
        "topping_question": "Add {topping}? {answer}",
        "topping.whipped_cream": "Whipped Cream",
        "topping.chocolate": "Chocolate",
        "yes": "Yes",
        "no": "No",
        "quantity_line": "Quantity: {quantity}",
        "quantity_display": "Coffees: {quantity}",
        "total_line": "Total: {price}",
        "thank_you": "Thank you!",
        "topping_added": "{topping} adds {price} per cup",
        "negative_cups": "You cannot order a negative number of coffees",
        "no_email_app": "No email app found to send your order",
        "email_subject": "Coffee order",
    },
    "de": {
        "greeting": "Willkommen {name}",
        "topping_question": "{topping} hinzufügen? {answer}",
        "topping.whipped_cream": "Schlagsahne",
        "topping.chocolate": "Schokolade",
        "yes": "Ja",
        "no": "Nein",
        "quantity_line": "Menge: {quantity}",
        "quantity_display": "Kaffees: {quantity}",
        "total_line": "Gesamt: {price}",
        "thank_you": "Vielen Dank!",
        "topping_added": "{topping} kostet {price} pro Tasse",
        "negative_cups": "Sie können keine negative Anzahl Kaffees bestellen",
        "no_email_app": "Keine E-Mail-App zum Senden der Bestellung gefunden",
        "email_subject": "Kaffeebestellung",
    },
}


class TemplateMessageCatalog(MessageCatalog):

    def __init__(self, locale: str = "en_US") -> None:
        self._language = locale.replace("-", "_").split("_", 1)[0].lower()

    @property
    def language(self) -> str:
        return self._language if self._language in _TEMPLATES else FALLBACK_LANGUAGE

    def text(self, key: str, **params: object) -> str:
        """Raises KeyError if no table knows *key*."""
        table = _TEMPLATES.get(self._language, {})
        template = table.get(key)
        if template is None:
            template = _TEMPLATES[FALLBACK_LANGUAGE][key]
        return template.format(**params)
