"""End-to-end tests for the click CLI.

The mail composer is swapped for an in-memory fake so nothing is
launched on the machine running the tests.
"""

import logging

import pytest
from click.testing import CliRunner

from coffee_order.infrastructure import bootstrap
from coffee_order.infrastructure.cli.main import cli
from tests.fakes import FakeMailComposer


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def composer(monkeypatch) -> FakeMailComposer:
    fake = FakeMailComposer()
    monkeypatch.setattr(bootstrap, "mail_composer", lambda settings: fake)
    return fake


def _run(args: list[str], input: str | None = None):
    return CliRunner().invoke(cli, args, input=input, env={"COFFEE_ORDER_LOCALE": None})


class TestOrderCommand:

    def test_prints_summary(self, composer):
        result = _run(["order", "--name", "Alice", "--quantity", "2", "--whipped-cream"])
        assert result.exit_code == 0, result.output
        assert "Welcome Alice" in result.output
        assert "Add Whipped Cream? Yes" in result.output
        assert "Add Chocolate? No" in result.output
        assert "Quantity: 2" in result.output
        assert "Total: $12.00" in result.output
        assert "Thank you!" in result.output
        assert composer.composed == []

    def test_topping_notice_is_shown(self, composer):
        result = _run(["order", "--quantity", "1", "--chocolate"])
        assert "Chocolate adds $2.00 per cup" in result.output
        assert "Total: $7.00" in result.output

    def test_send_hands_summary_to_mail_client(self, composer):
        result = _run(
            ["order", "--name", "Bob", "--quantity", "3", "--whipped-cream", "--chocolate", "--send"]
        )
        assert result.exit_code == 0, result.output
        assert len(composer.composed) == 1
        subject, body = composer.composed[0]
        assert subject == "Coffee order"
        assert "Total: $24.00" in body

    def test_send_without_mail_client_still_prints_summary(self, composer):
        composer.available = False
        result = _run(["order", "--name", "Bob", "--quantity", "1", "--send"])
        assert result.exit_code == 0, result.output
        assert "No email app found to send your order" in result.output
        assert "Total: $5.00" in result.output

    def test_negative_quantity_rejected(self, composer):
        result = _run(["order", "--quantity", "-1"])
        assert result.exit_code == 2

    def test_german_locale(self, composer):
        result = _run(
            ["--locale", "de_DE", "--currency", "eur", "order", "--name", "Jonas", "--quantity", "2"]
        )
        assert result.exit_code == 0, result.output
        assert "Willkommen Jonas" in result.output
        assert "Gesamt: 10,00" in result.output
        assert "€" in result.output

    def test_locale_from_environment(self, composer):
        result = CliRunner().invoke(
            cli, ["order", "--quantity", "1"], env={"COFFEE_ORDER_LOCALE": "de_DE"}
        )
        assert "Menge: 1" in result.output

    def test_unknown_locale_rejected(self, composer):
        result = _run(["--locale", "xx_XX", "order"])
        assert result.exit_code == 2
        assert "Unknown locale 'xx_XX'" in result.output

    @pytest.mark.parametrize("code", ["XYZ", ""])
    def test_unknown_currency_rejected(self, composer, code):
        result = _run(["--currency", code, "order", "--quantity", "1"])
        assert result.exit_code == 2
        assert "Unknown currency" in result.output
        assert "Total:" not in result.output

    def test_currency_from_environment_is_validated(self, composer):
        result = CliRunner().invoke(
            cli, ["order", "--quantity", "1"], env={"COFFEE_ORDER_CURRENCY": "nope"}
        )
        assert result.exit_code == 2

    def test_currency_with_no_minor_units(self, composer):
        result = _run(["--currency", "jpy", "order", "--quantity", "1"])
        assert result.exit_code == 0, result.output
        assert "Total: ¥5" in result.output


class TestFormCommand:

    def test_starts_with_zero_total(self, composer):
        result = _run(["form"], input="quit\n")
        assert result.exit_code == 0, result.output
        assert "$0.00" in result.output

    def test_full_session(self, composer):
        events = "\n".join(["+", "+", "cream on", "name Alice", "price", "submit", "quit"]) + "\n"
        result = _run(["form"], input=events)
        assert result.exit_code == 0, result.output
        assert "Coffees: 1" in result.output
        assert "Coffees: 2" in result.output
        assert "Whipped Cream adds $1.00 per cup" in result.output
        assert "Welcome Alice" in result.output
        assert "Total: $12.00" in result.output

    def test_decrement_at_zero_keeps_session_alive(self, composer):
        result = _run(["form"], input="-\n+\nsubmit\nquit\n")
        assert result.exit_code == 0, result.output
        assert "You cannot order a negative number of coffees" in result.output
        assert "Coffees: 0" in result.output
        assert "Coffees: 1" in result.output

    def test_send(self, composer):
        result = _run(["form"], input="+\nchocolate on\nname Eve\nsend\nquit\n")
        assert result.exit_code == 0, result.output
        assert len(composer.composed) == 1
        assert composer.composed[0][1].startswith("Welcome Eve")

    def test_unknown_command_reported(self, composer):
        result = _run(["form"], input="latte\nquit\n")
        assert result.exit_code == 0, result.output
        assert "Unknown command 'latte'" in result.output

    def test_bad_switch_reported(self, composer):
        result = _run(["form"], input="cream maybe\nquit\n")
        assert "Expected 'on' or 'off'" in result.output

    def test_end_of_input_closes_form(self, composer):
        result = _run(["form"], input="+\n")
        assert result.exit_code == 0, result.output
        assert "Coffees: 1" in result.output


class TestLogging:

    def test_debug_level_logs_total_cost(self, composer):
        result = _run(["--log-level", "debug", "order", "--quantity", "2", "--whipped-cream"])
        assert result.exit_code == 0, result.output
        assert "The total cost is 12" in result.output

    def test_log_level_is_applied_from_settings(self, composer):
        result = _run(["--log-level", "info", "order"])
        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.INFO

    def test_default_level_is_quiet(self, composer):
        result = _run(["order", "--quantity", "2"])
        assert "The total cost is" not in result.output
