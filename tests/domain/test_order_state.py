"""Unit tests for OrderState and its non-negative quantity invariant."""

import pytest

from coffee_order.domain.exceptions import InvalidOperationError
from coffee_order.domain.model.order_state import OrderState
from coffee_order.domain.model.topping import Topping


class TestOrderStateDefaults:

    def test_new_state_is_empty(self):
        state = OrderState()
        assert state.quantity == 0
        assert state.has_whipped_cream is False
        assert state.has_chocolate is False
        assert state.customer_name == ""

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidOperationError, match="negative number"):
            OrderState(quantity=-1)

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(InvalidOperationError, match="must be an integer"):
            OrderState(quantity="2")  # type: ignore[arg-type]


class TestQuantity:

    def test_increment_returns_new_quantity(self):
        state = OrderState()
        assert state.increment() == 1
        assert state.increment() == 2

    def test_decrement_returns_new_quantity(self):
        state = OrderState(quantity=2)
        assert state.decrement() == 1

    def test_decrement_at_zero_rejected_and_state_unchanged(self):
        state = OrderState()
        with pytest.raises(InvalidOperationError, match="negative number of coffees"):
            state.decrement()
        assert state.quantity == 0

    def test_decrement_to_zero_then_rejected(self):
        state = OrderState(quantity=1)
        state.decrement()
        with pytest.raises(InvalidOperationError):
            state.decrement()
        assert state.quantity == 0

    @pytest.mark.parametrize("start", [0, 1, 7, 100])
    def test_increment_then_decrement_restores_state(self, start):
        state = OrderState(quantity=start, has_chocolate=True, customer_name="Ada")
        before = OrderState(quantity=start, has_chocolate=True, customer_name="Ada")
        state.increment()
        state.decrement()
        assert state == before


class TestToppings:

    def test_enabling_reports_transition(self):
        state = OrderState()
        assert state.set_topping(Topping.WHIPPED_CREAM, True) is True
        assert state.has_whipped_cream is True
        assert state.has_chocolate is False

    def test_enabling_twice_reports_transition_once(self):
        state = OrderState()
        state.set_topping(Topping.CHOCOLATE, True)
        assert state.set_topping(Topping.CHOCOLATE, True) is False
        assert state.has_chocolate is True

    def test_disabling_is_not_a_transition(self):
        state = OrderState(has_chocolate=True)
        assert state.set_topping(Topping.CHOCOLATE, False) is False
        assert state.has_chocolate is False

    def test_re_enabling_after_disable_is_a_transition(self):
        state = OrderState()
        state.set_topping(Topping.WHIPPED_CREAM, True)
        state.set_topping(Topping.WHIPPED_CREAM, False)
        assert state.set_topping(Topping.WHIPPED_CREAM, True) is True

    def test_has_topping(self):
        state = OrderState(has_whipped_cream=True)
        assert state.has_topping(Topping.WHIPPED_CREAM) is True
        assert state.has_topping(Topping.CHOCOLATE) is False
