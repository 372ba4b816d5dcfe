import pytest

from src.commons.enums.order_enums import OrderSide
from src.domain.orders.errors import InvalidOrder
from src.domain.orders.validation import validate_order_payload


def valid_payload(**overrides):
    payload = {"symbol": "AAPL", "side": "BUY", "quantity": 15.2, "price": 120.5}
    payload.update(overrides)
    return payload


def test_valid_payload_builds_draft():
    draft = validate_order_payload(valid_payload())

    assert draft.symbol == "AAPL"
    assert draft.side == OrderSide.BUY
    assert draft.quantity == 15.2
    assert draft.price == 120.5


def test_integer_quantity_and_price_are_accepted():
    draft = validate_order_payload(valid_payload(side="SELL", quantity=3, price=10))

    assert draft.side == OrderSide.SELL
    assert draft.quantity == 3.0
    assert isinstance(draft.price, float)


@pytest.mark.parametrize(
    "payload, reason",
    [
        ({"side": "BUY", "quantity": 1, "price": 1}, "symbol"),
        (valid_payload(symbol=""), "symbol"),
        (valid_payload(symbol=42), "symbol"),
        (valid_payload(side="buy"), "side"),
        (valid_payload(side="HOLD"), "side"),
        (valid_payload(side=None), "side"),
        (valid_payload(quantity=0), "quantity"),
        (valid_payload(quantity=-1.5), "quantity"),
        (valid_payload(quantity="10"), "quantity"),
        (valid_payload(quantity=True), "quantity"),
        (valid_payload(quantity=float("nan")), "quantity"),
        (valid_payload(quantity=10**400), "quantity"),
        (valid_payload(price=0), "price"),
        (valid_payload(price=-0.01), "price"),
        (valid_payload(price=float("inf")), "price"),
        (valid_payload(price=-(10**400)), "price"),
    ],
)
def test_invalid_payload_names_the_failing_rule(payload, reason):
    with pytest.raises(InvalidOrder) as exc_info:
        validate_order_payload(payload)

    message = str(exc_info.value)
    assert message.startswith("Invalid order")
    assert f"{reason} must be" in message
    assert "side(BUY/SELL)" in message


def test_first_failing_rule_wins():
    with pytest.raises(InvalidOrder, match="symbol must be"):
        validate_order_payload({"symbol": "", "side": "nope", "quantity": -1, "price": 0})


@pytest.mark.parametrize("payload", [None, [], "AAPL", 12])
def test_non_object_payload_is_rejected(payload):
    with pytest.raises(InvalidOrder, match="JSON object"):
        validate_order_payload(payload)
