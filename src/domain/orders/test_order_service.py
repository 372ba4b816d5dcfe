import pytest
from unittest.mock import AsyncMock

from src.commons.enums.order_enums import OrderStatus
from src.domain.orders.errors import InvalidId, InvalidOrder, NotFound, PersistenceError
from src.domain.orders.order_service import OrderService, parse_limit, parse_order_id
from src.infrastructure.database.repositories.order_repository_fake import InMemoryOrderRepository


AAPL_BUY = {"symbol": "AAPL", "side": "BUY", "quantity": 15.2, "price": 120.5}


@pytest.fixture
def gateway():
    return InMemoryOrderRepository()


@pytest.fixture
def service(gateway):
    return OrderService(gateway=gateway)


@pytest.fixture
def mock_gateway():
    """Gateway that records calls and fails on demand."""
    gateway = AsyncMock()
    gateway.cancel = AsyncMock(return_value=None)
    return gateway


# ==================== LIMIT / ID PARSING ====================


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 50),
        ("", 50),
        ("abc", 50),
        ("1.5", 50),
        ("10", 10),
        (" 7 ", 7),
        ("1000", 500),
        ("500", 500),
        ("0", 1),
        ("-5", 1),
        (25, 25),
        ("1_000", 50),
        ("\u0661\u0662", 50),
        ("+-5", 50),
        ("99999999999999999999", 500),
    ],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), ("42", 42), (7, 7), ("+3", 3), ("9223372036854775807", 2**63 - 1)],
)
def test_parse_order_id_accepts_positive_integers(raw, expected):
    assert parse_order_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "0", "-1", 0, -1, "abc", "", "1.0", None, True,
        "1_000",
        "\u0661\u0662",
        "9223372036854775808",
        "99999999999999999999",
        2**63,
    ],
)
def test_parse_order_id_rejects_everything_else(raw):
    with pytest.raises(InvalidId, match="Invalid id"):
        parse_order_id(raw)


# ==================== CREATE ====================


@pytest.mark.asyncio
async def test_create_order_returns_new_order_and_location(service):
    order, location = await service.create_order(AAPL_BUY)

    assert order.id > 0
    assert order.status == OrderStatus.NEW
    assert order.created_at is not None
    assert order.symbol == "AAPL"
    assert location == f"/orders/{order.id}"


@pytest.mark.asyncio
async def test_created_order_is_first_in_listing(service):
    await service.create_order({"symbol": "MSFT", "side": "SELL", "quantity": 1, "price": 300})
    order, _ = await service.create_order(AAPL_BUY)

    orders = await service.list_orders("1")

    assert [o.id for o in orders] == [order.id]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"side": "BUY", "quantity": 1, "price": 1},
        {"symbol": "", "side": "BUY", "quantity": 1, "price": 1},
        {"symbol": "AAPL", "side": "HOLD", "quantity": 1, "price": 1},
        {"symbol": "AAPL", "side": "BUY", "quantity": 0, "price": 1},
        {"symbol": "AAPL", "side": "BUY", "quantity": 1, "price": -2},
    ],
)
async def test_invalid_order_never_reaches_the_store(mock_gateway, payload):
    service = OrderService(gateway=mock_gateway)

    with pytest.raises(InvalidOrder):
        await service.create_order(payload)

    mock_gateway.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_store_failure_propagates(mock_gateway):
    mock_gateway.create.side_effect = PersistenceError("Failed to create order", detail="connection refused")
    service = OrderService(gateway=mock_gateway)

    with pytest.raises(PersistenceError) as exc_info:
        await service.create_order(AAPL_BUY)

    assert exc_info.value.detail == "connection refused"


# ==================== LIST ====================


@pytest.mark.asyncio
async def test_list_orders_newest_first(service):
    ids = [(await service.create_order(AAPL_BUY))[0].id for _ in range(3)]

    orders = await service.list_orders()

    assert [o.id for o in orders] == sorted(ids, reverse=True)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw, expected",
    [(None, 50), ("1000", 500), ("0", 1), ("-5", 1), ("abc", 50)],
)
async def test_list_orders_clamps_limit_before_calling_store(mock_gateway, raw, expected):
    mock_gateway.list.return_value = []
    service = OrderService(gateway=mock_gateway)

    await service.list_orders(raw)

    mock_gateway.list.assert_awaited_once_with(expected)


@pytest.mark.asyncio
async def test_list_orders_default_returns_at_most_fifty(service):
    for _ in range(60):
        await service.create_order(AAPL_BUY)

    assert len(await service.list_orders()) == 50


# ==================== GET ====================


@pytest.mark.asyncio
async def test_get_order(service):
    created, _ = await service.create_order(AAPL_BUY)

    assert await service.get_order(str(created.id)) == created


@pytest.mark.asyncio
async def test_get_unknown_order_is_not_found(service):
    with pytest.raises(NotFound):
        await service.get_order("999")


# ==================== CANCEL ====================


@pytest.mark.asyncio
async def test_cancel_deletes_order(service):
    created, _ = await service.create_order(AAPL_BUY)

    result = await service.cancel_order(str(created.id))

    assert result == {"status": "deleted", "id": created.id}
    assert created.id not in [o.id for o in await service.list_orders()]


@pytest.mark.asyncio
async def test_cancel_twice_is_not_found_the_second_time(service):
    created, _ = await service.create_order(AAPL_BUY)

    await service.cancel_order(created.id)

    with pytest.raises(NotFound, match="Order not found"):
        await service.cancel_order(created.id)


@pytest.mark.asyncio
async def test_cancel_never_created_is_not_found(service):
    with pytest.raises(NotFound):
        await service.cancel_order("12345")


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["0", "-1", "abc"])
async def test_cancel_invalid_id_does_not_contact_store(mock_gateway, raw):
    service = OrderService(gateway=mock_gateway)

    with pytest.raises(InvalidId):
        await service.cancel_order(raw)

    mock_gateway.cancel.assert_not_called()


@pytest.mark.asyncio
async def test_ids_are_not_reused_after_cancel(service):
    first, _ = await service.create_order(AAPL_BUY)
    await service.cancel_order(first.id)

    second, _ = await service.create_order(AAPL_BUY)

    assert second.id > first.id
