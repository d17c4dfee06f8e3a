"""
MockVenueClient tests
"""
import asyncio

import pytest

from venuekit.application.dto.filters import OrderFilter
from venuekit.application.ports.outbound.venue_client_port import VenueClientPort
from venuekit.domain.entities.balance import Balance
from venuekit.domain.entities.market import OrderBook
from venuekit.domain.entities.order import (
    ExecutionType,
    Order,
    OrderSide,
    OrderStatus,
)
from venuekit.exceptions import TemporaryError
from venuekit.infrastructure.adapters.mock import MockVenueClient


@pytest.fixture
def client():
    return MockVenueClient()


@pytest.fixture
def order():
    return Order(
        order_id="o-1",
        venue_symbol="BTC-USD",
        side=OrderSide.BUY,
        quantity=0.5,
        price=50000.0,
    )


class TestMockDefaults:
    """Default responses"""

    @pytest.mark.unit
    def test_implements_port(self, client):
        assert isinstance(client, VenueClientPort)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_place_order(self, client, order):
        first = await client.place_order(order)
        second = await client.place_order(order)

        assert first.execution_id == "mock-order-1"
        assert second.execution_id == "mock-order-2"
        assert first.execution_type == ExecutionType.NEW
        assert first.order_status == "NEW"
        assert first.price == 50000.0
        assert first.quantity == 0.5
        assert client.place_order_call_count == 2

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cancel_and_get(self, client):
        assert await client.cancel_order("o-1") == OrderStatus.CANCELLED

        fetched = await client.get_order("o-1")
        assert fetched.order_id == "o-1"
        assert fetched.status == OrderStatus.OPEN
        assert fetched.venue_symbol == "BTC-USD"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_queries(self, client):
        assert await client.get_orders() == []
        assert await client.get_balance() == Balance()

        book = await client.get_order_book("ETH-USD")
        assert book.venue_symbol == "ETH-USD"
        assert book.bids == [] and book.asks == []

        await client.health()
        assert client.health_call_count == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_orders_records_default_filter(self, client):
        await client.get_orders()

        assert client.calls("get_orders") == [(OrderFilter(),)]


class TestMockOverrides:
    """on_* overrides"""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_sync_override(self, client):
        client.on_get_balance = lambda: Balance(asset_id="USD", total=100.0)

        balance = await client.get_balance()

        assert balance.asset_id == "USD"
        assert client.get_balance_call_count == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_async_override(self, client):
        async def get_order_book(symbol):
            return OrderBook(venue_symbol=symbol, best_bid=1.0)

        client.on_get_order_book = get_order_book

        book = await client.get_order_book("SOL-USD")

        assert book.best_bid == 1.0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_override_error_propagates(self, client):
        def fail(order_id):
            raise TemporaryError("mock", 503, "down")

        client.on_cancel_order = fail

        with pytest.raises(TemporaryError):
            await client.cancel_order("o-1")
        assert client.cancel_order_call_count == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_subscription_handler_is_called(self, client):
        received = []

        async def subscribe(symbol, handler):
            handler(OrderBook(venue_symbol=symbol))

        client.on_subscribe_order_book = subscribe

        await client.subscribe_order_book("BTC-USD", received.append)

        assert [book.venue_symbol for book in received] == ["BTC-USD"]
        assert client.subscribe_order_book_call_count == 1


class TestMockCallTracking:
    """Call recording"""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_calls_record_arguments(self, client, order):
        await client.place_order(order)
        await client.get_order("o-9")

        assert client.calls("place_order") == [(order,)]
        assert client.calls("get_order") == [("o-9",)]
        assert client.get_order_call_count == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_reset(self, client, order):
        client.on_health = lambda: None
        await client.place_order(order)
        await client.health()

        client.reset()

        assert client.place_order_call_count == 0
        assert client.health_call_count == 0
        assert client.on_health is not None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_concurrent_calls_are_counted(self, client, order):
        await asyncio.gather(*(client.place_order(order) for _ in range(50)))

        ids = {call[0].order_id for call in client.calls("place_order")}
        assert client.place_order_call_count == 50
        assert ids == {"o-1"}
