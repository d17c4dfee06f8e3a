"""
MockVenueClient - deterministic VenueClientPort for tests.

Every call is recorded. Each operation can be overridden by assigning
an on_* callable (sync or async) with the same arguments.
"""
import inspect
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from venuekit.application.dto.filters import OrderFilter
from venuekit.application.ports.outbound.venue_client_port import (
    VenueClientPort,
    OrderBookHandler,
    TradeHandler,
)
from venuekit.domain.entities.order import (
    Order,
    ExecutionReport,
    ExecutionType,
    OrderStatus,
)
from venuekit.domain.entities.balance import Balance
from venuekit.domain.entities.market import OrderBook

DEFAULT_SYMBOL = "BTC-USD"

OPERATIONS = (
    "place_order",
    "cancel_order",
    "get_order",
    "get_orders",
    "get_balance",
    "get_order_book",
    "subscribe_order_book",
    "subscribe_trades",
    "health",
)


class MockVenueClient(VenueClientPort):
    """Mock venue client for testing."""

    def __init__(self):
        self._lock = threading.Lock()
        self._calls: Dict[str, List[Tuple[Any, ...]]] = {name: [] for name in OPERATIONS}

        self.on_place_order: Optional[Callable[..., Any]] = None
        self.on_cancel_order: Optional[Callable[..., Any]] = None
        self.on_get_order: Optional[Callable[..., Any]] = None
        self.on_get_orders: Optional[Callable[..., Any]] = None
        self.on_get_balance: Optional[Callable[..., Any]] = None
        self.on_get_order_book: Optional[Callable[..., Any]] = None
        self.on_subscribe_order_book: Optional[Callable[..., Any]] = None
        self.on_subscribe_trades: Optional[Callable[..., Any]] = None
        self.on_health: Optional[Callable[..., Any]] = None

    # --- Call recording ---

    def _record(self, name: str, *args: Any) -> Tuple[Optional[Callable[..., Any]], int]:
        with self._lock:
            self._calls[name].append(args)
            return getattr(self, f"on_{name}"), len(self._calls[name])

    @staticmethod
    async def _invoke(handler: Callable[..., Any], *args: Any) -> Any:
        result = handler(*args)
        if inspect.isawaitable(result):
            result = await result
        return result

    def calls(self, name: str) -> List[Tuple[Any, ...]]:
        """Recorded argument tuples for an operation."""
        with self._lock:
            return list(self._calls[name])

    def call_count(self, name: str) -> int:
        with self._lock:
            return len(self._calls[name])

    def reset(self) -> None:
        """Forget all recorded calls (overrides are kept)."""
        with self._lock:
            for recorded in self._calls.values():
                recorded.clear()

    @property
    def place_order_call_count(self) -> int:
        return self.call_count("place_order")

    @property
    def cancel_order_call_count(self) -> int:
        return self.call_count("cancel_order")

    @property
    def get_order_call_count(self) -> int:
        return self.call_count("get_order")

    @property
    def get_orders_call_count(self) -> int:
        return self.call_count("get_orders")

    @property
    def get_balance_call_count(self) -> int:
        return self.call_count("get_balance")

    @property
    def get_order_book_call_count(self) -> int:
        return self.call_count("get_order_book")

    @property
    def subscribe_order_book_call_count(self) -> int:
        return self.call_count("subscribe_order_book")

    @property
    def subscribe_trades_call_count(self) -> int:
        return self.call_count("subscribe_trades")

    @property
    def health_call_count(self) -> int:
        return self.call_count("health")

    # --- VenueClientPort ---

    async def place_order(self, order: Order) -> ExecutionReport:
        handler, n = self._record("place_order", order)
        if handler is not None:
            return await self._invoke(handler, order)
        return ExecutionReport(
            execution_id=f"mock-order-{n}",
            order_id=order.order_id,
            venue_symbol=order.venue_symbol,
            execution_type=ExecutionType.NEW,
            order_status="NEW",
            price=order.price,
            quantity=order.quantity,
        )

    async def cancel_order(self, order_id: str) -> OrderStatus:
        handler, _ = self._record("cancel_order", order_id)
        if handler is not None:
            return await self._invoke(handler, order_id)
        return OrderStatus.CANCELLED

    async def get_order(self, order_id: str) -> Order:
        handler, _ = self._record("get_order", order_id)
        if handler is not None:
            return await self._invoke(handler, order_id)
        return Order(
            order_id=order_id,
            status=OrderStatus.OPEN,
            venue_symbol=DEFAULT_SYMBOL,
        )

    async def get_orders(self, order_filter: Optional[OrderFilter] = None) -> List[Order]:
        order_filter = order_filter or OrderFilter()
        handler, _ = self._record("get_orders", order_filter)
        if handler is not None:
            return await self._invoke(handler, order_filter)
        return []

    async def get_balance(self) -> Balance:
        handler, _ = self._record("get_balance")
        if handler is not None:
            return await self._invoke(handler)
        return Balance()

    async def get_order_book(self, symbol: str) -> OrderBook:
        handler, _ = self._record("get_order_book", symbol)
        if handler is not None:
            return await self._invoke(handler, symbol)
        return OrderBook(venue_symbol=symbol, bids=[], asks=[])

    async def subscribe_order_book(self, symbol: str, handler: OrderBookHandler) -> None:
        override, _ = self._record("subscribe_order_book", symbol, handler)
        if override is not None:
            await self._invoke(override, symbol, handler)

    async def subscribe_trades(self, symbol: str, handler: TradeHandler) -> None:
        override, _ = self._record("subscribe_trades", symbol, handler)
        if override is not None:
            await self._invoke(override, symbol, handler)

    async def health(self) -> None:
        handler, _ = self._record("health")
        if handler is not None:
            await self._invoke(handler)
