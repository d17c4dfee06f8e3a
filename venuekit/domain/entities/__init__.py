"""Domain entities."""
from venuekit.domain.entities.order import (
    Order,
    ExecutionReport,
    OrderSide,
    OrderType,
    OrderStatus,
    TimeInForce,
    ExecutionType,
)
from venuekit.domain.entities.market import (
    OrderBook,
    OrderBookLevel,
    Trade,
    TradeSide,
)
from venuekit.domain.entities.balance import Balance

__all__ = [
    "Order",
    "ExecutionReport",
    "OrderSide",
    "OrderType",
    "OrderStatus",
    "TimeInForce",
    "ExecutionType",
    "OrderBook",
    "OrderBookLevel",
    "Trade",
    "TradeSide",
    "Balance",
]
