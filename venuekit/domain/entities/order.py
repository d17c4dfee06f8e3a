"""
Order and ExecutionReport Domain Entities

Canonical order records produced by venue normalizers.
Every field is optional: None means the venue did not send it,
which is different from a zero value.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class OrderSide(Enum):
    """Order side."""
    UNSPECIFIED = "unspecified"
    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    """Order type."""
    UNSPECIFIED = "unspecified"
    MARKET = "market"
    LIMIT = "limit"
    STOP_LOSS = "stop_loss"
    STOP_LIMIT = "stop_limit"
    TRAILING_STOP = "trailing_stop"
    POST_ONLY = "post_only"
    IOC = "ioc"
    FOK = "fok"
    GTC = "gtc"


class OrderStatus(Enum):
    """Order status."""
    UNSPECIFIED = "unspecified"
    OPEN = "open"
    PENDING = "pending"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


class TimeInForce(Enum):
    """Time in force."""
    UNSPECIFIED = "unspecified"
    GTC = "gtc"
    IOC = "ioc"
    FOK = "fok"
    GTD = "gtd"


class ExecutionType(Enum):
    """Kind of order state change reported by an execution report."""
    UNSPECIFIED = "unspecified"
    NEW = "new"
    TRADE = "trade"
    FILL = "fill"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Order:
    """
    Immutable canonical order.

    Attributes:
        order_id: Order identifier
        venue_order_id: Identifier assigned by the venue
        client_order_id: Identifier assigned by the client
        venue_symbol: Venue's symbol for the instrument (e.g., "BTC-USD")
        side: Buy or sell
        order_type: Market, limit, ...
        status: Current order status
        time_in_force: Time in force
        quantity: Order quantity
        price: Limit price
        stop_price: Stop trigger price
        filled_quantity: Quantity filled so far
        average_fill_price: Average fill price
        total_fees: Fees paid so far
        post_only: Whether the order is maker-only
        rejection_reason: Venue's rejection reason
        created_at: Creation time
        updated_at: Last update time
    """
    order_id: Optional[str] = None
    venue_order_id: Optional[str] = None
    client_order_id: Optional[str] = None
    venue_symbol: Optional[str] = None
    side: Optional[OrderSide] = None
    order_type: Optional[OrderType] = None
    status: Optional[OrderStatus] = None
    time_in_force: Optional[TimeInForce] = None
    quantity: Optional[float] = None
    price: Optional[float] = None
    stop_price: Optional[float] = None
    filled_quantity: Optional[float] = None
    average_fill_price: Optional[float] = None
    total_fees: Optional[float] = None
    post_only: Optional[bool] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class ExecutionReport:
    """
    Immutable execution report (acknowledgement, fill, cancel, reject).

    order_status and side keep the venue's raw strings.
    """
    execution_id: Optional[str] = None
    venue_execution_id: Optional[str] = None
    order_id: Optional[str] = None
    venue_order_id: Optional[str] = None
    client_order_id: Optional[str] = None
    venue_symbol: Optional[str] = None
    execution_type: Optional[ExecutionType] = None
    order_status: Optional[str] = None
    side: Optional[str] = None
    timestamp: Optional[datetime] = None
    price: Optional[float] = None
    quantity: Optional[float] = None
    value: Optional[float] = None
    fee: Optional[float] = None
    trade_id: Optional[str] = None
    is_maker: Optional[bool] = None
    liquidity: Optional[str] = None
