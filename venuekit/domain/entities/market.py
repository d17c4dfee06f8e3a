"""
Market data Domain Entities

Order books, order book levels and public trades.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class TradeSide(Enum):
    """Trade direction from the taker's perspective."""
    UNSPECIFIED = "unspecified"
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class OrderBookLevel:
    """Single aggregated price level."""
    price: Optional[float] = None
    quantity: Optional[float] = None
    order_count: Optional[int] = None


@dataclass(frozen=True)
class OrderBook:
    """
    Immutable order book snapshot.

    Bids and asks keep the order the venue sent them in.
    best_bid/best_ask are the first entries on each side;
    spread and mid_price are set only when both sides are non-empty.
    """
    venue_id: Optional[str] = None
    venue_symbol: Optional[str] = None
    timestamp: Optional[datetime] = None
    bids: List[OrderBookLevel] = field(default_factory=list)
    asks: List[OrderBookLevel] = field(default_factory=list)
    best_bid: Optional[float] = None
    best_ask: Optional[float] = None
    spread: Optional[float] = None
    mid_price: Optional[float] = None
    sequence: Optional[int] = None


@dataclass(frozen=True)
class Trade:
    """Immutable public trade."""
    trade_id: Optional[str] = None
    venue_id: Optional[str] = None
    venue_symbol: Optional[str] = None
    timestamp: Optional[datetime] = None
    price: Optional[float] = None
    quantity: Optional[float] = None
    side: Optional[TradeSide] = None
    value: Optional[float] = None
