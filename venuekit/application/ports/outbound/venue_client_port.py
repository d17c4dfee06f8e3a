"""
VenueClientPort - Interface for trading venue operations.

This port defines the contract every venue client fulfils: order
management, balances, market data, streaming subscriptions and
health checks. Methods are async, like the rest of the I/O surface.
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from venuekit.application.dto.filters import OrderFilter
from venuekit.domain.entities.order import Order, ExecutionReport, OrderStatus
from venuekit.domain.entities.balance import Balance
from venuekit.domain.entities.market import OrderBook, Trade

# A handler raises to stop the subscription.
OrderBookHandler = Callable[[OrderBook], None]
TradeHandler = Callable[[Trade], None]


class VenueClientPort(ABC):
    """Port interface for a single trading venue."""

    # --- Order Operations ---

    @abstractmethod
    async def place_order(self, order: Order) -> ExecutionReport:
        """
        Submit an order.

        Args:
            order: Order to submit

        Returns:
            ExecutionReport acknowledging the order

        Raises:
            VenueAPIError: If the venue rejects the request
        """
        pass

    @abstractmethod
    async def cancel_order(self, order_id: str) -> OrderStatus:
        """
        Cancel an open order.

        Returns:
            Order status after cancellation
        """
        pass

    @abstractmethod
    async def get_order(self, order_id: str) -> Order:
        """Get a single order by ID."""
        pass

    @abstractmethod
    async def get_orders(self, order_filter: Optional[OrderFilter] = None) -> List[Order]:
        """
        List orders matching a filter.

        Raises:
            FilterValidationError: If the filter is invalid
        """
        pass

    # --- Account Operations ---

    @abstractmethod
    async def get_balance(self) -> Balance:
        """Get account balance."""
        pass

    # --- Market Data Operations ---

    @abstractmethod
    async def get_order_book(self, symbol: str) -> OrderBook:
        """Get current order book snapshot for a symbol."""
        pass

    @abstractmethod
    async def subscribe_order_book(self, symbol: str, handler: OrderBookHandler) -> None:
        """Stream order book updates to handler."""
        pass

    @abstractmethod
    async def subscribe_trades(self, symbol: str, handler: TradeHandler) -> None:
        """Stream public trades to handler."""
        pass

    # --- Health ---

    @abstractmethod
    async def health(self) -> None:
        """
        Check venue connectivity.

        Raises:
            VenueAPIError: If the venue is unhealthy
        """
        pass
