"""
NormalizerPort - Interface for venue response normalization.

Each venue adapter converts its own JSON payloads into the canonical
domain records defined in venuekit.domain.entities.
"""
from abc import ABC, abstractmethod

from venuekit.domain.entities.order import Order, ExecutionReport
from venuekit.domain.entities.balance import Balance
from venuekit.domain.entities.market import OrderBook, Trade
from venuekit.exceptions import VenueAPIError


class NormalizerPort(ABC):
    """
    Port interface for venue response normalization.

    All operations are pure: normalizing the same bytes twice yields
    equal records.
    """

    @abstractmethod
    def normalize_order(self, raw: bytes) -> Order:
        """
        Convert a venue order payload.

        Raises:
            NormalizationError: If input is empty or malformed
        """
        pass

    @abstractmethod
    def normalize_execution_report(self, raw: bytes) -> ExecutionReport:
        """
        Convert a venue fill/execution payload.

        Raises:
            NormalizationError: If input is empty or malformed
        """
        pass

    @abstractmethod
    def normalize_balance(self, raw: bytes) -> Balance:
        """
        Convert a venue balance payload.

        Raises:
            NormalizationError: If input is empty or malformed
        """
        pass

    @abstractmethod
    def normalize_order_book(self, raw: bytes) -> OrderBook:
        """
        Convert a venue order book payload.

        Raises:
            NormalizationError: If input is empty or malformed
        """
        pass

    @abstractmethod
    def normalize_trade(self, raw: bytes) -> Trade:
        """
        Convert a venue trade payload.

        Raises:
            NormalizationError: If input is empty or malformed
        """
        pass

    @abstractmethod
    def normalize_error(self, status_code: int, body: bytes) -> VenueAPIError:
        """
        Classify a venue error response.

        The error is returned, not raised. Unparseable bodies still
        produce a classified error carrying the raw text.

        Args:
            status_code: HTTP status code
            body: Raw response body (may be empty)

        Returns:
            PermanentError, TemporaryError or RateLimitError
        """
        pass
