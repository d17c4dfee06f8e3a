"""
PrimeNormalizer - Coinbase Prime implementation of NormalizerPort.

Prime uses exact uppercase enum spellings, so mapping is a plain
lookup rather than the shared synonym tables.
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError

from venuekit.application.ports.outbound.normalizer_port import NormalizerPort
from venuekit.application.ports.outbound.time_provider_port import (
    TimeProviderPort,
    SystemTimeAdapter,
)
from venuekit.domain.entities.order import (
    Order,
    ExecutionReport,
    ExecutionType,
    OrderSide,
    OrderStatus,
    OrderType,
    TimeInForce,
)
from venuekit.domain.entities.balance import Balance
from venuekit.domain.entities.market import OrderBook, Trade, TradeSide
from venuekit.exceptions import NormalizationError, VenueAPIError
from venuekit.infrastructure.adapters.normalizer.base import decode
from venuekit.infrastructure.adapters.normalizer.errors import (
    ErrorCodes,
    classify_error,
    has_client_error_keyword,
)
from venuekit.infrastructure.adapters.normalizer.orderbook import (
    compute_top_of_book,
    parse_levels,
)
from venuekit.infrastructure.adapters.normalizer.parsing import (
    parse_decimal_or_zero,
    parse_timestamp,
)
from venuekit.infrastructure.adapters.normalizer.prime.models import (
    PrimeBalance,
    PrimeErrorBody,
    PrimeFill,
    PrimeOrder,
    PrimeOrderBook,
    PrimeTrade,
    PrimeWalletBalance,
)

logger = logging.getLogger(__name__)

VENUE_ID = "prime"

ORDER_TYPES = {
    "MARKET": OrderType.MARKET,
    "LIMIT": OrderType.LIMIT,
    "STOP_LIMIT": OrderType.STOP_LIMIT,
    # Algorithmic and negotiated orders carry a limit price
    "TWAP": OrderType.LIMIT,
    "VWAP": OrderType.LIMIT,
    "BLOCK": OrderType.LIMIT,
    "RFQ": OrderType.LIMIT,
}

ORDER_SIDES = {
    "BUY": OrderSide.BUY,
    "SELL": OrderSide.SELL,
}

ORDER_STATUSES = {
    "OPEN": OrderStatus.OPEN,
    "WORKING": OrderStatus.OPEN,
    "FILLED": OrderStatus.FILLED,
    "CANCELLED": OrderStatus.CANCELLED,
    "EXPIRED": OrderStatus.REJECTED,
    "PENDING": OrderStatus.PENDING,
    "REJECTED": OrderStatus.REJECTED,
}

TIME_IN_FORCE = {
    "GOOD_UNTIL_DATE_TIME": TimeInForce.GTD,
    "GOOD_UNTIL_CANCELLED": TimeInForce.GTC,
    "IMMEDIATE_OR_CANCEL": TimeInForce.IOC,
    "FILL_OR_KILL": TimeInForce.FOK,
}

TRADE_SIDES = {
    "BUY": TradeSide.BUY,
    "SELL": TradeSide.SELL,
}

CLIENT_ERROR_CODES = frozenset({
    "INVALID_ARGUMENT",
    "INVALID_PRODUCT",
    "INVALID_ORDER",
    "INVALID_ORDER_ID",
    "INVALID_PORTFOLIO",
    "INVALID_PORTFOLIO_ID",
    "INSUFFICIENT_FUNDS",
    "ORDER_NOT_FOUND",
    "VALIDATION_ERROR",
})


def map_order_type(value: Optional[str]) -> OrderType:
    return ORDER_TYPES.get(value or "", OrderType.UNSPECIFIED)


def map_order_side(value: Optional[str]) -> OrderSide:
    return ORDER_SIDES.get(value or "", OrderSide.UNSPECIFIED)


def map_order_status(value: Optional[str]) -> OrderStatus:
    return ORDER_STATUSES.get(value or "", OrderStatus.UNSPECIFIED)


def map_time_in_force(value: Optional[str]) -> TimeInForce:
    """Unknown or missing values default to GTC."""
    return TIME_IN_FORCE.get(value or "", TimeInForce.GTC)


def _decimal(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    return parse_decimal_or_zero(value)


def _timestamp(value: Optional[str], field: str, kind: str):
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise NormalizationError(kind, f"invalid {field}: {e}") from e


def format_error_message(body: PrimeErrorBody) -> str:
    """prime api error: CODE (message) [details: {...}]"""
    msg = "prime api error"
    if body.code:
        msg = f"{msg}: {body.code}"
    if body.message:
        msg = f"{msg}: {body.message}" if not body.code else f"{msg} ({body.message})"
    if body.details:
        details = json.dumps(body.details, sort_keys=True, separators=(",", ":"))
        msg = f"{msg} [details: {details}]"
    return msg


def is_client_error(body: PrimeErrorBody) -> bool:
    """Known client error code, or a client-error keyword in the message."""
    if (body.code or "") in CLIENT_ERROR_CODES:
        return True
    return has_client_error_keyword(body.message or "")


class PrimeNormalizer(NormalizerPort):
    """Coinbase Prime normalizer."""

    def __init__(self, time_provider: Optional[TimeProviderPort] = None):
        self._time = time_provider or SystemTimeAdapter()

    def normalize_order(self, raw: bytes) -> Order:
        po = decode(PrimeOrder, raw, "order")
        created_at = _timestamp(po.created_at, "created_at", "order")

        return Order(
            order_id=po.id,
            venue_order_id=po.id,
            client_order_id=po.client_order_id,
            venue_symbol=po.product_id,
            side=map_order_side(po.side),
            order_type=map_order_type(po.type),
            status=map_order_status(po.status),
            time_in_force=map_time_in_force(po.time_in_force),
            quantity=_decimal(po.base_quantity),
            price=_decimal(po.limit_price),
            stop_price=_decimal(po.stop_price),
            filled_quantity=_decimal(po.filled_quantity),
            average_fill_price=_decimal(po.average_filled_price),
            total_fees=_decimal(po.commission),
            post_only=po.post_only,
            created_at=created_at,
            # Prime orders carry no separate update time
            updated_at=created_at,
        )

    def normalize_execution_report(self, raw: bytes) -> ExecutionReport:
        fill = decode(PrimeFill, raw, "execution report")

        value = None
        if fill.fill_price is not None and fill.fill_qty is not None:
            value = fill.fill_price * fill.fill_qty

        return ExecutionReport(
            execution_id=fill.fill_id,
            venue_execution_id=fill.fill_id,
            order_id=fill.order_id,
            venue_order_id=fill.order_id,
            client_order_id=fill.client_order_id or None,
            venue_symbol=fill.symbol,
            execution_type=ExecutionType.FILL,
            order_status=fill.order_status,
            side=fill.side,
            timestamp=_timestamp(fill.event_time, "event_time", "execution report"),
            price=fill.fill_price,
            quantity=fill.fill_qty,
            value=value,
            fee=fill.fee,
            trade_id=fill.match_id,
            is_maker=False,
        )

    def normalize_balance(self, raw: bytes) -> Balance:
        """available = amount - holds"""
        pb = decode(PrimeBalance, raw, "balance")
        total = parse_decimal_or_zero(pb.amount)
        holds = parse_decimal_or_zero(pb.holds)
        return Balance(
            asset_id=pb.symbol,
            total=total,
            available=total - holds,
            locked=holds,
        )

    def normalize_wallet_balance(self, raw: bytes) -> Balance:
        """Wallet balance; the wallet id becomes the account id."""
        wb = decode(PrimeWalletBalance, raw, "wallet balance")
        total = parse_decimal_or_zero(wb.amount)
        holds = parse_decimal_or_zero(wb.holds)
        return Balance(
            account_id=wb.wallet_id,
            asset_id=wb.symbol,
            total=total,
            available=total - holds,
            locked=holds,
        )

    def normalize_order_book(self, raw: bytes) -> OrderBook:
        book = decode(PrimeOrderBook, raw, "orderbook")

        timestamp = None
        if book.time:
            try:
                timestamp = parse_timestamp(book.time)
            except ValueError:
                logger.warning(f"Unparseable book time {book.time!r}, using now")
        if timestamp is None:
            timestamp = self._time.now()

        bids = parse_levels(book.bids, skip_empty=True)
        asks = parse_levels(book.asks, skip_empty=True)
        best_bid, best_ask, spread, mid = compute_top_of_book(bids, asks)

        return OrderBook(
            venue_id=VENUE_ID,
            venue_symbol=book.product_id,
            timestamp=timestamp,
            bids=bids,
            asks=asks,
            best_bid=best_bid,
            best_ask=best_ask,
            spread=spread,
            mid_price=mid,
            sequence=book.sequence if book.sequence and book.sequence > 0 else None,
        )

    def normalize_trade(self, raw: bytes) -> Trade:
        pt = decode(PrimeTrade, raw, "trade")
        price = _decimal(pt.price)
        quantity = _decimal(pt.size)
        value = price * quantity if price is not None and quantity is not None else None

        return Trade(
            trade_id=pt.trade_id,
            venue_id=VENUE_ID,
            venue_symbol=pt.product_id,
            timestamp=_timestamp(pt.time, "time", "trade"),
            price=price,
            quantity=quantity,
            side=TRADE_SIDES.get(pt.side or "", TradeSide.UNSPECIFIED),
            value=value,
        )

    def normalize_error(self, status_code: int, body: bytes) -> VenueAPIError:
        if not body:
            message = f"prime api error: status {status_code} (no body)"
            return classify_error(VENUE_ID, status_code, message, ErrorCodes(), False, body)

        try:
            parsed = PrimeErrorBody.model_validate_json(body)
        except ValidationError:
            text = body.decode("utf-8", errors="replace")
            logger.warning(f"Unparseable prime error body (status {status_code})")
            message = f"prime api error: status {status_code}: {text}"
            return classify_error(
                VENUE_ID, status_code, message, ErrorCodes(),
                has_client_error_keyword(text), body,
            )

        return classify_error(
            VENUE_ID,
            status_code,
            format_error_message(parsed),
            ErrorCodes.uniform(parsed.code or ""),
            is_client_error(parsed),
            body,
        )
