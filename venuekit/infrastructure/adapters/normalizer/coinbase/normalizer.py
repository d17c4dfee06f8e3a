"""
CoinbaseNormalizer - Coinbase Advanced Trade (v3) implementation of NormalizerPort.
"""
import logging
from typing import List, Optional, Tuple

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
    OrderType,
)
from venuekit.domain.entities.balance import Balance
from venuekit.domain.entities.market import OrderBook, Trade, TradeSide
from venuekit.exceptions import NormalizationError, VenueAPIError
from venuekit.infrastructure.adapters.normalizer.base import decode
from venuekit.infrastructure.adapters.normalizer.errors import (
    ErrorCodes,
    classify_error,
    has_client_error_keyword,
    join_details,
)
from venuekit.infrastructure.adapters.normalizer.orderbook import (
    compute_top_of_book,
    parse_levels,
)
from venuekit.infrastructure.adapters.normalizer.parsing import (
    parse_decimal_or_zero,
    parse_order_side,
    parse_order_status,
    parse_order_type,
    parse_time_in_force,
    parse_timestamp,
)
from venuekit.infrastructure.adapters.normalizer.coinbase.models import (
    CoinbaseAccount,
    CoinbaseAccounts,
    CoinbaseErrorBody,
    CoinbaseFill,
    CoinbaseOrder,
    CoinbaseOrderBook,
    CoinbaseTrade,
    CoinbaseTrades,
    OrderConfiguration,
)

logger = logging.getLogger(__name__)

VENUE_ID = "coinbase"

ERROR_CODES = ErrorCodes(
    auth_failure="AUTH_FAILURE",
    rate_limit="RATE_LIMIT",
    invalid_request="INVALID_REQUEST",
    bad_request="BAD_REQUEST",
    not_found="NOT_FOUND",
    server_error="SERVER_ERROR",
    unknown="UNKNOWN",
)

TRADE_SIDES = {
    "BUY": TradeSide.BUY,
    "SELL": TradeSide.SELL,
}


def _decimal(value: Optional[str]) -> Optional[float]:
    """None stays None; anything present parses leniently."""
    if value is None:
        return None
    return parse_decimal_or_zero(value)


def _timestamp(value: Optional[str], field: str, kind: str):
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise NormalizationError(kind, f"invalid {field}: {e}") from e


def extract_price_quantity(
    config: OrderConfiguration,
) -> Tuple[Optional[float], Optional[float]]:
    """(price, quantity) from whichever configuration variant is set."""
    if config.market_market_ioc is not None:
        market = config.market_market_ioc
        # Quote size wins when both are present
        if market.quote_size:
            quantity = parse_decimal_or_zero(market.quote_size)
        elif market.base_size:
            quantity = parse_decimal_or_zero(market.base_size)
        else:
            quantity = None
        return 0.0, quantity

    for variant in (
        config.sor_limit_ioc,
        config.limit_limit_gtc,
        config.limit_limit_gtd,
        config.limit_limit_fok,
        config.stop_limit_stop_limit_gtc,
        config.stop_limit_stop_limit_gtd,
        config.trigger_bracket_gtc,
        config.trigger_bracket_gtd,
    ):
        if variant is not None:
            return _decimal(variant.limit_price), _decimal(variant.base_size)
    return None, None


def extract_stop_price(config: OrderConfiguration) -> Optional[float]:
    for variant in (config.stop_limit_stop_limit_gtc, config.stop_limit_stop_limit_gtd):
        if variant is not None:
            return _decimal(variant.stop_price)
    for bracket in (config.trigger_bracket_gtc, config.trigger_bracket_gtd):
        if bracket is not None:
            return _decimal(bracket.stop_trigger_price)
    return None


def determine_order_type(config: OrderConfiguration, order_type: Optional[str]) -> OrderType:
    """Explicit order_type string first, then the configuration variant."""
    if order_type:
        parsed = parse_order_type(order_type)
        if parsed != OrderType.UNSPECIFIED:
            return parsed

    if config.market_market_ioc is not None:
        return OrderType.MARKET
    if (
        config.sor_limit_ioc is not None
        or config.limit_limit_gtc is not None
        or config.limit_limit_gtd is not None
        or config.limit_limit_fok is not None
    ):
        return OrderType.LIMIT
    if (
        config.stop_limit_stop_limit_gtc is not None
        or config.stop_limit_stop_limit_gtd is not None
        or config.trigger_bracket_gtc is not None
        or config.trigger_bracket_gtd is not None
    ):
        return OrderType.STOP_LIMIT
    return OrderType.UNSPECIFIED


def format_error_message(body: CoinbaseErrorBody) -> str:
    """coinbase api error: {error} ({message}) [details; preview: ..; order: ..; edit: ..]"""
    msg = "coinbase api error"
    if body.error:
        msg = f"{msg}: {body.error}"
    if body.message:
        msg = f"{msg}: {body.message}" if not body.error else f"{msg} ({body.message})"

    details = join_details([
        body.error_details or "",
        f"preview: {body.preview_failure_reason}" if body.preview_failure_reason else "",
        f"order: {body.new_order_failure_reason}" if body.new_order_failure_reason else "",
        f"edit: {body.edit_failure_reason}" if body.edit_failure_reason else "",
    ])
    if details:
        msg = f"{msg} [{details}]"
    return msg


class CoinbaseNormalizer(NormalizerPort):
    """
    Coinbase Advanced Trade normalizer.

    Converts v3 brokerage payloads (orders, fills, accounts, product
    books, market trades, errors) into canonical records.
    """

    def __init__(self, time_provider: Optional[TimeProviderPort] = None):
        """
        Args:
            time_provider: Clock used when a book carries no usable timestamp
        """
        self._time = time_provider or SystemTimeAdapter()

    # --- Orders ---

    def normalize_order(self, raw: bytes) -> Order:
        cb = decode(CoinbaseOrder, raw, "order")
        config = cb.order_configuration

        price, quantity = extract_price_quantity(config)

        post_only = None
        if config.limit_limit_gtc is not None and config.limit_limit_gtc.post_only:
            post_only = True
        elif config.limit_limit_gtd is not None and config.limit_limit_gtd.post_only:
            post_only = True

        updated_at = None
        if cb.last_fill_time:
            try:
                updated_at = parse_timestamp(cb.last_fill_time)
            except ValueError:
                logger.warning(f"Ignoring unparseable last_fill_time: {cb.last_fill_time!r}")

        return Order(
            order_id=cb.order_id,
            venue_order_id=cb.order_id,
            client_order_id=cb.client_order_id,
            venue_symbol=cb.product_id,
            side=parse_order_side(cb.side),
            order_type=determine_order_type(config, cb.order_type),
            status=parse_order_status(cb.status),
            time_in_force=parse_time_in_force(cb.time_in_force),
            quantity=quantity,
            price=price,
            stop_price=extract_stop_price(config),
            filled_quantity=_decimal(cb.filled_size),
            average_fill_price=_decimal(cb.average_filled_price),
            total_fees=_decimal(cb.total_fees),
            post_only=post_only,
            rejection_reason=cb.reject_reason or None,
            created_at=_timestamp(cb.created_time, "created_time", "order"),
            updated_at=updated_at,
        )

    def normalize_execution_report(self, raw: bytes) -> ExecutionReport:
        fill = decode(CoinbaseFill, raw, "execution report")

        price = _decimal(fill.price)
        quantity = _decimal(fill.size)
        value = price * quantity if price is not None and quantity is not None else None
        execution_type = ExecutionType.TRADE if fill.trade_type == "FILL" else ExecutionType.UNSPECIFIED

        return ExecutionReport(
            execution_id=fill.entry_id,
            venue_execution_id=fill.entry_id,
            order_id=fill.order_id,
            venue_order_id=fill.order_id,
            venue_symbol=fill.product_id,
            execution_type=execution_type,
            order_status="FILLED",
            side=fill.side,
            timestamp=_timestamp(fill.trade_time, "trade_time", "execution report"),
            price=price,
            quantity=quantity,
            value=value,
            fee=_decimal(fill.commission),
            trade_id=fill.trade_id,
            is_maker=fill.liquidity_indicator == "MAKER",
            liquidity=fill.liquidity_indicator,
        )

    # --- Balances ---

    def normalize_balance(self, raw: bytes) -> Balance:
        """First account of an {"accounts": [...]} envelope, or a single account."""
        envelope = decode(CoinbaseAccounts, raw, "balance")
        if envelope.accounts:
            return self._account_to_balance(envelope.accounts[0])
        return self._account_to_balance(decode(CoinbaseAccount, raw, "balance"))

    def normalize_balances(self, raw: bytes) -> List[Balance]:
        """Every account of an envelope (or the single account)."""
        envelope = decode(CoinbaseAccounts, raw, "balance")
        if envelope.accounts:
            return [self._account_to_balance(a) for a in envelope.accounts]
        return [self._account_to_balance(decode(CoinbaseAccount, raw, "balance"))]

    def _account_to_balance(self, account: CoinbaseAccount) -> Balance:
        available = _decimal(account.available_balance.value)
        hold = _decimal(account.hold.value)
        total = None
        if available is not None or hold is not None:
            total = (available or 0.0) + (hold or 0.0)

        updated_at = None
        stamp = account.updated_at or account.created_at
        if stamp:
            try:
                updated_at = parse_timestamp(stamp)
            except ValueError:
                logger.warning(f"Ignoring unparseable account timestamp: {stamp!r}")

        return Balance(
            account_id=account.uuid,
            asset_id=account.currency,
            total=total,
            available=available,
            locked=hold,
            updated_at=updated_at,
        )

    # --- Market data ---

    def normalize_order_book(self, raw: bytes) -> OrderBook:
        book = decode(CoinbaseOrderBook, raw, "orderbook")

        time_str = book.time or book.pricebook.time
        timestamp = None
        if time_str:
            try:
                timestamp = parse_timestamp(time_str)
            except ValueError:
                logger.warning(f"Unparseable book time {time_str!r}, using now")
        if timestamp is None:
            timestamp = self._time.now()

        bids = parse_levels(book.pricebook.bids)
        asks = parse_levels(book.pricebook.asks)
        best_bid, best_ask, spread, mid = compute_top_of_book(bids, asks)

        return OrderBook(
            venue_id=VENUE_ID,
            venue_symbol=book.pricebook.product_id,
            timestamp=timestamp,
            bids=bids,
            asks=asks,
            best_bid=best_bid,
            best_ask=best_ask,
            spread=spread,
            mid_price=mid,
        )

    def normalize_trade(self, raw: bytes) -> Trade:
        """Single trade, or the first of a {"trades": [...]} envelope."""
        envelope = decode(CoinbaseTrades, raw, "trade")
        if envelope.trades:
            return self._to_trade(envelope.trades[0])
        return self._to_trade(decode(CoinbaseTrade, raw, "trade"))

    def normalize_trades(self, raw: bytes) -> List[Trade]:
        """All trades of an envelope; malformed entries are skipped."""
        envelope = decode(CoinbaseTrades, raw, "trades")
        trades: List[Trade] = []
        for cb_trade in envelope.trades:
            try:
                trades.append(self._to_trade(cb_trade))
            except NormalizationError as e:
                logger.warning(f"Skipping trade {cb_trade.trade_id}: {e}")
        return trades

    def _to_trade(self, cb_trade: CoinbaseTrade) -> Trade:
        price = _decimal(cb_trade.price)
        quantity = _decimal(cb_trade.size)
        value = price * quantity if price is not None and quantity is not None else None

        return Trade(
            trade_id=cb_trade.trade_id,
            venue_id=VENUE_ID,
            venue_symbol=cb_trade.product_id,
            timestamp=_timestamp(cb_trade.time, "trade time", "trade"),
            price=price,
            quantity=quantity,
            side=TRADE_SIDES.get((cb_trade.side or "").upper(), TradeSide.UNSPECIFIED),
            value=value,
        )

    # --- Errors ---

    def normalize_error(self, status_code: int, body: bytes) -> VenueAPIError:
        if not body:
            message = f"coinbase api error: status {status_code} (no body)"
            return classify_error(VENUE_ID, status_code, message, ERROR_CODES, False, body)

        try:
            parsed = CoinbaseErrorBody.model_validate_json(body)
        except ValidationError:
            text = body.decode("utf-8", errors="replace")
            logger.warning(f"Unparseable coinbase error body (status {status_code})")
            message = f"coinbase api error: status {status_code}: {text}"
            return classify_error(
                VENUE_ID, status_code, message, ERROR_CODES,
                has_client_error_keyword(text), body,
            )

        client_error = has_client_error_keyword(
            parsed.error or "", parsed.message or "", parsed.error_details or "",
        )
        return classify_error(
            VENUE_ID, status_code, format_error_message(parsed), ERROR_CODES,
            client_error, body,
        )
