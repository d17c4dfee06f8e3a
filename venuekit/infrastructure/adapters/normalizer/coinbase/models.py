"""
Coinbase Advanced Trade (v3) payload models.
"""
from typing import Any, List, Optional

from venuekit.infrastructure.adapters.normalizer.base import VenueModel


# --- Order configuration variants ---

class MarketIOC(VenueModel):
    quote_size: Optional[str] = None
    base_size: Optional[str] = None


class SorLimitIOC(VenueModel):
    base_size: Optional[str] = None
    limit_price: Optional[str] = None


class LimitGTC(VenueModel):
    base_size: Optional[str] = None
    limit_price: Optional[str] = None
    post_only: bool = False


class LimitGTD(VenueModel):
    base_size: Optional[str] = None
    limit_price: Optional[str] = None
    end_time: Optional[str] = None
    post_only: bool = False


class LimitFOK(VenueModel):
    base_size: Optional[str] = None
    limit_price: Optional[str] = None


class StopLimitGTC(VenueModel):
    base_size: Optional[str] = None
    limit_price: Optional[str] = None
    stop_price: Optional[str] = None
    stop_direction: Optional[str] = None


class StopLimitGTD(VenueModel):
    base_size: Optional[str] = None
    limit_price: Optional[str] = None
    stop_price: Optional[str] = None
    end_time: Optional[str] = None
    stop_direction: Optional[str] = None


class TriggerBracket(VenueModel):
    base_size: Optional[str] = None
    limit_price: Optional[str] = None
    stop_trigger_price: Optional[str] = None


class OrderConfiguration(VenueModel):
    """Exactly one variant is expected to be set."""
    market_market_ioc: Optional[MarketIOC] = None
    sor_limit_ioc: Optional[SorLimitIOC] = None
    limit_limit_gtc: Optional[LimitGTC] = None
    limit_limit_gtd: Optional[LimitGTD] = None
    limit_limit_fok: Optional[LimitFOK] = None
    stop_limit_stop_limit_gtc: Optional[StopLimitGTC] = None
    stop_limit_stop_limit_gtd: Optional[StopLimitGTD] = None
    trigger_bracket_gtc: Optional[TriggerBracket] = None
    trigger_bracket_gtd: Optional[TriggerBracket] = None


# --- Orders and fills ---

class CoinbaseOrder(VenueModel):
    order_id: Optional[str] = None
    product_id: Optional[str] = None
    user_id: Optional[str] = None
    order_configuration: OrderConfiguration = OrderConfiguration()
    side: Optional[str] = None
    client_order_id: Optional[str] = None
    status: Optional[str] = None
    time_in_force: Optional[str] = None
    created_time: Optional[str] = None
    completion_percentage: Optional[str] = None
    filled_size: Optional[str] = None
    average_filled_price: Optional[str] = None
    fee: Optional[str] = None
    number_of_fills: Optional[str] = None
    filled_value: Optional[str] = None
    pending_cancel: bool = False
    size_in_quote: bool = False
    total_fees: Optional[str] = None
    order_type: Optional[str] = None
    reject_reason: Optional[str] = None
    reject_message: Optional[str] = None
    cancel_message: Optional[str] = None
    last_fill_time: Optional[str] = None
    product_type: Optional[str] = None
    outstanding_hold_amount: Optional[str] = None


class CoinbaseFill(VenueModel):
    entry_id: Optional[str] = None
    trade_id: Optional[str] = None
    order_id: Optional[str] = None
    trade_time: Optional[str] = None
    trade_type: Optional[str] = None
    price: Optional[str] = None
    size: Optional[str] = None
    commission: Optional[str] = None
    product_id: Optional[str] = None
    sequence_timestamp: Optional[str] = None
    liquidity_indicator: Optional[str] = None
    size_in_quote: Optional[str] = None
    user_id: Optional[str] = None
    side: Optional[str] = None


# --- Accounts ---

class AccountAmount(VenueModel):
    value: Optional[str] = None
    currency: Optional[str] = None


class CoinbaseAccount(VenueModel):
    uuid: Optional[str] = None
    name: Optional[str] = None
    currency: Optional[str] = None
    available_balance: AccountAmount = AccountAmount()
    hold: AccountAmount = AccountAmount()
    default: bool = False
    active: bool = False
    ready: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
    type: Optional[str] = None


class CoinbaseAccounts(VenueModel):
    accounts: List[CoinbaseAccount] = []
    has_next: bool = False
    cursor: Optional[str] = None
    size: Optional[int] = None


# --- Market data ---

class PriceBook(VenueModel):
    product_id: Optional[str] = None
    bids: List[List[Any]] = []
    asks: List[List[Any]] = []
    time: Optional[str] = None


class CoinbaseOrderBook(VenueModel):
    pricebook: PriceBook = PriceBook()
    time: Optional[str] = None


class CoinbaseTrade(VenueModel):
    trade_id: Optional[str] = None
    product_id: Optional[str] = None
    price: Optional[str] = None
    size: Optional[str] = None
    time: Optional[str] = None
    side: Optional[str] = None
    bid: Optional[str] = None
    ask: Optional[str] = None


class CoinbaseTrades(VenueModel):
    trades: List[CoinbaseTrade] = []
    best_bid: Optional[str] = None
    best_ask: Optional[str] = None


# --- Errors ---

class CoinbaseErrorBody(VenueModel):
    error: Optional[str] = None
    message: Optional[str] = None
    error_details: Optional[str] = None
    preview_failure_reason: Optional[str] = None
    new_order_failure_reason: Optional[str] = None
    edit_failure_reason: Optional[str] = None
