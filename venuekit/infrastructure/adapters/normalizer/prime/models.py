"""
Coinbase Prime payload models.
"""
from typing import Any, Dict, List, Optional

from venuekit.infrastructure.adapters.normalizer.base import VenueModel


class PrimeOrder(VenueModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    portfolio_id: Optional[str] = None
    product_id: Optional[str] = None
    side: Optional[str] = None
    client_order_id: Optional[str] = None
    type: Optional[str] = None
    base_quantity: Optional[str] = None
    quote_value: Optional[str] = None
    limit_price: Optional[str] = None
    start_time: Optional[str] = None
    expiry_time: Optional[str] = None
    status: Optional[str] = None
    time_in_force: Optional[str] = None
    created_at: Optional[str] = None
    filled_quantity: Optional[str] = None
    filled_value: Optional[str] = None
    average_filled_price: Optional[str] = None
    commission: Optional[str] = None
    exchange_fee: Optional[str] = None
    stop_price: Optional[str] = None
    net_average_filled_price: Optional[str] = None
    user_context: Optional[str] = None
    client_product_id: Optional[str] = None
    post_only: bool = False
    display_size: Optional[str] = None


class PrimeFill(VenueModel):
    portfolio_id: Optional[str] = None
    fill_id: Optional[str] = None
    exec_id: Optional[int] = None
    order_id: Optional[str] = None
    instrument_id: Optional[str] = None
    symbol: Optional[str] = None
    match_id: Optional[str] = None
    fill_price: Optional[float] = None
    fill_qty: Optional[float] = None
    client_id: Optional[str] = None
    client_order_id: Optional[str] = None
    order_qty: Optional[float] = None
    limit_price: Optional[float] = None
    total_filled: Optional[float] = None
    filled_vwap: Optional[float] = None
    expire_time: Optional[str] = None
    stop_price: Optional[float] = None
    side: Optional[str] = None
    tif: Optional[str] = None
    stp_mode: Optional[str] = None
    fee: Optional[float] = None
    fee_asset: Optional[str] = None
    order_status: Optional[str] = None
    event_time: Optional[str] = None
    source: Optional[str] = None
    execution_venue: Optional[str] = None


class PrimeBalance(VenueModel):
    symbol: Optional[str] = None
    amount: Optional[str] = None
    holds: Optional[str] = None
    bonded_amount: Optional[str] = None
    reserved_amount: Optional[str] = None
    unbonding_amount: Optional[str] = None
    withdrawable_amount: Optional[str] = None


class PrimeWalletBalance(VenueModel):
    symbol: Optional[str] = None
    amount: Optional[str] = None
    holds: Optional[str] = None
    type: Optional[str] = None
    wallet_id: Optional[str] = None
    wallet_name: Optional[str] = None


class PrimeOrderBook(VenueModel):
    product_id: Optional[str] = None
    bids: List[List[Any]] = []
    asks: List[List[Any]] = []
    time: Optional[str] = None
    sequence: Optional[int] = None


class PrimeTrade(VenueModel):
    trade_id: Optional[str] = None
    product_id: Optional[str] = None
    price: Optional[str] = None
    size: Optional[str] = None
    side: Optional[str] = None
    time: Optional[str] = None


class PrimeErrorBody(VenueModel):
    message: Optional[str] = None
    code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    status_code: Optional[int] = None
