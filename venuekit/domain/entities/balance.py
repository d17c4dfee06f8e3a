"""
Balance Domain Entity
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Balance:
    """
    Immutable balance of one asset in one account.

    Attributes:
        account_id: Venue account / wallet identifier
        asset_id: Asset symbol (e.g., "BTC", "USD")
        total: Total amount held
        available: Amount free to trade or withdraw
        locked: Amount held by open orders or holds
        updated_at: Time of the balance snapshot
    """
    account_id: Optional[str] = None
    asset_id: Optional[str] = None
    total: Optional[float] = None
    available: Optional[float] = None
    locked: Optional[float] = None
    updated_at: Optional[datetime] = None
