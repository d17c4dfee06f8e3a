"""
Query filter DTOs used by venue clients.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Tuple

from venuekit.domain.entities.order import OrderStatus
from venuekit.exceptions import FilterValidationError


@dataclass(frozen=True)
class OrderFilter:
    """
    Criteria for listing orders.

    Empty tuples and None mean "no restriction"; limit 0 means no limit.
    """
    symbols: Tuple[str, ...] = ()
    statuses: Tuple[OrderStatus, ...] = ()
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    limit: int = 0
    offset: int = 0

    def validate(self) -> None:
        """
        Raises:
            FilterValidationError: If limit/offset is negative or start > end
        """
        if self.limit < 0:
            raise FilterValidationError("limit", "limit must be non-negative")
        if self.offset < 0:
            raise FilterValidationError("offset", "offset must be non-negative")
        if (
            self.start_time is not None
            and self.end_time is not None
            and self.start_time > self.end_time
        ):
            raise FilterValidationError(
                "start_time", "start time must be before end time"
            )

    def has_time_range(self) -> bool:
        return self.start_time is not None or self.end_time is not None

    def has_symbol_filter(self) -> bool:
        return len(self.symbols) > 0

    def has_status_filter(self) -> bool:
        return len(self.statuses) > 0


@dataclass(frozen=True)
class TimeRange:
    """Half-open time window [start, end). Either bound may be open."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def validate(self) -> None:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise FilterValidationError("time_range", "time range end must be after start")

    def is_zero(self) -> bool:
        return self.start is None and self.end is None

    def has_start(self) -> bool:
        return self.start is not None

    def has_end(self) -> bool:
        return self.end is not None

    def duration(self) -> timedelta:
        """Window length (zero when either bound is open)."""
        if self.start is None or self.end is None:
            return timedelta(0)
        return self.end - self.start

    def contains(self, moment: datetime) -> bool:
        """Start is inclusive, end is exclusive."""
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment >= self.end:
            return False
        return True


@dataclass(frozen=True)
class SymbolFilter:
    """
    Symbol restriction.

    Only the explicit symbol list is matched. base/quote are carried
    for venues that filter server-side.
    """
    symbols: Tuple[str, ...] = field(default_factory=tuple)
    base: str = ""
    quote: str = ""

    def is_empty(self) -> bool:
        return not self.symbols and not self.base and not self.quote

    def matches(self, symbol: str) -> bool:
        if self.is_empty():
            return True
        if self.symbols:
            return symbol in self.symbols
        return True


@dataclass(frozen=True)
class PaginationParams:
    """Limit/offset or cursor based pagination."""
    limit: int = 0
    offset: int = 0
    cursor: str = ""

    def validate(self) -> None:
        if self.limit < 0:
            raise FilterValidationError("limit", "limit must be non-negative")
        if self.offset < 0:
            raise FilterValidationError("offset", "offset must be non-negative")

    def has_limit(self) -> bool:
        return self.limit > 0

    def has_offset(self) -> bool:
        return self.offset > 0

    def has_cursor(self) -> bool:
        return self.cursor != ""
