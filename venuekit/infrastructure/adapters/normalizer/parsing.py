"""
Shared parsing utilities for venue normalizers.

Timestamps, decimals and enum synonyms arrive in many spellings
across venues. Everything here is pure and stateless.
"""
import math
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Dict, Generic, Iterable, Mapping, Optional, TypeVar, Union

from venuekit.domain.entities.order import (
    OrderSide,
    OrderStatus,
    OrderType,
    TimeInForce,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Unix magnitude thresholds: seconds < 1e11 <= millis < 1e14 <= micros < 1e17
_SECONDS_LIMIT = 10 ** 11
_MILLIS_LIMIT = 10 ** 14
_MICROS_LIMIT = 10 ** 17

_NUMERIC_RE = re.compile(r"^-?[0-9]+$")
_EXCESS_FRACTION_RE = re.compile(r"(\.\d{6})\d+")

# Tried in order
TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",      # RFC3339
    "%Y-%m-%dT%H:%M:%S.%f%z",   # RFC3339 with fraction, "Z" or offset
    "%Y-%m-%dT%H:%M:%S.%f",     # ISO without zone
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",        # SQL
)

Number = Union[str, int, float, None]


# =============================================================================
# Timestamps
# =============================================================================

def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a venue timestamp into a UTC-aware datetime.

    Args:
        value: Unix seconds/millis/micros as digits, or an RFC3339/ISO/SQL string

    Returns:
        datetime, or None for "", "null" or None

    Raises:
        ValueError: If the value cannot be parsed
    """
    if value is None:
        return None
    s = value.strip()
    if s == "" or s == "null":
        return None

    if _NUMERIC_RE.match(s):
        return _parse_unix(int(s))

    # strptime's %f takes at most microseconds
    candidate = _EXCESS_FRACTION_RE.sub(r"\1", s)
    for fmt in TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    raise ValueError(f"unable to parse timestamp: {value!r}")


def _parse_unix(n: int) -> datetime:
    if n >= _MICROS_LIMIT:
        raise ValueError(f"unix timestamp out of reasonable range: {n}")
    try:
        if n < _SECONDS_LIMIT:
            return EPOCH + timedelta(seconds=n)
        if n < _MILLIS_LIMIT:
            return EPOCH + timedelta(milliseconds=n)
        return EPOCH + timedelta(microseconds=n)
    except (OverflowError, OSError) as e:
        raise ValueError(f"unix timestamp out of reasonable range: {n}") from e


def parse_timestamp_or_now(value: Optional[str]) -> datetime:
    """parse_timestamp, falling back to the current UTC time"""
    try:
        parsed = parse_timestamp(value)
    except ValueError:
        parsed = None
    return parsed or datetime.now(timezone.utc)


# =============================================================================
# Decimals
# =============================================================================

def parse_decimal(value: Number) -> float:
    """
    Parse a venue decimal.

    "" / "null" / None give 0.0. Numbers pass through.

    Raises:
        ValueError: If the value is not numeric, or is NaN / infinite
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ValueError(f"invalid decimal: {value!r}")
    if isinstance(value, (int, float)):
        f = float(value)
    else:
        s = value.strip()
        if s == "" or s == "null":
            return 0.0
        try:
            f = float(s)
        except ValueError as e:
            raise ValueError(f"invalid decimal: {value!r}") from e

    if not math.isfinite(f):
        raise ValueError(f"invalid decimal: {value!r} (NaN or Inf)")
    return f


def parse_decimal_or_zero(value: Number) -> float:
    """parse_decimal, returning 0.0 instead of raising"""
    try:
        return parse_decimal(value)
    except ValueError:
        return 0.0


def parse_optional_decimal(value: Number) -> Optional[float]:
    """parse_decimal that keeps None for a missing field"""
    if value is None:
        return None
    return parse_decimal(value)


def format_decimal(value: float) -> str:
    """Shortest round-trip decimal string, never in exponent form."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


# =============================================================================
# Enums
# =============================================================================

E = TypeVar("E", bound=Enum)


def normalize_enum_key(value: Optional[str]) -> str:
    """Lowercase, trim, and turn '-' and ' ' into '_'."""
    if not value:
        return ""
    return value.strip().lower().replace("-", "_").replace(" ", "_")


class EnumMapper(Generic[E]):
    """
    Maps venue spellings to enum members.

    Keys are compared after normalize_enum_key. Unknown values map to
    the default (the enum's UNSPECIFIED member), never raise.
    """

    def __init__(self, table: Mapping[str, E], default: E):
        self._table: Dict[str, E] = {normalize_enum_key(k): v for k, v in table.items()}
        self._default = default

    def __call__(self, value: Optional[str]) -> E:
        return self._table.get(normalize_enum_key(value), self._default)

    def extend(self, overrides: Mapping[str, E]) -> "EnumMapper[E]":
        """New mapper with extra or replaced synonyms."""
        merged: Dict[str, E] = dict(self._table)
        merged.update({normalize_enum_key(k): v for k, v in overrides.items()})
        return EnumMapper(merged, self._default)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and normalize_enum_key(value) in self._table


def _synonyms(groups: Mapping[E, Iterable[str]]) -> Dict[str, E]:
    return {name: member for member, names in groups.items() for name in names}


ORDER_STATUS_SYNONYMS: Dict[str, OrderStatus] = _synonyms({
    OrderStatus.OPEN: ("open", "new", "active", "pending", "accepted"),
    OrderStatus.FILLED: ("filled", "done", "closed", "complete"),
    OrderStatus.CANCELLED: ("cancelled", "canceled", "cancelled_by_user", "canceled_by_user"),
    OrderStatus.REJECTED: ("rejected", "failed", "invalid", "expired"),
    OrderStatus.PARTIALLY_FILLED: (
        "partially_filled", "partial", "partial_fill", "partially_filled_active",
    ),
})

ORDER_TYPE_SYNONYMS: Dict[str, OrderType] = _synonyms({
    OrderType.LIMIT: ("limit",),
    OrderType.MARKET: ("market",),
    OrderType.STOP_LOSS: ("stop", "stop_loss", "stop_market"),
    OrderType.STOP_LIMIT: ("stop_limit", "stop_loss_limit"),
    OrderType.TRAILING_STOP: ("trailing_stop", "trailing_stop_loss"),
    OrderType.POST_ONLY: ("post_only", "maker_only"),
    OrderType.IOC: ("ioc", "immediate_or_cancel"),
    OrderType.FOK: ("fok", "fill_or_kill"),
    OrderType.GTC: ("gtc", "good_til_cancelled"),
})

ORDER_SIDE_SYNONYMS: Dict[str, OrderSide] = _synonyms({
    OrderSide.BUY: ("buy", "bid"),
    OrderSide.SELL: ("sell", "ask"),
})

TIME_IN_FORCE_SYNONYMS: Dict[str, TimeInForce] = _synonyms({
    TimeInForce.GTC: (
        "gtc", "good_til_cancelled", "good_til_canceled", "good_till_cancelled",
        "good_until_cancelled",
    ),
    TimeInForce.IOC: ("ioc", "immediate_or_cancel"),
    TimeInForce.FOK: ("fok", "fill_or_kill"),
    TimeInForce.GTD: ("gtd", "good_til_date", "good_til_time", "good_until_date_time"),
})

parse_order_status = EnumMapper(ORDER_STATUS_SYNONYMS, OrderStatus.UNSPECIFIED)
parse_order_type = EnumMapper(ORDER_TYPE_SYNONYMS, OrderType.UNSPECIFIED)
parse_order_side = EnumMapper(ORDER_SIDE_SYNONYMS, OrderSide.UNSPECIFIED)
parse_time_in_force = EnumMapper(TIME_IN_FORCE_SYNONYMS, TimeInForce.UNSPECIFIED)


# =============================================================================
# Strings
# =============================================================================

def contains_fold(s: str, sub: str) -> bool:
    """Case-insensitive substring test"""
    return sub.casefold() in s.casefold()


def contains_any_fold(s: str, subs: Iterable[str]) -> bool:
    """Case-insensitive test for any of the substrings"""
    folded = s.casefold()
    return any(sub.casefold() in folded for sub in subs)


