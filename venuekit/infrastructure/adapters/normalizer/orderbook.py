"""
Order book helpers shared by venue normalizers.
"""
from typing import Any, List, Optional, Sequence, Tuple

from venuekit.domain.entities.market import OrderBookLevel
from venuekit.exceptions import NormalizationError
from venuekit.infrastructure.adapters.normalizer.parsing import parse_decimal_or_zero


def _level_number(value: Any, field: str, index: int) -> float:
    # bool is an int subclass but never a valid price or size
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise NormalizationError(
            "orderbook",
            f"invalid {field} type at index {index}: {type(value).__name__}",
        )
    return parse_decimal_or_zero(value)


def _level_count(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        count = parse_decimal_or_zero(value)
        if count > 0:
            return int(count)
    return None


def parse_levels(
    levels: Optional[Sequence[Sequence[Any]]],
    skip_empty: bool = False,
) -> List[OrderBookLevel]:
    """
    Parse [[price, size], ...] or [[price, size, count], ...] entries.

    Price and size may be numbers or numeric strings. The optional
    third element is the order count.

    Args:
        levels: Raw level arrays (None gives an empty list)
        skip_empty: Drop levels whose price and size are both 0

    Raises:
        NormalizationError: If a level has fewer than 2 elements or a
            price/size of the wrong type
    """
    result: List[OrderBookLevel] = []
    for i, level in enumerate(levels or []):
        if len(level) < 2:
            raise NormalizationError(
                "orderbook",
                f"invalid level at index {i}: expected at least 2 elements, got {len(level)}",
            )
        price = _level_number(level[0], "price", i)
        quantity = _level_number(level[1], "quantity", i)
        if skip_empty and price == 0 and quantity == 0:
            continue

        order_count = _level_count(level[2]) if len(level) > 2 else None
        result.append(OrderBookLevel(price=price, quantity=quantity, order_count=order_count))
    return result


def compute_top_of_book(
    bids: Sequence[OrderBookLevel],
    asks: Sequence[OrderBookLevel],
) -> Tuple[Optional[float], Optional[float], Optional[float], Optional[float]]:
    """
    Best bid/ask are the first level on each side as received (no re-sort).

    Returns:
        (best_bid, best_ask, spread, mid_price); spread and mid are None
        unless both sides have a price
    """
    best_bid = bids[0].price if bids else None
    best_ask = asks[0].price if asks else None
    if best_bid is None or best_ask is None:
        return best_bid, best_ask, None, None
    return best_bid, best_ask, best_ask - best_bid, (best_bid + best_ask) / 2.0
