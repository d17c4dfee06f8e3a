"""
Tests for query filter DTOs.
"""
import pytest
from datetime import datetime, timedelta, timezone

from venuekit.application.dto.filters import (
    OrderFilter,
    PaginationParams,
    SymbolFilter,
    TimeRange,
)
from venuekit.domain.entities.order import OrderStatus
from venuekit.exceptions import FilterValidationError

START = datetime(2024, 1, 1, tzinfo=timezone.utc)
END = datetime(2024, 1, 2, tzinfo=timezone.utc)


class TestOrderFilter:
    """OrderFilter validation and helpers"""

    @pytest.mark.unit
    def test_empty_filter_is_valid(self):
        order_filter = OrderFilter()

        order_filter.validate()
        assert not order_filter.has_time_range()
        assert not order_filter.has_symbol_filter()
        assert not order_filter.has_status_filter()

    @pytest.mark.unit
    def test_negative_limit_rejected(self):
        with pytest.raises(FilterValidationError) as exc_info:
            OrderFilter(limit=-1).validate()

        assert exc_info.value.field == "limit"

    @pytest.mark.unit
    def test_negative_offset_rejected(self):
        with pytest.raises(FilterValidationError) as exc_info:
            OrderFilter(offset=-5).validate()

        assert exc_info.value.field == "offset"

    @pytest.mark.unit
    def test_start_after_end_rejected(self):
        with pytest.raises(FilterValidationError):
            OrderFilter(start_time=END, end_time=START).validate()

    @pytest.mark.unit
    def test_open_ended_range_is_valid(self):
        order_filter = OrderFilter(start_time=START)

        order_filter.validate()
        assert order_filter.has_time_range()

    @pytest.mark.unit
    def test_symbol_and_status_filters(self):
        order_filter = OrderFilter(
            symbols=("BTC-USD",),
            statuses=(OrderStatus.OPEN, OrderStatus.FILLED),
        )

        assert order_filter.has_symbol_filter()
        assert order_filter.has_status_filter()


class TestTimeRange:
    """TimeRange behaviour"""

    @pytest.mark.unit
    def test_zero_range(self):
        time_range = TimeRange()

        assert time_range.is_zero()
        assert time_range.duration() == timedelta(0)
        assert time_range.contains(START)

    @pytest.mark.unit
    def test_duration(self):
        assert TimeRange(START, END).duration() == timedelta(days=1)

    @pytest.mark.unit
    def test_open_range_has_zero_duration(self):
        time_range = TimeRange(start=START)

        assert time_range.has_start()
        assert not time_range.has_end()
        assert time_range.duration() == timedelta(0)

    @pytest.mark.unit
    def test_contains_start_but_not_end(self):
        time_range = TimeRange(START, END)

        assert time_range.contains(START)
        assert time_range.contains(START + timedelta(hours=12))
        assert not time_range.contains(END)
        assert not time_range.contains(START - timedelta(seconds=1))

    @pytest.mark.unit
    def test_inverted_range_rejected(self):
        with pytest.raises(FilterValidationError):
            TimeRange(END, START).validate()


class TestSymbolFilter:
    """SymbolFilter matching"""

    @pytest.mark.unit
    def test_empty_filter_matches_everything(self):
        symbol_filter = SymbolFilter()

        assert symbol_filter.is_empty()
        assert symbol_filter.matches("ETH-USD")

    @pytest.mark.unit
    def test_explicit_symbols(self):
        symbol_filter = SymbolFilter(symbols=("BTC-USD", "ETH-USD"))

        assert symbol_filter.matches("BTC-USD")
        assert not symbol_filter.matches("SOL-USD")

    @pytest.mark.unit
    def test_base_only_matches_everything(self):
        symbol_filter = SymbolFilter(base="BTC")

        assert not symbol_filter.is_empty()
        assert symbol_filter.matches("SOL-USD")


class TestPaginationParams:
    """PaginationParams helpers"""

    @pytest.mark.unit
    def test_defaults(self):
        params = PaginationParams()

        params.validate()
        assert not params.has_limit()
        assert not params.has_offset()
        assert not params.has_cursor()

    @pytest.mark.unit
    def test_cursor(self):
        assert PaginationParams(cursor="abc").has_cursor()

    @pytest.mark.unit
    def test_negative_values_rejected(self):
        with pytest.raises(FilterValidationError):
            PaginationParams(limit=-1).validate()
        with pytest.raises(FilterValidationError):
            PaginationParams(offset=-1).validate()
