"""Data Transfer Objects for application layer."""
from venuekit.application.dto.signing import SignRequest, SignResult
from venuekit.application.dto.filters import (
    OrderFilter,
    TimeRange,
    SymbolFilter,
    PaginationParams,
)

__all__ = [
    "SignRequest",
    "SignResult",
    "OrderFilter",
    "TimeRange",
    "SymbolFilter",
    "PaginationParams",
]
