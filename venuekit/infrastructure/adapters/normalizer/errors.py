"""
Venue error classification shared by all normalizers.

Status table:
    401, 403            -> Permanent
    429                 -> RateLimit (whatever the body says)
    404                 -> Permanent
    500, 502, 503, 504  -> Temporary
    400                 -> Permanent if the venue's client-error test matches,
                           otherwise Temporary
    anything else       -> Temporary
"""
from dataclasses import dataclass
from typing import Any, Iterable

from venuekit.exceptions import (
    VenueAPIError,
    PermanentError,
    TemporaryError,
    RateLimitError,
)
from venuekit.infrastructure.adapters.normalizer.parsing import contains_any_fold

CLIENT_ERROR_KEYWORDS = (
    "invalid",
    "missing",
    "insufficient",
    "exceed",
    "too small",
    "too large",
    "not allowed",
    "unsupported",
    "duplicate",
    "malformed",
)

AUTH_STATUSES = frozenset({401, 403})
SERVER_STATUSES = frozenset({500, 502, 503, 504})


@dataclass(frozen=True)
class ErrorCodes:
    """Code attached to each classification outcome."""
    auth_failure: str = ""
    rate_limit: str = ""
    invalid_request: str = ""
    bad_request: str = ""
    not_found: str = ""
    server_error: str = ""
    unknown: str = ""

    @classmethod
    def uniform(cls, code: str) -> "ErrorCodes":
        """Same code for every outcome (venues that send their own code)."""
        return cls(code, code, code, code, code, code, code)


def has_client_error_keyword(*texts: str) -> bool:
    """Whether any text contains a client-error keyword (case-insensitive)."""
    return contains_any_fold(" ".join(t for t in texts if t), CLIENT_ERROR_KEYWORDS)


def classify_error(
    venue: str,
    status_code: int,
    message: str,
    codes: ErrorCodes,
    client_error: bool = False,
    body: Any = None,
) -> VenueAPIError:
    """
    Classify a venue error response.

    Args:
        venue: Venue name
        status_code: HTTP status code
        message: Formatted venue message
        codes: Codes per outcome
        client_error: Result of the venue's client-error test (used for 400)
        body: Raw body kept on the error

    Returns:
        PermanentError, TemporaryError or RateLimitError
    """
    if status_code in AUTH_STATUSES:
        return PermanentError(venue, status_code, message, codes.auth_failure, body)
    if status_code == 429:
        return RateLimitError(venue, status_code, message, codes.rate_limit, body)
    if status_code == 400:
        if client_error:
            return PermanentError(venue, status_code, message, codes.invalid_request, body)
        return TemporaryError(venue, status_code, message, codes.bad_request, body)
    if status_code == 404:
        return PermanentError(venue, status_code, message, codes.not_found, body)
    if status_code in SERVER_STATUSES:
        return TemporaryError(venue, status_code, message, codes.server_error, body)
    return TemporaryError(venue, status_code, message, codes.unknown, body)


def join_details(details: Iterable[str]) -> str:
    """'a; b; c' from the non-empty details"""
    return "; ".join(d for d in details if d)
