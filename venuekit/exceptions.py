"""
venuekit exception classes
"""
from typing import Any, Optional


class VenueKitError(Exception):
    """Base exception for all venuekit errors"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Args:
            message: Error message
            error_code: Error code (optional)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(VenueKitError):
    """Invalid or missing configuration (raised at construction time only)"""

    def __init__(self, config_key: str, reason: str):
        """
        Args:
            config_key: Configuration key
            reason: Reason for the error
        """
        message = f"configuration error ({config_key}): {reason}"
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_key = config_key
        self.reason = reason


class SigningError(VenueKitError):
    """Request signing failed at sign time"""

    def __init__(self, reason: str):
        super().__init__(reason, error_code="SIGNING_FAILED")
        self.reason = reason


class NormalizationError(VenueKitError):
    """
    Venue response could not be read.

    Local parse failure. Not a VenueAPIError subclass.
    """

    def __init__(self, kind: str, reason: str):
        """
        Args:
            kind: Response kind being normalized (e.g. 'order', 'orderbook')
            reason: Reason for the failure
        """
        message = f"failed to normalize {kind}: {reason}"
        super().__init__(message, error_code="NORMALIZATION_FAILED")
        self.kind = kind
        self.reason = reason


class FilterValidationError(VenueKitError):
    """Query filter has invalid values"""

    def __init__(self, field: str, reason: str):
        message = f"invalid filter ({field}): {reason}"
        super().__init__(message, error_code="INVALID_FILTER")
        self.field = field
        self.reason = reason


class VenueAPIError(VenueKitError):
    """Classified error returned by a venue API"""

    retryable = False
    requires_backoff = False
    kind = "venue"

    def __init__(
        self,
        venue: str,
        status_code: int,
        message: str,
        code: str = "",
        body: Any = None,
    ):
        """
        Args:
            venue: Venue name (e.g. 'coinbase', 'prime')
            status_code: HTTP status code of the response
            message: Formatted venue error message
            code: Classification code (e.g. 'AUTH_FAILURE', 'INSUFFICIENT_FUNDS')
            body: Raw response body, kept for debugging
        """
        detail = f"{message} (status: {status_code})"
        if code:
            full = f"{self.kind} error [{code}]: {detail}"
        else:
            full = f"{self.kind} error: {detail}"
        super().__init__(full, error_code=code or None)
        self.venue = venue
        self.status_code = status_code
        self.code = code
        self.body = body
        self.venue_message = message


class PermanentError(VenueAPIError):
    """Client-caused error; must not be retried"""

    kind = "permanent"


class TemporaryError(VenueAPIError):
    """Server-side error; a retry may succeed"""

    retryable = True
    kind = "temporary"


class RateLimitError(TemporaryError):
    """Rate limit exceeded; retry only after backing off"""

    requires_backoff = True
    kind = "rate limit"


def is_permanent(err: BaseException) -> bool:
    """Whether the error must not be retried"""
    return isinstance(err, PermanentError)


def is_temporary(err: BaseException) -> bool:
    """Whether the error may be retried (rate limits included)"""
    return isinstance(err, TemporaryError)


def is_rate_limit(err: BaseException) -> bool:
    """Whether the error asks for backoff before retrying"""
    return isinstance(err, RateLimitError)
