"""
SignerPort - Interface for request authentication.

A signer turns request material into authentication headers and/or
query parameters. Signers hold only immutable configuration and are
safe to call concurrently.
"""
from abc import ABC, abstractmethod
from typing import Any

from venuekit.application.dto.signing import SignRequest, SignResult


class SignerPort(ABC):
    """Port interface for venue request signing."""

    @abstractmethod
    def sign(self, request: SignRequest, context: Any = None) -> SignResult:
        """
        Produce authentication material for a request.

        Args:
            request: Method, path, body, timestamp and headers of the request
            context: Opaque per-request value passed to delegated signers

        Returns:
            SignResult with headers and query params to apply

        Raises:
            SigningError: If signing fails
        """
        pass
