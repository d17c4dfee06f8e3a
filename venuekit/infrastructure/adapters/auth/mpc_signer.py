"""
MPCSigner - delegated signing for custody APIs (Fordefi style).

The signer only builds the message envelope. The signature itself is
produced by an injected function, typically backed by a remote MPC
signing service.
"""
import hashlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from venuekit.application.dto.signing import SignRequest, SignResult
from venuekit.application.ports.outbound.signer_port import SignerPort
from venuekit.application.ports.outbound.time_provider_port import (
    TimeProviderPort,
    SystemTimeAdapter,
)
from venuekit.exceptions import ConfigurationError, SigningError
from venuekit.utils.logger import mask_secret

logger = logging.getLogger(__name__)

HEADER_API_KEY = "X-API-KEY"
HEADER_TIMESTAMP = "X-TIMESTAMP"
HEADER_SIGNATURE = "X-SIGNATURE"

# (context, message) -> signature; raises on failure
MPCSignerFunc = Callable[[Any, bytes], str]


def default_mpc_signer_func(context: Any, message: bytes) -> str:
    """SHA-256 hex digest of the message. Deterministic stand-in for tests."""
    return hashlib.sha256(message).hexdigest()


@dataclass(frozen=True)
class MPCConfig:
    """
    MPC credentials.

    Attributes:
        api_key: API key identifier
        signer_func: Delegated signing function
    """
    api_key: str
    signer_func: MPCSignerFunc

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("api_key", "API key is required")
        if self.signer_func is None:
            raise ConfigurationError("signer_func", "signer function is required")
        if not callable(self.signer_func):
            raise ConfigurationError("signer_func", "signer function must be callable")


class MPCSigner(SignerPort):
    """Delegated signer implementing SignerPort."""

    def __init__(
        self,
        config: MPCConfig,
        time_provider: Optional[TimeProviderPort] = None,
    ):
        self._config = config
        self._time = time_provider or SystemTimeAdapter()
        logger.debug(f"MPC signer created: api_key={mask_secret(config.api_key)}")

    def sign(self, request: SignRequest, context: Any = None) -> SignResult:
        """
        Sign through the delegated function.

        Timestamps default to Unix milliseconds.

        Raises:
            SigningError: If the delegated function raises
        """
        timestamp = request.timestamp or str(self._time.unix_millis())
        message = timestamp.encode() + request.method.encode() + request.path.encode() + request.body_bytes

        try:
            signature = self._config.signer_func(context, message)
        except Exception as e:
            logger.error(f"MPC signing failed: {e}")
            raise SigningError(f"MPC signing failed: {e}") from e

        return SignResult(
            headers={
                HEADER_API_KEY: self._config.api_key,
                HEADER_TIMESTAMP: timestamp,
                HEADER_SIGNATURE: signature,
            }
        )
