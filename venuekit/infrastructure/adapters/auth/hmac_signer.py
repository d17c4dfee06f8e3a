"""
HMACSigner - HMAC-SHA256 request signing (Coinbase Exchange style).

Pre-hash is timestamp + method + path + body with no delimiters,
keyed with the base64-decoded secret. The digest is base64-encoded.
"""
import base64
import binascii
import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import Any, Optional

from venuekit.application.dto.signing import SignRequest, SignResult
from venuekit.application.ports.outbound.signer_port import SignerPort
from venuekit.application.ports.outbound.time_provider_port import (
    TimeProviderPort,
    SystemTimeAdapter,
)
from venuekit.exceptions import ConfigurationError
from venuekit.utils.logger import mask_secret

logger = logging.getLogger(__name__)

HEADER_KEY = "CB-ACCESS-KEY"
HEADER_SIGN = "CB-ACCESS-SIGN"
HEADER_TIMESTAMP = "CB-ACCESS-TIMESTAMP"
HEADER_PASSPHRASE = "CB-ACCESS-PASSPHRASE"


@dataclass(frozen=True)
class HMACConfig:
    """
    HMAC credentials.

    Attributes:
        api_key: API key
        secret: Base64-encoded secret
        passphrase: API passphrase
    """
    api_key: str
    secret: str
    passphrase: str

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("api_key", "API key is required")
        if not self.secret:
            raise ConfigurationError("secret", "secret is required")
        if not self.passphrase:
            raise ConfigurationError("passphrase", "passphrase is required")
        try:
            base64.b64decode(self.secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConfigurationError("secret", f"secret must be valid base64: {e}") from e


class HMACSigner(SignerPort):
    """HMAC-SHA256 signer implementing SignerPort."""

    def __init__(
        self,
        config: HMACConfig,
        time_provider: Optional[TimeProviderPort] = None,
    ):
        self._config = config
        self._key = base64.b64decode(config.secret, validate=True)
        self._time = time_provider or SystemTimeAdapter()
        logger.debug(f"HMAC signer created: api_key={mask_secret(config.api_key)}")

    def sign(self, request: SignRequest, context: Any = None) -> SignResult:
        timestamp = request.timestamp or str(self._time.unix_seconds())
        prehash = timestamp.encode() + request.method.encode() + request.path.encode() + request.body_bytes

        digest = hmac.new(self._key, prehash, hashlib.sha256).digest()
        signature = base64.b64encode(digest).decode("ascii")

        return SignResult(
            headers={
                HEADER_KEY: self._config.api_key,
                HEADER_SIGN: signature,
                HEADER_TIMESTAMP: timestamp,
                HEADER_PASSPHRASE: self._config.passphrase,
            }
        )
