"""
JWTSigner - ES256 JWT request signing (Coinbase Prime / CDP style).

Every call mints a fresh short-lived token bound to the request URI
with a random nonce in the JWT header.
"""
import logging
import secrets
from dataclasses import dataclass
from typing import Any, Optional

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from venuekit.application.dto.signing import SignRequest, SignResult
from venuekit.application.ports.outbound.signer_port import SignerPort
from venuekit.application.ports.outbound.time_provider_port import (
    TimeProviderPort,
    SystemTimeAdapter,
)
from venuekit.exceptions import ConfigurationError, SigningError
from venuekit.utils.logger import mask_secret

logger = logging.getLogger(__name__)

DEFAULT_HOST = "api.coinbase.com"
DEFAULT_EXPIRES_IN = 120
ISSUER = "cdp"
NONCE_BYTES = 16


@dataclass(frozen=True)
class JWTConfig:
    """
    JWT credentials.

    Attributes:
        key_name: API key name (used as sub and kid)
        private_key: PEM-encoded EC private key (PKCS8 or SEC1)
        expires_in: Token lifetime in seconds
    """
    key_name: str
    private_key: str
    expires_in: int = DEFAULT_EXPIRES_IN

    def __post_init__(self) -> None:
        if not self.key_name:
            raise ConfigurationError("key_name", "key name is required")
        if not self.private_key:
            raise ConfigurationError("private_key", "private key is required")
        if self.expires_in <= 0:
            raise ConfigurationError("expires_in", "expires_in must be positive")


def load_ec_private_key(pem: str) -> ec.EllipticCurvePrivateKey:
    """
    Parse a PEM EC private key in PKCS8 or SEC1 form.

    Raises:
        ConfigurationError: If the key cannot be decoded or is not a P-256 EC key
    """
    try:
        key = serialization.load_pem_private_key(pem.encode(), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ConfigurationError("private_key", f"failed to parse private key: {e}") from e

    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise ConfigurationError("private_key", "key is not an EC private key")
    if not isinstance(key.curve, ec.SECP256R1):
        raise ConfigurationError("private_key", f"ES256 requires a P-256 key, got {key.curve.name}")
    return key


def generate_nonce() -> str:
    """16 random bytes, hex-encoded"""
    return secrets.token_hex(NONCE_BYTES)


class JWTSigner(SignerPort):
    """ES256 JWT signer implementing SignerPort."""

    def __init__(
        self,
        config: JWTConfig,
        time_provider: Optional[TimeProviderPort] = None,
    ):
        self._config = config
        self._private_key = load_ec_private_key(config.private_key)
        self._time = time_provider or SystemTimeAdapter()
        logger.debug(f"JWT signer created: key_name={mask_secret(config.key_name)}, expires_in={config.expires_in}")

    def sign(self, request: SignRequest, context: Any = None) -> SignResult:
        host = request.header("Host") or DEFAULT_HOST
        uri = f"{request.method} {host}{request.path}"
        now = self._time.unix_seconds()

        claims = {
            "iss": ISSUER,
            "nbf": now,
            "exp": now + self._config.expires_in,
            "sub": self._config.key_name,
            "uri": uri,
        }
        headers = {
            "kid": self._config.key_name,
            "nonce": generate_nonce(),
            "typ": "JWT",
        }

        try:
            token = jwt.encode(claims, self._private_key, algorithm="ES256", headers=headers)
        except jwt.PyJWTError as e:
            raise SigningError(f"failed to sign JWT: {e}") from e

        return SignResult(headers={"Authorization": f"Bearer {token}"})
