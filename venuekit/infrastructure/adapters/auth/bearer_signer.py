"""
BearerSigner - static bearer token authentication (FalconX style).
"""
import logging
from dataclasses import dataclass
from typing import Any

from venuekit.application.dto.signing import SignRequest, SignResult
from venuekit.application.ports.outbound.signer_port import SignerPort
from venuekit.exceptions import ConfigurationError
from venuekit.utils.logger import mask_secret

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BearerConfig:
    """Static API token."""
    token: str

    def __post_init__(self) -> None:
        if not self.token:
            raise ConfigurationError("token", "token is required")


class BearerSigner(SignerPort):
    """Emits Authorization: Bearer <token>; the request is not inspected."""

    def __init__(self, config: BearerConfig):
        self._config = config
        logger.debug(f"Bearer signer created: token={mask_secret(config.token)}")

    def sign(self, request: SignRequest, context: Any = None) -> SignResult:
        return SignResult(headers={"Authorization": f"Bearer {self._config.token}"})
