"""Request signing adapters."""
from venuekit.infrastructure.adapters.auth.hmac_signer import HMACSigner, HMACConfig
from venuekit.infrastructure.adapters.auth.jwt_signer import JWTSigner, JWTConfig
from venuekit.infrastructure.adapters.auth.bearer_signer import BearerSigner, BearerConfig
from venuekit.infrastructure.adapters.auth.mpc_signer import (
    MPCSigner,
    MPCConfig,
    MPCSignerFunc,
    default_mpc_signer_func,
)
from venuekit.infrastructure.adapters.auth.middleware import (
    SigningTransport,
    AsyncSigningTransport,
    SIGN_CONTEXT_EXTENSION,
    build_client,
    build_async_client,
)

__all__ = [
    "HMACSigner",
    "HMACConfig",
    "JWTSigner",
    "JWTConfig",
    "BearerSigner",
    "BearerConfig",
    "MPCSigner",
    "MPCConfig",
    "MPCSignerFunc",
    "default_mpc_signer_func",
    "SigningTransport",
    "AsyncSigningTransport",
    "SIGN_CONTEXT_EXTENSION",
    "build_client",
    "build_async_client",
]
