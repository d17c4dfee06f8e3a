"""Infrastructure adapters."""
from venuekit.infrastructure.adapters.auth import (
    HMACSigner,
    JWTSigner,
    BearerSigner,
    MPCSigner,
    SigningTransport,
    AsyncSigningTransport,
)
from venuekit.infrastructure.adapters.normalizer import CoinbaseNormalizer, PrimeNormalizer
from venuekit.infrastructure.adapters.mock import MockVenueClient

__all__ = [
    "HMACSigner",
    "JWTSigner",
    "BearerSigner",
    "MPCSigner",
    "SigningTransport",
    "AsyncSigningTransport",
    "CoinbaseNormalizer",
    "PrimeNormalizer",
    "MockVenueClient",
]
