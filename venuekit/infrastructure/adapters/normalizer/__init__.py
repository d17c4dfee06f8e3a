"""Venue response normalizers."""
from venuekit.infrastructure.adapters.normalizer.coinbase import CoinbaseNormalizer
from venuekit.infrastructure.adapters.normalizer.prime import PrimeNormalizer
from venuekit.infrastructure.adapters.normalizer.errors import classify_error, ErrorCodes

__all__ = [
    "CoinbaseNormalizer",
    "PrimeNormalizer",
    "classify_error",
    "ErrorCodes",
]
