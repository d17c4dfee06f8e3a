"""Coinbase Prime normalizer."""
from venuekit.infrastructure.adapters.normalizer.prime.normalizer import (
    PrimeNormalizer,
    VENUE_ID,
)

__all__ = ["PrimeNormalizer", "VENUE_ID"]
