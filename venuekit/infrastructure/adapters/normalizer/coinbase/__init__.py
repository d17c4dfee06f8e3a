"""Coinbase Advanced Trade normalizer."""
from venuekit.infrastructure.adapters.normalizer.coinbase.normalizer import (
    CoinbaseNormalizer,
    VENUE_ID,
)

__all__ = ["CoinbaseNormalizer", "VENUE_ID"]
