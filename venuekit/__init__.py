"""
venuekit - unified signing and normalization for crypto trading venues
"""
from . import exceptions
from .application.dto import SignRequest, SignResult
from .application.ports.outbound import (
    SignerPort,
    NormalizerPort,
    VenueClientPort,
)
from .infrastructure.adapters.auth import (
    HMACSigner,
    HMACConfig,
    JWTSigner,
    JWTConfig,
    BearerSigner,
    BearerConfig,
    MPCSigner,
    MPCConfig,
    default_mpc_signer_func,
    SigningTransport,
    AsyncSigningTransport,
    build_client,
    build_async_client,
)
from .infrastructure.adapters.normalizer import CoinbaseNormalizer, PrimeNormalizer
from .infrastructure.adapters.mock import MockVenueClient

__version__ = "0.1.0"

__all__ = [
    'exceptions',
    'SignRequest',
    'SignResult',
    'SignerPort',
    'NormalizerPort',
    'VenueClientPort',
    'HMACSigner',
    'HMACConfig',
    'JWTSigner',
    'JWTConfig',
    'BearerSigner',
    'BearerConfig',
    'MPCSigner',
    'MPCConfig',
    'default_mpc_signer_func',
    'SigningTransport',
    'AsyncSigningTransport',
    'build_client',
    'build_async_client',
    'CoinbaseNormalizer',
    'PrimeNormalizer',
    'MockVenueClient',
]
