"""
pytest shared settings and fixtures
"""
from datetime import datetime, timezone

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from venuekit.application.ports.outbound.time_provider_port import FixedTimeAdapter
from venuekit.infrastructure.adapters.normalizer import CoinbaseNormalizer, PrimeNormalizer

FIXED_TIME = datetime(2021, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def fixed_time():
    """Clock pinned to 2021-01-01T00:00:00Z"""
    return FixedTimeAdapter(FIXED_TIME)


@pytest.fixture(scope="session")
def ec_private_key():
    """Freshly generated P-256 key"""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec_private_key_pem(ec_private_key):
    """PKCS8 PEM of the P-256 key"""
    return ec_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def coinbase_normalizer(fixed_time):
    return CoinbaseNormalizer(time_provider=fixed_time)


@pytest.fixture
def prime_normalizer(fixed_time):
    return PrimeNormalizer(time_provider=fixed_time)
