"""Settings module"""
from .settings import (
    CoinbaseConfig,
    PrimeConfig,
    FalconXConfig,
    FordefiConfig,
    LoggingConfig,
    hmac_config_from_env,
    jwt_config_from_env,
    bearer_config_from_env,
    mpc_config_from_env,
)

__all__ = [
    'CoinbaseConfig',
    'PrimeConfig',
    'FalconXConfig',
    'FordefiConfig',
    'LoggingConfig',
    'hmac_config_from_env',
    'jwt_config_from_env',
    'bearer_config_from_env',
    'mpc_config_from_env',
]
