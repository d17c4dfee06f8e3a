"""
venuekit settings

Credentials and settings come from environment variables (a .env file
is loaded first). Nothing is read at import time: each config class
re-reads the environment in reload(), which the *_config_from_env()
factories call.
"""
import os
from typing import Optional

from dotenv import load_dotenv

from venuekit.exceptions import ConfigurationError
from venuekit.infrastructure.adapters.auth.bearer_signer import BearerConfig
from venuekit.infrastructure.adapters.auth.hmac_signer import HMACConfig
from venuekit.infrastructure.adapters.auth.jwt_signer import JWTConfig, DEFAULT_EXPIRES_IN
from venuekit.infrastructure.adapters.auth.mpc_signer import (
    MPCConfig,
    MPCSignerFunc,
    default_mpc_signer_func,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_env_int(key: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    """Integer environment variable with range checks"""
    value = os.getenv(key)
    if value is None or value == "":
        return default

    try:
        int_value = int(value)
    except ValueError:
        raise ConfigurationError(key, f"not an integer: {value}") from None

    if min_value is not None and int_value < min_value:
        raise ConfigurationError(key, f"value below minimum ({min_value}): {int_value}")
    if max_value is not None and int_value > max_value:
        raise ConfigurationError(key, f"value above maximum ({max_value}): {int_value}")
    return int_value


def get_env_float(key: str, default: float, min_value: Optional[float] = None, max_value: Optional[float] = None) -> float:
    """Float environment variable with range checks"""
    value = os.getenv(key)
    if value is None or value == "":
        return default

    try:
        float_value = float(value)
    except ValueError:
        raise ConfigurationError(key, f"not a number: {value}") from None

    if min_value is not None and float_value < min_value:
        raise ConfigurationError(key, f"value below minimum ({min_value}): {float_value}")
    if max_value is not None and float_value > max_value:
        raise ConfigurationError(key, f"value above maximum ({max_value}): {float_value}")
    return float_value


def get_env_str(key: str, default: str) -> str:
    """String environment variable"""
    return os.getenv(key, default)


class CoinbaseConfig:
    """Coinbase Exchange HMAC credentials"""
    API_KEY = ""
    API_SECRET = ""
    PASSPHRASE = ""

    @classmethod
    def reload(cls):
        """Re-read the environment"""
        load_dotenv()
        cls.API_KEY = get_env_str("COINBASE_API_KEY", "")
        cls.API_SECRET = get_env_str("COINBASE_API_SECRET", "")
        cls.PASSPHRASE = get_env_str("COINBASE_PASSPHRASE", "")

    @classmethod
    def validate(cls):
        if not cls.API_KEY or not cls.API_SECRET or not cls.PASSPHRASE:
            raise ConfigurationError(
                "COINBASE_API_KEY",
                "set COINBASE_API_KEY, COINBASE_API_SECRET and COINBASE_PASSPHRASE",
            )


class PrimeConfig:
    """Coinbase Prime JWT credentials"""
    KEY_NAME = ""
    PRIVATE_KEY = ""
    JWT_EXPIRES_IN = DEFAULT_EXPIRES_IN

    @classmethod
    def reload(cls):
        load_dotenv()
        cls.KEY_NAME = get_env_str("PRIME_KEY_NAME", "")
        cls.PRIVATE_KEY = get_env_str("PRIME_PRIVATE_KEY", "")
        cls.JWT_EXPIRES_IN = get_env_int("PRIME_JWT_EXPIRES_IN", DEFAULT_EXPIRES_IN, min_value=1)

    @classmethod
    def validate(cls):
        if not cls.KEY_NAME or not cls.PRIVATE_KEY:
            raise ConfigurationError("PRIME_KEY_NAME", "set PRIME_KEY_NAME and PRIME_PRIVATE_KEY")
        if cls.JWT_EXPIRES_IN <= 0:
            raise ConfigurationError("PRIME_JWT_EXPIRES_IN", "must be positive")


class FalconXConfig:
    """FalconX bearer token"""
    TOKEN = ""

    @classmethod
    def reload(cls):
        load_dotenv()
        cls.TOKEN = get_env_str("FALCONX_TOKEN", "")

    @classmethod
    def validate(cls):
        if not cls.TOKEN:
            raise ConfigurationError("FALCONX_TOKEN", "set FALCONX_TOKEN")


class FordefiConfig:
    """Fordefi MPC API key"""
    API_KEY = ""

    @classmethod
    def reload(cls):
        load_dotenv()
        cls.API_KEY = get_env_str("FORDEFI_API_KEY", "")

    @classmethod
    def validate(cls):
        if not cls.API_KEY:
            raise ConfigurationError("FORDEFI_API_KEY", "set FORDEFI_API_KEY")


class LoggingConfig:
    """Logging settings"""
    LEVEL = "INFO"

    @classmethod
    def reload(cls):
        load_dotenv()
        cls.LEVEL = get_env_str("VENUEKIT_LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls):
        if cls.LEVEL not in LOG_LEVELS:
            raise ConfigurationError(
                "VENUEKIT_LOG_LEVEL",
                f"unsupported level: {cls.LEVEL}. Use one of: {', '.join(LOG_LEVELS)}",
            )


def hmac_config_from_env() -> HMACConfig:
    """HMACConfig from COINBASE_* variables"""
    CoinbaseConfig.reload()
    CoinbaseConfig.validate()
    return HMACConfig(
        api_key=CoinbaseConfig.API_KEY,
        secret=CoinbaseConfig.API_SECRET,
        passphrase=CoinbaseConfig.PASSPHRASE,
    )


def jwt_config_from_env() -> JWTConfig:
    """JWTConfig from PRIME_* variables"""
    PrimeConfig.reload()
    PrimeConfig.validate()
    # .env files often store the PEM with literal "\n"
    private_key = PrimeConfig.PRIVATE_KEY.replace("\\n", "\n")
    return JWTConfig(
        key_name=PrimeConfig.KEY_NAME,
        private_key=private_key,
        expires_in=PrimeConfig.JWT_EXPIRES_IN,
    )


def bearer_config_from_env() -> BearerConfig:
    """BearerConfig from FALCONX_TOKEN"""
    FalconXConfig.reload()
    FalconXConfig.validate()
    return BearerConfig(token=FalconXConfig.TOKEN)


def mpc_config_from_env(signer_func: MPCSignerFunc = default_mpc_signer_func) -> MPCConfig:
    """MPCConfig from FORDEFI_API_KEY and a caller-supplied signing function"""
    FordefiConfig.reload()
    FordefiConfig.validate()
    return MPCConfig(api_key=FordefiConfig.API_KEY, signer_func=signer_func)


def validate_all_configs():
    """Validate settings that are always required (credentials are checked per venue)"""
    LoggingConfig.reload()
    LoggingConfig.validate()
