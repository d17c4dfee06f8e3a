"""
Logging helpers
"""
import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Configure root logging with the standard venuekit format.

    Args:
        level: Level name or number (defaults to VENUEKIT_LOG_LEVEL)
    """
    if level is None:
        from venuekit.config.settings import LoggingConfig

        LoggingConfig.reload()
        LoggingConfig.validate()
        level = LoggingConfig.LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    logging.basicConfig(level=level, format=LOG_FORMAT)


def mask_secret(value: Optional[str], visible: int = 4) -> str:
    """
    Mask a credential for diagnostics.

    Short values are fully masked; otherwise only the last `visible`
    characters are kept.
    """
    if not value:
        return ""
    if len(value) <= visible * 2:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
