"""Utilities"""
from .logger import configure_logging, mask_secret

__all__ = ['configure_logging', 'mask_secret']
