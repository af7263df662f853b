"""
Core package for Rocketeer
-------------------------

This package provides functionality used throughout Rocketeer.
"""

from .logger import configure_logging, get_logger

__all__ = [
    'configure_logging',
    'get_logger',
]
