"""
Utilities package.
Provides helper functions.
"""
from .logger import setup_logging

__all__ = [
    "setup_logging"
]
