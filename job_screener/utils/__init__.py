"""
Utility modules for the job screener.
"""

from .config import Config

__all__ = [
    "Config",
]
