"""
Configuration package for picugen.
"""

from .settings import AppConfig, HashSettings

__all__ = ["AppConfig", "HashSettings"]
