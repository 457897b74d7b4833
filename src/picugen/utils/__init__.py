"""
Utility helpers for picugen.
"""

from .logging_setup import LOGGER_NAME, setup_logging

__all__ = ["LOGGER_NAME", "setup_logging"]
