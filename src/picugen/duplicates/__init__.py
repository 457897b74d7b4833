"""
Duplicate grouping and output modes.
"""

from .engine import DigestGrouper, OutputMode, OutputStats, ResultWriter

__all__ = ["DigestGrouper", "OutputMode", "OutputStats", "ResultWriter"]
