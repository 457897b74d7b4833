"""
Path resolution for file mode.
"""

from .scanner import ResultRecord, Scanner

__all__ = ["ResultRecord", "Scanner"]
