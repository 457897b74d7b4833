"""
picugen: checksums and digests of strings or files.
"""

__version__ = "1.0.0"
