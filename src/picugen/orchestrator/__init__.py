"""
Command-line orchestration for picugen.
"""

from .main import Orchestrator, build_parser, main

__all__ = ["Orchestrator", "build_parser", "main"]
