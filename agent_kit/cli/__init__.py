"""
CLI module for Agent Kit.

This module provides the command-line interface, including the main entry
point that is installed as the ``agent-kit`` console script.
"""

from .commands import main

__all__ = ["main"]
