"""
User Interface module.

This package contains UI implementations for displaying simulation results.
Currently implements terminal/console output.
"""

from .terminal import TerminalDisplay

__all__ = ["TerminalDisplay"]
