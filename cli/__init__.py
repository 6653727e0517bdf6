"""
CLI module for depgraph.

The command-line interface providing the show and export commands.
"""

from cli.main import app

__all__ = ["app"]
