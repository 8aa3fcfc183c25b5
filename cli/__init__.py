"""
CLI module for astgraph.

The command-line interface providing extract, summary, search and
compare commands.
"""

from cli.main import app

__all__ = ["app"]
