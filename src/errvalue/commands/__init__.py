"""Command groups for the errvalue CLI.

This package provides sub-apps that are mounted by errvalue.cli.
"""

from . import config as config  # noqa: F401

__all__ = [
    "config",
]
