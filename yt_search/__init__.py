"""Invidious search-and-play package root.

Public surface kept intentionally small; internal modules may evolve.
"""

from .config import AppConfig
from .flow import FlowOutcome, SearchFlow
from .instances import InstanceResolver

__all__ = [
    "AppConfig",
    "FlowOutcome",
    "InstanceResolver",
    "SearchFlow",
]


def main():
    """Run the command-line interface."""
    from .cli import main as cli_main

    cli_main()
