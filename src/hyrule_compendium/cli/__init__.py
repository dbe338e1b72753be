"""CLI module for the Hyrule Compendium client.

Usage:
    hyrule-compendium --help
    hyrule-compendium lookup entry 112
    hyrule-compendium --json lookup category monsters
"""

from hyrule_compendium.cli.main import app

__all__ = ["app"]
