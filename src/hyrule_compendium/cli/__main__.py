"""Entry point for running the CLI as a module.

Usage:
    python -m hyrule_compendium.cli --help
"""

from hyrule_compendium.cli.main import app

if __name__ == "__main__":
    app()
