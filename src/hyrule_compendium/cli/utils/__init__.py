"""CLI utility modules."""

from hyrule_compendium.cli.utils.output import (
    console,
    print_error,
    print_json,
    print_success,
)

__all__ = [
    "console",
    "print_error",
    "print_json",
    "print_success",
]
