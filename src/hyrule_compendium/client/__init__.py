"""HTTP client module for the Hyrule Compendium API.

Usage:
    from hyrule_compendium.client import CompendiumClient

    with CompendiumClient.default() as client:
        monster = client.monster(123)
        monsters = client.category("monsters").monsters
"""

from hyrule_compendium.client.http_client import DEFAULT_BASE_URL, CompendiumClient

__all__ = [
    "CompendiumClient",
    "DEFAULT_BASE_URL",
]
