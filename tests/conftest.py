"""Shared fixtures and utilities for hyrule_compendium tests.

This module provides:
- Sample API payloads taken from the public v2 API
- A factory building a CompendiumClient on top of httpx.MockTransport
- Custom markers for test categorization
"""

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from hyrule_compendium import CompendiumClient

TEST_BASE_URL = "http://compendium.test/api/v2/"

Handler = Callable[[httpx.Request], httpx.Response]


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests requiring the live API"
    )


def silver_moblin() -> dict[str, Any]:
    return {
        "category": "monsters",
        "common_locations": None,
        "description": (
            "The strongest of all Moblins, Ganon's fiendish magic has allowed "
            "them to surpass even the Black Moblins in strength and resilience."
        ),
        "drops": [
            "moblin horn",
            "moblin fang",
            "moblin guts",
            "amber",
            "opal",
            "topaz",
            "ruby",
            "sapphire",
            "diamond",
        ],
        "id": 112,
        "image": "https://botw-compendium.herokuapp.com/api/v2/entry/silver_moblin/image",
        "name": "silver moblin",
    }


def winterwing_butterfly() -> dict[str, Any]:
    return {
        "category": "creatures",
        "common_locations": ["Hyrule Ridge", "Tabantha Frontier"],
        "cooking_effect": "heat resistance",
        "description": (
            "The powdery scales of this butterfly's wings cool the air around it."
        ),
        "hearts_recovered": 0,
        "id": 67,
        "image": "https://botw-compendium.herokuapp.com/api/v2/entry/winterwing_butterfly/image",
        "name": "winterwing butterfly",
    }


def apple() -> dict[str, Any]:
    return {
        "category": "materials",
        "common_locations": ["Great Hyrule Forest", "Necluda Sea"],
        "cooking_effect": "",
        "description": "A common fruit found on trees all around Hyrule.",
        "hearts_recovered": 0.5,
        "id": 183,
        "image": "https://botw-compendium.herokuapp.com/api/v2/entry/apple/image",
        "name": "apple",
    }


def master_sword() -> dict[str, Any]:
    return {
        "category": "equipment",
        "common_locations": ["Great Hyrule Forest"],
        "description": "The legendary sword that seals the darkness.",
        "id": 352,
        "image": "https://botw-compendium.herokuapp.com/api/v2/entry/master_sword/image",
        "name": "master sword",
        "properties": {"attack": 30, "defense": 0},
        "attack": 30,
        "defense": 0,
    }


def treasure_chest() -> dict[str, Any]:
    return {
        "category": "treasure",
        "common_locations": None,
        "description": "This treasure chest has been placed in a hard-to-reach spot.",
        "drops": ["rupee"],
        "id": 386,
        "image": "https://botw-compendium.herokuapp.com/api/v2/entry/treasure_chest/image",
        "name": "treasure chest",
    }


def hyrule_bass() -> dict[str, Any]:
    return {
        "category": "creatures",
        "common_locations": ["West Necluda"],
        "cooking_effect": "",
        "description": "This fish can be found throughout Hyrule.",
        "hearts_recovered": 1,
        "id": 65,
        "image": "https://botw-compendium.herokuapp.com/api/v2/entry/hyrule_bass/image",
        "name": "hyrule bass",
    }


def envelope(data: Any) -> dict[str, Any]:
    return {"data": data}


@pytest.fixture
def make_client() -> Iterator[Callable[..., CompendiumClient]]:
    """Provide a factory for clients whose transport is a handler function.

    Clients and their transports are closed when the test finishes.
    """
    created: list[httpx.Client] = []

    def factory(handler: Handler, base_url: str = TEST_BASE_URL) -> CompendiumClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        created.append(http_client)
        return CompendiumClient(base_url, http_client=http_client)

    yield factory

    for http_client in created:
        http_client.close()


@pytest.fixture
def captured_requests() -> list[httpx.Request]:
    """Provide a list that recording handlers append requests to."""
    return []


def json_handler(
    payload: Any,
    status_code: int = 200,
    captured: list[httpx.Request] | None = None,
) -> Handler:
    """Build a handler answering every request with the same JSON body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        return httpx.Response(status_code, json=payload)

    return handler
