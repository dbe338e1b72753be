"""Synchronous HTTP client for the Hyrule Compendium REST API.

This module provides a typed interface over every compendium endpoint.
Each call performs exactly one GET request, classifies the response status
and validates the payload into the matching Pydantic model.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError

from hyrule_compendium.client.paths import (
    ALL_ENTRIES_PATH,
    ALL_MASTER_MODE_ENTRIES_PATH,
    category_path,
    entry_path,
    join_path,
    parse_base_url,
)
from hyrule_compendium.exceptions import (
    NoDataFoundError,
    RequestError,
    ResponseParsingError,
    ServerError,
)
from hyrule_compendium.models import (
    AllStandardEntries,
    ApiResponse,
    CategoryResult,
    CompendiumCategory,
    CreatureEntry,
    EntryIdentifier,
    EntryResponse,
    EquipmentEntry,
    GameMode,
    MaterialEntry,
    MonsterEntry,
    TreasureEntry,
)
from hyrule_compendium.models.responses import (
    ALL_STANDARD_ENTRIES_ADAPTER,
    CATEGORY_ADAPTERS,
    CREATURE_ADAPTER,
    ENTRY_RESPONSE_ADAPTER,
    EQUIPMENT_ADAPTER,
    MATERIAL_ADAPTER,
    MONSTER_ADAPTER,
    MONSTER_LIST_ADAPTER,
    TREASURE_ADAPTER,
)

if TYPE_CHECKING:
    from hyrule_compendium.config import CompendiumConfig

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://botw-compendium.herokuapp.com/api/v2/"
MAX_REDIRECTS = 10

Identifier = EntryIdentifier | int | str


class CompendiumClient:
    """HTTP client for Hyrule Compendium API lookups.

    The base URL and the underlying ``httpx.Client`` are fixed at
    construction. Calls never retry and never cache.

    Example:
        with CompendiumClient.default() as client:
            lynel = client.monster(EntryIdentifier.by_id(123))
            entry = client.entry("silver moblin")
            if isinstance(entry, MonsterEntry):
                print(entry.drops)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Absolute base URL of the API (default: the public v2 API).
            http_client: Optional pre-built transport. The caller keeps
                ownership of an injected client; ``close()`` leaves it open.

        Raises:
            InvalidBaseUrlError: If base_url is not an absolute URL.
        """
        self._base_url = parse_base_url(base_url)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            follow_redirects=True, max_redirects=MAX_REDIRECTS
        )

    @classmethod
    def default(cls) -> CompendiumClient:
        """Create a client bound to the public v2 API."""
        return cls(DEFAULT_BASE_URL)

    @classmethod
    def new(cls, url: str) -> CompendiumClient:
        """Create a client bound to an arbitrary base URL.

        Raises:
            InvalidBaseUrlError: If url is not an absolute URL.
        """
        return cls(url)

    @classmethod
    def from_config(cls, config: CompendiumConfig) -> CompendiumClient:
        """Create a client from a loaded configuration."""
        return cls(config.base_url)

    @property
    def base_url(self) -> str:
        return str(self._base_url)

    def __enter__(self) -> CompendiumClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_client:
            self._client.close()
            logger.debug("HTTP client closed")

    # =========================================================================
    # Entry lookups
    # =========================================================================

    def entry(self, identifier: Identifier) -> EntryResponse:
        """Get any standard mode entry by id or name.

        The concrete model (``MonsterEntry``, ``CreatureEntry``, ...) is
        chosen by the ``category`` field of the payload.

        Raises:
            NoDataFoundError: If no entry matches the identifier.
            ServerError: If the server fails.
            RequestError: If the request could not be sent.
            ResponseParsingError: If the payload has no known category.
        """
        return self._fetch_entry(identifier, GameMode.STANDARD, ENTRY_RESPONSE_ADAPTER)

    def monster(
        self, identifier: Identifier, mode: GameMode = GameMode.STANDARD
    ) -> MonsterEntry:
        """Get a monster entry, optionally from the master mode compendium."""
        return self._fetch_entry(identifier, mode, MONSTER_ADAPTER)

    def master_mode_monster(self, identifier: Identifier) -> MonsterEntry:
        """Get a monster entry that exists only in master mode."""
        return self._fetch_entry(identifier, GameMode.MASTER_MODE, MONSTER_ADAPTER)

    def creature(self, identifier: Identifier) -> CreatureEntry:
        return self._fetch_entry(identifier, GameMode.STANDARD, CREATURE_ADAPTER)

    def material(self, identifier: Identifier) -> MaterialEntry:
        return self._fetch_entry(identifier, GameMode.STANDARD, MATERIAL_ADAPTER)

    def equipment(self, identifier: Identifier) -> EquipmentEntry:
        return self._fetch_entry(identifier, GameMode.STANDARD, EQUIPMENT_ADAPTER)

    def treasure(self, identifier: Identifier) -> TreasureEntry:
        return self._fetch_entry(identifier, GameMode.STANDARD, TREASURE_ADAPTER)

    # =========================================================================
    # Listings
    # =========================================================================

    def category(self, category: CompendiumCategory | str) -> CategoryResult:
        """Get every entry of one category.

        Args:
            category: A CompendiumCategory, or its name (e.g. "monsters").

        Returns:
            CategoryResult tagged with the requested category.
        """
        if not isinstance(category, CompendiumCategory):
            category = CompendiumCategory.parse(category)
        entries = self._get(category_path(category), CATEGORY_ADAPTERS[category])
        return CategoryResult(category=category, entries=entries)

    def all_entries(self) -> AllStandardEntries:
        """Get the whole standard mode catalog in one request."""
        return self._get(ALL_ENTRIES_PATH, ALL_STANDARD_ENTRIES_ADAPTER)

    def all_master_mode_entries(self) -> list[MonsterEntry]:
        """Get every master mode entry; master mode only has monsters."""
        return self._get(ALL_MASTER_MODE_ENTRIES_PATH, MONSTER_LIST_ADAPTER)

    # =========================================================================
    # Internal HTTP Methods
    # =========================================================================

    def _fetch_entry(
        self, identifier: Identifier, mode: GameMode, adapter: TypeAdapter[Any]
    ) -> Any:
        path = entry_path(EntryIdentifier.coerce(identifier), mode)
        return self._get(path, adapter)

    def _get(self, path: str, adapter: TypeAdapter[Any]) -> Any:
        """Perform one GET request, following redirects, and decode ``data``.

        Args:
            path: Resource path relative to the base URL.
            adapter: Pydantic adapter for the payload type.

        Returns:
            The validated payload.

        Raises:
            InvalidResourcePathError: If the URL cannot be built.
            RequestError: If the transport fails.
            ServerError: On a 5xx status.
            NoDataFoundError: On a 4xx status.
            ResponseParsingError: If the body does not match the payload type.
        """
        url = join_path(self._base_url, path)
        logger.debug("Request GET %s", url)

        try:
            response = self._client.get(
                url,
                headers={"Accept": "application/json"},
                follow_redirects=True,
            )
        except httpx.HTTPError as e:
            raise RequestError(f"Request to {url} failed: {e}") from e

        logger.debug("Response %d for GET %s", response.status_code, url)
        _check_status(response, url)
        return _decode(response, adapter)


def _check_status(response: httpx.Response, url: httpx.URL) -> None:
    # Bodies of error responses are never inspected
    if response.is_server_error:
        raise ServerError(response.status_code)
    if response.is_client_error:
        raise NoDataFoundError(url.path, status_code=response.status_code)


def _decode(response: httpx.Response, adapter: TypeAdapter[Any]) -> Any:
    try:
        envelope = ApiResponse.model_validate_json(response.content)
        return adapter.validate_python(envelope.data)
    except ValidationError as e:
        raise ResponseParsingError(f"Response validation error: {e}") from e
