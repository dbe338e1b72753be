"""Resource path resolution for compendium requests.

Paths are relative (no leading slash) so that joining them onto the base
URL keeps the base's own path, e.g. ``/api/v2/``.
"""

import httpx

from hyrule_compendium.exceptions import InvalidBaseUrlError, InvalidResourcePathError
from hyrule_compendium.models.inputs import (
    CompendiumCategory,
    EntryIdentifier,
    GameMode,
)

ENTRY_PREFIX = "entry/"
MASTER_MODE_ENTRY_PREFIX = "master_mode/entry/"
CATEGORY_PREFIX = "category/"
ALL_ENTRIES_PATH = "all"
ALL_MASTER_MODE_ENTRIES_PATH = "master_mode/all"


def identifier_segment(identifier: EntryIdentifier) -> str:
    """Render an identifier as a path segment.

    Ids render in decimal. Names only have spaces replaced with
    underscores; case, accents and punctuation pass through unchanged.
    """
    if identifier.is_id:
        return str(identifier.value)
    return str(identifier.value).replace(" ", "_")


def entry_path(identifier: EntryIdentifier, mode: GameMode = GameMode.STANDARD) -> str:
    """Build the relative path of a single entry lookup."""
    prefix = MASTER_MODE_ENTRY_PREFIX if mode is GameMode.MASTER_MODE else ENTRY_PREFIX
    return f"{prefix}{identifier_segment(identifier)}"


def category_path(category: CompendiumCategory) -> str:
    """Build the relative path of a category listing."""
    return f"{CATEGORY_PREFIX}{category.path_segment}"


def parse_base_url(url: str) -> httpx.URL:
    """Parse a base URL, requiring it to be absolute.

    Raises:
        InvalidBaseUrlError: If the URL does not parse or has no scheme/host.
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidBaseUrlError(str(url)) from e
    if not parsed.scheme or not parsed.host:
        raise InvalidBaseUrlError(str(url))
    return parsed


def join_path(base_url: httpx.URL, path: str) -> httpx.URL:
    """Resolve a relative path against the base URL.

    Raises:
        InvalidResourcePathError: If the joined URL is not valid.
    """
    try:
        return base_url.join(path)
    except httpx.InvalidURL as e:
        raise InvalidResourcePathError(path) from e
