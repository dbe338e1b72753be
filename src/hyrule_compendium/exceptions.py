"""Custom exceptions for the compendium client.

This module defines the exception hierarchy for every failure point of a
compendium request: building the URL, talking to the server, and decoding
what came back.
"""


class CompendiumError(Exception):
    """Base exception for compendium client errors."""

    pass


class InvalidBaseUrlError(CompendiumError):
    """Raised when the configured base URL is not an absolute URL."""

    def __init__(self, url: str):
        super().__init__(f"Invalid base url of '{url}' provided")
        self.url = url


class InvalidResourcePathError(CompendiumError):
    """Raised when a resource path cannot be joined onto the base URL."""

    def __init__(self, path: str):
        super().__init__(f"Could not create the resource path for '{path}'")
        self.path = path


class RequestError(CompendiumError):
    """Raised when the transport fails before a response status is received."""

    pass


class ServerError(CompendiumError):
    """Raised when the server answers with a 5xx status."""

    def __init__(self, status_code: int | None = None):
        super().__init__("There was an unexpected error from the server")
        self.status_code = status_code


class NoDataFoundError(CompendiumError):
    """Raised when the server answers with a 4xx status.

    The requested path is kept for diagnostics.
    """

    def __init__(self, path: str, status_code: int | None = None):
        super().__init__(f"There was no data found for '{path}'")
        self.path = path
        self.status_code = status_code


class ResponseParsingError(CompendiumError):
    """Raised when a successful response body cannot be decoded."""

    pass
