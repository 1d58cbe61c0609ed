"""Exceptions raised while reading or fetching pages."""

from __future__ import annotations

from pathlib import Path


class FetchsiteError(Exception):
    """Base class for archive and fetch failures."""


class ArchiveReadError(FetchsiteError):
    """An archived file exists but could not be read.

    Attributes:
        path: Archive path that failed to read.
        cause: Underlying error.
    """

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f"Error encountered when parsing archived file {path}: {cause}"
        )


class FetchError(FetchsiteError):
    """Fetching or persisting an endpoint failed.

    Attributes:
        endpoint: Endpoint that was being processed.
        cause: Underlying error or a description of it.
    """

    def __init__(self, endpoint: str, cause: BaseException | str) -> None:
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(
            f"Error encountered when parsing {endpoint}: {cause}"
        )


class MalformedEndpointError(FetchError):
    """The endpoint is not an ``http`` or ``https`` URL."""
