"""Archive package for fetched pages."""

from .errors import (
    ArchiveReadError,
    FetchError,
    FetchsiteError,
    MalformedEndpointError,
)
from .fetch_page import fetch_page
from .page import Page
from .paths import SCHEME_DIRS, derive_path, derive_site
from .store import archive_exists, decode_document, read_archive

__all__ = [
    "SCHEME_DIRS",
    "ArchiveReadError",
    "FetchError",
    "FetchsiteError",
    "MalformedEndpointError",
    "Page",
    "archive_exists",
    "decode_document",
    "derive_path",
    "derive_site",
    "fetch_page",
    "read_archive",
]
