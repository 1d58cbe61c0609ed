"""Map endpoints to archive paths and display names."""

from __future__ import annotations

from pathlib import Path

# Recognized scheme prefixes mapped to their archive directory names.
SCHEME_DIRS = {
    "http://": "http",
    "https://": "https",
}

ARCHIVE_SUFFIX = ".html"


def _split_scheme(endpoint: str) -> tuple[str | None, str]:
    """Return the archive directory for ``endpoint`` and the remainder."""

    for prefix, directory in SCHEME_DIRS.items():
        if endpoint.startswith(prefix):
            return directory, endpoint[len(prefix) :]
    return None, endpoint


def derive_path(endpoint: str) -> Path:
    """Return the archive path for ``endpoint``.

    ``http://host/a`` maps to ``http/host/a.html`` and ``https://host/a`` to
    ``https/host/a.html``. Endpoints without a recognized scheme map to
    ``<endpoint>.html`` with no scheme directory.

    Args:
        endpoint: Endpoint supplied by the user.

    Returns:
        Path relative to the archive root.
    """

    directory, remainder = _split_scheme(endpoint)
    file_name = remainder + ARCHIVE_SUFFIX
    if directory is None:
        return Path(file_name)
    return Path(directory) / file_name


def derive_site(endpoint: str) -> str:
    """Return ``endpoint`` with a recognized scheme prefix stripped."""

    return _split_scheme(endpoint)[1]
