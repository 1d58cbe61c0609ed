"""Read previously archived pages from disk."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from bs4 import UnicodeDammit

from .errors import ArchiveReadError
from .page import Page
from .paths import derive_path

logger = logging.getLogger(__name__)


def archive_exists(endpoint: str, base_dir: Path) -> bool:
    """Return whether ``endpoint`` has an archived copy under ``base_dir``."""

    return (base_dir / derive_path(endpoint)).exists()


def decode_document(body: bytes) -> str:
    """Decode archived or fetched bytes to text.

    The encoding is detected from the bytes alone: BOM, then UTF-8, then the
    charset declared in the markup, then sniffing. A body therefore decodes
    to the same text whether it was just downloaded or read from the archive.
    """

    dammit = UnicodeDammit(body, user_encodings=["utf-8"], is_html=True)
    text = dammit.unicode_markup
    if text is None:
        return body.decode("utf-8", errors="replace")
    return text


def read_archive(endpoint: str, base_dir: Path) -> Page | None:
    """Return the archived page for ``endpoint`` if one exists.

    Every line of the archived file is terminated with ``\\n`` in the
    returned text, including the last one.

    Args:
        endpoint: Endpoint supplied by the user.
        base_dir: Archive root directory.

    Returns:
        The archived page, or ``None`` when the endpoint is not archived.

    Throws:
        ArchiveReadError: If the archived file exists but cannot be read.
    """

    path = derive_path(endpoint)
    archived_file = base_dir / path
    if not archive_exists(endpoint, base_dir):
        logger.debug("No archive for %s at %s", endpoint, archived_file)
        return None

    # Record when the read started in case metadata is requested.
    fetched_at = datetime.now(timezone.utc)
    try:
        body = archived_file.read_bytes()
    except OSError as exc:
        raise ArchiveReadError(path, exc) from exc

    decoded = decode_document(body).replace("\r\n", "\n").replace("\r", "\n")
    lines = decoded.split("\n")
    if lines[-1] == "":
        lines.pop()
    text = "".join(line + "\n" for line in lines)

    logger.debug("Read %d characters from %s", len(text), archived_file)
    return Page(
        endpoint=endpoint,
        path=path,
        text=text,
        fetched_at=fetched_at,
        from_archive=True,
    )
