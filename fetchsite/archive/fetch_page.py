"""Fetch pages over HTTP(S) and store them in the archive."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlparse

import requests  # type: ignore[import-untyped]

from .errors import FetchError, MalformedEndpointError
from .page import Page
from .paths import derive_path
from .store import decode_document

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
SUPPORTED_SCHEMES = {"http", "https"}


def _validate_endpoint(endpoint: str) -> None:
    """Ensure ``endpoint`` is an absolute ``http`` or ``https`` URL.

    Throws:
        MalformedEndpointError: If the scheme is missing or unsupported, or
            the URL has no host.
    """

    try:
        parsed = urlparse(endpoint)
    except ValueError as exc:
        raise MalformedEndpointError(endpoint, exc) from exc

    if not parsed.scheme:
        raise MalformedEndpointError(endpoint, f"no protocol: {endpoint}")
    if parsed.scheme not in SUPPORTED_SCHEMES:
        raise MalformedEndpointError(
            endpoint, f"unknown protocol: {parsed.scheme}"
        )
    if not parsed.netloc:
        raise MalformedEndpointError(endpoint, "missing host")


def fetch_page(
    endpoint: str,
    base_dir: Path,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> Page:
    """Download ``endpoint`` and write the body to its archive path.

    The response body is written byte for byte; parent directories of the
    archive path are created as needed.

    Args:
        endpoint: URL to download.
        base_dir: Archive root directory.
        timeout: Request timeout in seconds, ``None`` to wait indefinitely.

    Returns:
        The fetched page.

    Throws:
        MalformedEndpointError: If ``endpoint`` is not an HTTP(S) URL.
        FetchError: If the request fails or the file cannot be written.
    """

    _validate_endpoint(endpoint)
    path = derive_path(endpoint)
    target = base_dir / path

    # Record when the connection was opened in case metadata is requested.
    fetched_at = datetime.now(timezone.utc)
    try:
        with requests.get(endpoint, timeout=timeout) as response:
            response.raise_for_status()
            body = response.content
    except requests.exceptions.InvalidURL as exc:
        raise MalformedEndpointError(endpoint, exc) from exc
    except requests.RequestException as exc:
        raise FetchError(endpoint, exc) from exc

    logger.debug("Fetched %d bytes from %s", len(body), endpoint)

    # Store the body exactly as received.
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(body)
    except OSError as exc:
        raise FetchError(endpoint, exc) from exc

    return Page(
        endpoint=endpoint,
        path=path,
        text=decode_document(body),
        fetched_at=fetched_at,
    )
