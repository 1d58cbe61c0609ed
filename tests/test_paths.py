"""Tests for endpoint to path and site mapping."""

import os
from pathlib import Path

import pytest

from fetchsite.archive import derive_path, derive_site


@pytest.mark.parametrize(
    ("endpoint", "expected"),
    [
        ("http://example.com/a", Path("http", "example.com", "a.html")),
        (
            "https://example.com/a/b",
            Path("https", "example.com", "a", "b.html"),
        ),
        ("http://example.com", Path("http", "example.com.html")),
    ],
)
def test_derive_path_uses_scheme_directory(
    endpoint: str, expected: Path
) -> None:
    """Recognized schemes map to a directory named after the scheme."""

    path = derive_path(endpoint)
    assert path == expected
    scheme = endpoint.split("://", 1)[0]
    assert str(path).startswith(scheme + os.sep)


def test_derive_path_without_scheme_has_no_directory() -> None:
    """Endpoints without a scheme keep the bare ``<endpoint>.html`` path."""

    assert derive_path("example.com/a") == Path("example.com", "a.html")


@pytest.mark.parametrize(
    ("endpoint", "expected"),
    [
        ("http://example.com/a", "example.com/a"),
        ("https://example.com/a", "example.com/a"),
        ("example.com/a", "example.com/a"),
        ("ftp://example.com", "ftp://example.com"),
    ],
)
def test_derive_site(endpoint: str, expected: str) -> None:
    """Only the ``http://`` and ``https://`` prefixes are stripped."""

    assert derive_site(endpoint) == expected
