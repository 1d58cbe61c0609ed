"""Tests for reading archived pages."""

from pathlib import Path

import pytest

from fetchsite.archive import ArchiveReadError, archive_exists, read_archive


def test_read_archive_missing_returns_none(tmp_path: Path) -> None:
    """An endpoint that was never archived is reported as not found."""

    assert not archive_exists("http://example.com/a", tmp_path)
    assert read_archive("http://example.com/a", tmp_path) is None


def test_read_archive_returns_page(tmp_path: Path) -> None:
    """Archived text is returned with one newline per line."""

    target = tmp_path / "https" / "example.com" / "a.html"
    target.parent.mkdir(parents=True)
    target.write_bytes(b"<html>\r\n<body></body>\n</html>")

    page = read_archive("https://example.com/a", tmp_path)

    assert archive_exists("https://example.com/a", tmp_path)
    assert page is not None
    assert page.from_archive
    assert page.path == Path("https", "example.com", "a.html")
    assert page.text == "<html>\n<body></body>\n</html>\n"
    assert page.site == "example.com/a"
    assert page.fetched_at.tzinfo is not None


def test_read_archive_without_scheme(tmp_path: Path) -> None:
    """Scheme-less endpoints are looked up directly under the root."""

    target = tmp_path / "example.com" / "a.html"
    target.parent.mkdir(parents=True)
    target.write_text("<p>hi</p>\n", encoding="utf-8")

    page = read_archive("example.com/a", tmp_path)

    assert page is not None
    assert page.text == "<p>hi</p>\n"


def test_read_archive_unreadable_file_raises(tmp_path: Path) -> None:
    """Archives that cannot be read raise ``ArchiveReadError``."""

    # A directory at the archive path exists but cannot be read as a file.
    target = tmp_path / "http" / "example.com" / "a.html"
    target.mkdir(parents=True)

    with pytest.raises(ArchiveReadError) as info:
        read_archive("http://example.com/a", tmp_path)

    assert info.value.path == Path("http", "example.com", "a.html")
    assert str(info.value).startswith(
        "Error encountered when parsing archived file "
    )


def test_read_archive_decodes_declared_charset(tmp_path: Path) -> None:
    """Non-UTF-8 archives decode with the charset declared in the page."""

    html = '<meta charset="iso-8859-1"><p>café</p>\n'
    target = tmp_path / "http" / "example.com" / "a.html"
    target.parent.mkdir(parents=True)
    target.write_bytes(html.encode("iso-8859-1"))

    page = read_archive("http://example.com/a", tmp_path)

    assert page is not None
    assert page.text == html
