"""Summaries of fetched pages: link and image counts and fetch time."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
from datetime import datetime
from typing import Any

import click
import yaml  # type: ignore[import-untyped]
from attrs import define
from bs4 import BeautifulSoup

from fetchsite.archive.page import Page

# Weekday, month, year, hours and minutes, e.g. "Mon Oct 2026 14:05".
TIMESTAMP_FORMAT = "%a %b %Y %H:%M"
OUTPUT_FORMATS = ("text", "json", "yaml")


@define(slots=True, frozen=True)
class PageMetadata:
    """Statistics reported for a page.

    Attributes:
        site: Endpoint without its scheme prefix.
        num_links: Number of anchor elements.
        images: Number of image elements.
        last_fetch: UTC time at which the page was fetched or read.
    """

    site: str
    num_links: int
    images: int
    last_fetch: datetime

    @property
    def last_fetch_label(self) -> str:
        return f"{self.last_fetch.strftime(TIMESTAMP_FORMAT)} UTC"

    def as_dict(self) -> dict[str, Any]:
        return {
            "site": self.site,
            "num_links": self.num_links,
            "images": self.images,
            "last_fetch": self.last_fetch_label,
        }


def _json_dumps(data: dict[str, Any]) -> str:
    """Serialize ``data`` with orjson when installed."""

    if orjson is not None:
        return orjson.dumps(data).decode()
    return json.dumps(data, ensure_ascii=False)


def collect_metadata(
    text: str, timestamp: datetime, site: str
) -> PageMetadata:
    """Count anchor and image elements in ``text``.

    The markup is parsed leniently, so partial or broken HTML still yields
    counts instead of an error.

    Args:
        text: Document text.
        timestamp: UTC time of the fetch or archive read.
        site: Display name of the page.

    Returns:
        The collected statistics.
    """

    soup = BeautifulSoup(text, "html.parser")
    return PageMetadata(
        site=site,
        num_links=len(soup.find_all("a")),
        images=len(soup.find_all("img")),
        last_fetch=timestamp,
    )


def format_report(metadata: PageMetadata, output_format: str = "text") -> str:
    """Render ``metadata`` as text, JSON or YAML.

    Args:
        metadata: Statistics to render.
        output_format: One of ``text``, ``json`` or ``yaml``.

    Returns:
        The rendered report without a trailing newline.
    """

    if output_format == "json":
        return _json_dumps(metadata.as_dict())
    if output_format == "yaml":
        return yaml.safe_dump(
            metadata.as_dict(), allow_unicode=True, sort_keys=False
        ).rstrip("\n")
    if output_format != "text":
        raise ValueError(f"Unsupported metadata format: {output_format}")

    return "\n".join(
        [
            f"site: {metadata.site}",
            f"num_links: {metadata.num_links}",
            f"images: {metadata.images}",
            f"last_fetch: {metadata.last_fetch_label}",
        ]
    )


def report_metadata(
    page: Page, enabled: bool, output_format: str = "text"
) -> PageMetadata | None:
    """Print the metadata report for ``page`` when ``enabled``.

    Returns:
        The reported statistics, or ``None`` when reporting is disabled.
    """

    if not enabled:
        return None

    metadata = collect_metadata(page.text, page.fetched_at, page.site)
    click.echo(format_report(metadata, output_format))
    return metadata
