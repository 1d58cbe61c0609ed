"""A fetched or archived page."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from attrs import define, field

from .paths import derive_site


@define(slots=True)
class Page:
    """Document retrieved for a single endpoint.

    Attributes:
        endpoint: Endpoint exactly as supplied on the command line.
        path: Archive path derived from the endpoint, relative to the
            archive root.
        text: Document text.
        fetched_at: UTC time at which the fetch or archive read began.
        from_archive: Whether the text came from the local archive.
    """

    endpoint: str
    path: Path
    text: str = field(repr=False)
    fetched_at: datetime
    from_archive: bool = False

    @property
    def site(self) -> str:
        """Endpoint without its scheme prefix."""

        return derive_site(self.endpoint)
