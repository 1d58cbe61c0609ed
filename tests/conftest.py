"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Callable

import pytest
import requests  # type: ignore[import-untyped]

SAMPLE_HTML = """<html>
<head><title>Sample</title></head>
<body>
<a href="/one">One</a>
<a href="/two">Two</a>
<p><a href="/three">Three</a></p>
<img src="a.png">
<img src="b.png"/>
</body>
</html>
"""


def _build_response(
    body: bytes | str = SAMPLE_HTML,
    status: int = 200,
    url: str = "http://example.com/a",
) -> requests.Response:
    """Return a ready ``requests.Response`` without touching the network."""

    if isinstance(body, str):
        body = body.encode("utf-8")

    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response.url = url
    response.encoding = "utf-8"
    response._content = body
    # Nothing is streamed, so closing must not touch ``raw``.
    response._content_consumed = True
    return response


@pytest.fixture
def sample_html() -> str:
    """HTML document with three anchors and two images."""

    return SAMPLE_HTML


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory fixture building canned HTTP responses."""

    return _build_response
