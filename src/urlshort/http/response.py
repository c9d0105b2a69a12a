"""HTTP response with a chainable ``.with_*()`` transformation API.

Each transformation returns a new Response: immutable by convention,
built incrementally.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from urllib.parse import quote

# Every ASCII character is left alone; only non-ASCII is percent-encoded
_ASCII = "".join(map(chr, range(128)))


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_status()`` and
    ``.with_header()`` calls.  Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive), or *default*."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default

    @property
    def location(self) -> str | None:
        """The ``Location`` header, set on redirects."""
        return self.header("Location")

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to *url*.  Defaults to 303 See Other."""

    url: str
    status: int = 303
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def location(self) -> str:
        """``Location`` header value: *url* with non-ASCII percent-encoded as UTF-8.

        ASCII targets are returned byte-for-byte, so an IRI such as
        ``https://例え.jp/パス`` still fits in a latin-1 header.
        """
        if self.url.isascii():
            return self.url
        return quote(self.url, safe=_ASCII)

    def to_response(self) -> Response:
        """Empty-bodied Response carrying the status and ``Location``."""
        return (
            Response(body="")
            .with_status(self.status)
            .with_header("Location", self.location)
            .with_headers(dict(self.headers))
        )
