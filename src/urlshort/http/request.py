"""Immutable HTTP request.

Only the metadata the dispatcher and its fallbacks look at.  The body is
never read by urlshort itself; ``receive`` is kept so a fallback can.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from urlshort._internal.asgi import Receive, Scope
from urlshort.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query_string: bytes = b""
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    # Private: ASGI receive callable, for fallbacks that need the body
    _receive: Receive | None = field(default=None, repr=False, compare=False)

    @property
    def url(self) -> str:
        """Request target: path plus query string, if any."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    async def body(self) -> bytes:
        """Read the full request body from the ASGI receive channel."""
        if self._receive is None:
            return b""
        chunks: list[bytes] = []
        while True:
            message = await self._receive()
            chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                break
        return b"".join(chunks)

    @classmethod
    def from_asgi(cls, scope: Scope | dict[str, Any], receive: Receive | None = None) -> Request:
        """Create a Request from an ASGI HTTP scope and receive callable."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            _receive=receive,
        )
