"""Async test client for ASGI handlers.

Drives the application through the ASGI interface in-process and
rebuilds the same ``Response`` type the handler produced.  No sockets.
"""

from __future__ import annotations

from typing import Any

from urlshort._internal.asgi import Message, Receive, Scope, Send
from urlshort.http.response import Response


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for any ASGI 3.0 application.

    Usage::

        async with TestClient(handler) as client:
            response = await client.get("/urlshort")
            assert response.status == 303
    """

    __slots__ = ("app",)

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __aenter__(self) -> TestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def head(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a HEAD request."""
        return await self.request("HEAD", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send a POST request."""
        return await self.request("POST", path, headers=headers, body=body)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        path_part, _, query_string = path.partition("?")
        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]
        scope: Scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": path_part,
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        body_sent = False

        async def receive() -> Message:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": body or b"", "more_body": False}
            return {"type": "http.disconnect"}

        status = 200
        response_headers: list[tuple[bytes, bytes]] = []
        body_parts: list[bytes] = []

        async def send(message: Message) -> None:
            nonlocal status, response_headers
            if message["type"] == "http.response.start":
                status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)
        return _build_response(status, response_headers, b"".join(body_parts))

    async def lifespan(self) -> list[str]:
        """Run startup then shutdown; return the message types the app sent."""
        inbox = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[str] = []

        async def receive() -> Message:
            return next(inbox)

        async def send(message: Message) -> None:
            sent.append(message["type"])

        await self.app({"type": "lifespan", "asgi": {"version": "3.0"}}, receive, send)
        return sent


def _build_response(status: int, raw_headers: list[tuple[bytes, bytes]], body: bytes) -> Response:
    content_type = "text/plain; charset=utf-8"
    headers: list[tuple[str, str]] = []
    for name_b, value_b in raw_headers:
        name = name_b.decode("latin-1")
        value = value_b.decode("latin-1")
        if name == "content-type":
            content_type = value
        else:
            headers.append((name, value))
    return Response(body=body, status=status, content_type=content_type, headers=tuple(headers))
