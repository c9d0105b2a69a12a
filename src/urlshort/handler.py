"""Redirect dispatcher.

Looks the request path up in a prebuilt lookup table.  A hit answers
``303 See Other`` with ``Location`` set to the mapped url; a miss hands
the untouched request to the fallback and returns whatever it produces.

Mapped urls are passed through verbatim.  Nothing checks that a target
is well formed or on an allowed host, so mapping data from an untrusted
source makes this an open redirector.

Usage::

    from urlshort import yaml_handler, not_found

    app = yaml_handler(Path("paths.yaml").read_text(), not_found)

``app`` is an ASGI application; hand it to any ASGI server.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort._internal.invoke import invoke
from urlshort._internal.types import Fallback
from urlshort.config import check_redirect_status
from urlshort.http.request import Request
from urlshort.http.response import Redirect, Response
from urlshort.mapping import load_mapping, parse_json, parse_yaml
from urlshort.server.sender import send_response

logger = logging.getLogger("urlshort.handler")


def not_found(request: Request) -> Response:
    """Default fallback: a plain-text 404."""
    return Response(body="404 page not found\n").with_status(404)


class MapHandler:
    """Serve redirects from a read-only path -> url table.

    The table is copied once at construction and exposed as a
    ``MappingProxyType``, so concurrent requests share it without locks.
    ``handle`` has the same shape as a fallback, which lets handlers
    chain::

        inner = map_handler({"/a": "https://a.example"}, not_found)
        outer = yaml_handler(yml, inner.handle)
    """

    __slots__ = ("_fallback", "_paths", "_status")

    def __init__(
        self,
        paths: Mapping[str, str],
        fallback: Fallback,
        *,
        status: int = 303,
    ) -> None:
        self._paths = MappingProxyType(dict(paths))
        self._fallback = fallback
        self._status = check_redirect_status(status)

    @property
    def paths(self) -> MappingProxyType[str, str]:
        """The lookup table.  Read-only."""
        return self._paths

    @property
    def fallback(self) -> Fallback:
        return self._fallback

    @property
    def status(self) -> int:
        return self._status

    def __repr__(self) -> str:
        return f"MapHandler({len(self._paths)} paths, status={self._status})"

    async def handle(self, request: Request) -> Response:
        """Redirect a mapped path, delegate anything else to the fallback."""
        url = self._paths.get(request.path)
        if url is None:
            logger.debug("No mapping found for %s", request.path)
            return await invoke(self._fallback, request)
        logger.debug("Redirecting to %s", url)
        return Redirect(url, status=self._status).to_response()

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Answers the lifespan protocol itself (there is nothing to start
        or stop), dispatches HTTP scopes, and ignores everything else.
        """
        if scope["type"] == "lifespan":
            await _handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope, receive)
        response = await self.handle(request)
        await send_response(response, send)


async def _handle_lifespan(receive: Receive, send: Send) -> None:
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return


# -- Factories --


def map_handler(paths: Mapping[str, str], fallback: Fallback, *, status: int = 303) -> MapHandler:
    """Handler over an in-memory path -> url mapping."""
    return MapHandler(paths, fallback, status=status)


def yaml_handler(yml: str | bytes, fallback: Fallback, *, status: int = 303) -> MapHandler:
    """Handler over a YAML list of path/url records.

    Raises:
        ParseError: If *yml* is not valid YAML or not a list of
            ``{path, url}`` records.
    """
    return MapHandler(parse_yaml(yml), fallback, status=status)


def json_handler(data: str | bytes, fallback: Fallback, *, status: int = 303) -> MapHandler:
    """Handler over a JSON array of path/url objects.

    Raises:
        ParseError: If *data* is malformed.
    """
    return MapHandler(parse_json(data), fallback, status=status)


def file_handler(path: str | Path, fallback: Fallback, *, status: int = 303) -> MapHandler:
    """Handler over a mapping file (``.json``, otherwise YAML).

    Raises:
        ConfigurationError: If the file cannot be read.
        ParseError: If its content is malformed.
    """
    return MapHandler(load_mapping(path), fallback, status=status)
