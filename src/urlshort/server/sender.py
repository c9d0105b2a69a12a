"""ASGI response sending: translates a Response into ASGI messages."""

from urlshort._internal.asgi import Send
from urlshort.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC 9110: 1xx, 204, and 304 responses carry no message body.
    return not (100 <= status < 200 or status in {204, 304})


def _encode(value: str) -> bytes:
    return value.encode("latin-1")


async def send_response(response: Response, send: Send) -> None:
    """Send *response* as one ``http.response.start`` and one body message."""
    body = response.body_bytes if _body_allowed(response.status) else b""

    raw_headers = [(b"content-type", _encode(response.content_type))]
    raw_headers.extend((_encode(name.lower()), _encode(value)) for name, value in response.headers)
    raw_headers.append((b"content-length", _encode(str(len(body)))))

    await send({"type": "http.response.start", "status": response.status, "headers": raw_headers})
    await send({"type": "http.response.body", "body": body})
