"""Shared type aliases used across urlshort modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from urlshort.http.request import Request
    from urlshort.http.response import Response

# Fallback handler: receives the unmatched request, returns its response
Fallback: TypeAlias = "Callable[[Request], Response | Awaitable[Response]]"
