"""Invoke helper: call sync or async fallbacks uniformly.

A fallback can be a ``def`` or an ``async def`` (or another handler's
bound ``handle`` coroutine).  The sync/async check lives here and
nowhere else::

    response = await invoke(fallback, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *handler* and await the result if it is awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
