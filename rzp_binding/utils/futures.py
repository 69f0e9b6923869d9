"""
Future/callback delivery.

Every API call returns an ``asyncio.Future``. An optional callback is attached as a
done-listener on that same future, so it runs once and sees the same outcome as
anyone awaiting the future.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

Callback = Callable[["asyncio.Future[Any]"], Any]


def deliver(awaitable: Awaitable[Any], callback: Optional[Callback] = None) -> "asyncio.Future[Any]":
    future = asyncio.ensure_future(awaitable)
    if callback is not None:
        future.add_done_callback(callback)
    return future


def rejected(exc: BaseException, callback: Optional[Callback] = None) -> "asyncio.Future[Any]":
    """Already-failed future for errors detected before any request is made."""
    future = asyncio.get_running_loop().create_future()
    future.set_exception(exc)
    if callback is not None:
        future.add_done_callback(callback)
    return future
