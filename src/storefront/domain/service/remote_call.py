"""Bounded remote calls.

Every call into a store goes through ``call_remote`` so a slow or
unreachable backend surfaces as a RemoteError, the same failure class as
any other store failure.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

from storefront.domain.exceptions import RemoteError, RemoteTimeoutError

T = TypeVar("T")

DEFAULT_TIMEOUT = 10.0


async def call_remote(
    awaitable: Awaitable[T],
    *,
    action: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> T:
    try:
        return await asyncio.wait_for(awaitable, timeout)
    except asyncio.TimeoutError as exc:
        raise RemoteTimeoutError(f"Timed out after {timeout:g}s: {action}") from exc
    except OSError as exc:
        raise RemoteError(f"Failed to {action}: {exc}") from exc
