"""Fan-out helpers for recursive operations."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def gather_all(*aws: Awaitable[T]) -> list[T]:
    """Run awaitables concurrently and wait for every one of them.

    Unlike a bare asyncio.gather, a failure does not leave siblings running
    after the call returns: all of them finish first, then the first
    exception (in argument order) is raised.

    Returns:
        Results in argument order
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)
