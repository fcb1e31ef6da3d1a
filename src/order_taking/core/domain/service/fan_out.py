from __future__ import annotations

import asyncio
from typing import Awaitable, Iterable, TypeVar

from returns.iterables import Fold
from returns.result import Failure, Result, Success

_ValueType = TypeVar("_ValueType")
_ErrorType = TypeVar("_ErrorType")


async def collect_concurrently(
    awaitables: Iterable[Awaitable[Result[_ValueType, _ErrorType]]],
) -> Result[tuple[_ValueType, ...], _ErrorType]:
    """
    Run every awaitable at once and fold the results back in input order.

    The first Failure to complete wins; siblings still running are cancelled
    and their results are never looked at. Ties inside one wake-up go to the
    lowest input index.
    """
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    try:
        pending = set(tasks)
        while pending:
            done, pending = await asyncio.wait(
                pending, return_when=asyncio.FIRST_COMPLETED
            )
            for task in tasks:
                if task in done:
                    result = task.result()
                    if isinstance(result, Failure):
                        return result
        return Fold.collect((task.result() for task in tasks), Success(()))
    finally:
        leftovers = [task for task in tasks if not task.done()]
        for task in leftovers:
            task.cancel()
        if leftovers:
            await asyncio.gather(*leftovers, return_exceptions=True)
