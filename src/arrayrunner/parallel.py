"""
Parallel array runner.

Every element is handed to the operation at once and the results are
combined after all invocations have settled.
"""

from __future__ import annotations
from collections.abc import Sequence
from typing import Any
import asyncio

from .base import (
    ArrayRunner,
    Operation,
    T,
    bind_operation,
    drop_outcome,
    invoke,
    validate_run_arguments,
)
from .behavior import LAST_RETURN, ReturnBehavior
from .logger import get_logger


class ParallelArrayRunner(ArrayRunner):
    """
    Calls an async operation concurrently for every element of a sequence.

    All invocations are started before any is awaited. If one of them fails,
    run() raises that exception as soon as it is observed; the remaining
    invocations are not cancelled, they finish in the background and their
    outcomes are dropped. An operation that raises while being called stops
    the launch, so later elements are never passed to it.

    Example:
        async def add(a: int, b: int) -> int:
            await asyncio.sleep(0.01)
            return a + b

        runner = ParallelArrayRunner(ParallelArrayRunner.ARRAY_RETURN)
        await runner.run([1, 2, 3, 4], add, None, 10)   # [11, 12, 13, 14]
    """

    async def run(
        self,
        items: Sequence[T],
        operation: Operation,
        scope: Any = None,
        *args: Any,
    ) -> Any:
        validate_run_arguments(items, operation)
        config = self._config.snapshot()
        call = bind_operation(operation, scope)
        logger = get_logger(__name__)

        logger.debug(
            "Starting parallel run of %d invocations (%s)",
            len(items),
            config.behavior.value,
        )

        futures: list[asyncio.Future] = []
        try:
            for element in items:
                futures.append(invoke(call, element, args))
        except Exception as exc:
            # Nothing after the failing element is started.
            logger.debug(
                "Parallel run failed while starting element %d: %r", len(futures), exc
            )
            for future in futures:
                future.add_done_callback(drop_outcome)
            raise

        try:
            results = await asyncio.gather(*futures)
        except Exception as exc:
            logger.debug("Parallel run failed: %r", exc)
            raise

        logger.debug("Parallel run settled with %d results", len(results))
        return config.reduce(results)


async def run_parallel(
    items: Sequence[T],
    operation: Operation,
    *args: Any,
    behavior: ReturnBehavior | str = LAST_RETURN,
    scope: Any = None,
) -> Any:
    """
    One-shot parallel run without keeping a runner around.

    Example:
        squares = await run_parallel(items, square, behavior=ARRAY_RETURN)
    """
    return await ParallelArrayRunner(behavior).run(items, operation, scope, *args)
