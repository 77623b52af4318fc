"""
Serialized array runner.

Same contract as the parallel runner, but each invocation starts only after
the previous one has settled.
"""

from __future__ import annotations
from collections.abc import Sequence
from typing import Any

from .base import ArrayRunner, Operation, T, bind_operation, invoke, validate_run_arguments
from .logger import get_logger


class SerializedArrayRunner(ArrayRunner):
    """
    Calls an async operation for every element, one at a time, in order.

    The first failure stops the iteration: later elements are never passed
    to the operation and the exception is raised unchanged.
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
            "Starting serialized run of %d invocations (%s)",
            len(items),
            config.behavior.value,
        )

        results: list[Any] = []
        for index, element in enumerate(items):
            try:
                results.append(await invoke(call, element, args))
            except Exception as exc:
                logger.debug("Serialized run failed at element %d: %r", index, exc)
                raise

        logger.debug("Serialized run settled with %d results", len(results))
        return config.reduce(results)
