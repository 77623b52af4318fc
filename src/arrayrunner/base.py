"""
Base class shared by the array runners.

A runner calls an async operation once for every element of a sequence and
combines the results according to its return behavior.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar
import asyncio
import inspect
import types

from .behavior import (
    ARRAY_RETURN,
    CONCAT_ARRAY_RETURN,
    LAST_RETURN,
    VALID_RETURN_BEHAVIOR_TYPES,
    ReturnBehavior,
    RunnerConfig,
    is_sequence,
)
from .exceptions import InvalidArgumentError

T = TypeVar("T")

Operation = Callable[..., Awaitable[Any]]


class ArrayRunner(ABC):
    """
    Abstract array runner. Not meant to be instantiated.

    The behavior constants are available on every runner class, so
    ``ParallelArrayRunner.ARRAY_RETURN`` and ``arrayrunner.ARRAY_RETURN``
    are the same value.
    """

    LAST_RETURN = LAST_RETURN
    ARRAY_RETURN = ARRAY_RETURN
    CONCAT_ARRAY_RETURN = CONCAT_ARRAY_RETURN
    VALID_RETURN_BEHAVIOR_TYPES = VALID_RETURN_BEHAVIOR_TYPES

    def __init__(self, return_behavior: ReturnBehavior | str = LAST_RETURN):
        """
        Args:
            return_behavior: One of the behavior constants (or its string
                             value). Defaults to LAST_RETURN.

        Raises:
            InvalidArgumentError: If return_behavior is not a defined behavior.
        """
        self._config = RunnerConfig(return_behavior)

    @property
    def config(self) -> RunnerConfig:
        return self._config

    @property
    def behavior_type(self) -> ReturnBehavior:
        """Current return behavior. Assigning an invalid value raises."""
        return self._config.behavior

    @behavior_type.setter
    def behavior_type(self, value: ReturnBehavior | str) -> None:
        self._config.behavior = value

    @property
    def is_last_return(self) -> bool:
        return self._config.is_last_return

    @property
    def is_array_return(self) -> bool:
        return self._config.is_array_return

    @property
    def is_concat_array_return(self) -> bool:
        return self._config.is_concat_array_return

    @abstractmethod
    async def run(
        self,
        items: Sequence[T],
        operation: Operation,
        scope: Any = None,
        *args: Any,
    ) -> Any:
        """
        Call operation(element, *args) for every element and reduce the results.

        Args:
            items: The elements, each passed as the first argument.
            operation: Async callable to invoke per element.
            scope: Receiver to bind operation to, needed when operation is a
                   function taken from a class rather than a bound method.
            *args: Extra arguments passed unchanged to every invocation.
        """
        raise NotImplementedError("Subclasses must implement run")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.behavior_type.value!r})"


def validate_run_arguments(items: Any, operation: Any) -> None:
    """
    Check the shape of run() arguments before any invocation starts.

    Raises:
        InvalidArgumentError: items is not a sequence or operation is not callable.
    """
    if not is_sequence(items):
        raise InvalidArgumentError(
            f"Expected type sequence, but passed {type(items).__name__}"
        )
    if not callable(operation):
        raise InvalidArgumentError(
            f"Expected type callable, but passed {type(operation).__name__}"
        )


def bind_operation(operation: Operation, scope: Any) -> Operation:
    """
    Bind operation to scope when it is a function defined on scope's class.

    Free functions, static methods, bound methods and other callables are
    used as given, whatever scope is.
    """
    if scope is None or not inspect.isfunction(operation):
        return operation
    declared = inspect.getattr_static(type(scope), operation.__name__, None)
    if declared is not operation:
        return operation
    return types.MethodType(operation, scope)


def invoke(operation: Operation, element: Any, args: tuple[Any, ...]) -> asyncio.Future:
    """
    Start one invocation and return a future for its result.

    Coroutines are scheduled as tasks right away and a plain return value is
    treated as an already settled result. An exception raised by the call
    itself propagates to the caller.
    """
    result = operation(element, *args)
    if inspect.isawaitable(result):
        return asyncio.ensure_future(result)

    future = asyncio.get_running_loop().create_future()
    future.set_result(result)
    return future


def drop_outcome(future: asyncio.Future) -> None:
    """Done callback for abandoned invocations; marks their exception retrieved."""
    if not future.cancelled():
        future.exception()
