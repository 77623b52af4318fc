"""
Return behaviors and the configuration object that holds one.

A runner reduces the results of its invocations according to exactly one
behavior:

    LAST_RETURN          all but the result for the last element is discarded
    ARRAY_RETURN         every result is kept, one slot per element
    CONCAT_ARRAY_RETURN  sequence results are spliced into one flat list,
                         other results are appended as single elements
"""

from __future__ import annotations
from collections.abc import Sequence
from enum import Enum
from typing import Any

from .exceptions import InvalidArgumentError


class ReturnBehavior(Enum):
    """How the results of a run are combined"""
    LAST_RETURN = "LAST_RETURN"
    ARRAY_RETURN = "ARRAY_RETURN"
    CONCAT_ARRAY_RETURN = "CONCAT_ARRAY_RETURN"


LAST_RETURN = ReturnBehavior.LAST_RETURN
ARRAY_RETURN = ReturnBehavior.ARRAY_RETURN
CONCAT_ARRAY_RETURN = ReturnBehavior.CONCAT_ARRAY_RETURN

VALID_RETURN_BEHAVIOR_TYPES: tuple[ReturnBehavior, ...] = tuple(ReturnBehavior)


def is_sequence(value: Any) -> bool:
    """True for ordered sequences, excluding text and bytes."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def coerce_behavior(value: Any) -> ReturnBehavior:
    """
    Convert a behavior member or its string value to a ReturnBehavior.

    Raises:
        InvalidArgumentError: If value names none of the defined behaviors.
    """
    if isinstance(value, ReturnBehavior):
        return value
    if isinstance(value, str):
        try:
            return ReturnBehavior(value)
        except ValueError:
            pass
    valid = ", ".join(b.value for b in VALID_RETURN_BEHAVIOR_TYPES)
    raise InvalidArgumentError(
        f"Invalid Return Behavior. Use one of the defined types: {valid} "
        f"(got {value!r})"
    )


class RunnerConfig:
    """
    Holds the validated return behavior of a runner.

    Assignment is validated every time; an invalid value raises
    InvalidArgumentError and the previous behavior is kept.

    Example:
        config = RunnerConfig()
        config.behavior                       # ReturnBehavior.LAST_RETURN
        config.behavior = ARRAY_RETURN
        config.is_array_return                # True
    """

    def __init__(self, behavior: ReturnBehavior | str = LAST_RETURN):
        self._behavior = coerce_behavior(behavior)

    @property
    def behavior(self) -> ReturnBehavior:
        return self._behavior

    @behavior.setter
    def behavior(self, value: ReturnBehavior | str) -> None:
        self._behavior = coerce_behavior(value)

    @property
    def is_last_return(self) -> bool:
        return self._behavior is LAST_RETURN

    @property
    def is_array_return(self) -> bool:
        return self._behavior is ARRAY_RETURN

    @property
    def is_concat_array_return(self) -> bool:
        return self._behavior is CONCAT_ARRAY_RETURN

    def snapshot(self) -> RunnerConfig:
        """Independent copy, unaffected by later assignments to this one."""
        return RunnerConfig(self._behavior)

    def reduce(self, results: Sequence[Any]) -> Any:
        """Combine ordered per-element results according to the behavior."""
        if self.is_last_return:
            return results[-1] if results else None
        if self.is_array_return:
            return list(results)

        combined: list[Any] = []
        for result in results:
            if is_sequence(result):
                combined.extend(result)
            else:
                combined.append(result)
        return combined

    def __repr__(self) -> str:
        return f"RunnerConfig({self._behavior.value!r})"
