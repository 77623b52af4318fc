"""
Arrayrunner: apply an async operation to every element of a sequence.

The results are combined according to a return behavior: keep only the
last one, collect them all, or collect and splice sequence results.

Usage:
    from arrayrunner import ParallelArrayRunner, ARRAY_RETURN

    runner = ParallelArrayRunner(ARRAY_RETURN)
    results = await runner.run(items, fetch, None, session)
"""

from .base import ArrayRunner
from .behavior import (
    ARRAY_RETURN,
    CONCAT_ARRAY_RETURN,
    LAST_RETURN,
    VALID_RETURN_BEHAVIOR_TYPES,
    ReturnBehavior,
    RunnerConfig,
)
from .exceptions import ArrayRunnerError, InvalidArgumentError
from .parallel import ParallelArrayRunner, run_parallel
from .serialized import SerializedArrayRunner

__version__ = "0.1.0"
__all__ = [
    # Runners
    "ArrayRunner",
    "ParallelArrayRunner",
    "SerializedArrayRunner",
    "run_parallel",
    # Behaviors
    "ReturnBehavior",
    "RunnerConfig",
    "LAST_RETURN",
    "ARRAY_RETURN",
    "CONCAT_ARRAY_RETURN",
    "VALID_RETURN_BEHAVIOR_TYPES",
    # Errors
    "ArrayRunnerError",
    "InvalidArgumentError",
]
