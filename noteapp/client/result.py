"""
Operation Results.

Tagged success/failure outcome returned by every note service call.

Usage:
    match await service.get_note("42"):
        case Success(value=record):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

ValueT = TypeVar("ValueT")


@dataclass(frozen=True)
class Success(Generic[ValueT]):
    """Operation completed with the expected status."""

    value: ValueT


@dataclass(frozen=True)
class Failure:
    """Operation did not complete; ``error`` describes why."""

    error: Exception


Result = Success[ValueT] | Failure
