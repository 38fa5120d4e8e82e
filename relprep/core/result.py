"""Result type for explicit error handling.

Every step of a release run that can fail returns a ``Result``: either
``Ok(value)`` or ``Err(error)``. Callers short-circuit on ``Err`` instead of
catching exceptions, which keeps the fail-fast ordering of the workflow
visible in the code.

Usage:
    match repo.stage(path):
        case Ok(_):
            ...
        case Err(error):
            return Err(error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Ok[T] | Err[E]
