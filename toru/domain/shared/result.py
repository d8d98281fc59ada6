"""Ok/Err values for failures the caller is expected to handle.

A position that names no pending child, or a save file that cannot be
read, is an ordinary outcome and comes back as ``Err``. Broken index
references are not, and raise ``TreeInvariantError`` instead.

    >>> def to_position(raw: str) -> Result[int, str]:
    ...     return Ok(int(raw)) if raw.isdigit() else Err(f"Not a number: {raw}")
    ...
    >>> map_result(to_position("3"), lambda p: p - 1)
    Ok(value=2)
    >>> to_position("x")
    Err(error='Not a number: x')
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """The operation produced ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """The operation failed with ``error``; nothing was changed."""

    error: E


# PEP 604 unions of generic aliases are not usable as a runtime alias here
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def map_result(result: Ok[T] | Err[E], fn: Callable[[T], U]) -> Ok[U] | Err[E]:
    """Transform the value of an ``Ok``; pass an ``Err`` through untouched."""
    if isinstance(result, Err):
        return result
    return Ok(fn(result.value))


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Feed the value of an ``Ok`` to a step that can fail in turn.

    Args:
        result: Outcome of the previous step.
        fn: Next step, run only when ``result`` is ``Ok``.

    Returns:
        Whatever ``fn`` returns, or the first ``Err`` encountered.
    """
    if isinstance(result, Err):
        return result
    return fn(result.value)
