"""Small sequence helpers used to assemble table reports.

These helpers cover the handful of operations the provenance layer needs
(first element, projection, summation and materialization) over inputs
that may be large or lazily produced. Argument checks always run at call
time; only the projection itself is deferred until iteration.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
TResult = TypeVar("TResult")


def _require(value: object, name: str) -> None:
    """Raise ValueError if a required argument is missing."""
    if value is None:
        raise ValueError(f"{name} is required")


def _project(
    source: Iterable[T], selector: Callable[[T], TResult]
) -> Iterator[TResult]:
    for item in source:
        yield selector(item)


class Projection(Generic[T, TResult]):
    """
    Lazy, re-iterable projection of a source iterable.

    Nothing is read from the source and the selector is never called until
    the projection is iterated. Every iteration starts over and calls the
    selector again for each element.
    """

    def __init__(self, source: Iterable[T], selector: Callable[[T], TResult]):
        self._source = source
        self._selector = selector

    def __iter__(self) -> Iterator[TResult]:
        return _project(self._source, self._selector)


def first_or_default(source: Iterable[T], default: T | None = None) -> T | None:
    """
    Return the first element of source, or default if it is empty.

    Indexable sequences are read at index 0 directly; anything else is
    advanced once through a fresh iterator.

    Raises:
        ValueError: If source is None.
    """
    _require(source, "source")

    if isinstance(source, Sequence) and len(source) > 0:
        return source[0]
    return next(iter(source), default)


def select(
    source: Iterable[T], selector: Callable[[T], TResult]
) -> Projection[T, TResult]:
    """
    Project each element of source through selector, lazily.

    Args:
        source: Elements to project.
        selector: Function applied to each element.

    Returns:
        A Projection yielding selector(item) for every item, in order.

    Raises:
        ValueError: If source or selector is None.
    """
    _require(source, "source")
    _require(selector, "selector")

    return Projection(source, selector)


def sum_by(source: Iterable[T], selector: Callable[[T], int]) -> int:
    """Return the sum of selector(item) over source (0 when empty)."""
    _require(source, "source")
    _require(selector, "selector")

    total = 0
    for value in _project(source, selector):
        total += value
    return total


def to_array(source: Iterable[T]) -> tuple[T, ...]:
    """Materialize source into a new fixed-size tuple."""
    _require(source, "source")
    return tuple(source)


def to_list(source: Iterable[T]) -> list[T]:
    """Materialize source into a new list."""
    _require(source, "source")
    return list(source)
