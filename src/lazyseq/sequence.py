from __future__ import annotations

import logging
import typing as tp
from collections.abc import Callable, Iterable

from typing_extensions import override

from lazyseq._helpers import drain, non_negative
from lazyseq.combinators import (
    BoundedCursor,
    FilterCursor,
    FlattenCursor,
    MapCursor,
    SkippedCursor,
)
from lazyseq.cursor import ArrayCursor, Cursor, cursor_of
from lazyseq.wtyping import CursorFactory, Expansion, Predicate, Transform

logger = logging.getLogger(__name__)


@tp.final
class Sequence[T](Iterable[T]):
    """
    Lazy, re-iterable sequence supporting method chaining.

    A Sequence only holds a factory producing a fresh `Cursor` per
    traversal. Combinators return new sequences without pulling any
    element; work happens when a terminal operation (`count`, `to_list`,
    `for_each`) or a plain `for` loop drains a cursor.

    Args:
        factory: zero-argument callable returning a new cursor each call.

    Example:
        >>> seq = Sequence.of(1, 2, 3, 4, 5)
        >>> seq.where(lambda x: x % 2 == 1).select(lambda x: x * 10).to_list()
        [10, 30, 50]
        >>> seq.count(), seq.count()
        (5, 5)
    """

    def __init__(self, factory: CursorFactory[T]) -> None:
        self.factory = factory

    @staticmethod
    def of[V](*values: V) -> Sequence[V]:
        """
        Sequence over the given values.

        Example:
            >>> Sequence.of("a", "b").to_list()
            ['a', 'b']
            >>> Sequence.of().count()
            0
        """
        return Sequence(lambda: ArrayCursor(values))

    @staticmethod
    def from_iterable[V](iterable: Iterable[V]) -> Sequence[V]:
        """
        Sequence reading from an existing iterable, without copying it.

        Every traversal starts a new iteration of `iterable`. For a one-shot
        iterator (e.g. a generator) that means only the first traversal
        sees any elements.

        Example:
            >>> Sequence.from_iterable(range(3)).to_list()
            [0, 1, 2]
            >>> once = Sequence.from_iterable(x for x in range(3))
            >>> once.to_list(), once.to_list()
            ([0, 1, 2], [])
        """
        return Sequence(lambda: cursor_of(iterable))

    def cursor(self) -> Cursor[T]:
        """Start a new traversal."""
        return self.factory()

    @override
    def __iter__(self) -> Cursor[T]:
        return self.factory()

    def select[R](self, transform: Transform[T, R]) -> Sequence[R]:
        """
        Apply transform on each element.

        Args:
            transform: callable applied to every element as it is pulled.

        Returns:
            Sequence: transformed elements, same length and order.

        Example:
            >>> Sequence.of(1, 2, 3).select(lambda x: x * 10).to_list()
            [10, 20, 30]
        """
        return Sequence(lambda: MapCursor(self.factory(), transform))

    def where(self, predicate: Predicate[T]) -> Sequence[T]:
        """
        Keep only the elements satisfying predicate.

        Args:
            predicate: callable returning a truthy value for elements to keep.

        Returns:
            Sequence: matching elements in their original order.

        Example:
            >>> Sequence.of(1, 2, 3, 4, 5).where(lambda x: x % 2 == 0).to_list()
            [2, 4]
        """
        return Sequence(lambda: FilterCursor(self.factory(), predicate))

    def skip(self, n: int) -> Sequence[T]:
        """
        Drop the first n elements.

        Skipping past the end gives an empty sequence; a negative n drops
        nothing.

        Raises:
            TypeError: if n is not an integer.

        Example:
            >>> Sequence.of(1, 2, 3, 4).skip(2).to_list()
            [3, 4]
            >>> Sequence.of(1, 2).skip(5).to_list()
            []
        """
        count = self._count_arg("skip", n)
        return Sequence(lambda: SkippedCursor(self.factory(), count))

    def take(self, n: int) -> Sequence[T]:
        """
        Yield at most n elements.

        A negative n behaves as 0.

        Raises:
            TypeError: if n is not an integer.

        Example:
            >>> Sequence.of(1, 2, 3, 4).take(2).to_list()
            [1, 2]
            >>> Sequence.of(1, 2, 3, 4, 5).skip(2).take(2).to_list()
            [3, 4]
        """
        count = self._count_arg("take", n)
        return Sequence(lambda: BoundedCursor(self.factory(), count))

    def flat[R](self, expand: Expansion[T, R]) -> Sequence[R]:
        """
        Expand each element into an iterable and concatenate the results.

        Only one level is flattened. Elements expanding to nothing are
        dropped.

        Args:
            expand: callable returning a fresh iterable for each element.

        Example:
            >>> Sequence.of(1, 2, 3).flat(lambda x: [x, x]).to_list()
            [1, 1, 2, 2, 3, 3]
            >>> Sequence.of([1, [2]], [], [3]).flat(lambda x: x).to_list()
            [1, [2], 3]
        """
        return Sequence(lambda: FlattenCursor(self.factory(), expand))

    def count(self) -> int:
        """
        Number of elements, found by draining a new traversal.

        Example:
            >>> Sequence.of(1, 2, 3, 4, 5).where(lambda x: x > 10).count()
            0
        """
        logger.debug("Counting %r", self)
        total = drain(self.factory())
        logger.debug("Counted %d elements", total)
        return total

    def to_list(self) -> list[T]:
        """
        Collect the elements into a list.

        Example:
            >>> Sequence.of(3, 1, 2).to_list()
            [3, 1, 2]
        """
        logger.debug("Collecting %r into a list", self)
        items: list[T] = []
        cursor = self.factory()
        while cursor.has_more():
            items.append(cursor.take_next())
        return items

    def for_each(self, action: Callable[[T], object]) -> None:
        """
        Call action on every element, in order.

        Example:
            >>> Sequence.of(1, 2).for_each(print)
            1
            2
        """
        logger.debug("Running action %r over %r", action, self)
        cursor = self.factory()
        while cursor.has_more():
            _ = action(cursor.take_next())

    @staticmethod
    def _count_arg(op: str, n: int) -> int:
        count = non_negative(n)
        if count != n:
            logger.debug("%s(%d): negative count treated as 0", op, n)
        return count

    map = select
    filter = where
    flat_map = flat

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(factory={self.factory!r})"

    @override
    def __str__(self) -> str:
        return f"{self.__class__.__name__}(factory={self.factory})"

    repr = __repr__
    str = __str__


if __name__ == "__main__":
    from doctest import testmod

    _ = testmod()
