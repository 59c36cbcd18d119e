"""
Pull-based cursor protocol and the cursors reading from concrete sources.
"""

from __future__ import annotations

import abc
import typing as tp
from collections.abc import Iterable, Iterator, Sequence

from typing_extensions import override

from lazyseq.defaults import Default, Empty, Exhausted


class Cursor[T](Iterator[T], abc.ABC):
    """
    Single-use, forward-only traversal.

    Callers ask `has_more` before every `take_next`. Once `has_more` has
    returned False it keeps returning False.
    Every cursor is also an iterator, so it can be handed to `list`,
    `for` loops and the like directly.
    """

    @abc.abstractmethod
    def has_more(self) -> bool:
        """Whether `take_next` would return an element."""

    @abc.abstractmethod
    def take_next(self) -> T:
        """
        Return the next element.

        Raises:
            StopIteration: if the cursor is exhausted.
        """

    @override
    def __iter__(self) -> Cursor[T]:
        return self

    @override
    def __next__(self) -> T:
        try:
            if self.has_more():
                return self.take_next()
        except StopIteration as exc:
            raise RuntimeError(
                f"{self.__class__.__name__} raised StopIteration"
            ) from exc
        raise StopIteration

    @override
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


@tp.final
class ArrayCursor[T](Cursor[T]):
    """
    Cursor over an indexable sequence, read in place.

    The elements are not copied, so mutating `elements` while a traversal
    is in progress gives undefined results.

    Example:
        >>> cursor = ArrayCursor([1, 2])
        >>> cursor.has_more(), cursor.take_next(), cursor.take_next()
        (True, 1, 2)
        >>> cursor.has_more()
        False
    """

    def __init__(self, elements: Sequence[T]) -> None:
        self.elements = elements
        self._index = 0

    @override
    def has_more(self) -> bool:
        return self._index < len(self.elements)

    @override
    def take_next(self) -> T:
        if not self.has_more():
            raise StopIteration
        item = self.elements[self._index]
        self._index += 1
        return item

    @override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(index={self._index}, elements={self.elements!r})"
        )


@tp.final
class IterCursor[T](Cursor[T]):
    """
    Cursor over a plain iterator.

    Iterators cannot tell whether they have more without advancing,
    so one element is fetched ahead and held until it is taken.
    """

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iter: Iterator[T] | None = iterator
        self._pending: T | Default = Empty

    @override
    def has_more(self) -> bool:
        if self._pending is Empty and self._iter is not None:
            try:
                self._pending = next(self._iter)
            except StopIteration:
                self._pending = Exhausted
                self._iter = None
        return self._pending is not Exhausted

    @override
    def take_next(self) -> T:
        if not self.has_more():
            raise StopIteration
        item = tp.cast(T, self._pending)
        self._pending = Empty
        return item


ARRAY_TYPES = (list, tuple, range, str, bytes)


def cursor_of[T](iterable: Iterable[T]) -> Cursor[T]:
    """
    Return a fresh cursor over `iterable`.

    Built-in constant-time indexables (`ARRAY_TYPES`) are read in place by
    an `ArrayCursor`. Anything whose iterator already is a `Cursor`
    (including `lazyseq` sequences) is used as-is; any other iterator,
    `deque` included, is wrapped in an `IterCursor`.

    Example:
        >>> cursor_of((1, 2))
        ArrayCursor(index=0, elements=(1, 2))
        >>> list(cursor_of(x for x in "ab"))
        ['a', 'b']
    """
    if isinstance(iterable, ARRAY_TYPES):
        return ArrayCursor(tp.cast(Sequence[T], iterable))
    iterator = iter(iterable)
    if isinstance(iterator, Cursor):
        return tp.cast(Cursor[T], iterator)
    return IterCursor(iterator)
