"""
Cursors wrapping other cursors; one per `Sequence` combinator.
"""

from __future__ import annotations

import typing as tp

from typing_extensions import override

from lazyseq._helpers import advance
from lazyseq.cursor import Cursor, cursor_of
from lazyseq.defaults import Default, Empty, Exhausted
from lazyseq.wtyping import Expansion, Predicate, Transform


@tp.final
class MapCursor[T, R](Cursor[R]):
    """Apply `transform` to each upstream element as it is taken."""

    def __init__(self, upstream: Cursor[T], transform: Transform[T, R]) -> None:
        self.upstream = upstream
        self.transform = transform

    @override
    def has_more(self) -> bool:
        return self.upstream.has_more()

    @override
    def take_next(self) -> R:
        return self.transform(self.upstream.take_next())


@tp.final
class FilterCursor[T](Cursor[T]):
    """
    Yield only the upstream elements satisfying `predicate`.

    Answering `has_more` means finding the next match, so the match is
    buffered in `_pending` until `take_next` hands it out.

    Example:
        >>> from lazyseq.cursor import ArrayCursor
        >>> cursor = FilterCursor(ArrayCursor([1, 2, 3, 4]), lambda x: x % 2 == 0)
        >>> cursor.has_more(), cursor.has_more(), cursor.take_next()
        (True, True, 2)
        >>> list(cursor)
        [4]
    """

    def __init__(self, upstream: Cursor[T], predicate: Predicate[T]) -> None:
        self.upstream = upstream
        self.predicate = predicate
        self._pending: T | Default = Empty

    @override
    def has_more(self) -> bool:
        if self._pending is not Empty:
            return self._pending is not Exhausted
        while self.upstream.has_more():
            item = self.upstream.take_next()
            if self.predicate(item):
                self._pending = item
                return True
        self._pending = Exhausted
        return False

    @override
    def take_next(self) -> T:
        if not self.has_more():
            raise StopIteration
        item = tp.cast(T, self._pending)
        self._pending = Empty
        return item


@tp.final
class FlattenCursor[T, R](Cursor[R]):
    """
    Concatenate `expand(item)` for every upstream item, one level deep.

    The upstream cursor only advances once the current inner cursor is
    used up. Items expanding to nothing are passed over.

    Example:
        >>> from lazyseq.cursor import ArrayCursor
        >>> list(FlattenCursor(ArrayCursor([0, 2, 0, 1]), range))
        [0, 1, 0]
    """

    def __init__(self, upstream: Cursor[T], expand: Expansion[T, R]) -> None:
        self.upstream = upstream
        self.expand = expand
        self._inner: Cursor[R] | None = None

    @override
    def has_more(self) -> bool:
        while True:
            if self._inner is None:
                if not self.upstream.has_more():
                    return False
                self._inner = cursor_of(self.expand(self.upstream.take_next()))
            if self._inner.has_more():
                return True
            self._inner = None

    @override
    def take_next(self) -> R:
        if not self.has_more():
            raise StopIteration
        return tp.cast(Cursor[R], self._inner).take_next()


@tp.final
class SkippedCursor[T](Cursor[T]):
    """Drop the first `n` upstream elements, on first use."""

    def __init__(self, upstream: Cursor[T], n: int) -> None:
        self.upstream = upstream
        self.n = n
        self._skipped = False

    def _skip(self) -> None:
        if not self._skipped:
            _ = advance(self.upstream, self.n)
            self._skipped = True

    @override
    def has_more(self) -> bool:
        self._skip()
        return self.upstream.has_more()

    @override
    def take_next(self) -> T:
        self._skip()
        return self.upstream.take_next()


@tp.final
class BoundedCursor[T](Cursor[T]):
    """Yield at most `n` upstream elements."""

    def __init__(self, upstream: Cursor[T], n: int) -> None:
        self.upstream = upstream
        self.n = n
        self._taken = 0

    @override
    def has_more(self) -> bool:
        return self._taken < self.n and self.upstream.has_more()

    @override
    def take_next(self) -> T:
        if self._taken >= self.n:
            raise StopIteration
        item = self.upstream.take_next()
        self._taken += 1
        return item
