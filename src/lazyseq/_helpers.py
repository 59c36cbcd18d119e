from operator import index

from lazyseq.cursor import Cursor


def non_negative(n: int) -> int:
    return max(index(n), 0)


def advance(cursor: Cursor[object], n: int) -> int:
    """Pull and discard up to `n` elements, return how many were discarded."""
    advanced = 0
    while advanced < n and cursor.has_more():
        _ = cursor.take_next()
        advanced += 1
    return advanced


def drain(cursor: Cursor[object]) -> int:
    count = 0
    while cursor.has_more():
        _ = cursor.take_next()
        count += 1
    return count
