import typing as tp
from collections.abc import Callable, Iterable

if tp.TYPE_CHECKING:
    from lazyseq.cursor import Cursor


type Transform[T, R] = Callable[[T], R]
type Predicate[T] = Callable[[T], bool]
type Expansion[T, R] = Callable[[T], Iterable[R]]
type CursorFactory[T] = Callable[[], Cursor[T]]
