import typing
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collection


def create(values: Any = UNSET) -> 'Collection[Any]':
    """create a collection from any input (see Collection.create)"""
    from .collection import Collection
    return Collection.create(values)


def from_entries(entries: Iterable[Entry]) -> 'Collection[Any]':
    """create a collection from (key, value) pairs, keeping every key"""
    from .collection import Collection
    return Collection._from_entries(entries)


def from_range(start: int, count: int) -> 'Collection[int]':
    """create a sequence of count consecutive integers"""
    return create(range(start, start + count))


def repeat(item: T, count: int) -> 'Collection[T]':
    """create a sequence holding item count times"""
    return create([item] * count)


def empty() -> 'Collection[Any]':
    """create empty collection"""
    return create()


# --- aliases ---
sc = create
swiss = create
