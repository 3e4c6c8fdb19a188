from __future__ import annotations

import logging
from .types import *
from .comparison import native_equals
from .errors import MissingKeyError, TypeMismatch
from .normalize import entries_from_mixed, normalize_key

# --- operation sets ---
from .extensions.core import _CoreOperations
from .extensions.mutation import _MutationOperations
from .extensions.transform import _TransformOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.reduction import _ReductionOperations
from .extensions.iteration import _IterationOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# inserted entries carry this in place of a key until the splice renumbers them
_AUTO = None


def _resolve_range(count: int, offset: int, length: Optional[int]) -> Tuple[int, int]:
    """
    clamp an offset/length pair against a sequence of `count` entries.
    negative offsets count from the end, a negative length stops that many entries before the end.
    """
    if offset > count:
        offset = count
    elif offset < 0:
        offset = max(count + offset, 0)
    if length is None:
        stop = count
    elif length < 0:
        stop = max(count + length, offset)
    else:
        stop = min(offset + length, count)
    return offset, stop


# --- ordered key-value store ---

class _BaseCollection(Generic[T]):
    """
    insertion-ordered mapping of int or str keys to values.

    the store keeps a per-instance auto key: one past the largest integer key ever
    assigned. unset() never rolls it back, so removing the last entry of a sequence
    does not make the next add() reuse its key.

    callbacks passed to any operation must not mutate the collection they iterate.
    """

    def __init__(self):
        self._entries: Dict[Key, T] = {}
        self._next_key = 0

    @classmethod
    def _from_entries(cls, entries: Iterable[Entry]) -> 'Collection[T]':
        instance = cls()
        for key, value in entries:
            instance._store(normalize_key(key), value)
        return instance

    def _new(self, entries: Iterable[Entry] = (), renumber: bool = False) -> 'Collection[Any]':
        """build an independent collection of the same class, optionally renumbering integer keys"""
        if renumber:
            result = type(self)()
            result._rebuild(list(entries))
            return result
        return type(self)._from_entries(entries)

    def _new_sequence(self, values: Iterable[Any]) -> 'Collection[Any]':
        return type(self)._from_entries(enumerate(values))

    # --- primitives ---

    def _store(self, key: Key, value: T) -> None:
        self._entries[key] = value
        if isinstance(key, int) and key >= self._next_key:
            self._next_key = key + 1

    def _append_auto(self, value: T) -> Key:
        key = self._next_key
        self._entries[key] = value
        self._next_key = key + 1
        return key

    def _rebuild(self, entries: List[Entry]) -> None:
        """replace the store, renumbering integer-keyed (and inserted) entries from 0 in order"""
        rebuilt: Dict[Key, T] = {}
        position = 0
        for key, value in entries:
            if key is _AUTO or isinstance(key, int):
                rebuilt[position] = value
                position += 1
            else:
                rebuilt[key] = value
        self._entries = rebuilt
        self._next_key = position

    def _splice(self, offset: int, length: Optional[int] = None,
                replacement: Optional[Iterable[T]] = None) -> List[T]:
        """remove a range, insert bare values in its place, renumber integer keys. returns the removed values."""
        items = list(self._entries.items())
        start, stop = _resolve_range(len(items), offset, length)
        inserted = [(_AUTO, value) for value in (replacement or ())]
        removed = items[start:stop]
        self._rebuild(items[:start] + inserted + items[stop:])
        logger.debug(f"splice at {start}: removed {len(removed)}, inserted {len(inserted)}")
        return [value for _, value in removed]

    def _merge(self, entries: Iterable[Entry]) -> None:
        """integer-keyed entries are appended under fresh auto keys, string keys overwrite"""
        appended = 0
        for key, value in entries:
            if isinstance(key, int):
                self._append_auto(value)
                appended += 1
            else:
                self._entries[key] = value
        logger.debug(f"merge appended {appended} entries, next auto key {self._next_key}")

    def _overwrite(self, entries: Iterable[Entry]) -> None:
        for key, value in entries:
            self._store(normalize_key(key), value)

    def _lookup_key(self, key: Any) -> Any:
        # keys that cannot exist are reported as absent instead of raising
        try:
            return normalize_key(key)
        except TypeMismatch:
            return MISSING

    # --- keyed access ---

    def get(self, key: Any, default: Any = MISSING) -> Any:
        """value stored under key, or `default` (MISSING unless given) when absent"""
        key = self._lookup_key(key)
        if key is MISSING:
            return default
        return self._entries.get(key, default)

    @mutating
    def set(self, key: Any, value: T) -> 'Collection[T]':
        """insert or overwrite; an integer key at or past the auto key moves the auto key beyond it"""
        self._store(normalize_key(key), value)
        return self

    @mutating
    def unset(self, key: Any) -> 'Collection[T]':
        """remove the entry if present. other keys and the auto key are left alone."""
        key = self._lookup_key(key)
        if key is not MISSING:
            self._entries.pop(key, None)
        return self

    def contains_key(self, key: Any) -> bool:
        key = self._lookup_key(key)
        return key is not MISSING and key in self._entries

    # --- python protocols ---

    def __getitem__(self, key: Any) -> T:
        value = self.get(key)
        if value is MISSING:
            raise MissingKeyError(key)
        return value

    def __setitem__(self, key: Any, value: T) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        self.unset(key)

    def __iter__(self) -> Iterator[T]:
        # a snapshot, so iteration is restartable and unaffected by later changes
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value: Any) -> bool:
        return any(item is value or native_equals(item, value) for item in self._entries.values())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, _BaseCollection):
            return NotImplemented
        if len(self._entries) != len(other._entries):
            return False
        return all(k1 == k2 and native_equals(v1, v2)
                   for (k1, v1), (k2, v2) in zip(self._entries.items(), other._entries.items()))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


# --- main collection class ---

class Collection(
    _BaseCollection[T],
    _CoreOperations[T],
    _MutationOperations[T],
    _TransformOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _ReductionOperations[T],
    _IterationOperations[T]
):
    """an ordered, key-addressable collection with a fluent api over array-style semantics."""

    def __init__(self, values: Any = UNSET):
        super().__init__()
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
        if values is not UNSET:
            self._overwrite(entries_from_mixed(values))

    @classmethod
    def create(cls, values: Any = UNSET) -> 'Collection[Any]':
        """
        normalize any input into a new collection. a collection, mapping, sequence or iterator
        supplies its entries; any other value (None included) becomes a one-element collection.
        """
        return cls(values)

    @classmethod
    def mutating_operations(cls) -> List[str]:
        """names of the public operations that change the receiver in place"""
        return sorted(name for name in dir(cls)
                      if not name.startswith('_') and is_mutating(getattr(cls, name, None)))

    def copy(self) -> 'Collection[T]':
        """shallow copy with its own backing store, including the auto key"""
        duplicate = type(self)()
        duplicate._entries = dict(self._entries)
        duplicate._next_key = self._next_key
        return duplicate
