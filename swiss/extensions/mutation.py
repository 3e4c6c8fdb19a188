"""
the in-place operation set. every method here changes the receiver and, apart from
the removers that hand back a value (pop, dequeue, pop_to), returns it for chaining.
"""
from __future__ import annotations
import typing
import logging
from functools import cmp_to_key
from ..comparison import is_empty, sort_key
from ..normalize import entries_from_mixed, values_from_mixed
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


class _MutationOperations(Generic[T]):
    # --- growing ---

    @mutating
    def add(self: 'Collection[T]', value: T) -> 'Collection[T]':
        """adds a value under the next auto key"""
        self._append_auto(value)
        return self

    @mutating
    def push(self: 'Collection[T]', value: T) -> 'Collection[T]':
        """pushes a value onto the end"""
        self._append_auto(value)
        return self

    @mutating
    def queue(self: 'Collection[T]', value: T) -> 'Collection[T]':
        """enqueues a value at the end, same as push()"""
        return self.push(value)

    @mutating
    def insert(self: 'Collection[T]', offset: int, values: Any) -> 'Collection[T]':
        """inserts one or more values at offset. integer keys are renumbered afterwards."""
        self._splice(offset, 0, values_from_mixed(values))
        return self

    @mutating
    def append(self: 'Collection[T]', values: Any) -> 'Collection[T]':
        """
        appends one or more values. integer-keyed input gets fresh auto keys,
        string-keyed input overwrites or adds entries under the same key.
        """
        self._merge(entries_from_mixed(values))
        return self

    @mutating
    def prepend(self: 'Collection[T]', values: Any) -> 'Collection[T]':
        """inserts one or more values at the front. integer keys are renumbered afterwards."""
        self._splice(0, 0, values_from_mixed(values))
        return self

    @mutating
    def overwrite(self: 'Collection[T]', pairs: Any) -> 'Collection[T]':
        """sets every key/value pair of the input, keeping key identity exactly"""
        self._overwrite(entries_from_mixed(pairs))
        return self

    @mutating
    def splice(self: 'Collection[T]', offset: int, length: Optional[int] = None,
               replacement: Any = None) -> 'Collection[T]':
        """removes `length` entries at offset and inserts the replacement values in their place"""
        self._splice(offset, length, values_from_mixed(replacement) if replacement is not None else [])
        return self

    # --- shrinking ---

    @mutating
    def pop(self: 'Collection[T]', default: Any = None) -> Any:
        """removes and returns the last value, or default when empty. the auto key is not rolled back."""
        if not self._entries:
            return default
        return self._entries.pop(next(reversed(self._entries)))

    @mutating
    def dequeue(self: 'Collection[T]', default: Any = None) -> Any:
        """removes and returns the first value, or default when empty. integer keys are renumbered."""
        if not self._entries:
            return default
        return self._splice(0, 1)[0]

    @mutating
    def pop_to(self: 'Collection[T]', collection: 'Collection[Any]') -> Any:
        """pops the last value off this collection, pushes it onto another and returns it"""
        value = self.pop()
        collection.push(value)
        logger.debug(f"pop_to moved {value!r}")
        return value

    @mutating
    def remove(self: 'Collection[T]', key: Any) -> 'Collection[T]':
        """removes the entry under key; absent keys are ignored"""
        return self.unset(key)

    @mutating
    def remove_if(self: 'Collection[T]', predicate: Predicate[T]) -> 'Collection[T]':
        """removes every element matching the predicate, leaving other keys untouched"""
        doomed = [key for key, value in self._entries.items() if predicate(value)]
        for key in doomed:
            del self._entries[key]
        return self

    @mutating
    def remove_keys(self: 'Collection[T]', keys: Any) -> 'Collection[T]':
        """removes the entries under each of the given keys"""
        for key in values_from_mixed(keys):
            self.unset(key)
        return self

    @mutating
    def remove_range(self: 'Collection[T]', offset: int, length: Optional[int] = None) -> 'Collection[T]':
        """removes `length` entries starting at offset. integer keys are renumbered afterwards."""
        self._splice(offset, length)
        return self

    @mutating
    def remove_nulls(self: 'Collection[T]') -> 'Collection[T]':
        return self.remove_if(lambda value: value is None)

    @mutating
    def remove_empty(self: 'Collection[T]') -> 'Collection[T]':
        return self.remove_if(is_empty)

    # --- ordering ---

    def _sort_values(self: 'Collection[T]', key_func: Callable[[T], Any], descending: bool) -> None:
        # python's sort is stable, so equal elements keep their relative order in both directions
        items = sorted(self._entries.items(), key=lambda entry: key_func(entry[1]), reverse=descending)
        self._rebuild(items)
        logger.debug(f"value sort over {len(items)} entries")

    def _sort_keys(self: 'Collection[T]', key_func: Callable[[Key], Any], descending: bool) -> None:
        items = sorted(self._entries.items(), key=lambda entry: key_func(entry[0]), reverse=descending)
        self._entries = dict(items)

    @mutating
    def sort(self: 'Collection[T]', as_numbers: bool = False, descending: bool = False) -> 'Collection[T]':
        """
        sorts by value with the standard ordering (or numerically when as_numbers is set).
        integer keys are renumbered in the new order; string keys are kept.
        """
        self._sort_values(sort_key(as_numbers), descending)
        return self

    @mutating
    def custom_sort(self: 'Collection[T]', comparer: Comparer[T]) -> 'Collection[T]':
        """sorts by value with a three-way comparison function; integer keys are renumbered"""
        self._sort_values(cmp_to_key(comparer), False)
        return self

    @mutating
    def key_sort(self: 'Collection[T]', as_numbers: bool = False, descending: bool = False) -> 'Collection[T]':
        """reorders entries by key without changing any key"""
        self._sort_keys(sort_key(as_numbers), descending)
        return self

    @mutating
    def custom_key_sort(self: 'Collection[T]', comparer: Comparer[Key]) -> 'Collection[T]':
        """reorders entries by key with a three-way comparison function"""
        self._sort_keys(cmp_to_key(comparer), False)
        return self
