from __future__ import annotations
import typing
from ..comparison import EqualitySpec, resolve_equality
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _CoreOperations(Generic[T]):
    def find(self: 'Collection[T]', value: Any, strict: EqualitySpec = False) -> Any:
        """
        key of the first element equal to value, or MISSING when there is none.
        strict may be a bool, an EqualityPolicy or a two-argument comparator.
        """
        equals = resolve_equality(strict)
        for key, item in self._entries.items():
            if equals(item, value):
                return key
        return MISSING

    def search(self: 'Collection[T]', value: Any, strict: EqualitySpec = False) -> Any:
        """alias of find()"""
        return self.find(value, strict)

    def contains(self: 'Collection[T]', value: Any, strict: EqualitySpec = False) -> bool:
        """determines whether any element equals value"""
        return self.find(value, strict) is not MISSING

    def contains_key_value(self: 'Collection[T]', key: Any, value: Any, strict: EqualitySpec = False) -> bool:
        """determines whether key is present and its value equals value"""
        if not self.contains_key(key):
            return False
        return resolve_equality(strict)(self.get(key), value)

    def first(self: 'Collection[T]', default: Any = None) -> Any:
        """first value in iteration order, or default when empty"""
        for value in self._entries.values():
            return value
        return default

    def last(self: 'Collection[T]', default: Any = None) -> Any:
        """last value in iteration order, or default when empty"""
        for value in reversed(self._entries.values()):
            return value
        return default

    def is_empty(self: 'Collection[T]') -> bool:
        return not self._entries

    def has_items(self: 'Collection[T]') -> bool:
        return bool(self._entries)
