from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _IterationOperations(Generic[T]):
    """
    eager iteration for side effects, in current order. the callback must not change the
    collection it is iterating. the *_until variants stop at the first falsy callback result
    and report whether every element was visited.
    """

    def each(self: 'Collection[T]', callback: Callable[[T], Any]) -> 'Collection[T]':
        for value in list(self._entries.values()):
            callback(value)
        return self

    def each_until(self: 'Collection[T]', callback: Callable[[T], Any]) -> bool:
        for value in list(self._entries.values()):
            if not callback(value):
                return False
        return True

    def each_keyed(self: 'Collection[T]', callback: Callable[[Key, T], Any]) -> 'Collection[T]':
        for key, value in list(self._entries.items()):
            callback(key, value)
        return self

    def each_keyed_until(self: 'Collection[T]', callback: Callable[[Key, T], Any]) -> bool:
        for key, value in list(self._entries.items()):
            if not callback(key, value):
                return False
        return True
