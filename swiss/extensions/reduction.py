from __future__ import annotations
import typing
import math
from functools import reduce
from ..comparison import to_number, to_string
from ..config import settings
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _ReductionOperations(Generic[T]):
    def fold(self: 'Collection[T]', accumulator: Accumulator[U, T], initial: U) -> U:
        """reduces to a single value starting from initial; an empty collection returns initial"""
        return reduce(accumulator, self._entries.values(), initial)

    def reduce(self: 'Collection[T]', accumulator: Accumulator[T, T], default: Any = None) -> Any:
        """reduces using the first element as the initial value; an empty collection returns default"""
        if not self._entries:
            return default
        return reduce(accumulator, self._entries.values())

    # --- arithmetic ---

    def sum(self: 'Collection[T]') -> Union[int, float]:
        """sum of the numeric value of every element"""
        return sum(to_number(value) for value in self._entries.values())

    def sum_if(self: 'Collection[T]', predicate: Predicate[T]) -> Union[int, float]:
        return self.fold(lambda total, value: total + to_number(value) if predicate(value) else total, 0)

    def average(self: 'Collection[T]') -> Union[int, float]:
        """mean of the numeric values, 0 when empty"""
        if not self._entries:
            return 0
        return self.sum() / len(self._entries)

    def average_if(self: 'Collection[T]', predicate: Predicate[T]) -> Union[int, float]:
        return self.filter(predicate).average()

    def product(self: 'Collection[T]') -> Union[int, float]:
        """product of the numeric values, 1 when empty"""
        return math.prod(to_number(value) for value in self._entries.values())

    # --- counting & matching ---

    def count(self: 'Collection[T]') -> int:
        return len(self._entries)

    def count_if(self: 'Collection[T]', predicate: Predicate[T]) -> int:
        return sum(1 for value in self._entries.values() if predicate(value))

    def all_match(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        """true when every element matches; stops at the first miss"""
        return all(predicate(value) for value in self._entries.values())

    def any_match(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        """true when at least one element matches; stops at the first hit"""
        return any(predicate(value) for value in self._entries.values())

    def none_match(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        return not self.any_match(predicate)

    # --- strings ---

    def join(self: 'Collection[T]', delimiter: str = '') -> str:
        """the string form of every element with delimiter between them"""
        return delimiter.join(to_string(value) for value in self._entries.values())

    def natural_join(self: 'Collection[T]', delimiter: Optional[str] = None, and_: Optional[str] = None) -> str:
        """
        joins the way a sentence lists things: "a, b and c".
        up to two elements are joined with the "and" delimiter alone.
        """
        delimiter = settings.join_delimiter if delimiter is None else delimiter
        and_ = settings.join_and if and_ is None else and_
        parts = [to_string(value) for value in self._entries.values()]
        if len(parts) < 3:
            return and_.join(parts)
        return and_.join([delimiter.join(parts[:-1]), parts[-1]])
