from __future__ import annotations
import typing
import logging
import numpy as np
from ..comparison import loose_equals, to_number, to_string
from ..normalize import entries_from_mixed, values_from_mixed
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


def _try_numpy_first_occurrences(values: List[Any]) -> Optional[List[int]]:
    """positions of the first occurrence of each distinct number, using numpy when the data is purely numeric."""
    try:
        if not values or not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in values):
            return None
        arr = np.array(values)
        if arr.dtype.kind not in 'iuf':
            return None
        if arr.dtype.kind == 'f' and np.isnan(arr).any():
            return None
        _, first = np.unique(arr, return_index=True)
        return sorted(first.tolist())
    except (TypeError, ValueError, OverflowError) as e:  # catch specific errors
        logger.warning(f"numpy unique fell back to the python path: {e}")
        return None


class _SetOperations(Generic[T]):
    """
    intersections and de-duplication. every result keeps the first occurrence of an
    element together with its key.
    """

    def _finish(self: 'Collection[T]', entries: List[Entry], preserve_keys: bool) -> 'Collection[T]':
        result = self._new(entries)
        return result if preserve_keys else result.values()

    def intersect(self: 'Collection[T]', values: Any, preserve_keys: bool = False) -> 'Collection[T]':
        """elements whose string form also occurs among the given values"""
        other = {to_string(value) for value in values_from_mixed(values)}
        return self._finish([(k, v) for k, v in self._entries.items() if to_string(v) in other], preserve_keys)

    def intersect_assoc(self: 'Collection[T]', values: Any, preserve_keys: bool = False) -> 'Collection[T]':
        """entries whose key is present in the input with a value of the same string form"""
        other = dict(entries_from_mixed(values))
        return self._finish([(k, v) for k, v in self._entries.items()
                             if k in other and to_string(other[k]) == to_string(v)], preserve_keys)

    def intersect_keys(self: 'Collection[T]', values: Any, preserve_keys: bool = False) -> 'Collection[T]':
        """entries whose key is present in the input"""
        other = dict(entries_from_mixed(values))
        return self._finish([(k, v) for k, v in self._entries.items() if k in other], preserve_keys)

    def unique(self: 'Collection[T]') -> 'Collection[T]':
        """drops elements loosely equal to an earlier one"""
        kept: List[Entry] = []
        for key, value in self._entries.items():
            if not any(loose_equals(value, seen) for _, seen in kept):
                kept.append((key, value))
        return self._new(kept)

    def _unique_by(self: 'Collection[T]', identity: Callable[[T], Any]) -> 'Collection[T]':
        seen = set()
        return self._new((k, v) for k, v in self._entries.items()
                         if (ident := identity(v)) not in seen and not seen.add(ident))

    def unique_as_strings(self: 'Collection[T]') -> 'Collection[T]':
        """drops elements whose string form matches an earlier one"""
        return self._unique_by(to_string)

    def unique_as_numbers(self: 'Collection[T]') -> 'Collection[T]':
        """drops elements whose numeric value matches an earlier one"""
        items = list(self._entries.items())
        positions = _try_numpy_first_occurrences([v for _, v in items])
        if positions is not None:
            return self._new(items[i] for i in positions)
        return self._unique_by(to_number)
