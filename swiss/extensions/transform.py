from __future__ import annotations
import typing
from ..comparison import is_empty, to_bool, to_float, to_int, to_string
from ..config import settings
from ..errors import TypeMismatch
from ..normalize import is_iterable_input, values_from_mixed
from ..records import Shape, object_fields, read_field, read_fields, shape_of
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def trim(value: Any) -> Any:
    """
    the string form of a scalar with surrounding whitespace stripped.
    containers and objects pass through unchanged.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return to_string(value).strip()
    return value


def not_empty(value: Any) -> bool:
    return not is_empty(value)


class _TransformOperations(Generic[T]):
    # --- projection ---

    def map(self: 'Collection[T]', callback: Selector[T, U]) -> 'Collection[U]':
        """maps every value through the callback, keeping keys"""
        return self._new((key, callback(value)) for key, value in self._entries.items())

    def maybe_map(self: 'Collection[T]', callback: Selector[T, Optional[U]]) -> 'Collection[U]':
        """maps like map() and drops the results that are None"""
        return self.map(callback).remove_nulls()

    def map_assoc(self: 'Collection[T]', generator: PairGenerator[T, U]) -> 'Collection[U]':
        """builds a new collection from the (key, value) pair the generator returns for each entry"""
        return self._new(generator(key, value) for key, value in self._entries.items())

    def strings(self: 'Collection[T]') -> 'Collection[str]':
        return self.map(to_string)

    def ints(self: 'Collection[T]') -> 'Collection[int]':
        return self.map(to_int)

    def floats(self: 'Collection[T]') -> 'Collection[float]':
        return self.map(to_float)

    def bools(self: 'Collection[T]') -> 'Collection[bool]':
        return self.map(to_bool)

    # --- filtering ---

    def filter(self: 'Collection[T]', predicate: Optional[Callable[..., bool]] = None,
               include_keys: bool = False) -> 'Collection[T]':
        """
        keeps the elements the predicate accepts, with their keys.
        with include_keys the predicate receives (value, key). without a predicate,
        empty values are dropped.
        """
        if predicate is None:
            predicate, include_keys = not_empty, False
        if include_keys:
            return self._new((k, v) for k, v in self._entries.items() if predicate(v, k))
        return self._new((k, v) for k, v in self._entries.items() if predicate(v))

    def where(self: 'Collection[T]', predicate: Optional[Callable[..., bool]] = None,
              include_keys: bool = False) -> 'Collection[T]':
        """alias of filter()"""
        return self.filter(predicate, include_keys)

    def filter_to_keys(self: 'Collection[T]', keys: Any) -> 'Collection[T]':
        """a copy holding only the entries under the given keys"""
        wanted = {self._lookup_key(key) for key in values_from_mixed(keys)}
        return self._new((k, v) for k, v in self._entries.items() if k in wanted)

    def without_nulls(self: 'Collection[T]') -> 'Collection[T]':
        return self.filter(lambda value: value is not None)

    def without_empty(self: 'Collection[T]') -> 'Collection[T]':
        return self.filter(not_empty)

    def clean(self: 'Collection[T]', mapper: Optional[Selector[T, Any]] = trim,
              keep: Optional[Predicate[Any]] = not_empty) -> 'Collection[Any]':
        """
        maps then filters in one step, keeping keys. the defaults trim strings and drop
        empty values; pass None to skip either step.
        """
        result = self.map(mapper) if mapper else self.copy()
        return result.filter(keep) if keep else result

    # --- records ---

    def pluck(self: 'Collection[T]', field: Optional[Key] = None) -> 'Collection[Any]':
        """
        a single field of every element, keeping keys. elements may be mappings or objects.
        raises TypeMismatch when an element has neither shape or lacks the field.
        """
        field = settings.default_field if field is None else field
        return self.map(lambda value: read_field(value, field))

    def select(self: 'Collection[T]', fields: Any, preserve_keys: bool = False) -> 'Collection[Dict[Key, Any]]':
        """
        a dict record per element holding only the requested fields, in the requested order.
        mappings and objects can be mixed freely. without preserve_keys the result is keyed
        0..n-1 in iteration order, whatever the source keys were.
        """
        names = values_from_mixed(fields)
        if preserve_keys:
            return self._new((key, read_fields(value, names)) for key, value in self._entries.items())
        return self._new_sequence(read_fields(value, names) for value in self._entries.values())

    def objects_to_arrays(self: 'Collection[T]') -> 'Collection[Any]':
        """object elements become dicts of their fields; other elements pass through"""
        return self.map(lambda value: object_fields(value) if shape_of(value) is Shape.OBJECT else value)

    # --- rekeying ---

    def rekey(self: 'Collection[T]', key_generator: KeyGenerator[T]) -> 'Collection[T]':
        """re-keys every element with key_generator(key, value); later duplicates overwrite earlier ones"""
        return self._new((key_generator(key, value), value) for key, value in self._entries.items())

    def _rekey_by_field(self: 'Collection[T]', field: Key, shape: Shape) -> 'Collection[T]':
        def key_for(value: T) -> Key:
            actual = shape_of(value)
            if actual is not shape:
                raise TypeMismatch(f"expected a {shape.value} element, got {type(value).__name__}", value)
            return read_field(value, field, actual)
        return self._new((key_for(value), value) for value in self._entries.values())

    def rekey_from_arrays(self: 'Collection[T]', field: Optional[Key] = None) -> 'Collection[T]':
        """re-keys mapping elements by one of their fields"""
        return self._rekey_by_field(settings.default_field if field is None else field, Shape.MAPPING)

    def rekey_from_objects(self: 'Collection[T]', attribute: Optional[str] = None) -> 'Collection[T]':
        """re-keys object elements by one of their attributes"""
        return self._rekey_by_field(settings.default_field if attribute is None else attribute, Shape.OBJECT)

    def flip(self: 'Collection[T]') -> 'Collection[Key]':
        """swaps keys and values. values must be ints or strings."""
        def as_key(value: Any) -> Key:
            if isinstance(value, bool) or not isinstance(value, (int, str)):
                raise TypeMismatch(f"only int and str values can be flipped into keys, got {value!r}", value)
            return value
        return self._new((as_key(value), key) for key, value in self._entries.items())

    # --- structure ---

    def values(self: 'Collection[T]') -> 'Collection[T]':
        """the values alone, keyed 0..n-1"""
        return self._new_sequence(self._entries.values())

    def keys(self: 'Collection[T]') -> 'Collection[Key]':
        """the keys as values, keyed 0..n-1"""
        return self._new_sequence(self._entries.keys())

    def flatten(self: 'Collection[T]') -> 'Collection[Any]':
        """
        every leaf value of every nested collection, mapping, sequence or iterator,
        depth first, in one sequence keyed 0..n-1. strings are leaves.
        """
        result = []
        stack = list(reversed(list(self._entries.values())))
        while stack:
            item = stack.pop()
            if is_iterable_input(item):
                stack.extend(reversed(values_from_mixed(item)))
            else:
                result.append(item)
        return self._new_sequence(result)

    def spliced(self: 'Collection[T]', offset: int, length: Optional[int] = None,
                replacement: Any = None) -> 'Collection[T]':
        """splice() applied to a copy, leaving this collection untouched"""
        return self.copy().splice(offset, length, replacement)

    def reverse(self: 'Collection[T]', preserve_keys: bool = False) -> 'Collection[T]':
        """entries in reverse order. string keys are kept; integer keys too with preserve_keys."""
        return self._new(reversed(list(self._entries.items())), renumber=not preserve_keys)

    def offset(self: 'Collection[T]', offset: int = 0, count: Optional[int] = None,
               preserve_keys: bool = False) -> 'Collection[T]':
        """
        a run of entries starting at offset, optionally limited to count.
        negative offsets count from the end, a negative count stops short of the end.
        string keys are kept; integer keys too with preserve_keys.
        """
        from ..collection import _resolve_range
        items = list(self._entries.items())
        start, stop = _resolve_range(len(items), offset, count)
        return self._new(items[start:stop], renumber=not preserve_keys)

    def limit(self: 'Collection[T]', count: int = 1, offset: int = 0,
              preserve_keys: bool = False) -> 'Collection[T]':
        """the first `count` entries from offset"""
        return self.offset(offset, count, preserve_keys)

    def slice(self: 'Collection[T]', offset: int = 0, count: Optional[int] = None,
              preserve_keys: bool = False) -> 'Collection[T]':
        """alias of offset()"""
        return self.offset(offset, count, preserve_keys)
