"""
equality and ordering policy shared by search, unique, intersect and sort.

loose equality is a fixed, enumerated rule set rather than ambient coercion:

  1. python ``==`` (so ``1 == 1.0 == True``)
  2. a number equals a numeric string of the same value (``3 == "3"``, ``3 == " 3.0"``)
  3. two numeric strings compare numerically (``"10" == "1e1"``)
  4. ``None`` equals ``None``, ``False``, ``0``, ``0.0``, ``""`` and empty containers
  5. collections, mappings and lists compare entry by entry, loosely, ignoring order
  6. nothing else is equal (``"abc" != 0``)

strict equality is ``type(a) is type(b) and a == b``.
"""
from __future__ import annotations

import math
import numbers
import re
from collections.abc import Mapping, Sized
from enum import Enum
from functools import cmp_to_key
from .errors import TypeMismatch
from .types import *

_NUMERIC = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')
_LEADING_NUMERIC = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')


def _parse(text: str) -> Union[int, float]:
    text = text.strip()
    if any(c in text for c in '.eE'):
        return float(text)
    return int(text)


def parse_numeric(value: str) -> Optional[Union[int, float]]:
    """the numeric value of a fully numeric string, otherwise None"""
    if not _NUMERIC.match(value):
        return None
    return _parse(value)


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def is_numeric(value: Any) -> bool:
    """a real number or a string that is entirely numeric"""
    if isinstance(value, str):
        return parse_numeric(value) is not None
    return is_number(value)


def _numeric_value(value: Any) -> Optional[Union[int, float]]:
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    if isinstance(value, str):
        return parse_numeric(value)
    return None


def _is_container(value: Any) -> bool:
    return isinstance(value, Sized) and not isinstance(value, (str, bytes, bytearray))


def is_empty(value: Any) -> bool:
    """None, False, zero, '', '0' and empty containers are empty"""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == '' or value == '0'
    if is_number(value):
        return value == 0
    if _is_container(value):
        return len(value) == 0
    return False


def to_number(value: Any) -> Union[int, float]:
    """
    numeric coercion used by sums, products and numeric sorts.
    strings honor a leading numeric prefix ("12abc" -> 12), containers give 0 or 1,
    other objects give 1 and None gives 0.
    """
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    if value is None:
        return 0
    if isinstance(value, str):
        match = _LEADING_NUMERIC.match(value)
        return _parse(match.group(0)) if match else 0
    if _is_container(value):
        return 0 if len(value) == 0 else 1
    return 1


def to_int(value: Any) -> int:
    number = to_number(value)
    if isinstance(number, float) and not math.isfinite(number):
        return 0
    return int(number)


def to_float(value: Any) -> float:
    return float(to_number(value))


def to_bool(value: Any) -> bool:
    return not is_empty(value)


def to_string(value: Any) -> str:
    """string form used by joins, string uniqueness and value intersection"""
    if isinstance(value, str):
        return value
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    if isinstance(value, float):
        if math.isnan(value): return 'NAN'
        if math.isinf(value): return 'INF' if value > 0 else '-INF'
        if value.is_integer(): return str(int(value))
        return repr(value)
    return str(value)


def native_equals(a: Any, b: Any) -> bool:
    # array-likes answer == elementwise, which has no single truth value
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return a is b


def _loose_none(other: Any) -> bool:
    if other is None or other is False or (isinstance(other, str) and other == ''):
        return True
    if is_number(other):
        return other == 0
    return _is_container(other) and len(other) == 0


def _is_entry_container(value: Any) -> bool:
    from .collection import Collection
    return isinstance(value, (Collection, Mapping, list, tuple))


def _comparable_entries(value: Any) -> Dict[Any, Any]:
    # mapping keys are compared raw when they are not valid collection keys
    from .collection import Collection
    from .normalize import normalize_key
    if isinstance(value, Collection):
        return value.to.dict()
    if isinstance(value, Mapping):
        entries = {}
        for key, item in value.items():
            try:
                entries[normalize_key(key)] = item
            except TypeMismatch:
                entries[key] = item
        return entries
    return dict(enumerate(value))


def _loose_entries_equal(a: Any, b: Any) -> bool:
    left = _comparable_entries(a)
    right = _comparable_entries(b)
    if left.keys() != right.keys():
        return False
    return all(loose_equals(value, right[key]) for key, value in left.items())


def loose_equals(a: Any, b: Any) -> bool:
    if a is b or native_equals(a, b):
        return True
    if a is None or b is None:
        return _loose_none(b if a is None else a)
    if isinstance(a, str) or isinstance(b, str):
        left, right = _numeric_value(a), _numeric_value(b)
        return left is not None and right is not None and left == right
    if _is_entry_container(a) and _is_entry_container(b):
        return _loose_entries_equal(a, b)
    return False


def strict_equals(a: Any, b: Any) -> bool:
    return a is b or (type(a) is type(b) and native_equals(a, b))


class EqualityPolicy(Enum):
    """the comparison modes available to find, contains and contains_key_value"""
    LOOSE = 'loose'
    STRICT = 'strict'

    def equals(self, a: Any, b: Any) -> bool:
        return strict_equals(a, b) if self is EqualityPolicy.STRICT else loose_equals(a, b)


EqualitySpec = Union[bool, EqualityPolicy, Callable[[Any, Any], bool]]


def resolve_equality(strict: EqualitySpec) -> Callable[[Any, Any], bool]:
    """turn a strict flag, a policy or a custom comparator into a two-argument equality function"""
    if isinstance(strict, EqualityPolicy):
        return strict.equals
    if callable(strict):
        return strict
    return EqualityPolicy.STRICT.equals if strict else EqualityPolicy.LOOSE.equals


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_values(a: Any, b: Any) -> int:
    """
    standard three-way ordering for mixed values.
    numbers and numeric strings order numerically, other strings lexically,
    a number against a non-numeric string by string form, None first.
    unorderable pairs fall back to the type name.
    """
    if a is None or b is None:
        return (a is not None) - (b is not None)
    left, right = _numeric_value(a), _numeric_value(b)
    if left is not None and right is not None:
        return _cmp(left, right)
    if isinstance(a, str) or isinstance(b, str):
        if (isinstance(a, str) or is_number(a)) and (isinstance(b, str) or is_number(b)):
            return _cmp(to_string(a), to_string(b))
    try:
        return _cmp(a, b)
    except TypeError:
        return _cmp(type(a).__name__, type(b).__name__)


standard_key = cmp_to_key(compare_values)


def sort_key(as_numbers: bool = False) -> Callable[[Any], Any]:
    """key function for sorted(); numeric mode coerces every value first"""
    if as_numbers:
        return to_number
    return standard_key
