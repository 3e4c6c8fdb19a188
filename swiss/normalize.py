"""turns arbitrary input into the (key, value) entries a collection stores."""
from __future__ import annotations

import math
import typing
from collections.abc import Mapping
import pandas as pd
from .errors import TypeMismatch
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collection

_SCALAR_SEQUENCES = (str, bytes, bytearray)


def _canonical_int(text: str) -> Optional[int]:
    # "5" and "-3" are integer keys, "05", "+5", "-0" and "5.0" stay strings
    body = text[1:] if text.startswith('-') else text
    if not body.isdigit() or not body.isascii():
        return None
    if body != '0' and body.startswith('0'):
        return None
    if text == '-0':
        return None
    return int(text)


def normalize_key(key: Any) -> Key:
    """coerce a key to the int-or-str domain, raising TypeMismatch for anything unusable"""
    if isinstance(key, bool):
        return int(key)
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        as_int = _canonical_int(key)
        return key if as_int is None else as_int
    if isinstance(key, float):
        if not math.isfinite(key):
            raise TypeMismatch(f"non-finite float cannot be a key: {key!r}", key)
        return int(key)
    if key is None:
        return ''
    if hasattr(key, '__index__'):
        # numpy integer scalars
        return int(key.__index__())
    raise TypeMismatch(f"illegal key type {type(key).__name__}: {key!r}", key)


def is_iterable_input(value: Any) -> bool:
    """whether the normalizer would unpack this value rather than wrap it"""
    from .collection import Collection
    if isinstance(value, _SCALAR_SEQUENCES):
        return False
    return isinstance(value, (Collection, Mapping, pd.Series, Iterable))


def entries_from_mixed(value: Any) -> List[Entry]:
    """
    unwrap a collection, pass through a mapping or sequence, drain an iterator
    or wrap a single value, always producing an ordered list of (key, value) pairs.
    """
    from .collection import Collection
    if isinstance(value, Collection):
        return value.to.items()
    if isinstance(value, Mapping):
        return [(normalize_key(k), v) for k, v in value.items()]
    if isinstance(value, pd.Series):
        return [(normalize_key(k), v) for k, v in value.items()]
    if isinstance(value, _SCALAR_SEQUENCES):
        return [(0, value)]
    if isinstance(value, Iterable):
        return list(enumerate(value))
    return [(0, value)]


def values_from_mixed(value: Any) -> List[Any]:
    """the same unpacking as entries_from_mixed, keeping only the values"""
    return [v for _, v in entries_from_mixed(value)]


def to_collection(value: Any) -> 'Collection':
    """return the value itself when it is already a collection, otherwise normalize it into one"""
    from .collection import Collection
    if isinstance(value, Collection):
        return value
    return Collection.create(value)
