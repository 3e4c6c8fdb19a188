"""
field access over the two record shapes a collection element can take.

an element is read by name either as a ``MAPPING`` (subscript: dicts, collections,
lists, tuples) or as an ``OBJECT`` (attributes: named tuples, dataclasses, plain
instances). the tag is computed once per element and checked at the call site.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from .errors import TypeMismatch
from .types import *


class Shape(Enum):
    MAPPING = 'mapping'
    OBJECT = 'object'


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(value, '_fields')


def shape_of(value: Any) -> Optional[Shape]:
    """tag an element with its record shape, or None when it has no named fields"""
    from .collection import Collection
    if isinstance(value, (Mapping, Collection)):
        return Shape.MAPPING
    if _is_named_tuple(value):
        return Shape.OBJECT
    if isinstance(value, (list, tuple)):
        return Shape.MAPPING
    if isinstance(value, type) or callable(value):
        return None
    if hasattr(value, '__dict__') or hasattr(type(value), '__slots__'):
        return Shape.OBJECT
    return None


def _read_mapping(value: Any, name: Key) -> Any:
    from .collection import Collection
    if isinstance(value, Collection):
        if not value.contains_key(name):
            raise TypeMismatch(f"record has no field {name!r}", value)
        return value.get(name)
    try:
        return value[name]
    except (KeyError, IndexError, TypeError):
        raise TypeMismatch(f"record has no field {name!r}", value) from None


def _read_object(value: Any, name: Key) -> Any:
    if not isinstance(name, str):
        raise TypeMismatch(f"object fields are named by strings, got {name!r}", value)
    try:
        return getattr(value, name)
    except AttributeError:
        raise TypeMismatch(f"object has no attribute {name!r}", value) from None


def read_field(value: Any, name: Key, shape: Optional[Shape] = None) -> Any:
    """read one named field from a record, raising TypeMismatch if it cannot be read"""
    shape = shape or shape_of(value)
    if shape is Shape.MAPPING:
        return _read_mapping(value, name)
    if shape is Shape.OBJECT:
        return _read_object(value, name)
    raise TypeMismatch(f"element is not a mapping or an object: {value!r}", value)


def read_fields(value: Any, names: Iterable[Key]) -> Dict[Key, Any]:
    """build a record of the requested fields, in the order requested"""
    shape = shape_of(value)
    return {name: read_field(value, name, shape) for name in names}


def object_fields(value: Any) -> Dict[str, Any]:
    """an object's public fields as a plain dict (shallow)"""
    if _is_named_tuple(value):
        return dict(value._asdict())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, '__dict__'):
        return {k: v for k, v in vars(value).items() if not k.startswith('_')}
    slots = [s for cls in type(value).__mro__ for s in getattr(cls, '__slots__', ())]
    return {s: getattr(value, s) for s in slots if not s.startswith('_') and hasattr(value, s)}
