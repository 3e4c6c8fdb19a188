from __future__ import annotations
import typing
import json
from collections.abc import Mapping
from urllib.parse import urlencode
import numpy as np
import pandas as pd
from ..comparison import to_string
from ..config import settings
from ..errors import TypeMismatch
from ..normalize import normalize_key
from ..records import Shape, object_fields, shape_of
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _plain_key(key: Any) -> Key:
    try:
        return normalize_key(key)
    except TypeMismatch:
        return str(key)


def _entries_of(value: Any) -> Optional[List[Entry]]:
    """the (key, value) pairs of a nested container, or None for a leaf"""
    from ..collection import Collection
    if isinstance(value, Collection):
        return value.to.items()
    if isinstance(value, Mapping):
        return [(_plain_key(k), v) for k, v in value.items()]
    if isinstance(value, (list, tuple)) and not hasattr(value, '_fields'):
        return list(enumerate(value))
    if isinstance(value, (set, frozenset)):
        return list(enumerate(value))
    if isinstance(value, np.ndarray):
        return list(enumerate(value.tolist()))
    return None


def _jsonable(value: Any, force_object: bool) -> Any:
    """
    plain json data for a value. a container whose keys are exactly 0..n-1 in order
    becomes an array, anything else an object; object records always become objects.
    """
    entries = _entries_of(value)
    if entries is None:
        if isinstance(value, np.generic):
            return value.item()
        if shape_of(value) is Shape.OBJECT:
            return {k: _jsonable(v, force_object) for k, v in object_fields(value).items()}
        return value
    if not force_object and [k for k, _ in entries] == list(range(len(entries))):
        return [_jsonable(v, force_object) for _, v in entries]
    return {str(k): _jsonable(v, force_object) for k, v in entries}


def _query_pairs(name: str, value: Any) -> List[Tuple[str, str]]:
    if value is None:
        return []
    entries = _entries_of(value)
    if entries is None and shape_of(value) is Shape.OBJECT:
        entries = list(object_fields(value).items())
    if entries is not None:
        return [pair for k, v in entries for pair in _query_pairs(f"{name}[{k}]", v)]
    if isinstance(value, bool):
        return [(name, '1' if value else '0')]
    return [(name, to_string(value))]


def _as_row(value: Any) -> Any:
    from ..collection import Collection
    if isinstance(value, Collection):
        return value.to.dict()
    if shape_of(value) is Shape.OBJECT:
        return object_fields(value)
    return value


class TerminalAccessor(Generic[T]):
    """conversions out of a collection. nothing here changes the collection."""

    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def list(self) -> List[T]:
        """values in order"""
        return list(self._collection._entries.values())

    def dict(self) -> Dict[Key, T]:
        """a copy of the key/value store"""
        return dict(self._collection._entries)

    def items(self) -> List[Entry]:
        """(key, value) pairs in order"""
        return list(self._collection._entries.items())

    def keys(self) -> List[Key]:
        return list(self._collection._entries.keys())

    def array(self) -> np.ndarray:
        """convert values to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series indexed by key"""
        return pd.Series(self.list(), index=self.keys())

    def df(self) -> pd.DataFrame:
        """
        convert record elements (mappings, collections or objects) to a dataframe,
        one row per element, indexed by key.
        """
        return pd.DataFrame([_as_row(value) for value in self.list()], index=self.keys())

    def json(self, pretty: bool = False, force_object: bool = False) -> str:
        """
        encode as json. sequential collections become arrays unless force_object is set,
        which applies to every nested level.
        """
        data = _jsonable(self._collection, force_object)
        if pretty:
            return json.dumps(data, indent=settings.json_indent)
        return json.dumps(data, separators=(',', ':'))

    def query(self) -> str:
        """
        encode as a url query string. nested containers use name[key]=value,
        booleans become 1/0 and None values are skipped.
        """
        pairs = [pair for key, value in self._collection._entries.items()
                 for pair in _query_pairs(str(key), value)]
        return urlencode(pairs)
