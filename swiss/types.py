from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Key = Union[int, str]
Entry = Tuple[Key, Any]

Predicate = Callable[[T], bool]
KeyedPredicate = Callable[[Key, T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
KeyGenerator = Callable[[Key, T], Key]
PairGenerator = Callable[[Key, T], Tuple[Key, U]]
GroupGenerator = Callable[[Key, T], Tuple[Key, Key, U]]


class _Missing:
    """sentinel returned by lookups on absent keys. falsy, one instance only."""
    _instance: Optional['_Missing'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"

    def __reduce__(self): return (_Missing, ())


MISSING = _Missing()


def mutating(func: Callable) -> Callable:
    """
    marks an operation as changing the receiver in place.
    unmarked public operations leave the receiver untouched and return a new collection or a value.
    """
    func.__swiss_mutating__ = True
    return func


def is_mutating(func: Any) -> bool:
    return getattr(func, '__swiss_mutating__', False)


class _Unset:
    """marks an omitted argument where None is a meaningful value"""
    def __repr__(self) -> str: return "UNSET"


UNSET = _Unset()
