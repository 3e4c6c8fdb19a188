from __future__ import annotations
import typing
from itertools import batched
from ..normalize import normalize_key
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _GroupingOperations(Generic[T]):
    def _bucket(self: 'Collection[T]', groups: 'Collection[Any]', group_key: Any) -> 'Collection[T]':
        bucket = groups.get(group_key)
        if bucket is MISSING:
            bucket = self._new()
            groups.set(group_key, bucket)
        return bucket

    def group(self: 'Collection[T]', group_key_generator: KeyGenerator[T],
              preserve_keys: bool = True) -> 'Collection[Collection[T]]':
        """
        groups elements into sub-collections keyed by group_key_generator(key, value).
        groups appear in order of first encounter and members keep their encounter order.
        """
        groups = self._new()
        for key, value in self._entries.items():
            bucket = self._bucket(groups, normalize_key(group_key_generator(key, value)))
            if preserve_keys:
                bucket.set(key, value)
            else:
                bucket.add(value)
        return groups

    def mapped_group(self: 'Collection[T]', generator: GroupGenerator[T, U], preserve_keys: bool = True,
                     remove_nulls: bool = False) -> 'Collection[Collection[U]]':
        """
        like group(), but the generator returns (group, key, value) so each member can be
        re-keyed and re-mapped before it is placed. with remove_nulls, members mapped to None
        are dropped (and a group that only ever received None is never created).
        """
        groups = self._new()
        for key, value in self._entries.items():
            group_key, member_key, member = generator(key, value)
            if remove_nulls and member is None:
                continue
            bucket = self._bucket(groups, normalize_key(group_key))
            if preserve_keys:
                bucket.set(member_key, member)
            else:
                bucket.add(member)
        return groups

    def chunk(self: 'Collection[T]', size: int, preserve_keys: bool = False) -> 'Collection[Collection[T]]':
        """splits into runs of `size` entries; the last run may be shorter"""
        if size <= 0:
            raise ValueError("chunk size must be positive")
        return self._new_sequence(
            self._new(batch) if preserve_keys else self._new_sequence(v for _, v in batch)
            for batch in batched(self._entries.items(), size))

    def chunk_if(self: 'Collection[T]', predicate: KeyedPredicate[T],
                 preserve_keys: bool = False) -> 'Collection[Collection[T]]':
        """
        starts a new run whenever predicate(key, value) is true for the element about to be
        added, so that element opens the new run. a match on the first element leaves an
        empty leading run, and an empty collection gives a single empty run.
        """
        runs: List[List[Entry]] = []
        current: List[Entry] = []
        for key, value in self._entries.items():
            if predicate(key, value):
                runs.append(current)
                current = []
            current.append((key, value))
        runs.append(current)
        return self._new_sequence(
            self._new(run) if preserve_keys else self._new_sequence(v for _, v in run)
            for run in runs)
