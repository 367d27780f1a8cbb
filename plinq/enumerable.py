from __future__ import annotations

import logging
from collections import abc

from .errors import InvalidSourceError, KeyNotFoundError
from .types import *

logger = logging.getLogger(__name__)


class _Cursor(Generic[K, V]):
    """a single forward pass over a frozen list of pairs."""

    def __init__(self, pairs: List[Tuple[K, V]]):
        self._pairs = pairs
        self._position = 0

    def has_more(self) -> bool:
        return self._position < len(self._pairs)

    def current(self) -> Tuple[K, V]:
        if not self.has_more():
            raise IndexError("enumeration has no current element")
        return self._pairs[self._position]

    def advance(self) -> None:
        if self.has_more():
            self._position += 1


class Enumerable(Generic[K, V]):
    """
    ordered key -> value storage with a re-enumerable iteration contract.

    every pass (begin_iteration() or a fresh iter()) works on a snapshot of the
    pairs taken when it starts, so removals never disturb a pass in progress.
    a mapping source is shared with the caller until the first removal copies it.
    """

    def __init__(self, source: Any):
        self._data, self._shared = self._admit(source)
        self._cursor: Optional[_Cursor[K, V]] = None
        logger.debug(f"wrapped {type(source).__name__} source ({len(self._data)} entries, shared={self._shared})")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[K, V]]) -> 'Enumerable[K, V]':
        """build an enumerable that owns its data from (key, value) pairs"""
        enumerable = cls(dict(pairs))
        enumerable._shared = False
        return enumerable

    @staticmethod
    def _admit(source: Any) -> Tuple[Dict[K, V], bool]:
        if isinstance(source, Enumerable):
            return dict(source._data), False
        if isinstance(source, abc.Mapping):
            return source, True
        if isinstance(source, abc.Iterable):
            # lists, tuples, generators and iterators are drained right here
            return dict(enumerate(source)), False
        raise InvalidSourceError(source)

    def _own(self) -> None:
        """copy shared backing data before the first write"""
        if self._shared:
            self._data = dict(self._data)
            self._shared = False

    # --- pull-based cursor ---

    def begin_iteration(self) -> 'Enumerable[K, V]':
        """start a new pass from the first pair"""
        self._cursor = _Cursor(list(self._data.items()))
        return self

    def _active_cursor(self) -> _Cursor[K, V]:
        if self._cursor is None:
            self.begin_iteration()
        return self._cursor

    def has_more(self) -> bool:
        return self._active_cursor().has_more()

    def current_key_value(self) -> Tuple[K, V]:
        return self._active_cursor().current()

    def current_key(self) -> K:
        return self.current_key_value()[0]

    def current_value(self) -> V:
        return self.current_key_value()[1]

    def advance(self) -> None:
        self._active_cursor().advance()

    # --- mutation ---

    def remove(self, key: K) -> None:
        """remove one entry in place; passes already started still see it"""
        if key not in self._data:
            raise KeyNotFoundError(key)
        self._own()
        del self._data[key]

    # --- read access ---

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        # independent of the shared cursor, so nested passes don't interfere
        cursor = _Cursor(list(self._data.items()))
        while cursor.has_more():
            yield cursor.current()
            cursor.advance()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def __getitem__(self, key: K) -> V:
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def get(self, key: K, default: Any = None) -> Any:
        return self._data.get(key, default)

    def keys(self) -> List[K]:
        return list(self._data.keys())

    def values(self) -> List[V]:
        return list(self._data.values())

    def items(self) -> List[Tuple[K, V]]:
        return list(self._data.items())

    def __repr__(self) -> str:
        return f"Enumerable({len(self._data)} entries)"
