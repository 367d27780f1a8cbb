from __future__ import annotations

from .enumerable import Enumerable
from .types import *

# --- operator groups ---
from .extensions.core import _CoreOperations
from .extensions.element import _ElementOperations
from .extensions.aggregate import _AggregateOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor


class PLinq(
    _CoreOperations[K, V],
    _ElementOperations[K, V],
    _AggregateOperations[K, V]
):
    """
    a linq-style query handle over an ordered key -> value snapshot.

    intermediate operators (where, select, take, ...) run as soon as they are
    called and rewrite this handle's own enumerable; terminal operators (first,
    single, count, ...) scan it and return a value. iterating yields
    (key, value) pairs and always starts from the beginning.
    """

    def __init__(self, source: Any):
        if isinstance(source, PLinq):
            # copy the pairs, the two handles must not share storage
            source = source._iterator
        self._iterator: Enumerable[K, V] = Enumerable(source)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @classmethod
    def from_(cls, source: Any) -> 'PLinq[Any, Any]':
        """wrap a mapping, list, iterator, iterable or another sequence"""
        return cls(source)

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return iter(self._iterator)

    def __len__(self) -> int:
        return len(self._iterator)

    def __repr__(self) -> str:
        return f"PLinq({self._iterator.items()!r})"
