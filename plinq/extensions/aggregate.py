from __future__ import annotations
import typing
from ..errors import NoElementsError
from ..functions import create_lambda, Functions
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import PLinq


class _AggregateOperations(Generic[K, V]):
    """terminal operators that reduce the whole sequence to one result."""

    def any(self: 'PLinq[K, V]', predicate: FunctionInput = None) -> bool:
        """true if any entry satisfies predicate(v, k), or if the sequence is non-empty"""
        predicate = create_lambda(predicate, 'v,k', Functions.true)
        return any(predicate(v, k) for k, v in self._iterator)

    def all(self: 'PLinq[K, V]', predicate: FunctionInput) -> bool:
        """true if every entry satisfies predicate(v, k); true for an empty sequence"""
        predicate = create_lambda(predicate, 'v,k')
        return all(predicate(v, k) for k, v in self._iterator)

    def count(self: 'PLinq[K, V]', predicate: FunctionInput = None) -> int:
        if predicate is None:
            return len(self._iterator)
        predicate = create_lambda(predicate, 'v,k')
        return sum(1 for k, v in self._iterator if predicate(v, k))

    def contains(self: 'PLinq[K, V]', value: Any) -> bool:
        return any(v == value for _, v in self._iterator)

    def contains_key(self: 'PLinq[K, V]', key: Any) -> bool:
        return key in self._iterator

    def aggregate(self: 'PLinq[K, V]', func: FunctionInput, seed: Any = MISSING) -> Any:
        """
        left fold over the values with func(accumulator, v, k).
        without a seed the first value starts the fold, so the sequence
        must not be empty.
        """
        func = create_lambda(func, 'a,v,k')
        result = seed
        for k, v in self._iterator:
            result = v if result is MISSING else func(result, v, k)
        if result is MISSING:
            raise NoElementsError()
        return result
