from __future__ import annotations
import typing
from ..errors import (
    NoMatchError, MultipleMatchError, ERROR_MANY_ELEMENTS, ERROR_MANY_MATCHES
)
from ..functions import create_lambda, Functions
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import PLinq


class _ElementOperations(Generic[K, V]):
    """terminal operators that pick a single value out of the sequence."""

    def _scan_first(self: 'PLinq[K, V]', predicate: FunctionInput) -> Any:
        predicate = create_lambda(predicate, 'v,k', Functions.true)
        # a private pass: predicates may scan this same sequence again
        for k, v in self._iterator:
            if predicate(v, k):
                return v
        return MISSING

    def _scan_last(self: 'PLinq[K, V]', predicate: FunctionInput) -> Any:
        predicate = create_lambda(predicate, 'v,k', Functions.true)
        found = MISSING
        for k, v in self._iterator:
            if predicate(v, k):
                found = v
        return found

    def _scan_single(self: 'PLinq[K, V]', predicate: FunctionInput) -> Any:
        message = ERROR_MANY_ELEMENTS if predicate is None else ERROR_MANY_MATCHES
        predicate = create_lambda(predicate, 'v,k', Functions.true)
        found = MISSING
        for k, v in self._iterator:
            if predicate(v, k):
                if found is not MISSING:
                    raise MultipleMatchError(message)
                found = v
        return found

    # --- first ---

    def first(self: 'PLinq[K, V]', predicate: FunctionInput = None) -> V:
        """
        the first value, or the first one satisfying predicate(v, k).
        raises NoMatchError when nothing matches, including on an empty sequence.
        """
        found = self._scan_first(predicate)
        if found is MISSING:
            raise NoMatchError()
        return found

    def first_or_default(self: 'PLinq[K, V]', default: Any = None,
                         predicate: FunctionInput = None) -> Any:
        """
        the first value satisfying predicate(v, k), or default when nothing matches.
        if computing the default is costly, use first_or_fallback instead.
        """
        found = self._scan_first(predicate)
        return default if found is MISSING else found

    def first_or_fallback(self: 'PLinq[K, V]', fallback: FunctionInput,
                          predicate: FunctionInput = None) -> Any:
        """like first_or_default, but fallback() is only called when nothing matches"""
        fallback = create_lambda(fallback, '')
        found = self._scan_first(predicate)
        return fallback() if found is MISSING else found

    # --- last ---

    def last(self: 'PLinq[K, V]', predicate: FunctionInput = None) -> V:
        found = self._scan_last(predicate)
        if found is MISSING:
            raise NoMatchError()
        return found

    def last_or_default(self: 'PLinq[K, V]', default: Any = None,
                        predicate: FunctionInput = None) -> Any:
        found = self._scan_last(predicate)
        return default if found is MISSING else found

    def last_or_fallback(self: 'PLinq[K, V]', fallback: FunctionInput,
                         predicate: FunctionInput = None) -> Any:
        fallback = create_lambda(fallback, '')
        found = self._scan_last(predicate)
        return fallback() if found is MISSING else found

    # --- single ---

    def single(self: 'PLinq[K, V]', predicate: FunctionInput = None) -> V:
        """the only matching value; errors on zero or several matches"""
        found = self._scan_single(predicate)
        if found is MISSING:
            raise NoMatchError()
        return found

    def single_or_default(self: 'PLinq[K, V]', default: Any = None,
                          predicate: FunctionInput = None) -> Any:
        """the only matching value or default; several matches still raise"""
        found = self._scan_single(predicate)
        return default if found is MISSING else found

    # --- by key ---

    def element_at(self: 'PLinq[K, V]', key: K) -> V:
        """value stored under key; raises KeyNotFoundError"""
        return self._iterator[key]

    def element_at_or_default(self: 'PLinq[K, V]', key: K, default: Any = None) -> Any:
        return self._iterator.get(key, default)
