from __future__ import annotations
import logging
import typing
from ..enumerable import Enumerable
from ..errors import InvalidArgumentError, ERROR_COUNT_LESS_THAN_ZERO
from ..functions import create_lambda, Functions
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import PLinq

logger = logging.getLogger(__name__)


def _check_count(count: int) -> None:
    if count < 0:
        raise InvalidArgumentError(ERROR_COUNT_LESS_THAN_ZERO)


class _CoreOperations(Generic[K, V]):
    """
    intermediate operators. each one runs eagerly when called, rewrites the
    sequence's own enumerable and returns the same sequence for chaining.
    """

    def where(self: 'PLinq[K, V]', predicate: FunctionInput) -> 'PLinq[K, V]':
        """keep only the entries for which predicate(v, k) is truthy"""
        predicate = create_lambda(predicate, 'v,k')
        enumerable = self._iterator
        removed = 0
        # the pass works on a snapshot, so removing as we go is safe
        for k, v in enumerable:
            if not predicate(v, k):
                enumerable.remove(k)
                removed += 1
        logger.debug(f"where removed {removed} of {removed + len(enumerable)} entries")
        return self

    def select(self: 'PLinq[K, V]', selector: FunctionInput,
               key_selector: FunctionInput = None) -> 'PLinq[Any, Any]':
        """
        project every entry through selector(v, k), and optionally re-key it
        through key_selector(v, k). when projected keys collide the last value
        wins, at the position of the first.
        """
        selector = create_lambda(selector, 'v,k')
        key_selector = create_lambda(key_selector, 'v,k', Functions.key)
        self._iterator = Enumerable.from_pairs(
            (key_selector(v, k), selector(v, k)) for k, v in self._iterator)
        return self

    def take(self: 'PLinq[K, V]', count: int) -> 'PLinq[K, V]':
        """keep the first 'count' entries"""
        _check_count(count)
        enumerable = self._iterator
        for index, (k, _) in enumerate(enumerable):
            if index >= count:
                enumerable.remove(k)
        return self

    def skip(self: 'PLinq[K, V]', count: int) -> 'PLinq[K, V]':
        """drop the first 'count' entries"""
        _check_count(count)
        enumerable = self._iterator
        for index, (k, _) in enumerate(enumerable):
            if index >= count:
                break
            enumerable.remove(k)
        return self

    def take_while(self: 'PLinq[K, V]', predicate: FunctionInput) -> 'PLinq[K, V]':
        """keep entries while predicate holds, drop everything from the first failure on"""
        predicate = create_lambda(predicate, 'v,k')
        enumerable = self._iterator
        taking = True
        for k, v in enumerable:
            if taking and predicate(v, k):
                continue
            taking = False
            enumerable.remove(k)
        return self

    def skip_while(self: 'PLinq[K, V]', predicate: FunctionInput) -> 'PLinq[K, V]':
        """drop entries while predicate holds"""
        predicate = create_lambda(predicate, 'v,k')
        enumerable = self._iterator
        for k, v in enumerable:
            if not predicate(v, k):
                break
            enumerable.remove(k)
        return self

    def of_type(self: 'PLinq[K, V]', *types: Type) -> 'PLinq[K, V]':
        """keep entries whose value is an instance of one of the given types"""
        if not types:
            raise InvalidArgumentError("of_type requires at least one type.")
        return self.where(lambda v: isinstance(v, types))

    def to_values(self: 'PLinq[K, V]') -> 'PLinq[int, V]':
        """renumber the keys 0..n-1, keeping the order"""
        self._iterator = Enumerable.from_pairs(enumerate(self._iterator.values()))
        return self

    def for_each(self: 'PLinq[K, V]', action: FunctionInput) -> 'PLinq[K, V]':
        """
        call action(v, k) on every entry for its side effects.
        returns the same sequence so the chain can go on.
        """
        action = create_lambda(action, 'v,k')
        for k, v in self._iterator:
            action(v, k)
        return self
