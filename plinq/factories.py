import typing
from .errors import InvalidArgumentError, ERROR_COUNT_LESS_THAN_ZERO, ERROR_STEP_NEGATIVE
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import PLinq


def from_iterable(source: Any) -> 'PLinq[Any, Any]':
    """create a sequence from a mapping, list, iterator, iterable or sequence"""
    from .sequence import PLinq
    return PLinq(source)


def from_range(start: int, count: int, step: int = 1) -> 'PLinq[int, int]':
    """create a sequence of 'count' integers starting at start"""
    from .sequence import PLinq
    if count < 0:
        raise InvalidArgumentError(ERROR_COUNT_LESS_THAN_ZERO)
    if step <= 0:
        raise InvalidArgumentError(ERROR_STEP_NEGATIVE)
    return PLinq(range(start, start + count * step, step))


def repeat(element: T, count: int) -> 'PLinq[int, T]':
    """create a sequence with element repeated count times"""
    from .sequence import PLinq
    if count < 0:
        raise InvalidArgumentError(ERROR_COUNT_LESS_THAN_ZERO)
    return PLinq([element] * count)


def empty() -> 'PLinq[Any, Any]':
    """create an empty sequence"""
    from .sequence import PLinq
    return PLinq([])


# --- aliases ---
plinq = from_iterable
P = from_iterable
p = from_iterable
