from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# every operator function is called as f(value, key)
Predicate = Callable[[V, K], Any]
Selector = Callable[[V, K], U]
Action = Callable[[V, K], Any]
Accumulator = Callable[[U, V, K], U]

# what callers may hand to an operator before normalization
FunctionInput = Union[Callable[..., Any], str, None]

KeyValue = Tuple[K, V]


class _Missing:
    """sentinel for 'no argument given' where none is a valid value"""

    def __repr__(self) -> str:
        return '<missing>'

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()
