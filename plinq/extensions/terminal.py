from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import PLinq


class TerminalAccessor(Generic[K, V]):
    """conversions of the current snapshot into plain containers."""

    def __init__(self, sequence_instance: 'PLinq[K, V]'):
        self._sequence = sequence_instance

    def list(self) -> List[V]:
        """values, in order"""
        return self._sequence._iterator.values()

    def keys(self) -> List[K]:
        return self._sequence._iterator.keys()

    def pairs(self) -> List[Tuple[K, V]]:
        """(key, value) tuples, in order"""
        return self._sequence._iterator.items()

    def dict(self) -> Dict[K, V]:
        return dict(self._sequence._iterator.items())

    def array(self) -> np.ndarray:
        """values as a numpy array"""
        return np.array(self._sequence._iterator.values())

    def series(self) -> pd.Series:
        """values as a pandas series indexed by key"""
        enumerable = self._sequence._iterator
        return pd.Series(enumerable.values(), index=enumerable.keys())

    def df(self) -> pd.DataFrame:
        """values (records or mappings) as a pandas dataframe indexed by key"""
        enumerable = self._sequence._iterator
        return pd.DataFrame(enumerable.values(), index=enumerable.keys())
