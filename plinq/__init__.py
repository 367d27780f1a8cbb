"""
'    __________.____    .___ _______   ________
'    \______   \    |   |   |\      \  \_____  \
'     |     ___/    |   |   |/   |   \  /  / \  \
'     |    |   |    |___|   /    |    \/   \_/.  \
'     |____|   |_______ \___\____|__  /\_____\ \_/
'                      \/           \/        \__>
"""

# expose the main classes
from .sequence import PLinq
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    plinq,
    P,
    p
)

# expose the predicate binder
from .functions import create_lambda, Functions

# expose settings
from .config import Settings, configure, get_settings

# expose the error taxonomy
from .errors import (
    PLinqError,
    InvalidSourceError,
    InvalidPredicateError,
    NoMatchError,
    NoElementsError,
    MultipleMatchError,
    KeyNotFoundError,
    InvalidArgumentError
)

# define what `import *` does
__all__ = [
    "PLinq",
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "plinq",
    "P",
    "p",
    "create_lambda",
    "Functions",
    "Settings",
    "configure",
    "get_settings",
    "PLinqError",
    "InvalidSourceError",
    "InvalidPredicateError",
    "NoMatchError",
    "NoElementsError",
    "MultipleMatchError",
    "KeyNotFoundError",
    "InvalidArgumentError"
]
