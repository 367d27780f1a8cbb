"""exception taxonomy raised by plinq operators."""

ERROR_NO_ELEMENTS = 'Sequence contains no elements.'
ERROR_NO_MATCHES = 'Sequence contains no matching elements.'
ERROR_NO_KEY = 'Sequence does not contain the key.'
ERROR_MANY_ELEMENTS = 'Sequence contains more than one element.'
ERROR_MANY_MATCHES = 'Sequence contains more than one matching element.'
ERROR_COUNT_LESS_THAN_ZERO = 'count must be a non-negative value.'
ERROR_STEP_NEGATIVE = 'step must be a positive value.'


class PLinqError(Exception):
    """base class for all plinq errors."""


class InvalidSourceError(PLinqError, TypeError):
    """the source can't be wrapped into a sequence."""

    def __init__(self, source):
        self.source = source
        super().__init__(f"unexpected source type: {type(source).__name__}")


class InvalidPredicateError(PLinqError, TypeError):
    """a predicate was required, or could not be turned into a (v, k) function."""


class NoMatchError(PLinqError, ValueError):
    def __init__(self, message: str = ERROR_NO_MATCHES):
        super().__init__(message)


class NoElementsError(PLinqError, ValueError):
    def __init__(self, message: str = ERROR_NO_ELEMENTS):
        super().__init__(message)


class MultipleMatchError(PLinqError, ValueError):
    def __init__(self, message: str = ERROR_MANY_MATCHES):
        super().__init__(message)


class KeyNotFoundError(PLinqError, KeyError):
    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        # KeyError.__str__ would only repr the key
        return f"{ERROR_NO_KEY} (key={self.key!r})"


class InvalidArgumentError(PLinqError, ValueError):
    """an operator argument is outside its accepted range."""
