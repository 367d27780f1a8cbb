"""
predicate binder: turns whatever the caller passed to an operator into a
canonical function called as f(value, key).

accepted inputs are a callable of any positional arity, none (replaced by
the operator's default) and string lambdas:

    'v ==> v > 2'
    '(v, k) ==> k % 2 == 0'
    'v * 10'          # parameters default to the operator's own names
"""
import builtins
import inspect
import keyword
import logging
from functools import lru_cache

from .config import get_settings
from .errors import InvalidPredicateError
from .types import *

logger = logging.getLogger(__name__)

LAMBDA_ARROW = '==>'


class Functions:
    """stock functions used as operator defaults."""

    @staticmethod
    def true(*args) -> bool:
        return True

    @staticmethod
    def false(*args) -> bool:
        return False

    @staticmethod
    def blank(*args) -> None:
        return None

    @staticmethod
    def identity(v, *args):
        return v

    @staticmethod
    def key(v, k, *args):
        return k


def create_lambda(closure: FunctionInput, params: Optional[str] = None,
                  default: Optional[Callable[..., Any]] = None) -> Callable[..., Any]:
    """
    normalize `closure` into a function taking the arguments named by `params`
    (comma separated, e.g. 'v,k'). `default` is returned when closure is none;
    without a default a missing closure is an error.
    """
    settings = get_settings()
    names = _split_params(settings.default_params if params is None else params)

    if closure is None:
        if default is None:
            raise InvalidPredicateError("a function is required for this operator.")
        return default

    if isinstance(closure, str):
        if not settings.allow_string_lambdas:
            raise InvalidPredicateError("string lambdas are disabled.")
        func = _compile_lambda(closure, ','.join(names))
        return _fit_arity(func, len(names))

    if callable(closure):
        return _fit_arity(closure, len(names))

    raise InvalidPredicateError(
        f"expected a callable or a string lambda, got {type(closure).__name__}.")


def reset_lambda_cache() -> None:
    """drop compiled string lambdas and resize the cache from settings"""
    global _compile_lambda
    _compile_lambda = lru_cache(maxsize=get_settings().lambda_cache_size)(_compile)


def _split_params(params: str) -> List[str]:
    return [name.strip() for name in params.split(',') if name.strip()]


def _fit_arity(func: Callable[..., Any], arity: int) -> Callable[..., Any]:
    """wrap func so it can be called with `arity` positional args, dropping the extras"""
    try:
        parameters = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        # builtins such as max expose no signature; give them everything but the key
        accepted = max(arity - 1, 1) if arity else 0
    else:
        if any(p.kind is p.VAR_POSITIONAL for p in parameters):
            return func
        accepted = sum(1 for p in parameters
                       if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD))

    if accepted >= arity:
        return func
    if accepted == 0:
        return lambda *args: func()
    return lambda *args: func(*args[:accepted])


def _compile(expression: str, params: str) -> Callable[..., Any]:
    if LAMBDA_ARROW in expression:
        head, body = expression.split(LAMBDA_ARROW, 1)
        head = head.strip()
        if head.startswith('(') and head.endswith(')'):
            head = head[1:-1]
        names = _split_params(head)
    else:
        names, body = _split_params(params), expression

    body = body.strip()
    if not body:
        raise InvalidPredicateError(f"lambda expression has no body: {expression!r}")
    for name in names:
        if not name.isidentifier() or keyword.iskeyword(name):
            raise InvalidPredicateError(f"invalid parameter name {name!r} in {expression!r}")

    source = f"lambda {', '.join(names)}: ({body})"
    try:
        code = compile(source, f"<plinq lambda {expression!r}>", 'eval')
    except SyntaxError as e:
        raise InvalidPredicateError(f"invalid lambda expression {expression!r}: {e.msg}") from e

    logger.debug(f"compiled string lambda {expression!r} as {source!r}")
    return eval(code, {'__builtins__': builtins})


_compile_lambda = lru_cache(maxsize=get_settings().lambda_cache_size)(_compile)
