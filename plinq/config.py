"""process-wide settings for the predicate binder."""
from dataclasses import dataclass, fields, replace

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Settings:
    allow_string_lambdas: bool = True  # accept "v ==> v > 2" style predicates
    lambda_cache_size: int = 256
    # parameter names for direct create_lambda() calls that pass no params;
    # operators always name their own
    default_params: str = 'v,k'


_settings = Settings()


def get_settings() -> Settings:
    """current settings"""
    return _settings


def configure(**overrides) -> Settings:
    """
    replace the current settings with the given overrides and return them.
    compiled string lambdas are dropped, since they depend on these options.
    """
    global _settings
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise InvalidArgumentError(f"unknown settings: {', '.join(unknown)}")
    if overrides.get('lambda_cache_size', 1) < 0:
        raise InvalidArgumentError("lambda_cache_size must be a non-negative value.")

    _settings = replace(_settings, **overrides)

    from .functions import reset_lambda_cache
    reset_lambda_cache()
    return _settings
