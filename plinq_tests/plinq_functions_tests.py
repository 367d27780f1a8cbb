import suite
from plinq import (
    P, create_lambda, Functions, configure, get_settings, Settings,
    InvalidPredicateError, InvalidArgumentError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# none and defaults

@test("none resolves to the default function")
def test_none_uses_default():
    result = create_lambda(None, 'v,k', Functions.true)
    assert_that(result is Functions.true, f"should return the default itself: {result}")


@test("none without a default is an error")
def test_none_without_default():
    error = assert_raises(InvalidPredicateError, create_lambda, None, 'v,k')
    assert_that(isinstance(error, TypeError), "invalid predicate should also be a TypeError")


# callables

@test("two-argument callables pass through unchanged")
def test_callable_passthrough():
    func = lambda v, k: k
    assert_that(create_lambda(func, 'v,k') is func, "should not wrap a matching callable")

    variadic = lambda *args: len(args)
    assert_that(create_lambda(variadic, 'v,k') is variadic, "should not wrap *args callables")


@test("shorter callables only receive the leading arguments")
def test_callable_arity():
    unary = create_lambda(lambda v: v + 1, 'v,k')
    assert_that(unary(1, 'ignored') == 2, "unary callable should get the value only")

    nullary = create_lambda(lambda: 'constant', 'v,k')
    assert_that(nullary(1, 2) == 'constant', "nullary callable should get nothing")

    binary = create_lambda(lambda a, v: a * v, 'a,v,k')
    assert_that(binary(3, 4, 'ignored') == 12, "binary callable should get two arguments")


@test("builtins and methods are adapted")
def test_builtin_callables():
    isdigit = create_lambda(str.isdigit, 'v,k')
    assert_that(isdigit('12', 0) is True, "method descriptor should be called with the value")
    assert_that(P(['1', 'a', '2']).where(str.isdigit).to.list() == ['1', '2'], "where with str.isdigit")


@test("signature-less builtins get every argument but the key")
def test_signatureless_builtins():
    folded = create_lambda(max, 'a,v,k')
    assert_that(folded(1, 2, 50) == 2, "key should not reach max")
    assert_that(create_lambda(min, 'v,k')([4, 3], 'ignored') == 3, "unary use should get the value only")


@test("non-callables are rejected")
def test_non_callable():
    for bad in (3.5, 42, ['v'], {'v': 1}):
        assert_raises(InvalidPredicateError, create_lambda, bad, 'v,k')


# string lambdas

@test("explicit string lambdas")
def test_explicit_string_lambda():
    assert_that(create_lambda('v ==> v * 2', 'v,k')(3, 'x') == 6, "v ==> v * 2 failed")
    assert_that(create_lambda('(v, k) ==> k', 'v,k')('a', 5) == 5, "(v, k) ==> k failed")
    assert_that(create_lambda('x ==> x.upper()', 'v,k')('abc', 0) == 'ABC', "custom names failed")
    assert_that(create_lambda('==> 42', '')() == 42, "parameterless lambda failed")


@test("implicit string lambdas use the operator's parameter names")
def test_implicit_string_lambda():
    assert_that(create_lambda('v + k', 'v,k')(1, 2) == 3, "v + k failed")
    assert_that(create_lambda('a + v', 'a,v,k')(1, 2, 3) == 3, "a + v failed")


@test("compiled string lambdas are cached")
def test_string_lambda_cache():
    first = create_lambda('v > 1', 'v,k')
    second = create_lambda('v > 1', 'v,k')
    assert_that(first is second, "same expression should reuse the compiled function")


@test("malformed string lambdas are rejected")
def test_malformed_string_lambda():
    for bad in ('v ==> v >', '1x ==> 2', 'v ==>', 'class ==> 1', ''):
        assert_raises(InvalidPredicateError, create_lambda, bad, 'v,k')


# stock functions

@test("stock functions")
def test_stock_functions():
    assert_that(Functions.true(1, 2) is True, "true failed")
    assert_that(Functions.false(1, 2) is False, "false failed")
    assert_that(Functions.blank(1, 2) is None, "blank failed")
    assert_that(Functions.identity(5, 'k') == 5, "identity failed")
    assert_that(Functions.key(5, 'k') == 'k', "key failed")


# settings

@test("default settings")
def test_default_settings():
    settings = get_settings()
    assert_that(settings == Settings(), f"unexpected defaults: {settings}")
    assert_that(settings.default_params == 'v,k', "default params should be v,k")


@test("default_params only names parameters for bare create_lambda calls")
def test_default_params():
    try:
        configure(default_params='x')
        assert_that(create_lambda('x * 2')(3) == 6, "bare call should use the configured names")
        assert_that(P([1, 2]).where('v > 1').to.list() == [2], "operators keep their own names")
    finally:
        configure(default_params='v,k')
    assert_that(get_settings() == Settings(), "settings should be restored")


@test("string lambdas can be disabled")
def test_disable_string_lambdas():
    try:
        configure(allow_string_lambdas=False)
        assert_raises(InvalidPredicateError, P([1, 2]).where, 'v > 1')
        assert_that(P([1, 2]).where(lambda v: v > 1).to.list() == [2], "callables still work")
    finally:
        configure(allow_string_lambdas=True)
    assert_that(P([1, 2]).where('v > 1').to.list() == [2], "string lambdas should work again")


@test("configure clears the lambda cache")
def test_configure_resets_cache():
    before = create_lambda('v * 3', 'v,k')
    configure(lambda_cache_size=get_settings().lambda_cache_size)
    after = create_lambda('v * 3', 'v,k')
    assert_that(before is not after, "cache should be rebuilt")
    assert_that(after(2, 0) == 6, "recompiled lambda should still work")


@test("configure validates its options")
def test_configure_validation():
    error = assert_raises(InvalidArgumentError, configure, bogus=True)
    assert_that("bogus" in str(error), f"unexpected message: {error}")
    assert_raises(InvalidArgumentError, configure, lambda_cache_size=-1)
    assert_that(get_settings() == Settings(), "failed configure should leave settings alone")


if __name__ == "__main__":
    suite.run(title="plinq predicate binder test suite")
