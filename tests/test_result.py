"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given
from strategies import int_functions, integers, results, texts

from klaw_monad import (
    CannotUnwrapErrError,
    CannotUnwrapOkError,
    Err,
    FlatMapMustReturnResultError,
    Nothing,
    Ok,
    Result,
    Some,
    TransposeExpectedOkWithOptionError,
)


class TestResultCreation:
    """Tests for Ok/Err instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        assert Ok(42).value == 42

    def test_err_creation(self):
        """Err wraps an error value."""
        exc = ValueError('something went wrong')
        assert Err(exc).error is exc

    def test_frozen(self):
        """Ok and Err are immutable."""
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]
        with pytest.raises(AttributeError):
            Err('e').error = 'f'  # type: ignore[misc]

    def test_result_base(self):
        """Both variants share the Result base."""
        assert isinstance(Ok(1), Result)
        assert isinstance(Err(1), Result)

    def test_ok_not_equal_to_err(self):
        """Ok and Err with the same payload differ."""
        assert Ok(1) != Err(1)

    def test_bool_raises(self):
        """Results refuse implicit truthiness."""
        with pytest.raises(TypeError, match='is_ok'):
            bool(Ok(1))


class TestPredicates:
    """Tests for is_ok/is_err and their predicate forms."""

    @given(results)
    def test_exactly_one(self, result):
        """is_ok and is_err are exact complements."""
        assert result.is_ok() != result.is_err()

    def test_is_ok_and(self):
        """is_ok_and applies the predicate to Ok values only."""
        assert Ok(2).is_ok_and(lambda x: x > 1)
        assert not Ok(0).is_ok_and(lambda x: x > 1)
        assert not Err(2).is_ok_and(lambda x: x > 1)

    def test_is_err_and(self):
        """is_err_and applies the predicate to Err values only."""
        assert Err('boom').is_err_and(lambda e: e == 'boom')
        assert not Ok('boom').is_err_and(lambda e: e == 'boom')


class TestMapping:
    """Tests for map, map_err, map_or and map_or_else."""

    @given(integers, int_functions)
    def test_map_ok(self, value, f):
        """Ok(v).map(f) == Ok(f(v))."""
        assert Ok(value).map(f) == Ok(f(value))

    def test_ok_map_scenario(self):
        """Ok(2).map(v * 5) unwraps to 10."""
        assert Ok(2).map(lambda v: v * 5).unwrap() == 10

    def test_map_err_skips_ok(self, counter):
        """map on Err and map_err on Ok never call f."""
        assert Err('e').map(counter) == Err('e')
        assert Ok(1).map_err(counter) == Ok(1)
        assert counter.calls == []

    def test_map_err(self):
        """map_err transforms the error."""
        assert Err('e').map_err(str.upper) == Err('E')

    def test_map_or(self):
        """map_or applies f or returns the default."""
        assert Ok(2).map_or(0, lambda x: x + 1) == 3
        assert Err('e').map_or(0, lambda x: x + 1) == 0

    def test_map_or_else_receives_error(self):
        """The default function is called with the error."""
        assert Err('bad').map_or_else(len, lambda x: x) == 3
        assert Ok(5).map_or_else(len, lambda x: x * 2) == 10


class TestChaining:
    """Tests for and_then, and_, or_ and or_else."""

    def test_and_then(self):
        """and_then returns the callback's Result."""
        assert Ok(2).and_then(lambda x: Ok(x * 2)) == Ok(4)
        assert Ok(2).flat_map(lambda _: Err('no')) == Err('no')

    def test_and_then_skips_err(self, counter):
        """Err never calls the callback."""
        assert Err('e').and_then(counter) == Err('e')
        assert counter.calls == []

    def test_and_then_requires_result(self):
        """A non-Result return raises FlatMapMustReturnResultError."""
        with pytest.raises(FlatMapMustReturnResultError):
            Ok(2).and_then(lambda x: x * 2)

    def test_and(self):
        """and_ returns other for Ok, self for Err."""
        assert Ok(1).and_(Ok(2)) == Ok(2)
        assert Err('a').and_(Ok(2)) == Err('a')

    def test_or(self):
        """or_ returns self for Ok, other for Err."""
        assert Ok(1).or_(Ok(2)) == Ok(1)
        assert Err('a').or_(Ok(2)) == Ok(2)

    def test_or_else_receives_error(self):
        """or_else calls f with the error."""
        assert Err('a').or_else(lambda e: Ok(e * 2)) == Ok('aa')
        assert Ok(1).or_else(lambda e: Ok(0)) == Ok(1)


class TestUnwrapping:
    """Tests for unwrap, unwrap_err, expect and fallbacks."""

    def test_unwrap_ok(self):
        """unwrap returns the Ok value."""
        assert Ok(1).unwrap() == 1

    def test_unwrap_err_raises(self):
        """unwrap on Err raises and mentions the error."""
        with pytest.raises(CannotUnwrapErrError, match='boom') as exc_info:
            Err('boom').unwrap()
        assert exc_info.value.error == 'boom'

    def test_unwrap_err(self):
        """unwrap_err returns the error; on Ok it raises."""
        assert Err('e').unwrap_err() == 'e'
        with pytest.raises(CannotUnwrapOkError):
            Ok(1).unwrap_err()

    def test_expect(self):
        """expect raises with the caller's message."""
        assert Ok(1).expect('unused') == 1
        with pytest.raises(CannotUnwrapErrError, match='config missing'):
            Err('e').expect('config missing')

    def test_expect_err(self):
        """expect_err raises with the caller's message on Ok."""
        assert Err('e').expect_err('unused') == 'e'
        with pytest.raises(CannotUnwrapOkError, match='should have failed'):
            Ok(1).expect_err('should have failed')

    def test_unwrap_or(self):
        """unwrap_or falls back only for Err."""
        assert Ok(1).unwrap_or(0) == 1
        assert Err('e').unwrap_or(0) == 0

    def test_unwrap_or_else_receives_error(self):
        """unwrap_or_else calls f with the error."""
        assert Err('abc').unwrap_or_else(len) == 3
        assert Ok(1).unwrap_or_else(len) == 1


class TestOptionConversions:
    """Tests for ok, err, into_ok and into_err."""

    def test_ok(self):
        """ok() keeps the success value as an Option."""
        assert Ok(1).ok() == Some(1)
        assert Err('e').ok() is Nothing
        assert Ok(1).into_ok() == Some(1)

    def test_err(self):
        """err() keeps the error as an Option."""
        assert Err('e').err() == Some('e')
        assert Ok(1).err() is Nothing
        assert Err('e').into_err() == Some('e')


class TestContainsAndInspect:
    """Tests for contains, contains_err, inspect and inspect_err."""

    def test_contains_strict(self):
        """contains compares without coercion."""
        assert Ok(1).contains(1)
        assert not Ok(1).contains(True)
        assert not Err(1).contains(1)

    def test_contains_err_strict(self):
        """contains_err compares without coercion."""
        assert Err('e').contains_err('e')
        assert not Err(0).contains_err(False)
        assert not Ok('e').contains_err('e')

    def test_inspect(self, counter):
        """inspect sees Ok values, inspect_err sees errors."""
        ok = Ok(1)
        err = Err('e')
        assert ok.inspect(counter) is ok
        assert err.inspect(counter) is err
        assert ok.inspect_err(counter) is ok
        assert err.inspect_err(counter) is err
        assert counter.calls == [(1,), ('e',)]


class TestFlattenAndTranspose:
    """Tests for flatten and transpose."""

    def test_flatten(self):
        """flatten removes one level of nesting."""
        assert Ok(Ok(1)).flatten() == Ok(1)
        assert Ok(Err('e')).flatten() == Err('e')
        assert Ok(1).flatten() == Ok(1)
        assert Err('e').flatten() == Err('e')

    @given(integers)
    def test_transpose_ok_some(self, value):
        """Ok(Some(v)) becomes Some(Ok(v))."""
        assert Ok(Some(value)).transpose().get().unwrap() == value

    def test_transpose_ok_nothing(self):
        """Ok(Nothing) becomes Nothing."""
        assert Ok(Nothing).transpose().is_empty()

    @given(texts)
    def test_transpose_err(self, error):
        """Err(e) becomes Some(Err(e))."""
        assert Err(error).transpose().get().unwrap_err() == error

    def test_transpose_requires_option(self):
        """A non-Option Ok payload raises."""
        with pytest.raises(TransposeExpectedOkWithOptionError, match='got Ok\\(str\\)'):
            Ok('x').transpose()


class TestClonedAndIteration:
    """Tests for cloned and iteration."""

    def test_cloned(self):
        """cloned deep-copies the payload."""
        payload = [[1]]
        assert Ok(payload).cloned().value[0] is not payload[0]
        assert Err(payload).cloned().error == payload

    def test_iteration(self):
        """Ok yields its value, Err yields nothing."""
        assert list(Ok(1)) == [1]
        assert list(Err('e')) == []
