"""Tests for Option constructors: from_nullable, from_value, from_key, from_return, ensure, lift."""

from collections import UserDict

import pytest

from klaw_monad import (
    ExpectedOptionError,
    LazyOption,
    Nothing,
    Some,
    ensure,
    from_key,
    from_nullable,
    from_return,
    from_value,
    lift,
)


class TestFromNullable:
    """Tests for from_nullable."""

    def test_value_becomes_some(self):
        """Falsy but non-None values are present."""
        assert from_nullable(0) == Some(0)
        assert from_nullable('') == Some('')
        assert from_nullable(False) == Some(False)

    def test_none_becomes_nothing(self):
        """None is absent."""
        assert from_nullable(None) is Nothing


class TestFromValue:
    """Tests for from_value with a sentinel."""

    def test_default_sentinel_is_none(self):
        """Without a sentinel, None is absent."""
        assert from_value(None) is Nothing
        assert from_value(1) == Some(1)

    def test_custom_sentinel(self):
        """A matching sentinel gives Nothing."""
        assert from_value(-1, -1) is Nothing
        assert from_value(None, -1) == Some(None)

    def test_sentinel_is_strict(self):
        """The sentinel comparison does not coerce types."""
        assert from_value(0, False) == Some(0)
        assert from_value(-1.0, -1) == Some(-1.0)
        assert from_value([], []) is Nothing


class TestFromKey:
    """Tests for from_key."""

    def test_mapping_hit(self):
        """A present key gives Some."""
        assert from_key({'a': 1}, 'a') == Some(1)

    def test_mapping_miss(self):
        """A missing key gives Nothing."""
        assert from_key({'a': 1}, 'b') is Nothing

    def test_none_value(self):
        """A key stored with None gives Nothing."""
        assert from_key({'a': None}, 'a') is Nothing

    def test_none_key(self):
        """A None key always gives Nothing."""
        assert from_key({None: 1}, None) is Nothing

    def test_sequence_index(self):
        """Sequences accept in-range non-negative integer indices."""
        assert from_key([10, 20], 1) == Some(20)
        assert from_key([10, 20], 2) is Nothing
        assert from_key([10, 20], -1) is Nothing
        assert from_key([10, 20], True) is Nothing
        assert from_key((10, 20), 0) == Some(10)

    def test_strings_are_not_containers(self):
        """Strings and bytes give Nothing."""
        assert from_key('abc', 0) is Nothing
        assert from_key(b'abc', 0) is Nothing

    def test_unsupported_container(self):
        """Objects without item access give Nothing."""
        assert from_key(42, 'a') is Nothing
        assert from_key(None, 'a') is Nothing

    def test_user_mapping(self):
        """Mapping subclasses are supported."""
        assert from_key(UserDict({'k': 'v'}), 'k') == Some('v')

    def test_custom_getitem(self):
        """Other subscriptable objects treat LookupError as missing."""

        class Registry:
            def __getitem__(self, key):
                if key == 'known':
                    return 'found'
                raise KeyError(key)

        assert from_key(Registry(), 'known') == Some('found')
        assert from_key(Registry(), 'unknown') is Nothing


class TestFromReturn:
    """Tests for from_return."""

    def test_deferred_until_used(self, counter):
        """The callback does not run until the option is used."""
        option = from_return(counter, [5])
        assert isinstance(option, LazyOption)
        assert counter.calls == []
        assert option.unwrap() == 5
        assert counter.calls == [(5,)]

    def test_none_result(self):
        """A None return value gives Nothing."""
        assert from_return(lambda: None).is_none()

    def test_custom_sentinel(self):
        """The sentinel is compared strictly."""
        assert from_return(lambda: False, none_value=False).is_none()
        assert from_return(lambda: 0, none_value=False).is_some()


class TestEnsure:
    """Tests for ensure."""

    def test_option_passes_through(self):
        """An Option is returned as-is."""
        some = Some(1)
        assert ensure(some) is some
        assert ensure(Nothing) is Nothing

    def test_plain_value(self):
        """Plain values go through from_value."""
        assert ensure(1) == Some(1)
        assert ensure(None) is Nothing
        assert ensure('n/a', 'n/a') is Nothing

    def test_callable_returning_value(self):
        """A callable becomes a LazyOption over its return value."""
        option = ensure(lambda: 3)
        assert isinstance(option, LazyOption)
        assert option.unwrap() == 3

    def test_callable_returning_option(self):
        """An Option returned by the callable is used directly."""
        assert ensure(lambda: Some(Some(1))).unwrap() == Some(1)
        assert ensure(lambda: Nothing).is_none()

    def test_callable_returning_sentinel(self):
        """A sentinel returned by the callable gives Nothing."""
        assert ensure(lambda: -1, -1).is_none()


class TestLift:
    """Tests for lift."""

    def test_all_some(self):
        """Arguments are unwrapped and the result re-wrapped."""
        add = lift(lambda a, b: a + b)
        assert add(Some(1), Some(5)).get() == 6

    def test_any_nothing(self, counter):
        """Any Nothing argument short-circuits without calling the function."""
        lifted = lift(counter)
        assert lifted(Some(1), Nothing) is Nothing
        assert counter.calls == []

    def test_keyword_arguments(self):
        """Keyword arguments are unwrapped too."""
        greet = lift(lambda name, punctuation='!': name + punctuation)
        assert greet(Some('hi'), punctuation=Some('?')) == Some('hi?')
        assert greet(Some('hi'), punctuation=Nothing) is Nothing

    def test_result_goes_through_ensure(self):
        """None results become Nothing; the sentinel is honoured."""
        assert lift(lambda _: None)(Some(1)) is Nothing
        assert lift(lambda x: x, none_value=0)(Some(0)) is Nothing

    def test_preserves_name(self):
        """The lifted function keeps the wrapped function's name."""

        def multiply(a, b):
            return a * b

        assert lift(multiply).__name__ == 'multiply'

    def test_no_arguments(self):
        """Passing no arguments calls the function."""
        assert lift(lambda: 4)() == Some(4)

    @pytest.mark.parametrize('value', [0, '', False])
    def test_falsy_results_are_present(self, value):
        """Only None (the default sentinel) is absent."""
        assert lift(lambda: value)() == Some(value)

    def test_non_option_argument_rejected(self, counter):
        """A plain value argument raises ExpectedOptionError before the call."""
        lifted = lift(counter)
        with pytest.raises(ExpectedOptionError, match='got int'):
            lifted(Some(1), 2)
        with pytest.raises(TypeError):
            lifted(value=None)
        assert counter.calls == []
