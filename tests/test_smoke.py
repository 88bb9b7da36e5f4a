"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Core types can be imported from the package root."""
    from klaw_monad import Either, Err, LazyEither, LazyOption, Left, Nothing, Ok, Option, Result, Right, Some

    assert Option is not None
    assert Some is not None
    assert Nothing is not None
    assert Result is not None
    assert Ok is not None
    assert Err is not None
    assert Either is not None
    assert Left is not None
    assert Right is not None
    assert LazyOption is not None
    assert LazyEither is not None


def test_import_constructors():
    """Constructors can be imported from the package root."""
    from klaw_monad import cond, ensure, from_key, from_nullable, from_return, from_value, lift, sequence, traverse

    assert all(callable(f) for f in (cond, ensure, from_key, from_nullable, from_return, from_value, lift))
    assert callable(sequence)
    assert callable(traverse)


def test_import_submodules():
    """Submodules are importable on their own."""
    from klaw_monad.types import either, lazy, option, result

    assert option.Some is not None
    assert result.Ok is not None
    assert either.Right is not None
    assert lazy.LazyOption is not None


def test_public_names_exist():
    """Everything in __all__ is actually exported."""
    import klaw_monad

    for name in klaw_monad.__all__:
        assert hasattr(klaw_monad, name), name


def test_pattern_matching():
    """Variants support structural pattern matching."""
    from klaw_monad import Nothing, NothingType, Ok, Some

    def describe(value):
        match value:
            case Some(inner):
                return f'some {inner}'
            case NothingType():
                return 'nothing'
            case Ok(value=inner):
                return f'ok {inner}'
        return 'other'

    assert describe(Some(1)) == 'some 1'
    assert describe(Nothing) == 'nothing'
    assert describe(Ok(2)) == 'ok 2'
