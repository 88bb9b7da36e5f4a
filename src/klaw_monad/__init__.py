"""klaw-monad: Option, Result and Either types for Python 3.13+.

Flat imports (preferred):
    from klaw_monad import Option, Some, Nothing, Result, Ok, Err
    from klaw_monad import Either, Left, Right, LazyOption, LazyEither
    from klaw_monad import from_nullable, from_key, lift, sequence, traverse

Submodule imports (for organization):
    from klaw_monad.types import option, either
    from klaw_monad.errors import MonadError
    from klaw_monad.config import init
"""

# Types
from klaw_monad.types import (
    Either,
    Err,
    LazyEither,
    LazyOption,
    Left,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Right,
    Some,
)

# Option constructors
from klaw_monad.types.option import (
    ensure,
    from_key,
    from_nullable,
    from_return,
    from_value,
    lift,
)

# Either constructors and collections
from klaw_monad.types.either import cond, sequence, traverse, try_catch
from klaw_monad.types.either import from_nullable as either_from_nullable
from klaw_monad.types.either import lazy as lazy_either

# Errors
from klaw_monad.errors import (
    CannotUnwrapErrError,
    CannotUnwrapLeftFromRightError,
    CannotUnwrapNothingError,
    CannotUnwrapOkError,
    CannotUnwrapRightFromLeftError,
    ExpectedEitherError,
    ExpectedOptionError,
    FlatMapMustReturnEitherError,
    FlatMapMustReturnOptionError,
    FlatMapMustReturnResultError,
    InvalidLazyEitherCallbackError,
    InvalidLazyOptionCallbackError,
    MonadError,
    TransposeExpectedOkWithOptionError,
    TransposeExpectedSomeWithResultError,
    UnwrapError,
    UnzipExpectedRightWithTupleError,
    UnzipExpectedSomeWithTupleError,
)

# Configuration
from klaw_monad.abort import AbortError
from klaw_monad.config import MonadConfig, get_config, init

__all__ = [
    'AbortError',
    'CannotUnwrapErrError',
    'CannotUnwrapLeftFromRightError',
    'CannotUnwrapNothingError',
    'CannotUnwrapOkError',
    'CannotUnwrapRightFromLeftError',
    'Either',
    'Err',
    'ExpectedEitherError',
    'ExpectedOptionError',
    'FlatMapMustReturnEitherError',
    'FlatMapMustReturnOptionError',
    'FlatMapMustReturnResultError',
    'InvalidLazyEitherCallbackError',
    'InvalidLazyOptionCallbackError',
    'LazyEither',
    'LazyOption',
    'Left',
    'MonadConfig',
    'MonadError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Right',
    'Some',
    'TransposeExpectedOkWithOptionError',
    'TransposeExpectedSomeWithResultError',
    'UnwrapError',
    'UnzipExpectedRightWithTupleError',
    'UnzipExpectedSomeWithTupleError',
    'cond',
    'either_from_nullable',
    'ensure',
    'from_key',
    'from_nullable',
    'from_return',
    'from_value',
    'get_config',
    'init',
    'lazy_either',
    'lift',
    'sequence',
    'traverse',
    'try_catch',
]
