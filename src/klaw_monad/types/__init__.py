"""Core types: Option, Result, Either and their lazy wrappers."""

from klaw_monad.types.either import Either, Left, Right
from klaw_monad.types.lazy import LazyEither, LazyOption
from klaw_monad.types.option import Nothing, NothingType, Option, Some
from klaw_monad.types.result import Err, Ok, Result

__all__ = [
    'Either',
    'Err',
    'LazyEither',
    'LazyOption',
    'Left',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Right',
    'Some',
]
