"""
The two ways a read-only collection may hold its contents: already captured, or produced on demand
"""
from __future__ import annotations

import logging
import typing
from dataclasses import dataclass

from typing_extensions import Literal
from typing_extensions import TypeAlias

from ..exception import InvalidArgumentError
from ..helper_functions import is_one_shot_iterator

T = typing.TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class Materialized(typing.Generic[T]):
    """
    Contents that have already been captured
    """
    items: T

    def is_lazy(self) -> Literal[False]:
        return False


@dataclass
class Lazy:
    """
    Contents produced by calling a factory that hands back a fresh iterator every time

    A one-shot source (such as a generator object) can only be driven once, so its owner has to capture it
    on first use
    """
    factory: typing.Callable[[], typing.Iterable]
    one_shot: bool = False

    def is_lazy(self) -> Literal[True]:
        return True

    def __iter__(self) -> typing.Iterator:
        return iter(self.factory())


Storage: TypeAlias = typing.Union[Materialized[T], Lazy]


def to_storage(source: typing.Any, materialize: typing.Callable[[typing.Iterable], T]) -> Storage[T]:
    """
    Decide how a read-only collection should hold the contents of a source

    Sized sources are captured right away through `materialize`. Callables become factories. Re-iterable
    sources without a size are iterated anew on every read. One-shot iterators are marked so that they may
    be captured on their first pass.

    Args:
        source: Where the contents come from
        materialize: How to capture the contents of an iterable

    Returns:
        Storage wrapping the source
    """
    if source is None:
        return Materialized(materialize(()))
    elif isinstance(source, (Materialized, Lazy)):
        return source
    elif isinstance(source, typing.Sized) and isinstance(source, typing.Iterable):
        return Materialized(materialize(source))
    elif is_one_shot_iterator(source):
        logger.warning(
            "A one-shot %s was handed to a lazy collection; it will be captured on its first read",
            type(source).__name__
        )
        return Lazy(lambda: source, one_shot=True)
    elif isinstance(source, typing.Iterable):
        return Lazy(lambda: iter(source))
    elif callable(source):
        return Lazy(source)

    raise InvalidArgumentError(f"Cannot build a collection out of a {type(source).__name__}")
