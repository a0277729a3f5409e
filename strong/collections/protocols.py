"""
Common type hinting protocols describing the capabilities the collections rely on
"""
from __future__ import annotations

import typing

from .constants import ArrayKey

T = typing.TypeVar("T")
T_contra = typing.TypeVar("T_contra", contravariant=True)


@typing.runtime_checkable
class EqualityComparerProtocol(typing.Protocol[T_contra]):
    """
    Represents a strategy object that decides whether two values are equal and which storage slot a value belongs to

    Implementations must keep `equals` reflexive and symmetric, and consistent with `hash`: if `equals(a, b)` is true,
    `hash(a)` must equal `hash(b)`. Two values hashing alike do NOT have to be equal.
    """
    def equals(self, x: T_contra, y: T_contra) -> bool:
        """
        Determine whether two values are equal

        Args:
            x: The first value
            y: The second value

        Returns:
            True if the two values should be considered the same
        """

    def hash(self, x: T_contra) -> ArrayKey:
        """
        Get the storage slot for a value

        Args:
            x: The value to hash

        Returns:
            An integer or string that all values equal to `x` share
        """


@typing.runtime_checkable
class ComparerProtocol(typing.Protocol[T_contra]):
    """
    Represents a strategy object that defines a three-way ordering between two values
    """
    def compare(self, x: T_contra, y: T_contra) -> int:
        """
        Compare two values

        Args:
            x: The first value
            y: The second value

        Returns:
            A negative number if x comes before y, zero if they are the same, a positive number if x comes after y
        """


@typing.runtime_checkable
class EquatableProtocol(typing.Protocol):
    """
    Represents a value object that knows whether it is equal to another value
    """
    def equals(self, other: typing.Any) -> bool:
        ...


@typing.runtime_checkable
class ComparableProtocol(typing.Protocol):
    """
    Represents a value object that knows how it is ordered relative to another value
    """
    def compare_to(self, other: typing.Any) -> int:
        ...


CompareFunction = typing.Callable[[T, T], int]
"""A plain `cmp(a, b)` style function that may stand in for a `ComparerProtocol`"""
