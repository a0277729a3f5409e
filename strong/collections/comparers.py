"""
Default implementations of the equality and ordering contracts that back every collection operation
"""
from __future__ import annotations

import calendar
import enum
import math
import re
import typing
from datetime import date
from datetime import datetime

from .constants import ArrayKey
from .constants import INT_MAX
from .constants import INT_MIN
from .exception import HashingUnsupportedError
from .exception import TypeMismatchError
from .protocols import ComparableProtocol
from .protocols import EqualityComparerProtocol
from .protocols import EquatableProtocol
from .settings import collection_settings


CANONICAL_INTEGER_PATTERN: typing.Final[typing.Pattern] = re.compile(r"^[+-]?\d+(\.0+)?$")
"""Strings matching this pattern hash (and compare against numbers) as the integer they spell"""

_UNSUPPORTED_TYPES = (type(None), bytes, bytearray, list, tuple, dict, set, frozenset)


class ValueKind(enum.IntEnum):
    """
    The closed set of value categories the default comparers know how to handle.

    Members are declared in the order they are checked
    """
    BOOLEAN = 0
    INTEGER = 1
    FLOAT = 2
    STRING = 3
    DATETIME = 4
    OBJECT = 5
    UNSUPPORTED = 6

    @classmethod
    def of(cls, value: typing.Any) -> ValueKind:
        """
        Classify a value

        `bool` is checked before `int` since it is a subclass of `int`

        Args:
            value: The value to classify

        Returns:
            The kind of the value
        """
        if isinstance(value, bool):
            return cls.BOOLEAN
        elif isinstance(value, int):
            return cls.INTEGER
        elif isinstance(value, float):
            return cls.FLOAT
        elif isinstance(value, str):
            return cls.STRING
        elif isinstance(value, date):
            return cls.DATETIME
        elif isinstance(value, _UNSUPPORTED_TYPES):
            return cls.UNSUPPORTED
        return cls.OBJECT

    @property
    def is_numeric(self) -> bool:
        return self in (ValueKind.INTEGER, ValueKind.FLOAT)


_SCALAR_KINDS = (ValueKind.BOOLEAN, ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.STRING)


def to_timestamp(value: date) -> int:
    """
    Convert a date or datetime into whole seconds since the epoch

    Aware datetimes are converted through UTC. Naive datetimes and plain dates are read as UTC wall time.
    Sub-second precision is discarded.

    Args:
        value: The date or datetime to convert

    Returns:
        The number of seconds since 1970-01-01T00:00:00Z
    """
    if isinstance(value, datetime):
        return calendar.timegm(value.utctimetuple())
    return calendar.timegm(value.timetuple())


def canonical_integer(value: str) -> typing.Optional[int]:
    """
    Read a string like "5", "-12", or "+7.000" as the integer it spells

    Args:
        value: The string to read

    Returns:
        The integer, or None if the string is not a canonical integer
    """
    if CANONICAL_INTEGER_PATTERN.match(value) is None:
        return None
    return int(value.split(".", 1)[0])


def _sign(value: typing.Union[int, float]) -> int:
    return (value > 0) - (value < 0)


def _is_equatable(value: typing.Any) -> bool:
    # an equality comparer also has an `equals` method, but it takes two values
    return isinstance(value, EquatableProtocol) and not isinstance(value, EqualityComparerProtocol)


class DefaultEqualityComparer:
    """
    Compares scalars, dates, and value objects by value

    Examples:
        >>> comparer = DefaultEqualityComparer()
        >>> comparer.equals(5, 5.0)
        True
        >>> comparer.equals(5, "5")
        True
        >>> comparer.equals("5", "5.0")
        False
        >>> comparer.hash("5") == comparer.hash(5)
        True
    """
    def __init__(self, epsilon: float = None):
        """
        Constructor

        Args:
            epsilon: The largest difference between two numbers that are still considered equal.
                Defaults to the machine epsilon for floats
        """
        if epsilon is None:
            epsilon = collection_settings().float_epsilon

        self.__epsilon = epsilon

    @property
    def epsilon(self) -> float:
        return self.__epsilon

    def equals(self, x: typing.Any, y: typing.Any) -> bool:
        if x is y:
            return True

        x_kind = ValueKind.of(x)
        y_kind = ValueKind.of(y)

        if x_kind == y_kind and x_kind in _SCALAR_KINDS and x == y:
            return True

        if x_kind == ValueKind.STRING and y_kind.is_numeric:
            x = canonical_integer(x)
            x_kind = ValueKind.INTEGER if x is not None else ValueKind.STRING
        elif y_kind == ValueKind.STRING and x_kind.is_numeric:
            y = canonical_integer(y)
            y_kind = ValueKind.INTEGER if y is not None else ValueKind.STRING

        if x_kind.is_numeric and y_kind.is_numeric:
            return abs(x - y) < self.__epsilon

        if x_kind == ValueKind.DATETIME and y_kind == ValueKind.DATETIME:
            return to_timestamp(x) == to_timestamp(y)

        if _is_equatable(x):
            return bool(x.equals(y))

        if _is_equatable(y):
            return bool(y.equals(x))

        return False

    def hash(self, x: typing.Any) -> ArrayKey:
        kind = ValueKind.of(x)

        if kind == ValueKind.BOOLEAN:
            return 1 if x else 0
        elif kind == ValueKind.INTEGER:
            return int(x)
        elif kind == ValueKind.STRING:
            as_integer = canonical_integer(x)
            return x if as_integer is None else as_integer
        elif kind == ValueKind.DATETIME:
            return to_timestamp(x)
        elif kind == ValueKind.OBJECT:
            return id(x)
        elif kind == ValueKind.FLOAT:
            if math.isnan(x):
                return 0
            if x < INT_MIN:
                return INT_MIN
            if x > INT_MAX:
                return INT_MAX
            return int(x)

        raise HashingUnsupportedError(f"Hashing of type {type(x).__name__} is not supported.")

    def __repr__(self):
        return f"{self.__class__.__name__}(epsilon={self.__epsilon!r})"


class DefaultComparer:
    """
    Orders scalars, dates, and objects implementing `compare_to`

    Values that are equal under the equality comparer always compare as 0, so the ordering agrees with equality
    """
    def __init__(self, equality_comparer: EqualityComparerProtocol = None):
        """
        Constructor

        Args:
            equality_comparer: The comparer used to short circuit equal values. A new `DefaultEqualityComparer` is
                used if none is given
        """
        self.__equality_comparer = equality_comparer or DefaultEqualityComparer()

    @property
    def equality_comparer(self) -> EqualityComparerProtocol:
        return self.__equality_comparer

    def compare(self, x: typing.Any, y: typing.Any) -> int:
        if self.__equality_comparer.equals(x, y):
            return 0

        x_kind = ValueKind.of(x)
        y_kind = ValueKind.of(y)

        if x_kind == ValueKind.BOOLEAN and y_kind == ValueKind.BOOLEAN:
            return _sign(int(x) - int(y))

        if x_kind.is_numeric and y_kind.is_numeric:
            return -1 if x < y else (1 if x > y else 0)

        if x_kind == ValueKind.DATETIME and y_kind == ValueKind.DATETIME:
            return _sign(to_timestamp(x) - to_timestamp(y))

        if x_kind == ValueKind.STRING and y_kind == ValueKind.STRING:
            x_bytes = x.encode("utf-8")
            y_bytes = y.encode("utf-8")
            return -1 if x_bytes < y_bytes else (1 if x_bytes > y_bytes else 0)

        if isinstance(x, ComparableProtocol):
            return x.compare_to(y)

        if isinstance(y, ComparableProtocol):
            return -y.compare_to(x)

        raise TypeMismatchError(
            f"Values of type {type(x).__name__} and {type(y).__name__} cannot be compared."
        )

    def __repr__(self):
        return f"{self.__class__.__name__}(equality_comparer={self.__equality_comparer!r})"
