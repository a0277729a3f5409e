"""
Provides simple helper functions shared by the sequences, maps, and sets
"""
import functools
import typing

from .comparers import canonical_integer
from .exception import IndexOutOfRangeError
from .exception import InvalidArgumentError
from .exception import TypeMismatchError
from .protocols import CompareFunction
from .protocols import ComparerProtocol

_CLASS_TYPE = typing.TypeVar('_CLASS_TYPE')
"""A type that points directly to a class. The _CLASS_TYPE of `6`, for example, is `<class 'int'>`"""


def is_sequence_type(value: typing.Any) -> bool:
    """
    Checks to see if a value is one that can be interpretted as a collection of values

    Why not just use `isinstance(value, typing.Sequence)`? Strings, bytes, and maps ALL count as sequences

    Args:
        value: The value to check

    Returns:
        Whether the passed value is a sequence
    """
    is_collection = value is not None
    is_collection = is_collection and not isinstance(value, (str, bytes, typing.Mapping))
    is_collection = is_collection and isinstance(value, typing.Sequence)

    return is_collection


def is_iterable_type(value: typing.Any) -> bool:
    """
    Checks to see if a value is one that can be interpreted as a series of iterable values.

    Strings, bytes, and maps all count as iterables in python, but none of them are a series of isolated values

    Args:
        value: The value to check

    Returns:
        Whether the passed value is an iterable collection of isolated values
    """
    is_collection = value is not None
    is_collection = is_collection and not isinstance(value, (str, bytes, typing.Mapping))
    is_collection = is_collection and isinstance(value, typing.Iterable)

    return is_collection


def is_one_shot_iterator(value: typing.Any) -> bool:
    """
    Whether the value is an iterator that cannot be iterated a second time, like a generator object

    Args:
        value: The value to check

    Returns:
        True if iterating over the value consumes it
    """
    return isinstance(value, typing.Iterator)


def normalize_index(index: int, count: int) -> int:
    """
    Translate a negative index into its positive counterpart

    Examples:
        >>> normalize_index(-1, 5)
        4
        >>> normalize_index(2, 5)
        2

    Args:
        index: The index that may be negative
        count: The number of items that the index refers into

    Returns:
        The index with `count` added to it if it was negative
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeMismatchError(f"Indices must be integers, not {type(index).__name__}")
    return index + count if index < 0 else index


def check_index(index: int, count: int) -> int:
    """
    Normalize an index and make sure that it points at an existing item

    Args:
        index: The index that may be negative
        count: The number of items that the index refers into

    Returns:
        The normalized index
    """
    normalized = normalize_index(index, count)
    if normalized < 0 or normalized >= count:
        raise IndexOutOfRangeError(f"Index {index} is out of range for a collection of {count} items")
    return normalized


def check_insertion_point(index: int, count: int) -> int:
    """
    Normalize an index and make sure that it points at an existing item or one past the end

    Args:
        index: The index that may be negative
        count: The number of items that the index refers into

    Returns:
        The normalized insertion point
    """
    normalized = normalize_index(index, count)
    if normalized < 0 or normalized > count:
        raise IndexOutOfRangeError(f"Insertion point {index} is out of range for a collection of {count} items")
    return normalized


def check_non_negative(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"'{name}' must be an integer, not {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"'{name}' may not be negative; received {value}")
    return value


def to_compare_function(comparer: typing.Union[ComparerProtocol, CompareFunction]) -> CompareFunction:
    """
    Get a plain `cmp(a, b)` style function out of either a comparer object or a function

    Args:
        comparer: An object with a `compare` method or a function that takes two values and returns an int

    Returns:
        A function that compares two values
    """
    if isinstance(comparer, ComparerProtocol):
        return comparer.compare
    elif callable(comparer):
        return comparer

    raise InvalidArgumentError(
        f"Expected a comparer or a comparison function, but received {type(comparer).__name__}"
    )


def to_sort_key(comparer: typing.Union[ComparerProtocol, CompareFunction]) -> typing.Callable[[typing.Any], typing.Any]:
    """
    Adapt a comparer into a key function usable by `sorted` and `list.sort`

    Args:
        comparer: An object with a `compare` method or a function that takes two values and returns an int

    Returns:
        A key function
    """
    return functools.cmp_to_key(to_compare_function(comparer))


def to_int(value: typing.Any) -> int:
    """
    Read a value as an integer without losing information

    Integers pass through, integral floats and strings spelling an integer are converted, and everything else
    (including booleans) is rejected

    Args:
        value: The value to read

    Returns:
        The value as an integer
    """
    if isinstance(value, bool):
        raise TypeMismatchError("A boolean cannot be read as an integer")
    elif isinstance(value, int):
        return value
    elif isinstance(value, float) and value.is_integer():
        return int(value)
    elif isinstance(value, str):
        as_integer = canonical_integer(value.strip())
        if as_integer is not None:
            return as_integer

    raise TypeMismatchError(f"'{value}' ({type(value).__name__}) cannot be read as an integer")


def to_str(value: typing.Any) -> str:
    """
    Read a value as a string

    Strings pass through and numbers are formatted; everything else is rejected

    Args:
        value: The value to read

    Returns:
        The value as a string
    """
    if isinstance(value, str):
        return value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)

    raise TypeMismatchError(f"A value of type {type(value).__name__} cannot be read as a string")


def to_instance(value: typing.Any, cls: typing.Type[_CLASS_TYPE]) -> _CLASS_TYPE:
    """
    Ensure that a value is an instance of the given type

    Args:
        value: The value to check
        cls: The type the value must be

    Returns:
        The value itself
    """
    if not isinstance(value, cls):
        raise TypeMismatchError(f"Expected an instance of {cls.__name__}, but found {type(value).__name__}")
    return value
