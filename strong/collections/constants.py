"""
Defines constants to be used across this package
"""
from __future__ import annotations

import typing

from .enum import PydanticEnum
from .exception import InvalidArgumentError


EntryType = typing.TypeVar("EntryType")
"""A generic indicator for the type of an entry in a collection"""

KeyType = typing.TypeVar("KeyType")
"""A generic indicator for the type of key in a map. Keys do not need to be hashable by python"""

ValueType = typing.TypeVar("ValueType")
"""A generic indicator for the type of value in a map"""

ResultType = typing.TypeVar("ResultType")
"""A generic indicator for the type produced by a selector or reducer"""

ArrayKey = typing.Union[int, str]
"""The type of storage slot that a map key is hashed into"""

INT_MIN: typing.Final[int] = -(2 ** 63)
"""The lowest value a float may be clamped to when it is hashed"""

INT_MAX: typing.Final[int] = 2 ** 63 - 1
"""The highest value a float may be clamped to when it is hashed"""

SENTINEL = object()
"""Marks an argument that was not passed when `None` is a legitimate value"""


class DuplicateKeyPolicy(PydanticEnum):
    """
    Specifies the behavior to use when an insertion targets a key that already exists
    """
    THROW_EXCEPTION = 0
    """Raise a `DuplicateKeyError` and leave the collection untouched"""

    IGNORE = 1
    """Keep the value that was inserted first and silently drop the new one"""

    OVERWRITE = 2
    """Replace the existing value while keeping the original key and its position"""

    @classmethod
    def default(cls) -> DuplicateKeyPolicy:
        """
        The policy used when nothing else has been configured
        """
        return cls.THROW_EXCEPTION

    @classmethod
    def get(cls, value: typing.Union[DuplicateKeyPolicy, str, int, None] = None) -> DuplicateKeyPolicy:
        """
        Interpret a member, member name, or member value as a policy

        Args:
            value: The member, its name (case insensitive), or its integer value

        Returns:
            The matching policy, or the default if nothing was passed

        Raises:
            InvalidArgumentError: If the value does not name or number a policy
        """
        if value is None:
            return cls.default()
        elif isinstance(value, cls):
            return value
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidArgumentError(f"{value} is not the value of a {cls.__name__}") from e

        return cls.validate(value)
