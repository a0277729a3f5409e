"""
An ordered sequence that refuses items equal to ones it already holds
"""
from __future__ import annotations

import typing

from typing_extensions import Self

from .constants import EntryType
from .exception import DuplicateKeyError
from .helper_functions import check_index
from .helper_functions import check_insertion_point
from .protocols import EqualityComparerProtocol
from .sequences import Sequence


class Set(Sequence[EntryType]):
    """
    A sequence of unique items, where uniqueness is decided by an equality comparer

    Membership is checked with a linear scan, so the items do not need to be hashable by python or by the
    equality comparer.

    Operations that add several items at once (`append`, `append_range`, `insert_range`, `unshift`) apply to one
    item at a time; items that are already present are skipped and the others are still added.

    Examples:
        >>> values = Set([1, 2, 2, 3])
        >>> values.to_list()
        [1, 2, 3]
        >>> values.add(2)
        False
        >>> values.add(4)
        True
    """
    def __init__(
        self,
        initial: typing.Iterable[EntryType] = None,
        equality_comparer: EqualityComparerProtocol = None
    ):
        super().__init__(equality_comparer=equality_comparer)

        if initial is not None:
            self.append_range(initial)

    def _derive(self, items: typing.Iterable[EntryType]) -> Self:
        return self.__class__(items, self.equality_comparer)

    def add(self, value: EntryType) -> bool:
        """
        Add a value to the end of the set unless an equal value is already present

        Args:
            value: The value to add

        Returns:
            Whether the value was added
        """
        if self.contains(value):
            return False

        super().append(value)
        return True

    def append(self, *values: EntryType):
        for value in values:
            self.add(value)

    def append_range(self, values: typing.Iterable[EntryType]):
        for value in values:
            self.add(value)

    def insert(self, index: int, value: EntryType) -> bool:
        """
        Insert a value before the item at an index unless an equal value is already present

        Args:
            index: The insertion point, anywhere from `-count` to `count`
            value: The value to insert

        Returns:
            Whether the value was inserted
        """
        position = check_insertion_point(index, self.count())

        if self.contains(value):
            return False

        super().insert(position, value)
        return True

    def insert_range(self, index: int, values: typing.Iterable[EntryType]):
        """
        Insert values, in order, before the item at an index, skipping any that are already present

        Values earlier in `values` count as present for the ones after them
        """
        position = check_insertion_point(index, self.count())

        for value in values:
            if self.insert(position, value):
                position += 1

    def unshift(self, *values: EntryType):
        self.insert_range(0, values)

    def set(self, index: int, value: EntryType):
        """
        Replace the item at an index

        Raises:
            DuplicateKeyError: If a value equal to the new one is held at a different index
        """
        position = check_index(index, self.count())
        equality_comparer = self._resolve_equality_comparer()

        for other_position, item in enumerate(self):
            if other_position != position and equality_comparer.equals(item, value):
                raise DuplicateKeyError(f"{value!r} is already in the set at index {other_position}")

        super().set(position, value)

    def splice(self, offset: int, length: int = None, replacement: typing.Iterable[EntryType] = ()) -> Self:
        """
        Remove part of the set, then insert the replacement values that are not already present in its place
        """
        position = check_insertion_point(offset, self.count())
        removed = super().splice(offset, length)
        self.insert_range(position, replacement)
        return removed
