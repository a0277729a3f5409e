"""
Ordered, zero-indexed collections whose searches and comparisons are driven by pluggable comparers
"""
from __future__ import annotations

import abc
import itertools
import logging
import random as _random
import secrets
import typing

from typing_extensions import Self

from .constants import EntryType
from .constants import KeyType
from .constants import ResultType
from .constants import SENTINEL
from .constants import ValueType
from .constants import DuplicateKeyPolicy
from .exception import IndexOutOfRangeError
from .exception import InvalidArgumentError
from .exception import TypeMismatchError
from .helper_functions import check_index
from .helper_functions import check_insertion_point
from .helper_functions import check_non_negative
from .helper_functions import is_iterable_type
from .helper_functions import to_compare_function
from .helper_functions import to_instance
from .helper_functions import to_int
from .helper_functions import to_sort_key
from .helper_functions import to_str
from .internal.storage import Materialized
from .internal.storage import Storage
from .internal.storage import to_storage
from .protocols import CompareFunction
from .protocols import ComparerProtocol
from .protocols import EqualityComparerProtocol
from .registry import default_registry

if typing.TYPE_CHECKING:
    from .maps import Map
    from .maps import ReadonlyMap

logger = logging.getLogger(__name__)

_CLASS_TYPE = typing.TypeVar("_CLASS_TYPE")

Predicate = typing.Callable[[EntryType], bool]
AnyComparer = typing.Union[ComparerProtocol, CompareFunction]


class AbstractSequence(typing.Collection[EntryType], abc.ABC):
    """
    The read operations shared by every ordered collection

    Every search and comparison goes through an equality comparer or comparer. One passed to a call wins, then
    the one the collection was built with, and finally the current default in the registry, looked up at the
    time of the call.

    Operations named after filters and projections (`where`, `map`, `skip`, `distinct`, ...) return lazy
    read-only views that re-read this sequence whenever they are read.
    """
    def __init__(
        self,
        *,
        equality_comparer: EqualityComparerProtocol = None,
        comparer: AnyComparer = None
    ):
        self.__equality_comparer = equality_comparer
        self.__comparer = comparer

    @property
    def equality_comparer(self) -> typing.Optional[EqualityComparerProtocol]:
        """
        The equality comparer this sequence was built with, if any
        """
        return self.__equality_comparer

    @property
    def comparer(self) -> typing.Optional[AnyComparer]:
        """
        The comparer this sequence was built with, if any
        """
        return self.__comparer

    def _resolve_equality_comparer(
        self,
        equality_comparer: EqualityComparerProtocol = None
    ) -> EqualityComparerProtocol:
        if equality_comparer is not None:
            return equality_comparer
        elif self.__equality_comparer is not None:
            return self.__equality_comparer
        return default_registry().get_equality_comparer()

    def _resolve_comparer(self, comparer: AnyComparer = None) -> AnyComparer:
        if comparer is not None:
            return comparer
        elif self.__comparer is not None:
            return self.__comparer
        return default_registry().get_comparer()

    def _view(self, factory: typing.Callable[[], typing.Iterable[ResultType]]) -> ReadonlySequence[ResultType]:
        return ReadonlySequence(factory, equality_comparer=self.__equality_comparer, comparer=self.__comparer)

    @abc.abstractmethod
    def __iter__(self) -> typing.Iterator[EntryType]:
        pass

    @abc.abstractmethod
    def count(self) -> int:
        """
        Returns:
            The number of items in the sequence
        """
        pass

    @abc.abstractmethod
    def get(self, index: int) -> EntryType:
        """
        Get the item at an index

        Args:
            index: The position of the item. Negative indices count back from the end

        Returns:
            The item at the index
        """
        pass

    @abc.abstractmethod
    def _derive(self, items: typing.Iterable[EntryType]) -> Self:
        """
        Create a new sequence of the same flavor as this one holding the given items
        """
        pass

    def at(self, index: int) -> EntryType:
        """
        Alias of `get`
        """
        return self.get(index)

    def __getitem__(self, index: typing.Union[int, slice]) -> typing.Union[EntryType, Self]:
        if isinstance(index, slice):
            return self._derive(self.to_list()[index])
        return self.get(index)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def to_list(self) -> typing.List[EntryType]:
        """
        Returns:
            A shallow copy of the contained items as a list
        """
        return [value for value in self]

    def as_list(self) -> typing.List[EntryType]:
        """
        Alias of `to_list`
        """
        return self.to_list()

    def as_readonly(self) -> ReadonlySequence[EntryType]:
        """
        Returns:
            A read-only snapshot of this sequence
        """
        return ReadonlySequence(self.to_list(), equality_comparer=self.__equality_comparer, comparer=self.__comparer)

    def contains(self, value: typing.Any, equality_comparer: EqualityComparerProtocol = None) -> bool:
        """
        Check whether an equal item is present

        Args:
            value: The value to look for
            equality_comparer: How to decide if an item matches the value

        Returns:
            True if an item is equal to the value
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)
        return any(equality_comparer.equals(item, value) for item in self)

    def index_of(
        self,
        value: typing.Any,
        from_index: int = 0,
        equality_comparer: EqualityComparerProtocol = None
    ) -> int:
        """
        Find the index of the first item equal to the given value

        Examples:
            >>> Sequence([1, 2, 3]).index_of(2)
            1
            >>> Sequence([1, 2, 3]).index_of(2, from_index=-1)
            -1

        Args:
            value: The value to look for
            from_index: Where to start searching. Negative values count back from the end
            equality_comparer: How to decide if an item matches the value

        Returns:
            The index of the first matching item, or -1 if there is no match
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)
        return self.find_index(lambda item: equality_comparer.equals(item, value), from_index)

    def last_index_of(
        self,
        value: typing.Any,
        from_index: int = -1,
        equality_comparer: EqualityComparerProtocol = None
    ) -> int:
        """
        Find the index of the last item equal to the given value, searching backwards

        Args:
            value: The value to look for
            from_index: Where to start searching backwards from. Negative values count back from the end
            equality_comparer: How to decide if an item matches the value

        Returns:
            The index of the last matching item, or -1 if there is no match
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)
        return self.find_last_index(lambda item: equality_comparer.equals(item, value), from_index)

    def find(self, predicate: Predicate, from_index: int = 0) -> typing.Optional[EntryType]:
        """
        Find the first item matching a predicate

        Args:
            predicate: A check to see if the encountered value is the desired value
            from_index: Where to start searching

        Returns:
            The first matching item, or None if nothing matches
        """
        index = self.find_index(predicate, from_index)
        return self.get(index) if index >= 0 else None

    def find_index(self, predicate: Predicate, from_index: int = 0) -> int:
        """
        Find the index of the first item matching a predicate

        Args:
            predicate: A check to see if the encountered value is the desired value
            from_index: Where to start searching. Negative values count back from the end

        Returns:
            The index of the first matching item, or -1 if nothing matches or the start is out of range
        """
        items = self.to_list()
        start = from_index + len(items) if from_index < 0 else from_index

        if start < 0 or start >= len(items):
            return -1

        for index in range(start, len(items)):
            if predicate(items[index]):
                return index

        return -1

    def find_last(self, predicate: Predicate, from_index: int = -1) -> typing.Optional[EntryType]:
        index = self.find_last_index(predicate, from_index)
        return self.get(index) if index >= 0 else None

    def find_last_index(self, predicate: Predicate, from_index: int = -1) -> int:
        """
        Find the index of the last item matching a predicate, searching backwards

        Args:
            predicate: A check to see if the encountered value is the desired value
            from_index: Where to start searching backwards from. Negative values count back from the end, and a
                start at or past the end is moved back to the last item

        Returns:
            The index of the last matching item, or -1 if nothing matches or the start is before the first item
        """
        items = self.to_list()
        start = from_index + len(items) if from_index < 0 else min(from_index, len(items) - 1)

        if start < 0:
            return -1

        for index in range(start, -1, -1):
            if predicate(items[index]):
                return index

        return -1

    def find_all(self, predicate: Predicate) -> ReadonlySequence[EntryType]:
        """
        Create a lazy view of every item matching a predicate

        Args:
            predicate: A function defining what should appear within the view

        Returns:
            A read-only sequence of the matching items
        """
        return self._view(lambda: (item for item in self if predicate(item)))

    def where(self, predicate: Predicate) -> ReadonlySequence[EntryType]:
        """
        Alias of `find_all`
        """
        return self.find_all(predicate)

    def filter(self, predicate: Predicate) -> ReadonlySequence[EntryType]:
        """
        Alias of `find_all`
        """
        return self.find_all(predicate)

    def except_for(self, predicate: Predicate) -> ReadonlySequence[EntryType]:
        """
        Create a lazy view of every item that does NOT match a predicate
        """
        return self._view(lambda: (item for item in self if not predicate(item)))

    def map(self, selector: typing.Callable[[EntryType], ResultType]) -> ReadonlySequence[ResultType]:
        """
        Create a lazy view of the result of calling a function on every item

        Args:
            selector: The function that transforms each item

        Returns:
            A read-only sequence of transformed items
        """
        return ReadonlySequence(lambda: (selector(item) for item in self))

    def reduce(
        self,
        reducer: typing.Callable[[ResultType, EntryType], ResultType],
        initial: ResultType = SENTINEL
    ) -> ResultType:
        """
        Fold the items into a single value

        Examples:
            >>> Sequence([1, 2, 3]).reduce(lambda total, value: total + value)
            6
            >>> Sequence([]).reduce(lambda total, value: total + value, 10)
            10

        Args:
            reducer: A function taking the accumulated value and the next item, returning the new accumulated value
            initial: The starting value. The first item is used if this is not given

        Returns:
            The final accumulated value
        """
        iterator = iter(self)

        if initial is SENTINEL:
            try:
                initial = next(iterator)
            except StopIteration:
                raise InvalidArgumentError("Cannot reduce an empty sequence without an initial value") from None

        accumulated = initial

        for item in iterator:
            accumulated = reducer(accumulated, item)

        return accumulated

    def all(self, predicate: Predicate) -> bool:
        """
        Returns:
            True if every item matches the predicate. True for an empty sequence
        """
        return all(predicate(item) for item in self)

    def any(self, predicate: Predicate) -> bool:
        """
        Returns:
            True if at least one item matches the predicate
        """
        return any(predicate(item) for item in self)

    def each(self, action: typing.Callable[[EntryType], typing.Any]):
        """
        Call a function on every item in order

        Iteration stops early when the function returns `False`; any other return value is ignored

        Args:
            action: The function to call on each item
        """
        for item in self:
            if action(item) is False:
                break

    def first(self) -> EntryType:
        for item in self:
            return item
        raise IndexOutOfRangeError("Cannot get the first item of an empty sequence")

    def first_or_default(self, default: typing.Any = None) -> typing.Optional[EntryType]:
        for item in self:
            return item
        return default

    def last(self) -> EntryType:
        items = self.to_list()
        if not items:
            raise IndexOutOfRangeError("Cannot get the last item of an empty sequence")
        return items[-1]

    def last_or_default(self, default: typing.Any = None) -> typing.Optional[EntryType]:
        items = self.to_list()
        return items[-1] if items else default

    def order_by(self, comparer: AnyComparer = None) -> ReadonlySequence[EntryType]:
        """
        Create a stably sorted read-only view of the items

        Args:
            comparer: A comparer object or a `cmp(a, b)` style function. The sequence's or the default comparer is
                used if none is given

        Returns:
            The items in sorted order
        """
        key = to_sort_key(self._resolve_comparer(comparer))
        return self._view(lambda: sorted(self, key=key))

    def reverse(self) -> ReadonlySequence[EntryType]:
        """
        Returns:
            A read-only view of the items in reverse order
        """
        return self._view(lambda: reversed(self.to_list()))

    def skip(self, amount: int) -> ReadonlySequence[EntryType]:
        """
        Create a lazy view that leaves out the first few items

        Args:
            amount: The number of items to leave out

        Returns:
            A read-only view of everything after the first `amount` items
        """
        check_non_negative(amount, "amount")
        return self._view(lambda: itertools.islice(self, amount, None))

    def take(self, amount: int) -> ReadonlySequence[EntryType]:
        """
        Create a lazy view of the first few items

        Args:
            amount: The maximum number of items to include

        Returns:
            A read-only view of at most `amount` items
        """
        check_non_negative(amount, "amount")
        return self._view(lambda: itertools.islice(self, amount))

    def chunk(self, size: int) -> ReadonlySequence[ReadonlySequence[EntryType]]:
        """
        Split the items into windows of a fixed size

        Examples:
            >>> [window.to_list() for window in Sequence([1, 2, 3, 4, 5]).chunk(2)]
            [[1, 2], [3, 4], [5]]

        Args:
            size: The number of items in each window. The last window may be shorter

        Returns:
            A read-only sequence of read-only windows
        """
        if check_non_negative(size, "size") == 0:
            raise InvalidArgumentError("The size of a chunk must be greater than zero")

        equality_comparer = self.__equality_comparer
        comparer = self.__comparer

        def generate_chunks():
            window = list()
            for item in self:
                window.append(item)
                if len(window) == size:
                    yield ReadonlySequence(window, equality_comparer=equality_comparer, comparer=comparer)
                    window = list()
            if window:
                yield ReadonlySequence(window, equality_comparer=equality_comparer, comparer=comparer)

        return ReadonlySequence(generate_chunks)

    def binary_search(self, value: typing.Any, comparer: AnyComparer = None) -> int:
        """
        Find the index of an item equal to the value, assuming the items are sorted by the same comparer

        Args:
            value: The value to look for
            comparer: How the items are ordered

        Returns:
            The index of a matching item, or -1 if there is no match
        """
        compare = to_compare_function(self._resolve_comparer(comparer))
        items = self.to_list()
        low = 0
        high = len(items) - 1

        while low <= high:
            middle = (low + high) // 2
            result = compare(items[middle], value)

            if result == 0:
                return middle
            elif result < 0:
                low = middle + 1
            else:
                high = middle - 1

        return -1

    def distinct(self, equality_comparer: EqualityComparerProtocol = None) -> ReadonlySequence[EntryType]:
        """
        Create a lazy view without repeated items; the first occurrence of each item is kept

        Args:
            equality_comparer: How to decide if two items are the same

        Returns:
            A read-only view of unique items
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)

        def generate_distinct():
            seen = list()
            for item in self:
                if not any(equality_comparer.equals(previous, item) for previous in seen):
                    seen.append(item)
                    yield item

        return self._view(generate_distinct)

    def union(
        self,
        other: typing.Iterable[EntryType],
        equality_comparer: EqualityComparerProtocol = None
    ) -> ReadonlySequence[EntryType]:
        """
        Create a lazy view of the unique items found in either this sequence or the other

        Items from this sequence come first, followed by new items from the other
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)

        def generate_union():
            seen = list()
            for item in itertools.chain(self, other):
                if not any(equality_comparer.equals(previous, item) for previous in seen):
                    seen.append(item)
                    yield item

        return self._view(generate_union)

    def intersect(
        self,
        other: typing.Iterable[EntryType],
        equality_comparer: EqualityComparerProtocol = None
    ) -> ReadonlySequence[EntryType]:
        """
        Create a lazy view of the unique items of this sequence that are also in the other
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)
        distinct = self.distinct(equality_comparer)

        def generate_intersection():
            others = list(other)
            for item in distinct:
                if any(equality_comparer.equals(item, other_item) for other_item in others):
                    yield item

        return self._view(generate_intersection)

    def diff(
        self,
        other: typing.Iterable[EntryType],
        equality_comparer: EqualityComparerProtocol = None
    ) -> ReadonlySequence[EntryType]:
        """
        Create a lazy view of the items of this sequence that are not in the other
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)

        def generate_difference():
            others = list(other)
            for item in self:
                if not any(equality_comparer.equals(item, other_item) for other_item in others):
                    yield item

        return self._view(generate_difference)

    def group_by(
        self,
        key_selector: typing.Callable[[EntryType], KeyType],
        equality_comparer: EqualityComparerProtocol = None
    ) -> ReadonlyMap[KeyType, ReadonlySequence[EntryType]]:
        """
        Group the items by a computed key

        Examples:
            >>> groups = Sequence([1, 2, 3, 4]).group_by(lambda value: value % 2)
            >>> groups.get(0).to_list()
            [2, 4]

        Args:
            key_selector: A function producing the group key of an item. It may not return None
            equality_comparer: How to decide if two group keys are the same

        Returns:
            A read-only map from each group key to the items in that group, in order of first appearance
        """
        from .maps import Map
        from .maps import ReadonlyMap

        groups: Map[KeyType, typing.List[EntryType]] = Map(
            duplicate_key_policy=DuplicateKeyPolicy.THROW_EXCEPTION,
            equality_comparer=equality_comparer
        )

        for item in self:
            group_key = key_selector(item)

            if group_key is None:
                raise InvalidArgumentError(f"The group key of {item!r} may not be None")

            group = groups.try_get(group_key)

            if group is None:
                group = list()
                groups.set(group_key, group)

            group.append(item)

        return ReadonlyMap(
            [
                (pair.key, ReadonlySequence(pair.value, equality_comparer=self.__equality_comparer))
                for pair in groups
            ],
            DuplicateKeyPolicy.THROW_EXCEPTION,
            equality_comparer=groups.equality_comparer
        )

    def to_map(
        self,
        key_selector: typing.Callable[[EntryType], KeyType],
        value_selector: typing.Callable[[EntryType], ValueType] = None,
        duplicate_key_policy: DuplicateKeyPolicy = None,
        equality_comparer: EqualityComparerProtocol = None
    ) -> Map[KeyType, ValueType]:
        """
        Build a map out of the items

        Args:
            key_selector: A function producing the key of an item
            value_selector: A function producing the value of an item. The item itself is used if not given
            duplicate_key_policy: What to do when two items produce the same key
            equality_comparer: How to decide if two keys are the same

        Returns:
            A new map
        """
        from .maps import Map

        if value_selector is None:
            pairs = [(key_selector(item), item) for item in self]
        else:
            pairs = [(key_selector(item), value_selector(item)) for item in self]

        return Map(pairs, duplicate_key_policy, equality_comparer=equality_comparer)

    def get_int(self, index: int) -> int:
        """
        Get the item at an index as an integer

        Raises:
            TypeMismatchError: If the item cannot be read as an integer without losing information
        """
        return to_int(self.get(index))

    def get_str(self, index: int) -> str:
        """
        Get the item at an index as a string

        Raises:
            TypeMismatchError: If the item is neither a string nor a number
        """
        return to_str(self.get(index))

    def get_instance(self, index: int, cls: typing.Type[_CLASS_TYPE]) -> _CLASS_TYPE:
        """
        Get the item at an index, making sure it is an instance of the given type

        Raises:
            TypeMismatchError: If the item is not an instance of `cls`
        """
        return to_instance(self.get(index), cls)

    def equals(self, other: typing.Any) -> bool:
        """
        Check whether another sized collection holds equal items in the same order

        Args:
            other: The collection to compare against

        Returns:
            True if both hold the same number of items and every pair of items is equal
        """
        if other is self:
            return True

        if not is_iterable_type(other) or not isinstance(other, typing.Sized):
            return False

        items = self.to_list()

        if len(items) != len(other):
            return False

        equality_comparer = self._resolve_equality_comparer()
        return all(equality_comparer.equals(mine, theirs) for mine, theirs in zip(items, other))

    def __eq__(self, other: object) -> bool:
        if not is_iterable_type(other) or not isinstance(other, typing.Sized):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}({self.to_list()!r})"

    @classmethod
    def __get_validators__(cls):
        yield cls.validate

    @classmethod
    def __modify_schema__(cls, field_schema: typing.Dict[str, typing.Any]):
        field_schema.update(type="array")

    @classmethod
    def validate(cls, value: typing.Any) -> Self:
        """
        Coerce a value into this type of sequence for use as a pydantic field
        """
        if isinstance(value, cls):
            return value
        elif is_iterable_type(value):
            return cls(value)

        raise TypeMismatchError(f"A {cls.__name__} cannot be built from a {type(value).__name__}")


class ReadonlySequence(AbstractSequence[EntryType]):
    """
    A sequence that cannot be changed after it is built

    The source may be a sized collection, which is copied right away, or a callable or re-iterable object that is
    read again every time the sequence is read. `freeze` captures a lazy source once and for all.

    Examples:
        >>> def numbers():
        ...     yield 1
        ...     yield 2
        >>> sequence = ReadonlySequence(numbers)
        >>> sequence.is_lazy
        True
        >>> sequence.freeze().to_list()
        [1, 2]
        >>> sequence.is_lazy
        False
    """
    def __init__(
        self,
        source: typing.Union[typing.Iterable[EntryType], typing.Callable[[], typing.Iterable[EntryType]]] = None,
        *,
        equality_comparer: EqualityComparerProtocol = None,
        comparer: AnyComparer = None
    ):
        super().__init__(equality_comparer=equality_comparer, comparer=comparer)
        self.__storage: Storage[typing.List[EntryType]] = to_storage(source, list)

    @property
    def is_lazy(self) -> bool:
        """
        Whether the contents are still produced on demand
        """
        return self.__storage.is_lazy()

    def freeze(self) -> Self:
        """
        Capture the contents of a lazy source so that it is never read again

        Freezing an already captured sequence does nothing

        Returns:
            This sequence
        """
        if self.__storage.is_lazy():
            items = list(self.__storage)
            self.__storage = Materialized(items)
            logger.debug("Froze a lazy sequence into %d items", len(items))
        return self

    def __iter__(self) -> typing.Iterator[EntryType]:
        storage = self.__storage

        if storage.is_lazy():
            if storage.one_shot:
                return iter(self.freeze().__storage.items)
            return iter(storage)

        return iter(storage.items)

    def count(self) -> int:
        if self.__storage.is_lazy():
            return sum(1 for _ in self)
        return len(self.__storage.items)

    def get(self, index: int) -> EntryType:
        if self.__storage.is_lazy() and isinstance(index, int) and not isinstance(index, bool) and index >= 0:
            for position, item in enumerate(self):
                if position == index:
                    return item
            raise IndexOutOfRangeError(f"Index {index} is beyond the end of the sequence")

        items = self.to_list() if self.__storage.is_lazy() else self.__storage.items
        return items[check_index(index, len(items))]

    def as_readonly(self) -> Self:
        return self

    def _derive(self, items: typing.Iterable[EntryType]) -> Self:
        return self.__class__(list(items), equality_comparer=self.equality_comparer, comparer=self.comparer)


class Sequence(AbstractSequence[EntryType]):
    """
    A mutable, ordered collection of items

    Examples:
        >>> sequence = Sequence([3, 1, 2])
        >>> sequence.append(4, 5)
        >>> sequence.sort()
        >>> sequence.to_list()
        [1, 2, 3, 4, 5]
        >>> sequence.splice(1, 2).to_list()
        [2, 3]
        >>> sequence.to_list()
        [1, 4, 5]
    """
    def __init__(
        self,
        initial: typing.Iterable[EntryType] = None,
        *,
        equality_comparer: EqualityComparerProtocol = None,
        comparer: AnyComparer = None
    ):
        super().__init__(equality_comparer=equality_comparer, comparer=comparer)
        self.__data: typing.List[EntryType] = [value for value in initial] if initial is not None else list()

    @classmethod
    def fill(cls, length: int, value: EntryType) -> Self:
        """
        Create a sequence holding the same value a number of times

        Args:
            length: How many times the value should appear
            value: The value to fill the sequence with

        Returns:
            A new sequence
        """
        check_non_negative(length, "length")
        return cls([value] * length)

    def __iter__(self) -> typing.Iterator[EntryType]:
        return iter(self.__data)

    def count(self) -> int:
        return len(self.__data)

    def get(self, index: int) -> EntryType:
        return self.__data[check_index(index, len(self.__data))]

    def _derive(self, items: typing.Iterable[EntryType]) -> Self:
        return self.__class__(items, equality_comparer=self.equality_comparer, comparer=self.comparer)

    def __setitem__(self, index: int, value: EntryType):
        self.set(index, value)

    def __delitem__(self, index: int):
        self.remove_at(index)

    def append(self, *values: EntryType):
        """
        Add values to the end of the sequence
        """
        self.__data.extend(values)

    def push(self, *values: EntryType):
        """
        Alias of `append`
        """
        self.append(*values)

    def append_range(self, values: typing.Iterable[EntryType]):
        """
        Add every value of an iterable to the end of the sequence
        """
        self.append(*values)

    def insert(self, index: int, value: EntryType):
        """
        Insert a value before the item at an index

        Args:
            index: The insertion point, anywhere from `-count` to `count`
            value: The value to insert
        """
        self.__data.insert(check_insertion_point(index, len(self.__data)), value)

    def insert_range(self, index: int, values: typing.Iterable[EntryType]):
        """
        Insert several values, in order, before the item at an index

        Args:
            index: The insertion point, anywhere from `-count` to `count`
            values: The values to insert
        """
        position = check_insertion_point(index, len(self.__data))
        self.__data[position:position] = [value for value in values]

    def set(self, index: int, value: EntryType):
        """
        Replace the item at an index
        """
        self.__data[check_index(index, len(self.__data))] = value

    def remove(self, value: typing.Any, equality_comparer: EqualityComparerProtocol = None) -> bool:
        """
        Remove the first item equal to the value

        Args:
            value: The value to remove
            equality_comparer: How to decide if an item matches the value

        Returns:
            Whether an item was removed
        """
        index = self.index_of(value, equality_comparer=equality_comparer)

        if index < 0:
            return False

        del self.__data[index]
        return True

    def remove_at(self, index: int) -> EntryType:
        """
        Remove the item at an index

        Returns:
            The removed item
        """
        return self.__data.pop(check_index(index, len(self.__data)))

    def remove_all(self, predicate: Predicate) -> int:
        """
        Remove every item matching a predicate

        Returns:
            The number of removed items
        """
        kept = [item for item in self.__data if not predicate(item)]
        removed = len(self.__data) - len(kept)
        self.__data[:] = kept
        return removed

    def pop(self) -> EntryType:
        """
        Remove and return the last item
        """
        if not self.__data:
            raise IndexOutOfRangeError("Cannot pop from an empty sequence")
        return self.__data.pop()

    def shift(self) -> EntryType:
        """
        Remove and return the first item
        """
        if not self.__data:
            raise IndexOutOfRangeError("Cannot shift from an empty sequence")
        return self.__data.pop(0)

    def unshift(self, *values: EntryType):
        """
        Add values, in order, to the start of the sequence
        """
        self.insert_range(0, values)

    def clear(self):
        self.__data.clear()

    def sort(self, comparer: AnyComparer = None):
        """
        Stably sort the sequence in place

        The sequence is left untouched if the comparer fails part way through

        Args:
            comparer: A comparer object or a `cmp(a, b)` style function
        """
        self.__data[:] = sorted(self.__data, key=to_sort_key(self._resolve_comparer(comparer)))

    def __get_range(self, offset: int, length: typing.Optional[int]) -> typing.Tuple[int, int]:
        count = len(self.__data)
        start = check_insertion_point(offset, count)

        if length is None:
            end = count
        elif length >= 0:
            end = min(start + length, count)
        else:
            end = max(count + length, start)

        return start, end

    def slice(self, offset: int, length: int = None) -> Self:
        """
        Copy part of the sequence

        Args:
            offset: Where the copied part starts, anywhere from `-count` to `count`
            length: How many items to copy. Everything up to the end is copied if not given. A negative length
                stops that many items before the end

        Returns:
            A new sequence holding the copied items
        """
        start, end = self.__get_range(offset, length)
        return self._derive(self.__data[start:end])

    def splice(self, offset: int, length: int = None, replacement: typing.Iterable[EntryType] = ()) -> Self:
        """
        Remove part of the sequence, optionally putting other values in its place

        Args:
            offset: Where the removed part starts, anywhere from `-count` to `count`
            length: How many items to remove. Everything up to the end is removed if not given. A negative length
                stops that many items before the end
            replacement: Values to insert where the items were removed

        Returns:
            A new sequence holding the removed items
        """
        start, end = self.__get_range(offset, length)
        removed = self.__data[start:end]
        self.__data[start:end] = [value for value in replacement]
        return self._derive(removed)

    def merge(self, *others: typing.Iterable[EntryType]) -> Self:
        """
        Create a new sequence with the items of this one followed by the items of the others
        """
        return self._derive(itertools.chain(self.__data, *others))

    def pad_left(self, length: int, value: EntryType) -> Self:
        """
        Create a copy of this sequence, prefixed with the value until it holds at least `length` items
        """
        check_non_negative(length, "length")
        return self._derive([value] * max(length - len(self.__data), 0) + self.__data)

    def pad_right(self, length: int, value: EntryType) -> Self:
        """
        Create a copy of this sequence, followed by the value until it holds at least `length` items
        """
        check_non_negative(length, "length")
        return self._derive(self.__data + [value] * max(length - len(self.__data), 0))

    def shuffle(self, secure: bool = False):
        """
        Randomly reorder the items in place

        Args:
            secure: Whether to use the operating system's cryptographically secure random source
        """
        generator = secrets.SystemRandom() if secure else _random
        generator.shuffle(self.__data)

    def random(self, secure: bool = False) -> EntryType:
        """
        Pick an item at random

        Args:
            secure: Whether to use the operating system's cryptographically secure random source

        Returns:
            One of the items
        """
        if not self.__data:
            raise IndexOutOfRangeError("Cannot pick a random item from an empty sequence")

        generator = secrets.SystemRandom() if secure else _random
        return generator.choice(self.__data)
