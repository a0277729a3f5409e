"""
Key/value collections whose keys are matched by an equality comparer rather than by python's `hash` and `__eq__`
"""
from __future__ import annotations

import abc
import logging
import typing

from typing_extensions import Self

from .constants import DuplicateKeyPolicy
from .constants import KeyType
from .constants import SENTINEL
from .constants import ValueType
from .exception import KeyNotFoundError
from .exception import TypeMismatchError
from .helper_functions import is_iterable_type
from .helper_functions import to_instance
from .helper_functions import to_int
from .helper_functions import to_str
from .internal.key_table import KeyTable
from .internal.key_table import KeyValuePair
from .internal.storage import Materialized
from .internal.storage import Storage
from .internal.storage import to_storage
from .protocols import EqualityComparerProtocol
from .registry import default_registry
from .sequences import ReadonlySequence
from .sequences import Sequence
from .settings import collection_settings

logger = logging.getLogger(__name__)

_CLASS_TYPE = typing.TypeVar("_CLASS_TYPE")

PairSource = typing.Union[
    typing.Mapping[KeyType, ValueType],
    "AbstractMap[KeyType, ValueType]",
    typing.Iterable[typing.Tuple[KeyType, ValueType]],
]


def _pairs_of(source: typing.Any) -> typing.Iterable[typing.Tuple[typing.Any, typing.Any]]:
    if isinstance(source, typing.Mapping):
        return source.items()
    return source


class AbstractMap(typing.Collection[KeyValuePair], typing.Generic[KeyType, ValueType], abc.ABC):
    """
    The read operations shared by every map

    A map that was not given an equality comparer follows the registry default at call time. Stored keys sit in
    the slots that comparer hashed them to, so a change of the default re-keys the table on the next operation,
    applying the map's duplicate key policy to keys that the new comparer considers equal. Iteration yields
    `KeyValuePair`s in insertion order, holding the keys exactly as they were first inserted.
    """
    def __init__(
        self,
        duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None,
        *,
        equality_comparer: EqualityComparerProtocol = None
    ):
        if duplicate_key_policy is None:
            duplicate_key_policy = collection_settings().default_duplicate_key_policy

        self.__duplicate_key_policy = DuplicateKeyPolicy.get(duplicate_key_policy)
        self.__equality_comparer = equality_comparer

    @property
    def duplicate_key_policy(self) -> DuplicateKeyPolicy:
        """
        What happens when an insertion targets a key that is already stored
        """
        return self.__duplicate_key_policy

    @property
    def equality_comparer(self) -> typing.Optional[EqualityComparerProtocol]:
        """
        The equality comparer this map was built with, if any
        """
        return self.__equality_comparer

    def _resolve_equality_comparer(
        self,
        equality_comparer: EqualityComparerProtocol = None
    ) -> EqualityComparerProtocol:
        if equality_comparer is not None:
            return equality_comparer
        elif self.__equality_comparer is not None:
            return self.__equality_comparer
        return default_registry().get_equality_comparer()

    def _resolve_policy(self, duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None):
        if duplicate_key_policy is None:
            return self.__duplicate_key_policy
        return DuplicateKeyPolicy.get(duplicate_key_policy)

    def _build_table(self, source: typing.Any, duplicate_key_policy: DuplicateKeyPolicy = None) -> KeyTable:
        return KeyTable.build(
            _pairs_of(source),
            self._resolve_equality_comparer(),
            self._resolve_policy(duplicate_key_policy)
        )

    def _current(self, table: KeyTable) -> KeyTable:
        """
        Get the given table, re-keyed first if the comparer it was built with is no longer the one in effect
        """
        equality_comparer = self._resolve_equality_comparer()

        if table.equality_comparer is equality_comparer:
            return table

        logger.debug(
            "Re-keying %d entries of a %s for %r",
            len(table),
            self.__class__.__name__,
            equality_comparer
        )
        return KeyTable.build(table, equality_comparer, self.__duplicate_key_policy)

    @abc.abstractmethod
    def _table(self) -> KeyTable:
        """
        The table holding the current entries
        """
        pass

    def get(self, key: KeyType) -> ValueType:
        """
        Get the value stored under a key

        Args:
            key: The key to look up

        Returns:
            The value stored under a key equal to the given one

        Raises:
            KeyNotFoundError: If no equal key is stored
        """
        pair = self._table().find(key)

        if pair is None:
            raise KeyNotFoundError(f"The key {key!r} was not found")

        return pair.value

    def __getitem__(self, key: KeyType) -> ValueType:
        return self.get(key)

    def try_get(self, key: KeyType, default: typing.Any = None) -> typing.Optional[ValueType]:
        """
        Get the value stored under a key, or a default if the key is not stored
        """
        pair = self._table().find(key)
        return default if pair is None else pair.value

    def has_key(self, key: KeyType) -> bool:
        return self._table().find(key) is not None

    def __contains__(self, key: object) -> bool:
        return self.has_key(key)

    def keys(self) -> ReadonlySequence[KeyType]:
        """
        Returns:
            The original keys in insertion order
        """
        return ReadonlySequence([pair.key for pair in self._table()])

    def values(self) -> ReadonlySequence[ValueType]:
        """
        Returns:
            The values in insertion order
        """
        return ReadonlySequence([pair.value for pair in self._table()])

    def items(self) -> ReadonlySequence[KeyValuePair]:
        """
        Returns:
            Every key and value in insertion order
        """
        return ReadonlySequence(list(self._table()))

    def as_key_value_pairs(self) -> Sequence[KeyValuePair]:
        """
        Returns:
            A mutable copy of every key and value in insertion order
        """
        return Sequence(list(self._table()))

    def __iter__(self) -> typing.Iterator[KeyValuePair]:
        return iter(self._table())

    def count(self) -> int:
        return len(self._table())

    def __len__(self) -> int:
        return self.count()

    def contains(self, value: typing.Any, equality_comparer: EqualityComparerProtocol = None) -> bool:
        """
        Check whether an equal value is stored under any key

        Args:
            value: The value to look for
            equality_comparer: How to decide if a stored value matches. The map's comparer is used if not given

        Returns:
            True if some key holds an equal value
        """
        return self.try_find_key(value, equality_comparer) is not None

    def each(self, action: typing.Callable[[ValueType, KeyType], typing.Any]):
        """
        Call a function with every value and its key in insertion order

        Iteration stops early when the function returns `False`

        Args:
            action: The function to call with each value and key
        """
        for key, value in self._table():
            if action(value, key) is False:
                break

    def try_find_key(
        self,
        value: typing.Any,
        equality_comparer: EqualityComparerProtocol = None
    ) -> typing.Optional[KeyType]:
        """
        Find the first key holding a value equal to the given one

        Returns:
            The key, or None if no key holds an equal value
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)

        for key, stored_value in self._table():
            if equality_comparer.equals(stored_value, value):
                return key

        return None

    def find_key(self, value: typing.Any, equality_comparer: EqualityComparerProtocol = None) -> KeyType:
        """
        Find the first key holding a value equal to the given one

        Raises:
            KeyNotFoundError: If no key holds an equal value
        """
        equality_comparer = self._resolve_equality_comparer(equality_comparer)

        for key, stored_value in self._table():
            if equality_comparer.equals(stored_value, value):
                return key

        raise KeyNotFoundError(f"No key holds the value {value!r}")

    def swap(
        self,
        duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None
    ) -> ReadonlyMap[ValueType, KeyType]:
        """
        Create a lazy map from each value to its key

        Args:
            duplicate_key_policy: What to do when two keys hold equal values

        Returns:
            A read-only map that reads this map again every time it is read
        """
        return ReadonlyMap(
            lambda: ((value, key) for key, value in self._table()),
            duplicate_key_policy,
            equality_comparer=self.__equality_comparer
        )

    def as_readonly(self, duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None) -> ReadonlyMap:
        """
        Returns:
            A read-only copy of this map
        """
        return ReadonlyMap(
            list(self._table()),
            self._resolve_policy(duplicate_key_policy),
            equality_comparer=self.__equality_comparer
        )

    def to_dict(self) -> typing.Dict[KeyType, ValueType]:
        """
        Returns:
            A python dictionary holding the original keys and their values
        """
        try:
            return {key: value for key, value in self._table()}
        except TypeError as e:
            raise TypeMismatchError(f"This map holds keys that a python dictionary cannot: {e}") from e

    def get_int(self, key: KeyType) -> int:
        return to_int(self.get(key))

    def get_str(self, key: KeyType) -> str:
        return to_str(self.get(key))

    def get_instance(self, key: KeyType, cls: typing.Type[_CLASS_TYPE]) -> _CLASS_TYPE:
        """
        Get the value stored under a key, making sure it is an instance of the given type

        Raises:
            TypeMismatchError: If the value is not an instance of `cls`
        """
        return to_instance(self.get(key), cls)

    def equals(self, other: typing.Any) -> bool:
        """
        Check whether another map has the same keys holding equal values

        Args:
            other: A map or python mapping to compare against

        Returns:
            True if both hold the same number of entries and every key of the other holds an equal value here
        """
        if other is self:
            return True

        if not isinstance(other, (AbstractMap, typing.Mapping)):
            return False

        table = self._table()

        if len(table) != len(other):
            return False

        for key, value in _pairs_of(other):
            pair = table.find(key)
            if pair is None or not table.equality_comparer.equals(pair.value, value):
                return False

        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (AbstractMap, typing.Mapping)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        entries = ", ".join(f"{key!r}: {value!r}" for key, value in self._table())
        return f"{self.__class__.__name__}({{{entries}}})"

    @classmethod
    def __get_validators__(cls):
        yield cls.validate

    @classmethod
    def __modify_schema__(cls, field_schema: typing.Dict[str, typing.Any]):
        field_schema.update(type="object")

    @classmethod
    def validate(cls, value: typing.Any) -> Self:
        """
        Coerce a value into this type of map for use as a pydantic field
        """
        if isinstance(value, cls):
            return value
        elif isinstance(value, (AbstractMap, typing.Mapping)) or is_iterable_type(value):
            return cls(value)

        raise TypeMismatchError(f"A {cls.__name__} cannot be built from a {type(value).__name__}")


class ReadonlyMap(AbstractMap[KeyType, ValueType]):
    """
    A map that cannot be changed after it is built

    The source may be a mapping or a sized collection of pairs, which is copied right away, or a callable or
    re-iterable object producing pairs (or a callable returning a mapping) that is read again, and checked
    against the duplicate key policy again, every time the map is read.
    `freeze` captures a lazy source once and for all.

    Examples:
        >>> def pairs():
        ...     yield "a", 1
        ...     yield "a", 2
        >>> ReadonlyMap(pairs, DuplicateKeyPolicy.IGNORE).get("a")
        1
        >>> ReadonlyMap(pairs, DuplicateKeyPolicy.OVERWRITE).get("a")
        2
    """
    def __init__(
        self,
        source: typing.Union[PairSource, typing.Callable[[], typing.Iterable[typing.Tuple[KeyType, ValueType]]]] = None,
        duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None,
        *,
        equality_comparer: EqualityComparerProtocol = None
    ):
        super().__init__(duplicate_key_policy, equality_comparer=equality_comparer)
        self.__storage: Storage[KeyTable] = to_storage(source, self._build_table)

    @property
    def is_lazy(self) -> bool:
        """
        Whether the entries are still produced on demand
        """
        return self.__storage.is_lazy()

    @property
    def is_native(self) -> bool:
        """
        Whether every key is stored directly under itself, without buckets
        """
        return self._table().is_native

    def freeze(self) -> Self:
        """
        Read a lazy source one last time, check it against the policy, and keep the result

        Freezing an already captured map does nothing

        Returns:
            This map
        """
        if self.__storage.is_lazy():
            table = self._build_table(self.__storage.factory())
            self.__storage = Materialized(table)
            logger.debug(
                "Froze a lazy map into %d entries with %s storage",
                len(table),
                "native" if table.is_native else "indirect"
            )
        return self

    def _table(self) -> KeyTable:
        storage = self.__storage

        if storage.is_lazy():
            if storage.one_shot:
                return self.freeze().__storage.items
            return self._build_table(storage.factory())

        table = self._current(storage.items)

        if table is not storage.items:
            self.__storage = Materialized(table)

        return table

    def as_readonly(self, duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None) -> ReadonlyMap:
        if duplicate_key_policy is None or self._resolve_policy(duplicate_key_policy) == self.duplicate_key_policy:
            return self
        return super().as_readonly(duplicate_key_policy)


class Map(AbstractMap[KeyType, ValueType]):
    """
    A mutable map with insertion order and a configurable response to duplicate keys

    Examples:
        >>> values = Map({"a": 1}, DuplicateKeyPolicy.OVERWRITE)
        >>> values.set("a", 2)
        >>> values["b"] = 3
        >>> values.to_dict()
        {'a': 2, 'b': 3}
        >>> values.add("a", 4, DuplicateKeyPolicy.IGNORE)
        False
    """
    def __init__(
        self,
        initial: PairSource = None,
        duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None,
        *,
        equality_comparer: EqualityComparerProtocol = None
    ):
        super().__init__(duplicate_key_policy, equality_comparer=equality_comparer)
        self.__table = self._build_table(initial if initial is not None else ())

    def _table(self) -> KeyTable:
        self.__table = self._current(self.__table)
        return self.__table

    def set(
        self,
        key: KeyType,
        value: ValueType,
        duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None
    ):
        """
        Store a value under a key

        Args:
            key: The key to store the value under
            value: The value to store
            duplicate_key_policy: What to do if the key is already stored. The map's policy is used if not given

        Raises:
            DuplicateKeyError: If the key is already stored and the policy says to throw
        """
        self._table().put(key, value, self._resolve_policy(duplicate_key_policy))

    def __setitem__(self, key: KeyType, value: ValueType):
        self.set(key, value)

    def add(
        self,
        key: KeyType,
        value: ValueType,
        duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None
    ) -> bool:
        """
        Store a value under a key

        Returns:
            Whether the value was stored; False when an existing value was kept under the `IGNORE` policy
        """
        return self._table().put(key, value, self._resolve_policy(duplicate_key_policy))

    def update(
        self,
        pairs: PairSource,
        duplicate_key_policy: typing.Union[DuplicateKeyPolicy, str, int] = None
    ):
        """
        Store every key and value from another source

        Nothing is stored if any of the pairs is rejected by the policy

        Args:
            pairs: A mapping, map, or iterable of key value pairs
            duplicate_key_policy: What to do with keys that are already stored. The map's policy is used if not given
        """
        policy = self._resolve_policy(duplicate_key_policy)
        staged = self._table().copy()

        for key, value in _pairs_of(pairs):
            staged.put(key, value, policy)

        self.__table = staged

    def remove(self, key: KeyType) -> bool:
        """
        Remove the entry stored under a key

        Returns:
            Whether an entry was removed
        """
        return self._table().remove(key) is not None

    def pop(self, key: KeyType, default: typing.Any = SENTINEL) -> ValueType:
        """
        Remove the entry stored under a key and return its value

        Args:
            key: The key of the entry to remove
            default: What to return if the key is not stored

        Raises:
            KeyNotFoundError: If the key is not stored and no default was given
        """
        removed = self._table().remove(key)

        if removed is not None:
            return removed.value
        elif default is not SENTINEL:
            return default

        raise KeyNotFoundError(f"The key {key!r} was not found")

    def __delitem__(self, key: KeyType):
        if self._table().remove(key) is None:
            raise KeyNotFoundError(f"The key {key!r} was not found")

    def clear(self):
        self._table().clear()
