"""
The slot table that maps store their entries in

Keys are arbitrary values, so they are stored under the slot their equality comparer hashes them to. While every
key is a plain `int` or `str` that hashes to itself, entries live directly in a dictionary keyed by the key. The
first key that breaks that rule converts the table, once, into buckets of entries that are scanned with `equals`.
"""
from __future__ import annotations

import itertools
import logging
import typing

from ..constants import ArrayKey
from ..constants import DuplicateKeyPolicy
from ..exception import DuplicateKeyError
from ..protocols import EqualityComparerProtocol

logger = logging.getLogger(__name__)


class KeyValuePair(typing.NamedTuple):
    """
    A key and the value stored under it
    """
    key: typing.Any
    value: typing.Any


class KeyItem:
    """
    An entry in a bucket of an indirect table
    """
    __slots__ = ("key", "value", "token")

    def __init__(self, key: typing.Any, value: typing.Any, token: int):
        self.key = key
        self.value = value
        self.token = token
        """Identifies the entry within the insertion order"""

    def to_pair(self) -> KeyValuePair:
        return KeyValuePair(self.key, self.value)

    def __repr__(self):
        return f"{self.__class__.__name__}(key={self.key!r}, value={self.value!r})"


def _is_own_slot(key: typing.Any, slot: ArrayKey) -> bool:
    return type(key) in (int, str) and type(slot) is type(key) and slot == key


class KeyTable:
    """
    Insertion ordered storage for entries whose keys are matched by an equality comparer rather than `__eq__`
    """
    def __init__(self, equality_comparer: EqualityComparerProtocol):
        self.__equality_comparer = equality_comparer
        self.__native: typing.Optional[typing.Dict[ArrayKey, typing.Any]] = dict()
        self.__buckets: typing.Dict[ArrayKey, typing.List[KeyItem]] = dict()
        self.__order: typing.Dict[int, KeyItem] = dict()
        self.__tokens = itertools.count()

    @property
    def equality_comparer(self) -> EqualityComparerProtocol:
        return self.__equality_comparer

    @property
    def is_native(self) -> bool:
        """
        Whether every key stored so far is its own slot
        """
        return self.__native is not None

    def __convert_to_indirect(self, reason: typing.Any):
        logger.debug(
            "Converting a key table of %d entries to indirect storage; %r is not its own slot",
            len(self.__native),
            reason
        )
        native = self.__native
        self.__native = None

        for key, value in native.items():
            self.__append_item(key, value, key)

    def __append_item(self, key: typing.Any, value: typing.Any, slot: ArrayKey):
        item = KeyItem(key, value, next(self.__tokens))
        self.__buckets.setdefault(slot, list()).append(item)
        self.__order[item.token] = item

    def __find_item(self, key: typing.Any, slot: ArrayKey) -> typing.Optional[KeyItem]:
        for item in self.__buckets.get(slot, ()):
            if self.__equality_comparer.equals(item.key, key):
                return item
        return None

    def find(self, key: typing.Any) -> typing.Optional[KeyValuePair]:
        """
        Find the entry stored under a key equal to the given key

        Args:
            key: The key to look for

        Returns:
            The original key and its value, or None if no equal key is stored
        """
        slot = self.__equality_comparer.hash(key)

        if self.__native is not None:
            if slot in self.__native and self.__equality_comparer.equals(slot, key):
                return KeyValuePair(slot, self.__native[slot])
            return None

        item = self.__find_item(key, slot)
        return item.to_pair() if item is not None else None

    def put(self, key: typing.Any, value: typing.Any, duplicate_key_policy: DuplicateKeyPolicy) -> bool:
        """
        Store a value under a key

        Args:
            key: The key to store the value under
            value: The value to store
            duplicate_key_policy: What to do if an equal key is already stored

        Returns:
            Whether the value was stored
        """
        slot = self.__equality_comparer.hash(key)

        if self.__native is not None:
            if slot in self.__native:
                if self.__equality_comparer.equals(slot, key):
                    return self.__handle_duplicate(slot, key, value, duplicate_key_policy)
                self.__convert_to_indirect(key)
            elif _is_own_slot(key, slot):
                self.__native[slot] = value
                return True
            else:
                self.__convert_to_indirect(key)

        existing = self.__find_item(key, slot)

        if existing is not None:
            return self.__handle_duplicate(existing, key, value, duplicate_key_policy)

        self.__append_item(key, value, slot)
        return True

    def __handle_duplicate(
        self,
        existing: typing.Union[ArrayKey, KeyItem],
        key: typing.Any,
        value: typing.Any,
        duplicate_key_policy: DuplicateKeyPolicy
    ) -> bool:
        if duplicate_key_policy == DuplicateKeyPolicy.THROW_EXCEPTION:
            raise DuplicateKeyError(f"An entry with the key {key!r} already exists")
        elif duplicate_key_policy == DuplicateKeyPolicy.IGNORE:
            logger.debug("Ignoring a new value for the existing key %r", key)
            return False

        logger.debug("Overwriting the value stored under the key %r", key)

        if isinstance(existing, KeyItem):
            existing.value = value
        else:
            self.__native[existing] = value

        return True

    def remove(self, key: typing.Any) -> typing.Optional[KeyValuePair]:
        """
        Remove the entry stored under a key equal to the given key

        Args:
            key: The key of the entry to remove

        Returns:
            The removed entry, or None if nothing was stored under the key
        """
        slot = self.__equality_comparer.hash(key)

        if self.__native is not None:
            if slot in self.__native and self.__equality_comparer.equals(slot, key):
                return KeyValuePair(slot, self.__native.pop(slot))
            return None

        item = self.__find_item(key, slot)

        if item is None:
            return None

        bucket = self.__buckets[slot]
        bucket.remove(item)

        if not bucket:
            del self.__buckets[slot]

        del self.__order[item.token]
        return item.to_pair()

    def clear(self):
        self.__native = dict()
        self.__buckets.clear()
        self.__order.clear()

    def copy(self) -> KeyTable:
        """
        Returns:
            A new table with the same comparer, storage mode, and entries
        """
        duplicate = self.__class__(self.__equality_comparer)

        if self.__native is not None:
            duplicate.__native = dict(self.__native)
        else:
            duplicate.__native = None
            for item in self.__order.values():
                duplicate.__append_item(item.key, item.value, self.__equality_comparer.hash(item.key))

        return duplicate

    def __len__(self) -> int:
        if self.__native is not None:
            return len(self.__native)
        return len(self.__order)

    def __iter__(self) -> typing.Iterator[KeyValuePair]:
        if self.__native is not None:
            return (KeyValuePair(key, value) for key, value in self.__native.items())
        return (item.to_pair() for item in self.__order.values())

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self)!r})"

    @classmethod
    def build(
        cls,
        pairs: typing.Iterable[typing.Tuple[typing.Any, typing.Any]],
        equality_comparer: EqualityComparerProtocol,
        duplicate_key_policy: DuplicateKeyPolicy
    ) -> KeyTable:
        """
        Create a table out of a series of key value pairs

        Args:
            pairs: The entries to store, in order
            equality_comparer: The comparer that matches and hashes keys
            duplicate_key_policy: What to do when a key shows up more than once

        Returns:
            A table holding the entries
        """
        table = cls(equality_comparer)

        for key, value in pairs:
            table.put(key, value, duplicate_key_policy)

        return table
