import os
import sys
import unittest
from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from unittest import mock

from strong.collections import DefaultComparer
from strong.collections import DefaultEqualityComparer
from strong.collections import HashingUnsupportedError
from strong.collections import Sequence
from strong.collections import TypeMismatchError
from strong.collections import ValueKind
from strong.collections import collection_settings
from strong.collections.constants import INT_MAX
from strong.collections.constants import INT_MIN


class Money:
    def __init__(self, amount: int):
        self.amount = amount

    def equals(self, other) -> bool:
        return isinstance(other, Money) and other.amount == self.amount


class Loose:
    """
    Equal to any number with the same value
    """
    def __init__(self, value: int):
        self.value = value

    def equals(self, other) -> bool:
        return other == self.value


class Version:
    def __init__(self, major: int):
        self.major = major

    def compare_to(self, other) -> int:
        other_major = other.major if isinstance(other, Version) else other
        return (self.major > other_major) - (self.major < other_major)


class CaseInsensitiveComparer:
    def equals(self, x, y) -> bool:
        return str(x).lower() == str(y).lower()

    def hash(self, x):
        return str(x).lower()


class TestValueKind(unittest.TestCase):
    def test_booleans_are_not_integers(self):
        self.assertEqual(ValueKind.of(True), ValueKind.BOOLEAN)
        self.assertEqual(ValueKind.of(1), ValueKind.INTEGER)

    def test_classification(self):
        self.assertEqual(ValueKind.of(1.5), ValueKind.FLOAT)
        self.assertEqual(ValueKind.of("text"), ValueKind.STRING)
        self.assertEqual(ValueKind.of(date(2020, 1, 1)), ValueKind.DATETIME)
        self.assertEqual(ValueKind.of(datetime(2020, 1, 1, 12)), ValueKind.DATETIME)
        self.assertEqual(ValueKind.of(Money(1)), ValueKind.OBJECT)

    def test_unsupported_values(self):
        for value in (None, b"bytes", bytearray(), [1], (1,), {"a": 1}, {1}, frozenset()):
            self.assertEqual(ValueKind.of(value), ValueKind.UNSUPPORTED, f"{value!r} should be unsupported")


class TestDefaultEqualityComparer(unittest.TestCase):
    def setUp(self) -> None:
        self.comparer = DefaultEqualityComparer()

    def test_scalars(self):
        self.assertTrue(self.comparer.equals(5, 5))
        self.assertTrue(self.comparer.equals("a", "a"))
        self.assertTrue(self.comparer.equals(True, True))
        self.assertFalse(self.comparer.equals("a", "b"))
        self.assertFalse(self.comparer.equals(True, 1))

    def test_numbers_are_compared_within_epsilon(self):
        self.assertTrue(self.comparer.equals(5, 5.0))
        self.assertTrue(self.comparer.equals(0.1 + 0.2, 0.3))
        self.assertFalse(self.comparer.equals(5, 5.001))

    def test_numbers_equal_canonical_integer_strings(self):
        self.assertTrue(self.comparer.equals(5, "5"))
        self.assertTrue(self.comparer.equals("5", 5))
        self.assertTrue(self.comparer.equals(5.0, "5.00"))
        self.assertTrue(self.comparer.equals(-3, "-3"))
        self.assertFalse(self.comparer.equals(5, "5.5"))
        self.assertFalse(self.comparer.equals(5, "five"))

    def test_strings_are_never_normalized(self):
        self.assertFalse(self.comparer.equals("5", "5.0"))
        self.assertEqual(self.comparer.hash("5"), self.comparer.hash("5.0"))

    def test_dates_are_compared_by_timestamp(self):
        utc_noon = datetime(2020, 1, 1, 12, tzinfo=timezone.utc)
        plus_two = datetime(2020, 1, 1, 14, tzinfo=timezone(timedelta(hours=2)))

        self.assertTrue(self.comparer.equals(utc_noon, plus_two))
        self.assertTrue(self.comparer.equals(date(2020, 1, 1), datetime(2020, 1, 1)))
        self.assertTrue(self.comparer.equals(datetime(2020, 1, 1, 12), utc_noon))
        self.assertFalse(self.comparer.equals(date(2020, 1, 1), date(2020, 1, 2)))

    def test_sub_second_precision_is_ignored(self):
        self.assertTrue(
            self.comparer.equals(datetime(2020, 1, 1, 0, 0, 0, 1000), datetime(2020, 1, 1, 0, 0, 0, 999000))
        )

    def test_equatable_objects(self):
        self.assertTrue(self.comparer.equals(Money(3), Money(3)))
        self.assertFalse(self.comparer.equals(Money(3), Money(4)))
        self.assertFalse(self.comparer.equals(Money(3), 3))

    def test_the_second_value_may_decide(self):
        self.assertTrue(self.comparer.equals(3, Loose(3)))
        self.assertFalse(self.comparer.equals(4, Loose(3)))

    def test_comparers_are_plain_objects(self):
        other = DefaultEqualityComparer()

        self.assertFalse(self.comparer.equals(other, 5))
        self.assertFalse(self.comparer.equals(5, CaseInsensitiveComparer()))
        self.assertTrue(self.comparer.equals(other, other))
        self.assertFalse(Sequence([other]).contains(5))

    def test_identity(self):
        value = object()
        self.assertTrue(self.comparer.equals(value, value))
        self.assertTrue(self.comparer.equals(None, None))
        self.assertFalse(self.comparer.equals(object(), object()))

    def test_containers_are_only_equal_to_themselves(self):
        values = [1, 2]
        self.assertTrue(self.comparer.equals(values, values))
        self.assertFalse(self.comparer.equals([1, 2], [1, 2]))

    def test_hash(self):
        self.assertEqual(self.comparer.hash(True), 1)
        self.assertEqual(self.comparer.hash(False), 0)
        self.assertEqual(self.comparer.hash(42), 42)
        self.assertEqual(self.comparer.hash("42"), 42)
        self.assertEqual(self.comparer.hash("+7.000"), 7)
        self.assertEqual(self.comparer.hash("abc"), "abc")
        self.assertEqual(self.comparer.hash(2.9), 2)
        self.assertEqual(self.comparer.hash(-2.9), -2)
        self.assertEqual(self.comparer.hash(date(1970, 1, 2)), 86400)

    def test_hash_of_unusual_floats(self):
        self.assertEqual(self.comparer.hash(float("nan")), 0)
        self.assertEqual(self.comparer.hash(1e300), INT_MAX)
        self.assertEqual(self.comparer.hash(-1e300), INT_MIN)
        self.assertEqual(self.comparer.hash(float("inf")), INT_MAX)

    def test_objects_hash_by_identity(self):
        value = Money(1)
        self.assertEqual(self.comparer.hash(value), id(value))

    def test_unsupported_values_cannot_be_hashed(self):
        for value in (None, [1], {"a": 1}, b"bytes"):
            with self.assertRaises(HashingUnsupportedError):
                self.comparer.hash(value)

        with self.assertRaises(TypeError):
            self.comparer.hash(None)

    def test_equal_values_hash_alike(self):
        pairs = [(5, 5.0), (5, "5"), ("7", 7.0), (True, True), (date(2020, 5, 5), datetime(2020, 5, 5))]

        for first, second in pairs:
            self.assertTrue(self.comparer.equals(first, second), f"{first!r} should equal {second!r}")
            self.assertEqual(self.comparer.hash(first), self.comparer.hash(second))

    def test_custom_epsilon(self):
        comparer = DefaultEqualityComparer(epsilon=0.01)
        self.assertEqual(comparer.epsilon, 0.01)
        self.assertTrue(comparer.equals(1.0, 1.005))
        self.assertFalse(comparer.equals(1.0, 1.02))

    def test_default_epsilon(self):
        self.assertEqual(self.comparer.epsilon, sys.float_info.epsilon)

    def test_epsilon_from_environment(self):
        with mock.patch.dict(os.environ, {"STRONG_COLLECTIONS_FLOAT_EPSILON": "0.5"}):
            collection_settings.cache_clear()
            comparer = DefaultEqualityComparer()

        self.assertEqual(comparer.epsilon, 0.5)
        self.assertTrue(comparer.equals(1, 1.4))


class TestDefaultComparer(unittest.TestCase):
    def setUp(self) -> None:
        self.comparer = DefaultComparer()

    def test_numbers(self):
        self.assertEqual(self.comparer.compare(1, 2), -1)
        self.assertEqual(self.comparer.compare(2, 1), 1)
        self.assertEqual(self.comparer.compare(2, 2.0), 0)
        self.assertEqual(self.comparer.compare(1, 2.5), -1)
        self.assertEqual(self.comparer.compare(100, 3), 1)

    def test_booleans(self):
        self.assertEqual(self.comparer.compare(False, True), -1)
        self.assertEqual(self.comparer.compare(True, False), 1)
        self.assertEqual(self.comparer.compare(True, True), 0)

    def test_strings_compare_by_bytes(self):
        self.assertEqual(self.comparer.compare("apple", "banana"), -1)
        self.assertEqual(self.comparer.compare("Z", "a"), -1)
        self.assertEqual(self.comparer.compare("é", "z"), 1)
        self.assertEqual(self.comparer.compare("abc", "ab"), 1)

    def test_dates(self):
        self.assertEqual(self.comparer.compare(date(2020, 1, 1), date(2021, 1, 1)), -1)
        self.assertEqual(self.comparer.compare(datetime(2021, 1, 1, 1), date(2021, 1, 1)), 1)

    def test_equal_values_compare_as_zero(self):
        self.assertEqual(self.comparer.compare("5", 5), 0)
        self.assertEqual(self.comparer.compare(Money(2), Money(2)), 0)

    def test_comparable_objects(self):
        self.assertEqual(self.comparer.compare(Version(1), Version(2)), -1)
        self.assertEqual(self.comparer.compare(Version(3), 2), 1)
        self.assertEqual(self.comparer.compare(2, Version(3)), -1)

    def test_values_that_cannot_be_ordered(self):
        with self.assertRaises(TypeMismatchError):
            self.comparer.compare("a", 1)

        with self.assertRaises(TypeMismatchError):
            self.comparer.compare(date(2020, 1, 1), "2020-01-01")

        with self.assertRaises(TypeError):
            self.comparer.compare(Money(1), Money(2))

    def test_uses_the_given_equality_comparer(self):
        comparer = DefaultComparer(CaseInsensitiveComparer())
        self.assertEqual(comparer.compare("A", "a"), 0)
        self.assertEqual(comparer.compare("A", "b"), -1)
