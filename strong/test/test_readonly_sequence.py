import typing
import unittest

from pydantic import BaseModel
from pydantic import ValidationError

from strong.collections import IndexOutOfRangeError
from strong.collections import InvalidArgumentError
from strong.collections import ReadonlySequence
from strong.collections import Sequence
from strong.collections import Set


class CountingSource:
    """
    A re-iterable source without a size that remembers how many values have been read from it
    """
    def __init__(self, values: typing.Iterable):
        self.values = list(values)
        self.passes = 0
        self.reads = 0

    def __iter__(self):
        self.passes += 1
        for value in self.values:
            self.reads += 1
            yield value


class Inventory(BaseModel):
    items: Sequence
    labels: ReadonlySequence
    tags: Set


class TestReadonlySequence(unittest.TestCase):
    def test_sized_sources_are_copied(self):
        source = [1, 2, 3]
        values = ReadonlySequence(source)
        source.append(4)

        self.assertFalse(values.is_lazy)
        self.assertEqual(values.to_list(), [1, 2, 3])

    def test_empty(self):
        values = ReadonlySequence()

        self.assertEqual(values.count(), 0)
        self.assertFalse(values.is_lazy)

    def test_callables_are_lazy(self):
        calls = list()

        def numbers():
            calls.append(True)
            yield 1
            yield 2

        values = ReadonlySequence(numbers)

        self.assertTrue(values.is_lazy)
        self.assertEqual(len(calls), 0)
        self.assertEqual(values.to_list(), [1, 2])
        self.assertEqual(values.count(), 2)
        self.assertEqual(len(calls), 2)

    def test_every_read_drives_the_source_again(self):
        source = CountingSource([1, 2, 3])
        values = ReadonlySequence(source)

        self.assertTrue(values.is_lazy)

        values.to_list()
        values.count()

        self.assertEqual(source.passes, 2)

        source.values.append(4)

        self.assertEqual(values.to_list(), [1, 2, 3, 4])

    def test_get_stops_reading_early(self):
        source = CountingSource(range(100))
        values = ReadonlySequence(source)

        self.assertEqual(values.get(2), 2)
        self.assertEqual(source.reads, 3)

    def test_negative_index_reads_everything(self):
        source = CountingSource(range(10))
        values = ReadonlySequence(source)

        self.assertEqual(values.get(-1), 9)
        self.assertEqual(source.reads, 10)

    def test_lazy_out_of_range(self):
        values = ReadonlySequence(lambda: iter([1, 2]))

        with self.assertRaises(IndexOutOfRangeError):
            values.get(2)

        with self.assertRaises(IndexOutOfRangeError):
            values.get(-3)

    def test_freeze(self):
        source = CountingSource([1, 2, 3])
        values = ReadonlySequence(source)

        self.assertIs(values.freeze(), values)
        self.assertFalse(values.is_lazy)

        source.values.append(4)
        values.freeze()

        self.assertEqual(values.to_list(), [1, 2, 3])
        self.assertEqual(source.passes, 1)

    def test_freezing_is_logged(self):
        with self.assertLogs("strong.collections.sequences", level="DEBUG"):
            ReadonlySequence(lambda: iter([1])).freeze()

    def test_one_shot_iterators_are_captured_on_first_read(self):
        generator = (value * 2 for value in range(3))

        with self.assertLogs("strong.collections.internal.storage", level="WARNING"):
            values = ReadonlySequence(generator)

        self.assertTrue(values.is_lazy)
        self.assertEqual(values.to_list(), [0, 2, 4])
        self.assertFalse(values.is_lazy)
        self.assertEqual(values.to_list(), [0, 2, 4])
        self.assertEqual(values.count(), 3)

    def test_as_readonly_returns_itself(self):
        values = ReadonlySequence([1])
        self.assertIs(values.as_readonly(), values)

    def test_slices_are_readonly(self):
        values = ReadonlySequence([1, 2, 3])
        sliced = values[1:]

        self.assertIsInstance(sliced, ReadonlySequence)
        self.assertEqual(sliced.to_list(), [2, 3])

    def test_cannot_be_modified(self):
        values = ReadonlySequence([1, 2])

        self.assertFalse(hasattr(values, "append"))
        self.assertFalse(hasattr(values, "set"))

        with self.assertRaises(TypeError):
            values[0] = 5

    def test_queries_over_a_lazy_source(self):
        values = ReadonlySequence(lambda: iter(range(1, 11)))

        self.assertEqual(values.where(lambda value: value % 3 == 0).to_list(), [3, 6, 9])
        self.assertEqual(values.index_of(5), 4)
        self.assertEqual(values.last(), 10)
        self.assertEqual(values.take(2).to_list(), [1, 2])

    def test_freezing_twice_is_the_same_as_freezing_once(self):
        once = ReadonlySequence(lambda: iter([3, 1, 2])).freeze()
        twice = ReadonlySequence(lambda: iter([3, 1, 2])).freeze().freeze()

        self.assertEqual(once.to_list(), twice.to_list())
        self.assertTrue(once.equals(twice))

    def test_invalid_sources(self):
        with self.assertRaises(InvalidArgumentError):
            ReadonlySequence(42)


class TestSequenceFields(unittest.TestCase):
    def test_values_are_coerced(self):
        model = Inventory(items=[1, 2], labels=("a", "b"), tags=[1, 1, 2])

        self.assertIsInstance(model.items, Sequence)
        self.assertIsInstance(model.labels, ReadonlySequence)
        self.assertIsInstance(model.tags, Set)
        self.assertEqual(model.items.to_list(), [1, 2])
        self.assertEqual(model.labels.to_list(), ["a", "b"])
        self.assertEqual(model.tags.to_list(), [1, 2])

    def test_instances_are_kept(self):
        items = Sequence([1])
        model = Inventory(items=items, labels=[], tags=[])

        self.assertIs(model.items, items)

    def test_invalid_values(self):
        with self.assertRaises(ValidationError):
            Inventory(items=5, labels=[], tags=[])

        with self.assertRaises(ValidationError):
            Inventory(items=[], labels="text", tags=[])
