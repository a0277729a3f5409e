import unittest

from pydantic import BaseModel

from strong.collections import DuplicateKeyPolicy
from strong.collections import InvalidArgumentError
from strong.collections import Map
from strong.collections import ReadonlyMap


class MapOptions(BaseModel):
    duplicate_key_policy: DuplicateKeyPolicy


class TestDuplicateKeyPolicy(unittest.TestCase):
    def test_values(self):
        self.assertEqual(DuplicateKeyPolicy.THROW_EXCEPTION.value, 0)
        self.assertEqual(DuplicateKeyPolicy.IGNORE.value, 1)
        self.assertEqual(DuplicateKeyPolicy.OVERWRITE.value, 2)

    def test_default(self):
        self.assertEqual(DuplicateKeyPolicy.default(), DuplicateKeyPolicy.THROW_EXCEPTION)
        self.assertEqual(DuplicateKeyPolicy.get(), DuplicateKeyPolicy.THROW_EXCEPTION)

    def test_get(self):
        self.assertEqual(DuplicateKeyPolicy.get(DuplicateKeyPolicy.IGNORE), DuplicateKeyPolicy.IGNORE)
        self.assertEqual(DuplicateKeyPolicy.get("overwrite"), DuplicateKeyPolicy.OVERWRITE)
        self.assertEqual(DuplicateKeyPolicy.get(1), DuplicateKeyPolicy.IGNORE)

    def test_get_rejects_unknown_policies(self):
        with self.assertRaises(InvalidArgumentError):
            DuplicateKeyPolicy.get("sometimes")

        with self.assertRaises(InvalidArgumentError):
            DuplicateKeyPolicy.get(7)

    def test_maps_reject_unknown_policies(self):
        with self.assertRaises(InvalidArgumentError):
            Map(duplicate_key_policy="bogus")

        with self.assertRaises(InvalidArgumentError):
            ReadonlyMap({"a": 1}, 3)

        with self.assertRaises(InvalidArgumentError):
            Map({"a": 1}).set("a", 2, "sometimes")

    def test_instantiate_model_with_policy_name(self):
        self.assertEqual(MapOptions(duplicate_key_policy="ignore").duplicate_key_policy, DuplicateKeyPolicy.IGNORE)
        self.assertEqual(
            MapOptions(duplicate_key_policy="THROW_EXCEPTION").duplicate_key_policy,
            DuplicateKeyPolicy.THROW_EXCEPTION
        )

    def test_instantiate_model_with_policy_instance(self):
        model = MapOptions(duplicate_key_policy=DuplicateKeyPolicy.OVERWRITE)
        self.assertEqual(model.duplicate_key_policy, DuplicateKeyPolicy.OVERWRITE)

    def test_raises_ValueError_instantiate_model_with_bad_policy_name(self):
        with self.assertRaises(ValueError):
            MapOptions(duplicate_key_policy="sometimes")

    def test_policy_names_in_json_schema(self):
        schema = MapOptions.schema()
        policy_schema = schema["definitions"]["DuplicateKeyPolicy"]
        self.assertEqual(policy_schema["type"], "string")
        self.assertListEqual(["THROW_EXCEPTION", "IGNORE", "OVERWRITE"], policy_schema["enum"])
