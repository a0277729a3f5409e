import os
import sys
import unittest
from unittest import mock

from strong.collections import CollectionSettings
from strong.collections import DuplicateKeyPolicy
from strong.collections import InvalidArgumentError
from strong.collections import Map
from strong.collections import collection_settings

EPSILON_VARIABLE = "STRONG_COLLECTIONS_FLOAT_EPSILON"
POLICY_VARIABLE = "STRONG_COLLECTIONS_DEFAULT_DUPLICATE_KEY_POLICY"


class TestCollectionSettings(unittest.TestCase):
    def setUp(self) -> None:
        collection_settings.cache_clear()

    def tearDown(self) -> None:
        collection_settings.cache_clear()

    def test_defaults(self):
        settings = CollectionSettings()
        self.assertEqual(settings.float_epsilon, sys.float_info.epsilon)
        self.assertEqual(settings.default_duplicate_key_policy, DuplicateKeyPolicy.THROW_EXCEPTION)

    def test_settings_are_cached(self):
        self.assertIs(collection_settings(), collection_settings())

    def test_settings_are_read_from_the_environment(self):
        with mock.patch.dict(os.environ, {EPSILON_VARIABLE: "0.001", POLICY_VARIABLE: "overwrite"}):
            settings = collection_settings()

        self.assertEqual(settings.float_epsilon, 0.001)
        self.assertEqual(settings.default_duplicate_key_policy, DuplicateKeyPolicy.OVERWRITE)

    def test_variable_names_are_case_insensitive(self):
        with mock.patch.dict(os.environ, {POLICY_VARIABLE.lower(): "IGNORE"}):
            settings = collection_settings()

        self.assertEqual(settings.default_duplicate_key_policy, DuplicateKeyPolicy.IGNORE)

    def test_maps_use_the_configured_policy(self):
        with mock.patch.dict(os.environ, {POLICY_VARIABLE: "ignore"}):
            values = Map([("a", 1), ("a", 2)])

        self.assertEqual(values.duplicate_key_policy, DuplicateKeyPolicy.IGNORE)
        self.assertEqual(values.get("a"), 1)

    def test_invalid_epsilon_describes_the_variable(self):
        with mock.patch.dict(os.environ, {EPSILON_VARIABLE: "-1"}):
            with self.assertRaises(InvalidArgumentError) as context:
                collection_settings()

        self.assertIn(EPSILON_VARIABLE, str(context.exception))

    def test_invalid_policy(self):
        with mock.patch.dict(os.environ, {POLICY_VARIABLE: "sometimes"}):
            with self.assertRaises(InvalidArgumentError) as context:
                collection_settings()

        self.assertIn(POLICY_VARIABLE, str(context.exception))

    def test_settings_are_frozen(self):
        settings = CollectionSettings()

        with self.assertRaises(TypeError):
            settings.float_epsilon = 1.0

    def test_usage_lists_every_variable(self):
        usage = CollectionSettings.usage()
        self.assertIn(EPSILON_VARIABLE, usage)
        self.assertIn(POLICY_VARIABLE, usage)
        self.assertIn("THROW_EXCEPTION", usage)
