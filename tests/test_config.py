import sys
import unittest
from dataclasses import FrozenInstanceError
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tagfield.config import DEFAULT_LAZY_LOAD_ITEM_LIMIT, TagFieldConfig  # noqa: E402


class TagFieldConfigTests(unittest.TestCase):
    def test_defaults(self):
        config = TagFieldConfig()
        self.assertEqual(config.lazy_load_item_limit, DEFAULT_LAZY_LOAD_ITEM_LIMIT)
        self.assertTrue(config.can_create)
        self.assertFalse(config.should_lazy_load)
        self.assertTrue(config.is_multiple)
        self.assertEqual(config.title_field, "Title")

    def test_invalid_limit(self):
        for limit in (0, -1, "10", 2.5, True):
            with self.subTest(limit=limit):
                with self.assertRaises(ValueError):
                    TagFieldConfig(lazy_load_item_limit=limit)  # type: ignore[arg-type]

    def test_invalid_title_field(self):
        with self.assertRaises(ValueError):
            TagFieldConfig(title_field=" ")

    def test_frozen(self):
        config = TagFieldConfig()
        with self.assertRaises(FrozenInstanceError):
            config.can_create = False  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
