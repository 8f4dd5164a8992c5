"""Unit tests for inventory supply groups."""

from __future__ import annotations

import unittest

from tracklayout.search.inventory import Inventory
from tracklayout.utils.exceptions import LayoutInputError, UnknownPieceError


class InventoryTests(unittest.TestCase):
    """Validate shared supply between flip-linked piece kinds."""

    def test_missing_flip_partner_shares_supply(self) -> None:
        """Let left arcs draw from the right-arc supply when only ``aR`` is listed."""
        inventory = Inventory.from_counts({"s1": 2, "aR": 12})

        self.assertEqual(inventory.kinds, ("s1", "aR", "aL"))
        self.assertEqual(inventory.group_of("aL"), "aR")
        self.assertEqual(inventory.total, 14)

        inventory.take("aL")
        self.assertEqual(inventory.remaining("aR"), 11)
        self.assertEqual(inventory.remaining("aL"), 11)
        self.assertEqual(inventory.total, 13)

    def test_listed_partners_keep_separate_supply(self) -> None:
        """Keep independent counters when both orientations are listed."""
        inventory = Inventory.from_counts({"aL": 1, "aR": 3})

        inventory.take("aL")
        self.assertEqual(inventory.remaining("aL"), 0)
        self.assertEqual(inventory.remaining("aR"), 3)
        self.assertEqual(inventory.available(), ["aR"])
        self.assertEqual(inventory.total, 3)

    def test_take_and_put_back_restore_counts(self) -> None:
        """Restore every counter after nested take/put-back pairs."""
        inventory = Inventory.from_counts({"s2": 1, "aL": 2})
        before = inventory.snapshot()

        inventory.take("aR")
        inventory.take("s2")
        inventory.take("aL")
        self.assertEqual(inventory.total, 0)
        self.assertEqual(inventory.available(), [])
        inventory.put_back("aL")
        inventory.put_back("s2")
        inventory.put_back("aR")

        self.assertEqual(inventory.snapshot(), before)
        self.assertEqual(inventory.total, 3)

    def test_taking_from_empty_supply_is_rejected(self) -> None:
        """Refuse to consume pieces that are not left."""
        inventory = Inventory.from_counts({"s1": 0})
        with self.assertRaises(LayoutInputError):
            inventory.take("s1")

    def test_invalid_inventories_are_rejected(self) -> None:
        """Reject unknown labels and invalid counts."""
        with self.assertRaises(UnknownPieceError):
            Inventory.from_counts({"x9": 1})
        with self.assertRaises(LayoutInputError):
            Inventory.from_counts({"s1": -1})
        with self.assertRaises(LayoutInputError):
            Inventory.from_counts({"s1": 1.5})
        with self.assertRaises(LayoutInputError):
            Inventory.from_counts({"s1": 2}).remaining("s2")


if __name__ == "__main__":
    unittest.main()
