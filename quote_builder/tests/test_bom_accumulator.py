import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.models.bom import BillOfMaterialLine, PartPricing
from src.utils.bom_accumulator import BOMAccumulator
from src.utils.catalog import Catalog
from src.utils.exceptions import ValidationError


class TestBOMAccumulator(unittest.TestCase):

    def setUp(self):
        catalog = Catalog(parts=[
            PartPricing("P001", "Control Panel", 450.0),
            PartPricing("P002", "Power Supply Unit", 275.5),
            PartPricing("P003", "Circuit Breaker", 125.25),
        ])
        self.bom = BOMAccumulator(catalog)

    def test_empty_total(self):
        self.assertEqual(self.bom.total(), 0)
        self.assertEqual(len(self.bom), 0)

    def test_add_line_prices_from_catalog(self):
        line = self.bom.add_line("P002", 2)
        self.assertEqual(line.id, "bom-1")
        self.assertEqual(line.description, "Power Supply Unit")
        self.assertEqual(line.unit_cost, 275.5)
        self.assertEqual(line.total_cost, 551.0)

    def test_total_is_sum_of_lines(self):
        self.bom.add_line("P002", 2)
        self.bom.add_line("P003", 3)
        self.assertEqual(self.bom.total(), 926.75)
        self.assertEqual(self.bom.total_quantity(), 5)
        self.assertEqual(self.bom.total(), sum(line.total_cost for line in self.bom))

    def test_lines_keep_insertion_order(self):
        self.bom.add_line("P003", 1)
        self.bom.add_line("P001", 1)
        self.assertEqual([line.part_number for line in self.bom.lines], ["P003", "P001"])

    def test_invalid_lines_are_rejected_without_effect(self):
        self.bom.add_line("P001", 1)
        invalid = (("", 1), ("   ", 1), ("P999", 1),
                   ("P001", 0), ("P001", -2), ("P001", 1.5), ("P001", None))
        for part_number, quantity in invalid:
            with self.assertRaises(ValidationError):
                self.bom.add_line(part_number, quantity)
        self.assertEqual(len(self.bom), 1)
        self.assertEqual(self.bom.total(), 450.0)

    def test_remove_line(self):
        first = self.bom.add_line("P001", 1)
        self.bom.add_line("P003", 2)
        self.assertTrue(self.bom.remove_line(first.id))
        self.assertEqual(self.bom.total(), 250.5)

    def test_remove_missing_line_is_noop(self):
        self.bom.add_line("P001", 1)
        self.assertFalse(self.bom.remove_line("bom-42"))
        self.assertEqual(len(self.bom), 1)
        self.assertEqual(self.bom.total(), 450.0)

    def test_ids_are_not_reused_after_removal(self):
        self.bom.add_line("P001", 1)
        second = self.bom.add_line("P002", 1)
        self.bom.remove_line("bom-1")
        third = self.bom.add_line("P003", 1)
        self.assertEqual(third.id, "bom-3")
        self.assertNotEqual(third.id, second.id)

    def test_load_lines_assigns_fresh_ids(self):
        self.bom.add_line("P001", 1)
        self.bom.load_lines([
            BillOfMaterialLine("bom1", "P002", "Power Supply Unit", 2, 275.5),
        ])
        self.assertEqual([line.id for line in self.bom.lines], ["bom-1", "bom-2"])
        self.assertEqual(self.bom.total(), 1001.0)

    def test_lines_snapshot_is_detached(self):
        self.bom.add_line("P001", 1)
        snapshot = self.bom.lines
        snapshot.clear()
        self.assertEqual(len(self.bom), 1)

    def test_line_total_follows_quantity_and_cost(self):
        line = BillOfMaterialLine.from_dict({
            'id': 'x', 'part_number': 'P003', 'quantity': 3,
            'unit_cost': 125.25, 'total_cost': 1.0
        })
        self.assertEqual(line.total_cost, 375.75)


if __name__ == '__main__':
    unittest.main()
