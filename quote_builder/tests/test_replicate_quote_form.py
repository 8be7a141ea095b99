"""
Tests for the replicate-quote form flow
"""

import unittest
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.forms.replicate_quote_form import ReplicateQuoteForm
from src.models.account import ContactType
from src.models.quote import QuoteStatus
from src.utils.catalog import Catalog
from src.utils.exceptions import NotFoundError, ValidationError
from src.utils.quote_number import QuoteNumberGenerator

TODAY = date(2026, 3, 15)


class TestReplicateQuoteForm(unittest.TestCase):

    def setUp(self):
        self.catalog = Catalog.load()
        self.form = ReplicateQuoteForm(self.catalog, today=lambda: TODAY)

    def test_initial_state(self):
        self.assertEqual(self.form.quote_number, "Q-2026-0003")
        self.assertEqual(len(self.form.filtered_quotes), 2)
        self.assertFalse(self.form.filtering_applied)
        self.assertIsNone(self.form.source_quote)

    def test_apply_and_reset_filters(self):
        self.form.set_filters(project_name="factory")
        result = self.form.apply_filters()
        self.assertEqual([q.project_name for q in result], ["Factory Automation System"])
        self.assertTrue(self.form.filtering_applied)

        self.form.set_filters(project_number="prj-00")
        self.assertEqual(len(self.form.apply_filters()), 2)

        self.form.set_filters(project_name="warehouse")
        self.assertEqual(self.form.apply_filters(), [])

        self.form.reset_filters()
        self.assertEqual(len(self.form.filtered_quotes), 2)
        self.assertFalse(self.form.filtering_applied)
        self.assertEqual(self.form.project_name_filter, "")
        self.assertEqual(len(self.form.existing_quotes), 2)

    def test_selecting_source_quote_resets_customer(self):
        self.form.select_account("1")
        self.form.select_source_quote("2")
        self.assertIsNone(self.form.selected_account)
        self.assertIsNone(self.form.billing_contact)
        self.assertIsNone(self.form.sales_contact)
        self.assertIsNone(self.form.site_contact)

        self.form.select_account("2")
        self.form.select_source_quote("1")
        self.assertEqual(self.form.source_quote.quote_number, "Q-2025-0001")
        self.assertIsNone(self.form.selected_account)

    def test_deselecting_source_quote_resets_customer(self):
        self.form.select_source_quote("1")
        self.form.select_account("2")
        self.assertIsNone(self.form.select_source_quote(None))
        self.assertIsNone(self.form.source_quote)
        self.assertIsNone(self.form.selected_account)
        self.assertIsNone(self.form.site_contact)

    def test_unknown_source_quote(self):
        self.form.select_source_quote("1")
        with self.assertRaises(NotFoundError):
            self.form.select_source_quote("99")
        self.assertIsNone(self.form.source_quote)

    def test_create_requires_source_quote(self):
        self.form.select_account("1")
        with self.assertRaises(ValidationError) as ctx:
            self.form.create_replicate()
        self.assertIn("quote to replicate", str(ctx.exception))

    def test_create_requires_new_customer(self):
        self.form.select_source_quote("1")
        with self.assertRaises(ValidationError) as ctx:
            self.form.create_replicate()
        self.assertIn("customer account", str(ctx.exception))

        self.form.select_account("2")
        self.form.select_contact(ContactType.BILLING, None)
        with self.assertRaises(ValidationError):
            self.form.create_replicate()

    def test_create_replicate(self):
        self.form.select_source_quote("1")
        self.form.select_account("2")

        quote = self.form.create_replicate()

        self.assertEqual(quote.quote_number, "Q-2026-0003")
        self.assertEqual(quote.status, QuoteStatus.DRAFT)
        self.assertEqual(quote.created_by, "John Admin")
        self.assertEqual(quote.created_on, TODAY)
        self.assertEqual(quote.valid_until, date(2026, 4, 14))
        self.assertEqual(quote.project_name, "Factory Automation System")
        self.assertEqual(quote.account.name, "GloboTech Industries")
        self.assertEqual(quote.billing_contact.id, "c4")
        self.assertEqual(quote.electrical_specs.calculated_power, 14.96)
        self.assertEqual([l.id for l in quote.bill_of_materials], ["bom-1", "bom-2", "bom-3"])
        self.assertEqual(quote.total_price, 1376.75)

        # The source quote is not modified
        self.assertEqual(self.form.source_quote.account.name, "Acme Corporation")
        self.assertEqual(self.form.source_quote.bill_of_materials[0].id, "bom1")

    def test_injected_number_generator(self):
        generator = QuoteNumberGenerator(["Q-2026-0041"], today=lambda: TODAY)
        form = ReplicateQuoteForm(self.catalog, number_generator=generator, today=lambda: TODAY)
        self.assertEqual(form.quote_number, "Q-2026-0042")
        self.assertEqual(generator.peek(), "Q-2026-0043")


if __name__ == '__main__':
    unittest.main()
