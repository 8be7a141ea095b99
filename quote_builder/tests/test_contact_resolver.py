"""
Unit tests for default contact resolution and the customer selection cascade
"""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.models.account import Account, Address, Contact, ContactType
from src.utils.contact_resolver import (
    ContactSelection, CustomerSelection, resolve_default_contacts
)
from src.utils.exceptions import NotFoundError, ValidationError

ADDRESS = Address(street="1 Main St", city="Springfield", state="IL", zip="62701", country="USA")


def make_contact(contact_id, contact_type, is_primary=False):
    return Contact(
        id=contact_id,
        name=f"Contact {contact_id}",
        email=f"{contact_id}@example.com",
        phone="555-000-0000",
        address=ADDRESS,
        type=contact_type,
        is_primary=is_primary
    )


class TestResolveDefaultContacts(unittest.TestCase):

    def test_missing_role_is_left_unset(self):
        account = Account(id="A", name="Account A", contacts=[
            make_contact("c1", ContactType.BILLING),
            make_contact("c2", ContactType.SALES),
        ])
        selection = resolve_default_contacts(account)

        self.assertEqual(selection.billing.id, "c1")
        self.assertEqual(selection.sales.id, "c2")
        self.assertIsNone(selection.site)
        self.assertEqual(selection.missing_roles(), [ContactType.SITE])

    def test_first_match_wins_over_primary_flag(self):
        account = Account(id="A", name="Account A", contacts=[
            make_contact("c1", ContactType.BILLING),
            make_contact("c2", ContactType.BILLING, is_primary=True),
            make_contact("c3", ContactType.OTHER),
        ])
        selection = resolve_default_contacts(account)
        self.assertEqual(selection.billing.id, "c1")

    def test_other_contacts_are_never_defaults(self):
        account = Account(id="A", name="Account A", contacts=[make_contact("c9", ContactType.OTHER)])
        selection = resolve_default_contacts(account)
        self.assertEqual(len(selection.missing_roles()), 3)

    def test_no_account(self):
        selection = resolve_default_contacts(None)
        self.assertEqual(selection, ContactSelection())


class TestCustomerSelection(unittest.TestCase):

    def setUp(self):
        self.account_a = Account(id="A", name="Account A", contacts=[
            make_contact("c1", ContactType.BILLING),
            make_contact("c2", ContactType.SALES),
            make_contact("c3", ContactType.SITE),
        ])
        self.account_b = Account(id="B", name="Account B", contacts=[
            make_contact("c4", ContactType.SALES),
        ])
        self.customer = CustomerSelection()

    def test_account_change_replaces_all_contacts(self):
        self.customer.on_account_changed(self.account_a)
        self.assertEqual(self.customer.billing_contact.id, "c1")
        self.assertEqual(self.customer.sales_contact.id, "c2")
        self.assertEqual(self.customer.site_contact.id, "c3")

        self.customer.on_account_changed(self.account_b)
        self.assertIs(self.customer.account, self.account_b)
        self.assertIsNone(self.customer.billing_contact)
        self.assertEqual(self.customer.sales_contact.id, "c4")
        self.assertIsNone(self.customer.site_contact)

    def test_clearing_account_clears_contacts(self):
        self.customer.on_account_changed(self.account_a)
        self.customer.clear()
        self.assertIsNone(self.customer.account)
        self.assertEqual(len(self.customer.missing_roles()), 3)

    def test_manual_contact_override(self):
        self.customer.on_account_changed(self.account_a)
        contact = self.customer.select_contact(ContactType.BILLING, "c2")
        self.assertEqual(contact.id, "c2")
        self.assertEqual(self.customer.billing_contact.id, "c2")
        # Other slots are untouched
        self.assertEqual(self.customer.sales_contact.id, "c2")

    def test_unknown_contact_clears_slot(self):
        self.customer.on_account_changed(self.account_a)
        self.assertIsNone(self.customer.select_contact(ContactType.SITE, "gone"))
        self.assertIsNone(self.customer.site_contact)
        self.assertEqual(self.customer.missing_roles(), [ContactType.SITE])

    def test_contact_without_account_is_cleared(self):
        self.assertIsNone(self.customer.select_contact(ContactType.SALES, "c2"))

    def test_other_role_has_no_slot(self):
        with self.assertRaises(ValueError):
            self.customer.select_contact(ContactType.OTHER, "c1")


class TestAccount(unittest.TestCase):

    def test_duplicate_contact_ids_rejected(self):
        with self.assertRaises(ValidationError):
            Account(id="A", name="Account A", contacts=[
                make_contact("c1", ContactType.BILLING),
                make_contact("c1", ContactType.SALES),
            ])

    def test_get_contact_unknown(self):
        account = Account(id="A", name="Account A")
        with self.assertRaises(NotFoundError):
            account.get_contact("c1")

    def test_round_trip_dict(self):
        account = Account(id="A", name="Account A", billing_address=ADDRESS,
                          contacts=[make_contact("c1", ContactType.BILLING, is_primary=True)])
        restored = Account.from_dict(account.to_dict())
        self.assertEqual(restored, account)


if __name__ == '__main__':
    unittest.main()
