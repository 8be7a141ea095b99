"""
Dependent contact selection for the quote forms.

Selecting an account picks default billing, sales and site contacts;
clearing it clears all three.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..models.account import Account, Contact, ContactType
from .exceptions import NotFoundError

logger = logging.getLogger(__name__)

# Contact slots every quote needs, in the order they are checked on submit
REQUIRED_ROLES = (ContactType.BILLING, ContactType.SALES, ContactType.SITE)


@dataclass
class ContactSelection:
    """Billing, sales and site contacts chosen for a quote"""
    billing: Optional[Contact] = None
    sales: Optional[Contact] = None
    site: Optional[Contact] = None

    def get(self, role: ContactType) -> Optional[Contact]:
        return getattr(self, _slot_name(role))

    def set(self, role: ContactType, contact: Optional[Contact]):
        setattr(self, _slot_name(role), contact)

    def missing_roles(self) -> List[ContactType]:
        return [role for role in REQUIRED_ROLES if self.get(role) is None]


def _slot_name(role: ContactType) -> str:
    if role not in REQUIRED_ROLES:
        raise ValueError(f"No contact slot for role '{role.value}'")
    return role.name.lower()


def resolve_default_contacts(account: Optional[Account]) -> ContactSelection:
    """
    Default contacts for an account.

    The first contact tagged with each role wins; is_primary is not
    consulted. Roles without a tagged contact stay unset.
    """
    if account is None:
        return ContactSelection()

    return ContactSelection(
        billing=account.first_contact_of_type(ContactType.BILLING),
        sales=account.first_contact_of_type(ContactType.SALES),
        site=account.first_contact_of_type(ContactType.SITE)
    )


class CustomerSelection:
    """Selected account and its dependent contact selections"""

    def __init__(self):
        self.account: Optional[Account] = None
        self.contacts = ContactSelection()

    def on_account_changed(self, account: Optional[Account]) -> ContactSelection:
        """Set the account and replace all contact selections with its defaults"""
        contacts = resolve_default_contacts(account)
        self.account = account
        self.contacts = contacts
        logger.debug("Account set to %s, missing contacts: %s",
                     account.name if account else None,
                     [r.value for r in contacts.missing_roles()])
        return contacts

    def clear(self):
        self.on_account_changed(None)

    def select_contact(self, role: ContactType, contact_id: Optional[str]) -> Optional[Contact]:
        """
        Manually choose the contact for a role.

        Any contact of the selected account may fill any role. An unknown id
        clears the slot instead of failing.
        """
        contact = None
        if contact_id is not None and self.account is not None:
            try:
                contact = self.account.get_contact(contact_id)
            except NotFoundError as e:
                logger.warning("%s; clearing %s contact", e, role.value.lower())

        self.contacts.set(role, contact)
        return contact

    def missing_roles(self) -> List[ContactType]:
        return self.contacts.missing_roles()

    @property
    def billing_contact(self) -> Optional[Contact]:
        return self.contacts.billing

    @property
    def sales_contact(self) -> Optional[Contact]:
        return self.contacts.sales

    @property
    def site_contact(self) -> Optional[Contact]:
        return self.contacts.site
