from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum

from ..utils.exceptions import NotFoundError, ValidationError

class ContactType(Enum):
    """Role tag of a customer contact"""
    BILLING = "Billing"
    SALES = "Sales"
    SITE = "Site"
    OTHER = "Other"

@dataclass(frozen=True)
class Address:
    """Postal address owned by an account or contact"""
    street: str
    city: str
    state: str
    zip: str
    country: str
    id: Optional[str] = None

    def one_line(self) -> str:
        """Render as a single line for summaries"""
        return f"{self.street}, {self.city}, {self.state} {self.zip}, {self.country}"

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'street': self.street,
            'city': self.city,
            'state': self.state,
            'zip': self.zip,
            'country': self.country
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Address':
        return cls(
            id=data.get('id'),
            street=data.get('street', ''),
            city=data.get('city', ''),
            state=data.get('state', ''),
            zip=data.get('zip', ''),
            country=data.get('country', '')
        )

@dataclass
class Contact:
    """Customer contact belonging to exactly one account"""
    id: str
    name: str
    email: str
    phone: str
    address: Address
    type: ContactType = ContactType.OTHER
    is_primary: bool = False

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'address': self.address.to_dict(),
            'type': self.type.value,
            'is_primary': self.is_primary
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Contact':
        return cls(
            id=data['id'],
            name=data['name'],
            email=data.get('email', ''),
            phone=data.get('phone', ''),
            address=Address.from_dict(data.get('address', {})),
            type=ContactType(data.get('type', ContactType.OTHER.value)),
            is_primary=data.get('is_primary', False)
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.type.value})"

@dataclass
class Account:
    """Customer account with its ordered contact list"""
    id: str
    name: str
    billing_address: Optional[Address] = None
    contacts: List[Contact] = field(default_factory=list)

    def __post_init__(self):
        seen = set()
        for contact in self.contacts:
            if contact.id in seen:
                raise ValidationError(f"Duplicate contact id '{contact.id}' in account '{self.id}'")
            seen.add(contact.id)

    def get_contact(self, contact_id: str) -> Contact:
        """Look up a contact by id, raising NotFoundError if it is not on this account"""
        for contact in self.contacts:
            if contact.id == contact_id:
                return contact
        raise NotFoundError(f"Contact '{contact_id}' not found on account '{self.name}'")

    def first_contact_of_type(self, contact_type: ContactType) -> Optional[Contact]:
        """First contact in list order with the given role tag, or None"""
        return next((c for c in self.contacts if c.type == contact_type), None)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'billing_address': self.billing_address.to_dict() if self.billing_address else None,
            'contacts': [c.to_dict() for c in self.contacts]
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Account':
        billing = data.get('billing_address')
        return cls(
            id=data['id'],
            name=data['name'],
            billing_address=Address.from_dict(billing) if billing else None,
            contacts=[Contact.from_dict(c) for c in data.get('contacts', [])]
        )

    def __str__(self) -> str:
        return self.name
