from dataclasses import dataclass, field
from typing import List, Optional
from datetime import date
from enum import Enum

from .account import Account, Contact
from .bom import BillOfMaterialLine
from .configuration import Configuration
from .electrical import ElectricalSpecs

class QuoteStatus(Enum):
    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    APPROVED = "Approved"
    REJECTED = "Rejected"

@dataclass
class Quote:
    """Data class representing a customer quotation"""
    id: str
    quote_number: str
    project_name: str
    project_number: str = ""
    created_by: str = ""
    created_on: date = field(default_factory=date.today)
    valid_until: Optional[date] = None
    status: QuoteStatus = QuoteStatus.DRAFT

    # Customer, referenced not owned
    account: Optional[Account] = None
    billing_contact: Optional[Contact] = None
    sales_contact: Optional[Contact] = None
    site_contact: Optional[Contact] = None

    electrical_specs: ElectricalSpecs = field(default_factory=ElectricalSpecs)
    configurations: List[Configuration] = field(default_factory=list)
    bill_of_materials: List[BillOfMaterialLine] = field(default_factory=list)

    @property
    def total_price(self) -> float:
        """Sum of all BOM line totals"""
        return sum(line.total_cost for line in self.bill_of_materials)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.bill_of_materials)

    @property
    def selected_configurations(self) -> List[Configuration]:
        return [c for c in self.configurations if c.selected]

    def to_dict(self) -> dict:
        """Convert quote to dictionary for serialization"""
        return {
            'id': self.id,
            'quote_number': self.quote_number,
            'project_name': self.project_name,
            'project_number': self.project_number,
            'created_by': self.created_by,
            'created_on': self.created_on.isoformat(),
            'valid_until': self.valid_until.isoformat() if self.valid_until else None,
            'status': self.status.value,
            'account': self.account.to_dict() if self.account else None,
            'billing_contact': self.billing_contact.to_dict() if self.billing_contact else None,
            'sales_contact': self.sales_contact.to_dict() if self.sales_contact else None,
            'site_contact': self.site_contact.to_dict() if self.site_contact else None,
            'electrical_specs': self.electrical_specs.to_dict(),
            'configurations': [c.to_dict() for c in self.configurations],
            'bill_of_materials': [line.to_dict() for line in self.bill_of_materials],
            'total_price': self.total_price
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Quote':
        """Create quote instance from dictionary"""
        def optional_contact(key):
            return Contact.from_dict(data[key]) if data.get(key) else None

        valid_until = data.get('valid_until')

        return cls(
            id=data['id'],
            quote_number=data['quote_number'],
            project_name=data.get('project_name', ''),
            project_number=data.get('project_number', ''),
            created_by=data.get('created_by', ''),
            created_on=date.fromisoformat(data['created_on']),
            valid_until=date.fromisoformat(valid_until) if valid_until else None,
            status=QuoteStatus(data.get('status', QuoteStatus.DRAFT.value)),
            account=Account.from_dict(data['account']) if data.get('account') else None,
            billing_contact=optional_contact('billing_contact'),
            sales_contact=optional_contact('sales_contact'),
            site_contact=optional_contact('site_contact'),
            electrical_specs=ElectricalSpecs.from_dict(data.get('electrical_specs', {})),
            configurations=[Configuration.from_dict(c) for c in data.get('configurations', [])],
            bill_of_materials=[BillOfMaterialLine.from_dict(b) for b in data.get('bill_of_materials', [])]
        )

    def __str__(self) -> str:
        return f"{self.quote_number}: {self.project_name}"
