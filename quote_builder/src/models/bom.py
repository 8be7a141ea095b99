from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class PartPricing:
    """Catalog price entry for a part"""
    part_number: str
    description: str
    unit_cost: float

    @classmethod
    def from_dict(cls, data: dict) -> 'PartPricing':
        return cls(
            part_number=str(data['part_number']).strip(),
            description=data.get('description', ''),
            unit_cost=round(float(data['unit_cost']), 2)
        )

    def to_dict(self) -> dict:
        return {
            'part_number': self.part_number,
            'description': self.description,
            'unit_cost': self.unit_cost
        }

@dataclass(frozen=True)
class BillOfMaterialLine:
    """Single BOM line; the total is always quantity x unit cost"""
    id: str
    part_number: str
    description: str
    quantity: int
    unit_cost: float
    configuration_id: Optional[str] = None

    @property
    def total_cost(self) -> float:
        return self.quantity * self.unit_cost

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'part_number': self.part_number,
            'description': self.description,
            'quantity': self.quantity,
            'unit_cost': self.unit_cost,
            'total_cost': self.total_cost,
            'configuration_id': self.configuration_id
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'BillOfMaterialLine':
        # total_cost in the data is ignored, it is derived
        return cls(
            id=data['id'],
            part_number=data['part_number'],
            description=data.get('description', ''),
            quantity=int(data['quantity']),
            unit_cost=float(data['unit_cost']),
            configuration_id=data.get('configuration_id')
        )
