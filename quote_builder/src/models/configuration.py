from dataclasses import dataclass

@dataclass
class Configuration:
    """Product configuration option that can be selected for a quote"""
    id: str
    name: str
    description: str = ""
    quantity: int = 1
    selected: bool = False

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'quantity': self.quantity,
            'selected': self.selected
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Configuration':
        return cls(
            id=data['id'],
            name=data['name'],
            description=data.get('description', ''),
            quantity=data.get('quantity', 1),
            selected=data.get('selected', False)
        )

    def __str__(self) -> str:
        return f"{self.name} - Qty: {self.quantity} - {self.description}"
