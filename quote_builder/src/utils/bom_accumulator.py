import logging
from typing import Iterable, Iterator, List, Optional

from ..models.bom import BillOfMaterialLine
from .catalog import Catalog
from .exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class BOMAccumulator:
    """Ordered bill of materials lines priced from the catalog"""

    LINE_ID_PREFIX = "bom"

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._lines: List[BillOfMaterialLine] = []
        # Ids are never reused, even after a line is removed
        self._next_id = 1

    def _new_line_id(self) -> str:
        line_id = f"{self.LINE_ID_PREFIX}-{self._next_id}"
        self._next_id += 1
        return line_id

    def add_line(self, part_number: str, quantity: int,
                 configuration_id: Optional[str] = None) -> BillOfMaterialLine:
        """
        Price a part from the catalog and append it as a new line.

        Args:
            part_number: Catalog part number
            quantity: Number of units, a positive whole number
            configuration_id: Optional configuration the line belongs to

        Returns:
            The new line

        Raises:
            ValidationError: If the part is missing or unknown, or the quantity
                is not a positive whole number
        """
        if not part_number or not str(part_number).strip():
            raise ValidationError("Please select a part and specify a quantity")
        # Quantities are unit counts
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Please select a part and specify a quantity")

        try:
            part = self.catalog.get_part(part_number)
        except NotFoundError as e:
            raise ValidationError(str(e)) from e

        line = BillOfMaterialLine(
            id=self._new_line_id(),
            part_number=part.part_number,
            description=part.description,
            quantity=quantity,
            unit_cost=part.unit_cost,
            configuration_id=configuration_id
        )
        self._lines.append(line)
        logger.debug("Added %s x %d to BOM as %s", part.part_number, quantity, line.id)
        return line

    def remove_line(self, line_id: str) -> bool:
        """Remove a line by id; returns False if no such line exists"""
        for index, line in enumerate(self._lines):
            if line.id == line_id:
                del self._lines[index]
                return True
        return False

    def load_lines(self, lines: Iterable[BillOfMaterialLine]):
        """Append copies of existing lines (e.g. from another quote) under fresh ids"""
        for line in lines:
            self._lines.append(BillOfMaterialLine(
                id=self._new_line_id(),
                part_number=line.part_number,
                description=line.description,
                quantity=line.quantity,
                unit_cost=line.unit_cost,
                configuration_id=line.configuration_id
            ))

    def total(self) -> float:
        return sum(line.total_cost for line in self._lines)

    def total_quantity(self) -> int:
        return sum(line.quantity for line in self._lines)

    @property
    def lines(self) -> List[BillOfMaterialLine]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[BillOfMaterialLine]:
        return iter(list(self._lines))
