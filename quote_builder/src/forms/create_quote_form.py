"""
Create Quote Form
Headless state of the new-quotation form: basic details, customer,
electrical specifications, configurations and bill of materials.
"""
import logging
from copy import deepcopy
from datetime import date
from typing import Any, Callable, List, Optional

from ..models.bom import BillOfMaterialLine
from ..models.configuration import Configuration
from ..models.electrical import DERIVED_FIELDS, ElectricalSpecs
from ..models.quote import Quote, QuoteStatus
from ..utils.bom_accumulator import BOMAccumulator
from ..utils.catalog import Catalog
from ..utils.exceptions import NotFoundError, ValidationError
from ..utils.field_highlighter import FieldChangeHighlighter
from ..utils.quote_number import QuoteNumberGenerator
from ..utils.quote_summary import QuoteSummary
from .base_form import QuoteFormBase

logger = logging.getLogger(__name__)


class CreateQuoteForm(QuoteFormBase):
    """Collects everything needed for a new quote and builds it on submit"""

    def __init__(self, catalog: Catalog,
                 number_generator: Optional[QuoteNumberGenerator] = None,
                 highlighter: Optional[FieldChangeHighlighter] = None,
                 today: Callable[[], date] = date.today):
        super().__init__(catalog, number_generator, today)

        # Basic details
        self.project_name = ""
        self.project_number = ""
        self.created_on = today()
        self.valid_until = self.default_valid_until()

        self.electrical_specs = ElectricalSpecs()
        self.highlighter = highlighter or FieldChangeHighlighter()

        # Working copy, toggling must not touch the catalog
        self.configurations: List[Configuration] = catalog.get_configurations()
        self.bom = BOMAccumulator(catalog)

    # Electrical specifications

    def set_electrical_input(self, field_name: str, value: Any) -> bool:
        """
        Update an electrical input and flash the derived fields if they changed.

        Returns:
            bool: True if calculated power and power output were updated
        """
        changed = self.electrical_specs.apply_input(field_name, value)
        if changed:
            for derived in DERIVED_FIELDS:
                self.highlighter.mark_changed(derived)
        return changed

    def is_highlighted(self, field_name: str) -> bool:
        return self.highlighter.is_highlighted(field_name)

    # Configurations

    def _get_configuration(self, config_id: str) -> Configuration:
        for config in self.configurations:
            if config.id == config_id:
                return config
        raise NotFoundError(f"Configuration '{config_id}' not found")

    def toggle_configuration(self, config_id: str) -> Configuration:
        config = self._get_configuration(config_id)
        config.selected = not config.selected
        return config

    def set_configuration_quantity(self, config_id: str, quantity: int) -> Configuration:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError("Configuration quantity must be a whole number of at least 1")
        config = self._get_configuration(config_id)
        config.quantity = quantity
        return config

    @property
    def selected_configurations(self) -> List[Configuration]:
        return [c for c in self.configurations if c.selected]

    # Bill of materials

    def add_part(self, part_number: str, quantity: int = 1) -> BillOfMaterialLine:
        return self.bom.add_line(part_number, quantity)

    def remove_part(self, line_id: str) -> bool:
        return self.bom.remove_line(line_id)

    @property
    def total_price(self) -> float:
        return self.bom.total()

    # Submission

    def build_quote(self) -> Quote:
        """Snapshot of the form as a draft quote, without validation"""
        return Quote(
            id=self._new_quote_id(),
            quote_number=self.quote_number,
            project_name=self.project_name,
            project_number=self.project_number,
            created_by=self.created_by,
            created_on=self.created_on,
            valid_until=self.valid_until,
            status=QuoteStatus.DRAFT,
            account=deepcopy(self.selected_account),
            billing_contact=deepcopy(self.billing_contact),
            sales_contact=deepcopy(self.sales_contact),
            site_contact=deepcopy(self.site_contact),
            electrical_specs=deepcopy(self.electrical_specs),
            configurations=deepcopy(self.selected_configurations),
            bill_of_materials=self.bom.lines
        )

    def summary(self) -> QuoteSummary:
        return QuoteSummary.from_quote(self.build_quote())

    def submit(self) -> Quote:
        """
        Validate the form and create the quote.

        Raises:
            ValidationError: If the account, a contact or the BOM is missing
        """
        self._check_customer("Please select a customer account")
        if len(self.bom) == 0:
            raise ValidationError("Please add at least one item to the Bill of Materials")

        quote = self.build_quote()
        logger.info("Quote %s for %s has been created", quote.quote_number, quote.account.name)
        return quote

    def dispose(self):
        """Release transient UI state when the form closes"""
        self.highlighter.clear()
