"""
Replicate Quote Form
Find an existing quote and copy it into a new quote for a chosen customer.
"""
import logging
from copy import deepcopy
from datetime import date
from typing import Callable, List, Optional

from ..models.quote import Quote, QuoteStatus
from ..utils.bom_accumulator import BOMAccumulator
from ..utils.catalog import Catalog
from ..utils.exceptions import NotFoundError, ValidationError
from ..utils.quote_filter import filter_quotes
from ..utils.quote_number import QuoteNumberGenerator
from .base_form import QuoteFormBase

logger = logging.getLogger(__name__)


class ReplicateQuoteForm(QuoteFormBase):
    """State of the replicate-quote flow"""

    def __init__(self, catalog: Catalog,
                 number_generator: Optional[QuoteNumberGenerator] = None,
                 today: Callable[[], date] = date.today):
        super().__init__(catalog, number_generator, today)
        self.existing_quotes: List[Quote] = catalog.get_existing_quotes()
        self.filtered_quotes: List[Quote] = list(self.existing_quotes)
        self.filtering_applied = False
        self.project_name_filter = ""
        self.project_number_filter = ""
        self.source_quote: Optional[Quote] = None

    # Searching

    def set_filters(self, project_name: str = "", project_number: str = ""):
        self.project_name_filter = project_name
        self.project_number_filter = project_number

    def apply_filters(self) -> List[Quote]:
        self.filtered_quotes = filter_quotes(
            self.existing_quotes, self.project_name_filter, self.project_number_filter)
        self.filtering_applied = True

        if not self.filtered_quotes:
            logger.info("No quotes match the applied filters")
        else:
            logger.info("Found %d matching quotes", len(self.filtered_quotes))
        return self.filtered_quotes

    def reset_filters(self):
        self.project_name_filter = ""
        self.project_number_filter = ""
        self.filtered_quotes = list(self.existing_quotes)
        self.filtering_applied = False

    # Selection

    def select_source_quote(self, quote_id: Optional[str]) -> Optional[Quote]:
        """
        Choose (or with None, drop) the quote to replicate.

        The customer of the new quote is always reset: the source quote's
        account and contacts are never carried over.

        Raises:
            NotFoundError: If the quote id is unknown; the source is cleared
        """
        self.customer.clear()
        self.source_quote = None

        if quote_id is None:
            return None

        for quote in self.existing_quotes:
            if quote.id == quote_id:
                self.source_quote = quote
                return quote
        raise NotFoundError(f"Quote '{quote_id}' not found")

    # Creation

    def create_replicate(self) -> Quote:
        """
        Build the new quote from the source quote and the chosen customer.

        Raises:
            ValidationError: If no source quote, account or contact is selected
        """
        if self.source_quote is None:
            raise ValidationError("Please select a quote to replicate")
        self._check_customer("Please select a customer account for the new quote")

        source = self.source_quote
        bom = BOMAccumulator(self.catalog)
        bom.load_lines(source.bill_of_materials)

        quote = Quote(
            id=self._new_quote_id(),
            quote_number=self.quote_number,
            project_name=source.project_name,
            project_number=source.project_number,
            created_by=self.created_by,
            created_on=self._today(),
            valid_until=self.default_valid_until(),
            status=QuoteStatus.DRAFT,
            account=deepcopy(self.selected_account),
            billing_contact=deepcopy(self.billing_contact),
            sales_contact=deepcopy(self.sales_contact),
            site_contact=deepcopy(self.site_contact),
            electrical_specs=deepcopy(source.electrical_specs),
            configurations=deepcopy(source.configurations),
            bill_of_materials=bom.lines
        )
        logger.info("New quote %s created based on %s", quote.quote_number, source.quote_number)
        return quote
