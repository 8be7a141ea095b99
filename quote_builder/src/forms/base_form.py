import logging
import uuid
from datetime import date, timedelta
from typing import Callable, Optional

from ..models.account import Account, Contact, ContactType
from ..models.user import User
from ..utils.catalog import Catalog
from ..utils.contact_resolver import ContactSelection, CustomerSelection
from ..utils.exceptions import NotFoundError, ValidationError
from ..utils.quote_number import QuoteNumberGenerator

logger = logging.getLogger(__name__)

# New quotes are valid for 30 days by default
DEFAULT_VALIDITY_DAYS = 30


class QuoteFormBase:
    """State shared by the create and replicate quote forms"""

    def __init__(self, catalog: Catalog,
                 number_generator: Optional[QuoteNumberGenerator] = None,
                 today: Callable[[], date] = date.today):
        self.catalog = catalog
        self._today = today
        if number_generator is None:
            number_generator = QuoteNumberGenerator(
                (q.quote_number for q in catalog.get_existing_quotes()), today=today)
        self.number_generator = number_generator
        self.quote_number = number_generator.next_number()

        self.current_user: Optional[User] = catalog.get_current_user()
        self.accounts = catalog.get_accounts()
        self.customer = CustomerSelection()

    @property
    def created_by(self) -> str:
        return self.current_user.name if self.current_user else ""

    def default_valid_until(self) -> date:
        return self._today() + timedelta(days=DEFAULT_VALIDITY_DAYS)

    @staticmethod
    def _new_quote_id() -> str:
        return str(uuid.uuid4())

    def select_account(self, account_id: Optional[str]) -> ContactSelection:
        """
        Select the customer account and reset contacts to its defaults.
        None, or an account id that no longer exists, clears the customer.
        """
        account = None
        if account_id is not None:
            try:
                account = self.catalog.get_account(account_id)
            except NotFoundError as e:
                logger.warning("%s; clearing account selection", e)
        return self.customer.on_account_changed(account)

    def select_contact(self, role: ContactType, contact_id: Optional[str]) -> Optional[Contact]:
        return self.customer.select_contact(role, contact_id)

    @property
    def selected_account(self) -> Optional[Account]:
        return self.customer.account

    @property
    def billing_contact(self) -> Optional[Contact]:
        return self.customer.billing_contact

    @property
    def sales_contact(self) -> Optional[Contact]:
        return self.customer.sales_contact

    @property
    def site_contact(self) -> Optional[Contact]:
        return self.customer.site_contact

    def _check_customer(self, missing_account_message: str):
        """Raise ValidationError unless an account and all three contacts are set"""
        if self.customer.account is None:
            raise ValidationError(missing_account_message)
        if self.customer.missing_roles():
            raise ValidationError("Please select all required contacts")
