"""
Catalog
Read-only reference data for quoting: accounts, configurations, part
pricing, prior quotes and users. Loaded from data/catalog.json or built
directly in memory.
"""
import logging
import os
from copy import deepcopy
from typing import Any, Dict, Iterable, List, Optional

from ..models.account import Account
from ..models.bom import PartPricing
from ..models.configuration import Configuration
from ..models.quote import Quote
from ..models.user import User
from .exceptions import NotFoundError
from .file_handlers import get_data_directory, load_json_file

logger = logging.getLogger(__name__)

CATALOG_FILENAME = 'catalog.json'


def get_catalog_file_path() -> str:
    """Get the path to the bundled catalog data file"""
    return os.path.join(get_data_directory(), CATALOG_FILENAME)


class Catalog:
    """
    Snapshot provider for quoting reference data.

    Every getter returns copies, so callers can edit what they get back
    (for example toggling configurations) without touching the catalog.
    """

    def __init__(self,
                 accounts: Iterable[Account] = (),
                 configurations: Iterable[Configuration] = (),
                 parts: Iterable[PartPricing] = (),
                 quotes: Iterable[Quote] = (),
                 users: Iterable[User] = ()):
        self._accounts = list(accounts)
        self._configurations = list(configurations)
        self._parts = {part.part_number: part for part in parts}
        self._quotes = list(quotes)
        self._users = list(users)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Catalog':
        accounts = [Account.from_dict(a) for a in data.get('accounts', [])]
        accounts_by_id = {account.id: account for account in accounts}
        return cls(
            accounts=accounts,
            configurations=[Configuration.from_dict(c) for c in data.get('configurations', [])],
            parts=[PartPricing.from_dict(p) for p in data.get('parts', [])],
            quotes=[cls._quote_from_dict(q, accounts_by_id) for q in data.get('quotes', [])],
            users=[User.from_dict(u) for u in data.get('users', [])]
        )

    @staticmethod
    def _quote_from_dict(data: Dict[str, Any], accounts_by_id: Dict[str, Account]) -> Quote:
        """
        Build a prior quote, resolving account_id / *_contact_id references
        against the catalog accounts. Stale references leave the customer
        field empty.
        """
        quote = Quote.from_dict(data)

        account_id = data.get('account_id')
        if account_id is None:
            return quote

        account = accounts_by_id.get(account_id)
        if account is None:
            logger.warning("Quote %s references unknown account '%s'", quote.quote_number, account_id)
            return quote
        quote.account = account

        for attr in ('billing_contact', 'sales_contact', 'site_contact'):
            contact_id = data.get(f'{attr}_id')
            if contact_id is None:
                continue
            try:
                setattr(quote, attr, account.get_contact(contact_id))
            except NotFoundError as e:
                logger.warning("Quote %s: %s", quote.quote_number, e)

        return quote

    @classmethod
    def load(cls, filepath: Optional[str] = None) -> 'Catalog':
        """Load a catalog from JSON (defaults to the bundled data file)"""
        filepath = filepath or get_catalog_file_path()
        catalog = cls.from_dict(load_json_file(filepath))
        logger.info("Loaded catalog from %s: %d accounts, %d parts, %d quotes",
                    filepath, len(catalog._accounts), len(catalog._parts), len(catalog._quotes))
        return catalog

    def get_accounts(self) -> List[Account]:
        return deepcopy(self._accounts)

    def get_account(self, account_id: str) -> Account:
        for account in self._accounts:
            if account.id == account_id:
                return deepcopy(account)
        raise NotFoundError(f"Account '{account_id}' not found")

    def get_configurations(self) -> List[Configuration]:
        return deepcopy(self._configurations)

    def get_parts(self) -> List[PartPricing]:
        return list(self._parts.values())

    def get_part(self, part_number: str) -> PartPricing:
        """
        Look up pricing for a part number.

        Raises:
            NotFoundError: If the part number is empty or not in the catalog
        """
        key = str(part_number or '').strip()
        if key not in self._parts:
            raise NotFoundError(f"Part '{key}' not found in pricing data")
        return self._parts[key]

    def get_existing_quotes(self) -> List[Quote]:
        return deepcopy(self._quotes)

    def get_quote(self, quote_id: str) -> Quote:
        for quote in self._quotes:
            if quote.id == quote_id:
                return deepcopy(quote)
        raise NotFoundError(f"Quote '{quote_id}' not found")

    def get_users(self) -> List[User]:
        return list(self._users)

    def get_current_user(self) -> Optional[User]:
        """The signed-in user; the first configured user"""
        return self._users[0] if self._users else None
