import logging
import re
from datetime import date
from typing import Callable, Iterable, Tuple

logger = logging.getLogger(__name__)

QUOTE_NUMBER_PREFIX = "Q"
QUOTE_NUMBER_PATTERN = re.compile(r'^Q-(\d{4})-(\d+)$')

def parse_quote_number(value: str) -> Tuple[int, int]:
    """
    Split a quote number like "Q-2025-0001" into (year, sequence).

    Raises:
        ValueError: If the value is not a quote number
    """
    match = QUOTE_NUMBER_PATTERN.match(str(value).strip())
    if not match:
        raise ValueError(f"Invalid quote number: {value!r}")
    return int(match.group(1)), int(match.group(2))

def format_quote_number(year: int, sequence: int) -> str:
    return f"{QUOTE_NUMBER_PREFIX}-{year}-{sequence:04d}"


class QuoteNumberGenerator:
    """Hands out sequential quote numbers continuing after the existing ones"""

    def __init__(self, existing_numbers: Iterable[str] = (),
                 today: Callable[[], date] = date.today):
        self._today = today
        self._last_sequence = 0
        for number in existing_numbers:
            try:
                _, sequence = parse_quote_number(number)
            except ValueError:
                logger.debug("Ignoring malformed quote number %r", number)
                continue
            self._last_sequence = max(self._last_sequence, sequence)

    def peek(self) -> str:
        """Next number without consuming it"""
        return format_quote_number(self._today().year, self._last_sequence + 1)

    def next_number(self) -> str:
        number = self.peek()
        self._last_sequence += 1
        return number
