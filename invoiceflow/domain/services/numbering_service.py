"""Numbering service for sequential invoice numbers.
Handles counter increments, number formatting and gap detection.
"""

from typing import List, Optional, Iterable
import logging
import re

from invoiceflow.domain.models.base import ValidationError
from invoiceflow.domain.repositories.sequence_repository import SequenceRepository

logger = logging.getLogger(__name__)

NUMBER_WIDTH = 4


def format_invoice_number(prefix: str, number: int) -> str:
    """
    Prefix followed by the number zero-padded to four digits.
    Longer numbers are never truncated: ("INV-", 12345) -> "INV-12345".
    """
    return f"{prefix or ''}{str(number).zfill(NUMBER_WIDTH)}"


def parse_invoice_number(prefix: str, value: str) -> Optional[int]:
    """
    Extract the sequence number from a formatted invoice number.
    Returns None when the value was not produced with this prefix.
    """
    if not value:
        return None

    match = re.fullmatch(rf"{re.escape(prefix or '')}(\d+)", value.strip())
    if not match:
        return None
    return int(match.group(1))


class NumberingService:
    """
    Domain service owning the invoice number sequence.
    Every call to next_invoice_number consumes a number, even if the invoice
    it was requested for is never saved.
    """

    def __init__(self, sequence_repository: SequenceRepository):
        self.sequence_repository = sequence_repository

    def next_invoice_number(self, start_number: int = 1) -> int:
        """
        Increment and persist the counter, returning the new value.
        start_number acts as a floor so a raised start number takes effect.
        """
        if start_number < 1:
            raise ValidationError("Starting number must be positive", "start_number")

        with self.sequence_repository.locked():
            next_number = self.peek_next_number(start_number)
            self.sequence_repository.set_last_number(next_number)

        logger.debug(f"Issued invoice number {next_number}")
        return next_number

    def generate_invoice_number(self, prefix: str, start_number: int = 1) -> str:
        """Consume the next number and format it with the prefix."""
        return format_invoice_number(prefix, self.next_invoice_number(start_number))

    def peek_last_number(self) -> int:
        """Last issued number without consuming one."""
        return self.sequence_repository.get_last_number()

    def peek_next_number(self, start_number: int = 1) -> int:
        """Number the next call to next_invoice_number would return."""
        return max(self.peek_last_number() + 1, start_number)

    def find_gaps_in_sequence(
        self,
        existing_numbers: Iterable[int],
        start_range: int = 1,
        end_range: Optional[int] = None
    ) -> List[int]:
        """
        Find numbers in [start_range, end_range] that no invoice uses.
        end_range defaults to the largest existing number.
        """
        numbers = sorted(set(existing_numbers))
        if end_range is None:
            if not numbers:
                return []
            end_range = numbers[-1]

        gaps = []
        expected = start_range

        for num in numbers:
            if num < start_range:
                continue
            if num > end_range:
                break
            while expected < num:
                gaps.append(expected)
                expected += 1
            expected = num + 1

        while expected <= end_range:
            gaps.append(expected)
            expected += 1

        return gaps
