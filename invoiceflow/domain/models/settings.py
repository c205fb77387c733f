"""
Company profile and invoicing settings.
Settings is a singleton record; the defaults apply until the user saves.
"""

from dataclasses import dataclass, field
from typing import Optional

from invoiceflow.domain.models.base import ValidationError
from invoiceflow.domain.models.value_objects import Address, BankDetails


@dataclass
class CompanyProfile:
    """Company details printed on every invoice."""

    name: str = "Your Company Name"
    email: str = "contact@company.com"
    phone: str = "+1 (555) 123-4567"
    website: str = "www.company.com"
    address: Address = field(default_factory=lambda: Address(
        street="123 Business St",
        city="Business City",
        state="BC",
        zip_code="12345",
        country="United States",
    ))
    logo: Optional[str] = None
    tax_id: str = "12-3456789"
    bank_details: BankDetails = field(default_factory=lambda: BankDetails(
        account_name="Your Company Name",
        account_number="1234567890",
        bank_name="Business Bank",
        iban="GB29 NWBK 6016 1331 9268 19",
    ))


@dataclass
class InvoiceSettings:
    """Invoice configuration and settings."""

    company: CompanyProfile = field(default_factory=CompanyProfile)

    default_tax_rate: float = 8.5
    default_currency: str = "PKR"

    # Numbering
    invoice_prefix: str = "INV-"
    invoice_start_number: int = 1

    # Terms and conditions
    default_terms: str = "Payment is due within 30 days of invoice date. Late payments may be subject to fees."
    default_notes: str = "Thank you for your business!"

    def validate(self) -> None:
        """Validate settings before they are saved."""
        if not self.company.name or not self.company.name.strip():
            raise ValidationError("Company name is required", "company.name")

        if self.default_tax_rate < 0 or self.default_tax_rate > 100:
            raise ValidationError("Default tax rate must be between 0 and 100", "default_tax_rate")

        if len(self.invoice_prefix) > 10:
            raise ValidationError("Invoice prefix too long (max 10 characters)", "invoice_prefix")

        if self.invoice_start_number < 1:
            raise ValidationError("Invoice start number must be positive", "invoice_start_number")
