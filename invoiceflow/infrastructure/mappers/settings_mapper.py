"""
Settings mapper for converting between InvoiceSettings and the stored record.
Fields missing from a stored record fall back to the defaults.
"""

from typing import Any, Dict, Optional

from invoiceflow.domain.models.settings import CompanyProfile, InvoiceSettings
from invoiceflow.domain.models.value_objects import BankDetails
from invoiceflow.infrastructure.mappers.base_mapper import (
    address_from_record,
    address_to_record,
    to_number,
    to_text
)


class SettingsMapper:
    """Maps between InvoiceSettings and its stored record."""

    def company_to_record(self, company: CompanyProfile) -> Dict[str, Any]:
        record = {
            "name": company.name,
            "email": company.email,
            "phone": company.phone,
            "website": company.website,
            "address": address_to_record(company.address),
            "taxId": company.tax_id,
            "bankDetails": {
                "accountName": company.bank_details.account_name,
                "accountNumber": company.bank_details.account_number,
                "bankName": company.bank_details.bank_name,
                "iban": company.bank_details.iban,
            },
        }
        if company.logo is not None:
            record["logo"] = company.logo
        return record

    def company_to_domain(self, record: Optional[Dict[str, Any]]) -> CompanyProfile:
        defaults = CompanyProfile()
        if not record:
            return defaults

        bank = record.get("bankDetails")
        if bank:
            bank_details = BankDetails(
                account_name=to_text(bank.get("accountName")),
                account_number=to_text(bank.get("accountNumber")),
                bank_name=to_text(bank.get("bankName")),
                iban=to_text(bank.get("iban")),
            )
        else:
            bank_details = defaults.bank_details

        return CompanyProfile(
            name=to_text(record.get("name"), defaults.name),
            email=to_text(record.get("email"), defaults.email),
            phone=to_text(record.get("phone"), defaults.phone),
            website=to_text(record.get("website"), defaults.website),
            address=address_from_record(record["address"]) if record.get("address") else defaults.address,
            logo=record.get("logo"),
            tax_id=to_text(record.get("taxId"), defaults.tax_id),
            bank_details=bank_details,
        )

    def to_record(self, settings: InvoiceSettings) -> Dict[str, Any]:
        return {
            "company": self.company_to_record(settings.company),
            "defaultTaxRate": settings.default_tax_rate,
            "defaultCurrency": settings.default_currency,
            "invoicePrefix": settings.invoice_prefix,
            "invoiceStartNumber": settings.invoice_start_number,
            "defaultTerms": settings.default_terms,
            "defaultNotes": settings.default_notes,
        }

    def to_domain(self, record: Dict[str, Any]) -> InvoiceSettings:
        defaults = InvoiceSettings()
        return InvoiceSettings(
            company=self.company_to_domain(record.get("company")),
            default_tax_rate=to_number(record.get("defaultTaxRate"), defaults.default_tax_rate),
            default_currency=to_text(record.get("defaultCurrency"), defaults.default_currency),
            invoice_prefix=to_text(record.get("invoicePrefix"), defaults.invoice_prefix),
            invoice_start_number=int(to_number(record.get("invoiceStartNumber"), defaults.invoice_start_number)),
            default_terms=to_text(record.get("defaultTerms"), defaults.default_terms),
            default_notes=to_text(record.get("defaultNotes"), defaults.default_notes),
        )
