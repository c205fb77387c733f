#!/usr/bin/env python3
"""
Data management script for InvoiceFlow.
Handles backups, clearing data and inspecting the invoice sequence.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from invoiceflow.application.use_cases.invoice_use_cases import GetInvoiceSummaryUseCase
from invoiceflow.application.use_cases.settings_use_cases import (
    ClearAllDataUseCase,
    ExportDataUseCase,
    ImportDataUseCase
)
from invoiceflow.config import Settings, get_settings
from invoiceflow.domain.services.currency_formatter import format_currency
from invoiceflow.domain.services.numbering_service import format_invoice_number, parse_invoice_number
from invoiceflow.infrastructure.backup.backup_service import backup_filename
from invoiceflow.infrastructure.dependencies import ServiceContainer, build_container

logger = logging.getLogger(__name__)


def configure_logging(config: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, config.effective_log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def export_data(container: ServiceContainer, target: Optional[str] = None) -> int:
    """Write a backup document to a file."""
    result = ExportDataUseCase(container.backup).execute()
    if not result.success:
        print(f"Export failed: {result.error}")
        return 1

    path = Path(target or backup_filename())
    path.write_text(result.data, encoding="utf-8")
    print(f"Exported data to {path}")
    return 0


def import_data(container: ServiceContainer, source: str) -> int:
    """Restore a backup document from a file."""
    path = Path(source)
    if not path.is_file():
        print(f"Backup file not found: {path}")
        return 1

    result = ImportDataUseCase(container.backup).execute(path.read_text(encoding="utf-8"))
    if not result.success:
        print(f"Import failed: {result.error}")
        return 1

    print(f"Imported data from {path}")
    return 0


def clear_data(container: ServiceContainer, confirmed: bool = False) -> int:
    """Clear all data - WARNING: This removes every invoice, client and product!"""
    if not confirmed:
        response = input("This will delete ALL data. Type 'yes' to continue: ")
        if response.lower() != 'yes':
            print("Clear cancelled.")
            return 0

    result = ClearAllDataUseCase(container.backup).execute()
    if not result.success:
        print(f"Clear failed: {result.error}")
        return 1

    print("All data cleared.")
    return 0


def show_next_number(container: ServiceContainer) -> int:
    """Show the number the next new invoice will get, without consuming it."""
    settings = container.settings.get_settings()
    next_number = container.numbering.peek_next_number(settings.invoice_start_number)
    print(format_invoice_number(settings.invoice_prefix, next_number))
    return 0


def show_gaps(container: ServiceContainer) -> int:
    """List issued invoice numbers that no stored invoice uses."""
    settings = container.settings.get_settings()
    last_number = container.numbering.peek_last_number()

    used_numbers = []
    for invoice_number in container.invoices.get_invoice_numbers():
        number = parse_invoice_number(settings.invoice_prefix, invoice_number)
        if number is not None:
            used_numbers.append(number)

    gaps = container.numbering.find_gaps_in_sequence(
        used_numbers,
        start_range=settings.invoice_start_number,
        end_range=last_number,
    ) if last_number else []

    if not gaps:
        print("No gaps in the invoice sequence.")
        return 0

    print(f"{len(gaps)} unused invoice number(s):")
    for number in gaps:
        print(f"  {format_invoice_number(settings.invoice_prefix, number)}")
    return 0


def show_summary(container: ServiceContainer) -> int:
    """Print invoice counts and totals per status."""
    result = GetInvoiceSummaryUseCase(container.invoices).execute()
    if not result.success:
        print(f"Summary failed: {result.error}")
        return 1

    summary = result.data
    currency = container.settings.get_settings().default_currency

    print(f"Invoices: {summary.count}")
    print(f"Total:    {format_currency(summary.total_amount, currency)}")
    for status, count in summary.count_by_status.items():
        total = format_currency(summary.totals_by_status[status], currency)
        print(f"  {status:<10} {count:>4}  {total}")
    return 0


def print_usage() -> None:
    print("Usage: invoiceflow [command]")
    print("Commands:")
    print("  export [file]  - Export all data to a JSON backup")
    print("  import <file>  - Import data from a JSON backup")
    print("  clear [--yes]  - Clear all data (WARNING: deletes everything)")
    print("  next-number    - Show the next invoice number")
    print("  gaps           - List unused invoice numbers")
    print("  summary        - Show invoice totals per status")


def main(argv: Optional[List[str]] = None, container: Optional[ServiceContainer] = None) -> int:
    """Main CLI function."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print_usage()
        return 0

    config = container.config if container else get_settings()
    configure_logging(config)
    container = container or build_container(config)

    command_name = args[0]

    if command_name == "export":
        return export_data(container, args[1] if len(args) > 1 else None)
    elif command_name == "import":
        if len(args) < 2:
            print("Usage: invoiceflow import <file>")
            return 1
        return import_data(container, args[1])
    elif command_name == "clear":
        return clear_data(container, confirmed="--yes" in args[1:])
    elif command_name == "next-number":
        return show_next_number(container)
    elif command_name == "gaps":
        return show_gaps(container)
    elif command_name == "summary":
        return show_summary(container)
    else:
        print(f"Unknown command: {command_name}")
        print_usage()
        return 1


if __name__ == "__main__":
    sys.exit(main())
