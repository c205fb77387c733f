"""
Infrastructure layer for the InvoiceFlow invoicing core.

This layer contains the implementation details behind the domain interfaces:
- Key-value backends (in-memory and SQLAlchemy)
- JSON storage and record mappers
- Repositories for invoices, clients, products and settings
- Backup export and import

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
