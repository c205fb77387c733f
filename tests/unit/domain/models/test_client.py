"""
Unit tests for Client domain model.
"""

import pytest

from invoiceflow.domain.models.base import ValidationError
from invoiceflow.domain.models.client import Client
from invoiceflow.domain.models.value_objects import Address


class TestClient:
    """Test cases for Client domain model."""

    def setup_method(self):
        """Set up test fixtures."""
        self.client = Client(
            name="Acme Corp",
            email="billing@acme.com",
            phone="555-0100",
            address=Address(street="1 Road", city="Springfield", state="IL", zip_code="62701", country="USA"),
            tax_id="TX-123"
        )

    def test_create_client_success(self):
        """Test successful client creation."""
        assert self.client.name == "Acme Corp"
        assert self.client.email == "billing@acme.com"
        assert self.client.address.city == "Springfield"
        assert self.client.id

    def test_clients_get_distinct_ids(self):
        """Test every new client gets its own ID."""
        assert Client(name="A").id != Client(name="A").id

    def test_equality_by_id(self):
        """Test clients with the same ID are equal regardless of fields."""
        other = Client(id=self.client.id, name="Renamed")
        assert other == self.client
        assert hash(other) == hash(self.client)

    def test_validate_success(self):
        """Test a complete client validates."""
        self.client.validate()

    def test_validate_requires_name(self):
        """Test validation fails without a name."""
        self.client.name = "  "
        with pytest.raises(ValidationError, match="Client name is required"):
            self.client.validate()

    def test_validate_requires_email(self):
        """Test validation fails without an email."""
        self.client.email = ""
        with pytest.raises(ValidationError, match="Client email is required") as exc_info:
            self.client.validate()
        assert exc_info.value.field == "email"

    def test_validate_email_format(self):
        """Test validation fails on a malformed email."""
        self.client.email = "not-an-email"
        with pytest.raises(ValidationError, match="Invalid email format"):
            self.client.validate()

    def test_validate_long_tax_id(self):
        """Test validation fails on an overly long tax ID."""
        self.client.tax_id = "X" * 51
        with pytest.raises(ValidationError, match="Tax ID too long"):
            self.client.validate()

    def test_matches_name_email_and_phone(self):
        """Test search matches name, email and phone case-insensitively."""
        assert self.client.matches("acme")
        assert self.client.matches("BILLING@")
        assert self.client.matches("0100")
        assert not self.client.matches("springfield")

    def test_matches_empty_term(self):
        """Test an empty search term matches every client."""
        assert self.client.matches("")

    def test_snapshot_is_independent(self):
        """Test a snapshot is a separate object with the same values."""
        snapshot = self.client.snapshot()
        snapshot.name = "Changed"

        assert snapshot is not self.client
        assert snapshot.id == self.client.id
        assert self.client.name == "Acme Corp"


class TestAddress:
    """Test cases for Address value object."""

    def test_single_line_skips_blanks(self):
        """Test blank parts are left out of the single-line format."""
        address = Address(street="1 Road", city="Springfield", country="USA")
        assert address.format_single_line() == "1 Road, Springfield, USA"
        assert str(address) == "1 Road, Springfield, USA"

    def test_multi_line(self):
        """Test the multi-line format."""
        address = Address(street="1 Road", city="Springfield", state="IL", zip_code="62701", country="USA")
        assert address.format_multi_line() == "1 Road\nSpringfield IL 62701\nUSA"

    def test_empty_address(self):
        """Test an empty address formats as an empty string."""
        assert Address().format_single_line() == ""
        assert Address().format_multi_line() == ""
