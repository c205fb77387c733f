"""
Unit tests for client and product use cases.
"""

from invoiceflow.application.dto.client_dto import AddressDTO, ClientDraft
from invoiceflow.application.dto.product_dto import ListProductsRequestDTO, ProductDraft
from invoiceflow.application.use_cases.client_use_cases import (
    DeleteClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
    SaveClientUseCase
)
from invoiceflow.application.use_cases.product_use_cases import (
    DeleteProductUseCase,
    ListProductsUseCase,
    SaveProductUseCase
)
from invoiceflow.config import Settings
from invoiceflow.infrastructure.dependencies import build_container
from invoiceflow.infrastructure.storage.memory_store import InMemoryKeyValueStore


def make_container():
    return build_container(Settings(_env_file=None, storage_backend="memory"), store=InMemoryKeyValueStore())


class TestClientUseCases:
    """Test cases for client use cases."""

    def setup_method(self):
        """Set up test fixtures."""
        self.container = make_container()
        self.save = SaveClientUseCase(self.container.clients)

    def test_save_new_client(self):
        """Test a draft without ID creates a client."""
        result = self.save.execute(ClientDraft(
            name="  Acme  ",
            email="billing@acme.com",
            address=AddressDTO(city="Springfield")
        ))

        assert result.success is True
        assert result.data.id
        assert result.data.name == "Acme"
        assert result.data.address.city == "Springfield"
        assert len(self.container.clients.get_all()) == 1

    def test_save_existing_client(self):
        """Test a draft with an ID replaces that client."""
        created = self.save.execute(ClientDraft(name="Acme", email="a@acme.com")).data

        draft = ClientDraft.from_domain(created)
        draft.name = "Acme Ltd"
        self.save.execute(draft)

        clients = self.container.clients.get_all()
        assert len(clients) == 1
        assert clients[0].name == "Acme Ltd"

    def test_save_requires_name_and_email(self):
        """Test missing required fields are reported and nothing is stored."""
        result = self.save.execute(ClientDraft(email="a@acme.com"))

        assert result.success is False
        assert result.error_code == "VALIDATION_ERROR"
        assert result.error == "Client name is required"
        assert self.container.clients.get_all() == []

    def test_save_rejects_bad_email(self):
        """Test an invalid email is reported."""
        result = self.save.execute(ClientDraft(name="Acme", email="nope"))

        assert result.success is False
        assert "Invalid email format" in result.error

    def test_blank_tax_id_is_dropped(self):
        """Test a blank tax ID is stored as missing."""
        client = self.save.execute(ClientDraft(name="Acme", email="a@acme.com", tax_id=" ")).data
        assert client.tax_id is None

    def test_delete(self):
        """Test deleting a client and an unknown ID."""
        client = self.save.execute(ClientDraft(name="Acme", email="a@acme.com")).data
        delete = DeleteClientUseCase(self.container.clients)

        assert delete.execute(client.id).data is True
        assert delete.execute(client.id).data is False

    def test_get_missing_client(self):
        """Test getting an unknown client is an error result."""
        result = GetClientUseCase(self.container.clients).execute("missing")

        assert result.success is False
        assert result.error_code == "ENTITY_NOT_FOUND"

    def test_list_with_search(self):
        """Test listing clients with and without a search term."""
        self.save.execute(ClientDraft(name="Acme", email="a@acme.com"))
        self.save.execute(ClientDraft(name="Globex", email="g@globex.com", phone="555-1234"))
        list_clients = ListClientsUseCase(self.container.clients)

        assert len(list_clients.execute().data) == 2
        assert [c.name for c in list_clients.execute("1234").data] == ["Globex"]


class TestProductUseCases:
    """Test cases for product use cases."""

    def setup_method(self):
        """Set up test fixtures."""
        self.container = make_container()
        self.save = SaveProductUseCase(self.container.products)

    def test_save_product(self):
        """Test saving a valid product."""
        result = self.save.execute(ProductDraft(name="Logo", description="Logo design", price=250, category="Design"))

        assert result.success is True
        assert result.data.price == 250

    def test_price_must_be_positive(self):
        """Test a zero price is rejected."""
        result = self.save.execute(ProductDraft(name="Logo", description="Logo design", price=0))

        assert result.success is False
        assert result.error == "Product price must be greater than 0"

    def test_description_required(self):
        """Test the description is required."""
        result = self.save.execute(ProductDraft(name="Logo", price=10))
        assert result.error == "Product description is required"

    def test_non_numeric_price_rejected(self):
        """Test a non-numeric price fails draft validation."""
        result = self.save.execute(ProductDraft.model_construct(
            id=None, name="Logo", description="Logo design", price="abc", category=""
        ))

        assert result.success is False
        assert result.error_code == "VALIDATION_ERROR"

    def test_list_and_categories(self):
        """Test filtering products and listing categories."""
        self.save.execute(ProductDraft(name="Logo", description="Logo design", price=250, category="Design"))
        self.save.execute(ProductDraft(name="Site", description="Website", price=900, category="Web"))
        list_products = ListProductsUseCase(self.container.products)

        assert len(list_products.execute().data) == 2
        design = list_products.execute(ListProductsRequestDTO(category="Design")).data
        assert [p.name for p in design] == ["Logo"]
        assert list_products.execute(ListProductsRequestDTO(search="site", category="")).data[0].name == "Site"
        assert list_products.list_categories() == ["Design", "Web"]

    def test_delete(self):
        """Test deleting a product."""
        product = self.save.execute(ProductDraft(name="Logo", description="Logo design", price=250)).data

        assert DeleteProductUseCase(self.container.products).execute(product.id).data is True
        assert self.container.products.get_all() == []
