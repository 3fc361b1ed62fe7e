"""Tests for CustomerApplicationService and the customer validation adapter."""
import pytest

from orders_core.application.dtos import RegisterCustomerRequest, UpdateCustomerRequest
from orders_core.application.errors import CustomerNotFoundError
from orders_core.application.services import CustomerApplicationService
from orders_core.domain.errors import InvalidCustomerEmailError, InvalidCustomerNameError
from orders_core.domain.value_objects import CustomerId
from orders_core.infrastructure.adapters.customers import CustomerServiceAdapter
from orders_core.infrastructure.adapters.persistence import InMemoryCustomerRepository


@pytest.fixture
def repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def service(repository) -> CustomerApplicationService:
    return CustomerApplicationService(repository, id_factory=lambda: CustomerId.create("cust-1"))


@pytest.mark.asyncio
async def test_register_customer_normalizes_input(service, repository):
    result = await service.register_customer(
        RegisterCustomerRequest(name="  Ada Lovelace ", email=" ADA@Example.com")
    )

    assert result.id == "cust-1"
    assert result.name == "Ada Lovelace"
    assert result.email == "ada@example.com"
    assert await repository.find_by_id("cust-1") is not None


@pytest.mark.asyncio
async def test_register_rejects_invalid_email(service):
    with pytest.raises(InvalidCustomerEmailError):
        await service.register_customer(RegisterCustomerRequest(name="Ada", email="not-an-email"))


@pytest.mark.asyncio
async def test_register_rejects_blank_name(service):
    with pytest.raises(InvalidCustomerNameError):
        await service.register_customer(RegisterCustomerRequest(name=" ", email="ada@example.com"))


@pytest.mark.asyncio
async def test_default_ids_are_generated(repository):
    service = CustomerApplicationService(repository)

    first = await service.register_customer(RegisterCustomerRequest(name="A", email="a@x.io"))
    second = await service.register_customer(RegisterCustomerRequest(name="B", email="b@x.io"))

    assert first.id != second.id


@pytest.mark.asyncio
async def test_get_customer_missing(service):
    assert await service.get_customer("missing") is None


class TestUpdateCustomer:

    @pytest.mark.asyncio
    async def test_update_name_only(self, service):
        await service.register_customer(RegisterCustomerRequest(name="Ada", email="ada@example.com"))

        result = await service.update_customer("cust-1", UpdateCustomerRequest(name="Ada King"))

        assert result.name == "Ada King"
        assert result.email == "ada@example.com"
        stored = await service.get_customer("cust-1")
        assert stored.name == "Ada King"

    @pytest.mark.asyncio
    async def test_update_email(self, service):
        await service.register_customer(RegisterCustomerRequest(name="Ada", email="ada@example.com"))

        result = await service.update_customer(
            "cust-1", UpdateCustomerRequest(email="Countess@Lovelace.org")
        )

        assert result.email == "countess@lovelace.org"

    @pytest.mark.asyncio
    async def test_update_missing_customer(self, service):
        with pytest.raises(CustomerNotFoundError):
            await service.update_customer("ghost", UpdateCustomerRequest(name="X"))

    @pytest.mark.asyncio
    async def test_invalid_update_leaves_customer_unchanged(self, service):
        await service.register_customer(RegisterCustomerRequest(name="Ada", email="ada@example.com"))

        with pytest.raises(InvalidCustomerEmailError):
            await service.update_customer("cust-1", UpdateCustomerRequest(email="broken"))

        stored = await service.get_customer("cust-1")
        assert stored.email == "ada@example.com"


@pytest.mark.asyncio
async def test_adapter_reports_existence(service):
    adapter = CustomerServiceAdapter(service)
    await service.register_customer(RegisterCustomerRequest(name="Ada", email="ada@example.com"))

    assert await adapter.customer_exists("cust-1") is True
    assert await adapter.customer_exists("cust-2") is False
