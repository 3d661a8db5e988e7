import pytest

from mock_api.repos.customer_repo import CustomerRepo
from mock_api.services.directory_service import DirectoryService, lookup_customer


def test_inactive_customer():
    customer = lookup_customer("Freyder-111")
    assert customer.customer_id == "Freyder-111"
    assert customer.name == "Freyder Otalvaro"
    assert customer.email == "freyde.otalvaro@example.com"
    assert customer.active is False


@pytest.mark.parametrize("customer_id", ["", "Violetta-495", "freyder-111", "Freyder-1111", "x"])
def test_default_customer(customer_id):
    customer = lookup_customer(customer_id)
    assert customer.customer_id == "Violetta-495"
    assert customer.name == "Violetta Otalvaro"
    assert customer.email == "violetta.otalvaro@example.com"
    assert customer.active is True


def test_repo_signals_absence():
    assert CustomerRepo().get_customer("missing") is None


def test_service_with_empty_table_still_returns_default():
    service = DirectoryService(CustomerRepo(table={}))
    assert service.lookup_customer("Freyder-111").customer_id == "Violetta-495"
