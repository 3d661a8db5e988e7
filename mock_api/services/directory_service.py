from mock_api.data.directory import CUSTOMERS, DEFAULT_CUSTOMER_ID
from mock_api.domain.schemas import Customer
from mock_api.repos.customer_repo import CustomerRepo


class DirectoryService:
    def __init__(self, repo: CustomerRepo | None = None):
        self.repo = repo or CustomerRepo()
        self.default = CUSTOMERS[DEFAULT_CUSTOMER_ID]

    def lookup_customer(self, customer_id: str) -> Customer:
        customer = self.repo.get_customer(customer_id)
        if customer is None:
            return self.default
        return customer


_service = DirectoryService()


def lookup_customer(customer_id: str) -> Customer:
    return _service.lookup_customer(customer_id)
