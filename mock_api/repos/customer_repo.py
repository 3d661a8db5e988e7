from collections.abc import Mapping

from mock_api.data.directory import CUSTOMERS
from mock_api.domain.schemas import Customer


class CustomerRepo:
    def __init__(self, table: Mapping[str, Customer] = CUSTOMERS):
        self.table = table

    def get_customer(self, customer_id: str) -> Customer | None:
        return self.table.get(customer_id)
