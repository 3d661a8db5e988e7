# mock_api/data/directory.py
from types import MappingProxyType

from mock_api.domain.schemas import Customer

INACTIVE_CUSTOMER_ID = "Freyder-111"
DEFAULT_CUSTOMER_ID = "Violetta-495"

CUSTOMERS = MappingProxyType({
    INACTIVE_CUSTOMER_ID: Customer(
        customer_id=INACTIVE_CUSTOMER_ID,
        name="Freyder Otalvaro",
        email="freyde.otalvaro@example.com",
        active=False,
    ),
    DEFAULT_CUSTOMER_ID: Customer(
        customer_id=DEFAULT_CUSTOMER_ID,
        name="Violetta Otalvaro",
        email="violetta.otalvaro@example.com",
        active=True,
    ),
})
