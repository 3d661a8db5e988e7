# mock_api/api/routers/customers.py
from fastapi import APIRouter, Query

from mock_api.domain.schemas import Customer
from mock_api.services.directory_service import lookup_customer
from mock_api.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["customers"])


@router.get("/customer", response_model=Customer)
def get_customer(customer_ids: list[str] = Query([], alias="customerId")):
    customer_id = customer_ids[0] if customer_ids else ""
    logger.info(f"GET /customer customerId={customer_id!r}")
    return lookup_customer(customer_id)
