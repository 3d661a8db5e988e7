# mock_api/api/routers/products.py
from fastapi import APIRouter, Query

from mock_api.domain.schemas import Product
from mock_api.services.catalog_service import lookup_product
from mock_api.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


@router.get("/product", response_model=Product)
def get_product(product_ids: list[str] = Query([], alias="productId")):
    # liczy się pierwsza wartość; brak parametru == pusty string -> rekord domyślny
    product_id = product_ids[0] if product_ids else ""
    logger.info(f"GET /product productId={product_id!r}")
    return lookup_product(product_id)
