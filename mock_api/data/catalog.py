# mock_api/data/catalog.py
from types import MappingProxyType

from mock_api.domain.schemas import Product

IPHONE_ID = "product-100"
DEFAULT_PRODUCT_ID = "product-789"

PRODUCTS = MappingProxyType({
    IPHONE_ID: Product(
        product_id=IPHONE_ID,
        name="Iphone",
        description="Un smartphone de última generación",
        price=2000.00,
    ),
    DEFAULT_PRODUCT_ID: Product(
        product_id=DEFAULT_PRODUCT_ID,
        name="Laptop",
        description="Una laptop potente",
        price=999.99,
    ),
})
