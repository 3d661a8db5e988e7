from collections.abc import Mapping

from mock_api.data.catalog import PRODUCTS
from mock_api.domain.schemas import Product


class ProductRepo:
    def __init__(self, table: Mapping[str, Product] = PRODUCTS):
        self.table = table

    def get_product(self, product_id: str) -> Product | None:
        return self.table.get(product_id)
