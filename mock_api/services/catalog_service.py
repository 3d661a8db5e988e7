from mock_api.data.catalog import PRODUCTS, DEFAULT_PRODUCT_ID
from mock_api.domain.schemas import Product
from mock_api.repos.product_repo import ProductRepo


class CatalogService:
    """
    Wyszukiwanie produktów w stałej tabeli.
    Nieznany (lub pusty) identyfikator nie jest błędem:
    zwracamy domyślny rekord product-789.
    """

    def __init__(self, repo: ProductRepo | None = None):
        self.repo = repo or ProductRepo()
        self.default = PRODUCTS[DEFAULT_PRODUCT_ID]

    def lookup_product(self, product_id: str) -> Product:
        product = self.repo.get_product(product_id)
        if product is None:
            return self.default
        return product


_service = CatalogService()


def lookup_product(product_id: str) -> Product:
    return _service.lookup_product(product_id)
