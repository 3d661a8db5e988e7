# mock_api/services/lookup_client.py
import requests
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
from requests import RequestException

from mock_api.domain.schemas import Product, Customer
from mock_api.utils.settings import LOOKUP_SERVICE_URL, LOOKUP_CLIENT_TIMEOUT
from mock_api.utils.logging import get_logger

logger = get_logger(__name__)


def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(RequestException),
    )


class LookupClient:
    """Klient HTTP dla /product i /customer (strona konsumenta, np. wzbogacanie zamówień)."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or LOOKUP_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else LOOKUP_CLIENT_TIMEOUT

    def _get(self, path: str, params: dict) -> dict:
        url = f"{self.base_url}{path}"
        logger.info(f"LookupClient GET {url} params={params}")

        resp = requests.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def fetch_product(self, product_id: str) -> Product:
        return Product.model_validate(self._get("/product", {"productId": product_id}))

    @http_retry()
    def fetch_customer(self, customer_id: str) -> Customer:
        return Customer.model_validate(self._get("/customer", {"customerId": customer_id}))
