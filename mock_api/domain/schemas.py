# mock_api/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict


class Product(BaseModel):
    """Rekord produktu zwracany przez /product."""

    product_id: str = Field(..., alias="productId", description="Unikalny identyfikator produktu")
    name: str
    description: str
    price: float = Field(..., ge=0, description="Cena (nieujemna)")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Customer(BaseModel):
    """Rekord klienta zwracany przez /customer."""

    customer_id: str = Field(..., alias="customerId", description="Unikalny identyfikator klienta")
    name: str
    email: str
    active: bool

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class HealthOut(BaseModel):
    status: str
