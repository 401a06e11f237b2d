# storefront/models.py
from pydantic import BaseModel, Field


class Product(BaseModel):
    id: int
    category: str
    description: str
    image: str
    price: float
    title: str


class CartItem(Product):
    """A catalog product plus the quantity sitting in the cart."""
    amount: int = Field(1, ge=1)

    @property
    def subtotal(self) -> float:
        return self.amount * self.price
