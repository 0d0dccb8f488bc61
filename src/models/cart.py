# src/models/cart.py

"""Cart line and summary records."""

from dataclasses import dataclass

from src.models.product import Product


@dataclass(frozen=True)
class CartLine:
    """One product's quantity entry in the cart (quantity >= 1)."""

    product: Product
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class CartSummary:
    """Derived totals over the current cart lines."""

    total_items: int = 0
    total_price: float = 0.0
