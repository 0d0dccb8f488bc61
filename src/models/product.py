# src/models/product.py

"""Product data model shared by the catalog, cart and filters."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Product:
    """A single shop product. Never mutated once built."""

    id: str
    name: str
    price: float
    image: str = ""
    category: str = ""
    rating: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a product from a JSON record, coercing loose types."""
        return cls(
            id=str(data.get("id") or data.get("_id") or ""),
            name=str(data.get("name", "")),
            price=float(data.get("price", 0) or 0),
            image=str(data.get("image", "")),
            category=str(data.get("category", "")),
            rating=int(data.get("rating", 0) or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict for JSON output."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "category": self.category,
            "rating": self.rating,
        }
