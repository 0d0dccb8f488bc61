# src/models/catalog.py

"""Built-in demo product catalog for the shop view."""

from src.models.product import Product

DEMO_PRODUCTS: list[Product] = [
    Product(
        id="1",
        name="Nike Air Max",
        price=120.0,
        image="https://images.pexels.com/photos/8859144/pexels-photo-8859144.jpeg",
        category="Shoes",
        rating=4,
    ),
    Product(
        id="2",
        name="Wireless Headphones",
        price=89.0,
        image="https://shorturl.at/d55yH",
        category="Electronics",
        rating=5,
    ),
    Product(
        id="3",
        name="Summer T-Shirt",
        price=25.0,
        image="https://shorturl.at/dtTJW",
        category="Clothing",
        rating=3,
    ),
    Product(
        id="4",
        name="Smart Watch",
        price=199.0,
        image="https://shorturl.at/NYMYO",
        category="Electronics",
        rating=4,
    ),
]
