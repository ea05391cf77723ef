"""Sample catalog for the local JSON store."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_catalog_repository import JsonCatalogRepository

# (id, name, price, original price, category, rating, reviews, in stock)
SAMPLE_PRODUCTS = [
    ("1", "Wireless Bluetooth Headphones", "89.99", "129.99", "Electronics", "4.5", 128, True),
    ("2", "Smart Fitness Watch", "199.99", "249.99", "Electronics", "4.7", 256, True),
    ("3", "Premium Coffee Maker", "149.99", "199.99", "Home & Garden", "4.6", 189, True),
    ("4", "Running Shoes", "79.99", "99.99", "Sports & Outdoors", "4.4", 156, True),
    ("5", "Portable Bluetooth Speaker", "79.99", "99.99", "Electronics", "4.3", 98, False),
    ("6", "Designer Handbag", "299.99", "399.99", "Fashion", "4.8", 203, True),
    ("7", "Gaming Laptop", "1299.99", "1499.99", "Electronics", "4.9", 342, True),
    ("8", "Yoga Mat", "29.99", "39.99", "Sports & Outdoors", "4.2", 89, True),
    ("9", "Kitchen Knife Set", "89.99", "119.99", "Home & Garden", "4.7", 167, True),
    ("10", "Wireless Earbuds", "59.99", "79.99", "Electronics", "4.1", 234, True),
]


def sample_products() -> list[Product]:
    return [
        Product(
            id=pid,
            name=name,
            price=Money.of(price),
            original_price=Money.of(original),
            category=category,
            rating=Decimal(rating),
            review_count=reviews,
            in_stock=in_stock,
        )
        for pid, name, price, original, category, rating, reviews, in_stock in SAMPLE_PRODUCTS
    ]


def seed_catalog(catalog: JsonCatalogRepository) -> int:
    products = sample_products()
    for product in products:
        catalog.save(product)
    return len(products)
