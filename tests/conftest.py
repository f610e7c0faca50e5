"""Shared fixtures – a small product catalogue."""

from __future__ import annotations

import pytest

from tableview.kernel.records import Product


def make_product(
    id: int,  # noqa: A002
    price: float = 10.0,
    brand: str | None = "Acme",
    category: str = "tools",
    title: str | None = None,
    stock: int = 5,
    rating: float = 4.0,
) -> Product:
    return Product(
        id=id,
        title=title or f"Product {id}",
        brand=brand,
        category=category,
        price=price,
        stock=stock,
        rating=rating,
    )


def product_payload(product: Product) -> dict[str, object]:
    return {
        "id": product.id,
        "title": product.title,
        "brand": product.brand,
        "category": product.category,
        "price": product.price,
        "stock": product.stock,
        "rating": product.rating,
        "description": "ignored",
    }


@pytest.fixture
def five_products() -> list[Product]:
    """Prices [10, 25, 5, 40, 15] in fetch order."""
    return [
        make_product(1, price=10, brand="Acme", category="tools"),
        make_product(2, price=25, brand="Zeta", category="garden"),
        make_product(3, price=5, brand="Acme", category="garden"),
        make_product(4, price=40, brand="Zeta", category="tools"),
        make_product(5, price=15, brand=None, category="kitchen"),
    ]


@pytest.fixture
def catalogue() -> list[Product]:
    """45 products; every third is a phone."""
    return [
        make_product(
            i,
            price=float(i),
            brand="Acme" if i % 2 else "Zeta",
            category="phones" if i % 3 == 0 else "laptops",
            title=f"{'Phone' if i % 3 == 0 else 'Laptop'} {i}",
        )
        for i in range(1, 46)
    ]


@pytest.fixture
def product_factory():
    """Return :func:`make_product` for tests that build their own rows."""
    return make_product


@pytest.fixture
def to_payload():
    """Return :func:`product_payload` for tests that build JSON bodies."""
    return product_payload
