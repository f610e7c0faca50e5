"""Kernel records – the Product record of the default deployment."""
from __future__ import annotations

import dataclasses

from tableview.kernel.records.schema import FieldKind, FieldSpec, RecordSchema


@dataclasses.dataclass(frozen=True, slots=True)
class Product:
    id: int
    title: str
    brand: str | None
    category: str
    price: float
    stock: int
    rating: float


PRODUCT_SCHEMA: RecordSchema[Product] = RecordSchema(
    record_type=Product,
    fields=(
        FieldSpec("id", FieldKind.NUMERIC),
        FieldSpec("title", FieldKind.TEXT),
        FieldSpec("brand", FieldKind.CATEGORICAL, required=False),
        FieldSpec("category", FieldKind.CATEGORICAL),
        FieldSpec("price", FieldKind.NUMERIC),
        FieldSpec("stock", FieldKind.NUMERIC),
        FieldSpec("rating", FieldKind.NUMERIC),
    ),
)

__all__ = ["PRODUCT_SCHEMA", "Product"]
