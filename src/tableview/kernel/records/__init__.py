"""Kernel records – closed-field record types and their schema."""
from tableview.kernel.records.product import PRODUCT_SCHEMA, Product
from tableview.kernel.records.schema import FieldKind, FieldSpec, RecordSchema, value_of

__all__ = ["PRODUCT_SCHEMA", "FieldKind", "FieldSpec", "Product", "RecordSchema", "value_of"]
