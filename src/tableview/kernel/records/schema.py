"""Kernel records – FieldKind, FieldSpec, RecordSchema."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Generic, Mapping, TypeVar

from tableview.kernel.errors import InvalidParameterError, MalformedResponseError

R = TypeVar("R")


class FieldKind(str, Enum):
    CATEGORICAL = "categorical"
    NUMERIC = "numeric"
    TEXT = "text"


@dataclasses.dataclass(frozen=True)
class FieldSpec:
    """One column of the closed field set.

    Optional fields default to ``None`` when the payload omits them.
    """

    name: str
    kind: FieldKind
    required: bool = True

    def coerce(self, raw: Any) -> Any:
        if raw is None:
            if self.required:
                raise MalformedResponseError(
                    f"Record is missing required field '{self.name}'",
                    missing_key=self.name,
                )
            return None
        if self.kind is FieldKind.NUMERIC:
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise MalformedResponseError(
                    f"Field '{self.name}' must be numeric, got {type(raw).__name__}",
                    detail={"field": self.name, "value": raw},
                )
            return raw
        if not isinstance(raw, str):
            raise MalformedResponseError(
                f"Field '{self.name}' must be a string, got {type(raw).__name__}",
                detail={"field": self.name, "value": raw},
            )
        return raw


@dataclasses.dataclass(frozen=True)
class RecordSchema(Generic[R]):
    """Closed field set of a record type plus the factory that builds it."""

    record_type: type[R]
    fields: tuple[FieldSpec, ...]

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise InvalidParameterError("field", name, "unknown field")

    def require_kind(self, name: str, kind: FieldKind) -> FieldSpec:
        spec = self.field(name)
        if spec.kind is not kind:
            raise InvalidParameterError("field", name, f"expected a {kind.value} field")
        return spec

    def names(self, kind: FieldKind | None = None) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if kind is None or f.kind is kind)

    @property
    def categorical_fields(self) -> tuple[str, ...]:
        return self.names(FieldKind.CATEGORICAL)

    @property
    def numeric_fields(self) -> tuple[str, ...]:
        return self.names(FieldKind.NUMERIC)

    def parse(self, raw: Any) -> R:
        """Build a record from a decoded JSON object.

        Keys outside the field set are ignored.

        Raises
        ------
        MalformedResponseError
            When *raw* is not a mapping, a required field is missing, or a
            value has the wrong type.
        """
        if not isinstance(raw, Mapping):
            raise MalformedResponseError(
                f"Record must be an object, got {type(raw).__name__}",
            )
        values = {spec.name: spec.coerce(raw.get(spec.name)) for spec in self.fields}
        return self.record_type(**values)


def value_of(record: Any, field: str) -> Any:
    """Read *field* from *record*; missing attributes read as ``None``."""
    return getattr(record, field, None)


__all__ = ["FieldKind", "FieldSpec", "RecordSchema", "value_of"]
