"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields are read from ``<PREFIX>_<FIELD>`` variables.

    Every field needs a default: a viewer must start against the public
    demo collection with no environment at all. Subclasses set ``_prefix``
    and reject unusable combinations in ``_validate``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``ViewerSettings.env_key("base_url") == "TABLEVIEW_BASE_URL"``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        return {f.name: cls.env_key(f.name) for f in dataclasses.fields(cls)}

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
