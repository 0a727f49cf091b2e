"""Partial-update primitives.

Patch dataclasses default every optional field to ``UNSET`` ("leave
unchanged").  ``None`` is a real value meaning "clear this field".
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict

from pydantic import BaseModel


class UnsetType:
    """Singleton marker for a field omitted from a patch."""

    _instance: "UnsetType | None" = None

    def __new__(cls) -> "UnsetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = UnsetType()


def is_set(value: Any) -> bool:
    return value is not UNSET


def supplied(dto: BaseModel, name: str, *, clearable: bool = False) -> Any:
    """Read ``name`` from a wire DTO, preserving omitted vs. cleared.

    A field missing from the payload yields ``UNSET``.  An explicit ``null``
    yields ``None`` when the field is ``clearable``; otherwise it is treated
    as omitted because the wire schema cannot clear it.
    """
    if name not in dto.model_fields_set:
        return UNSET
    value = getattr(dto, name)
    if value is None and not clearable:
        return UNSET
    return value


class PatchMixin:
    """Mixin for patch dataclasses carrying an ``id`` plus optional fields."""

    def changes(self) -> Dict[str, Any]:
        """Return the supplied fields (excluding the target ``id``)."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.name != "id" and is_set(getattr(self, f.name))
        }

    @property
    def is_empty(self) -> bool:
        return not self.changes()
