"""Unit tests for the partial-update primitives."""

from __future__ import annotations

from typing import Optional

import pytest
from pydantic import BaseModel

from shared.domain.patches import UNSET, UnsetType, is_set, supplied

pytestmark = pytest.mark.unit


class _Payload(BaseModel):
    name: Optional[str] = None
    note: Optional[str] = None


class TestUnset:
    def test_is_singleton(self):
        assert UnsetType() is UNSET

    def test_is_falsy(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"

    def test_is_set(self):
        assert not is_set(UNSET)
        assert is_set(None)
        assert is_set(0)


class TestSupplied:
    def test_missing_field_is_unset(self):
        assert supplied(_Payload.model_validate({}), "name") is UNSET

    def test_present_field(self):
        assert supplied(_Payload.model_validate({"name": "x"}), "name") == "x"

    def test_null_clears_clearable_field(self):
        dto = _Payload.model_validate({"note": None})
        assert supplied(dto, "note", clearable=True) is None

    def test_null_on_non_clearable_field_is_unset(self):
        dto = _Payload.model_validate({"name": None})
        assert supplied(dto, "name") is UNSET
