"""Tests for type handles."""

import pytest

from til_type_builder.domain.errors import InvalidHandleError
from til_type_builder.domain.models import INVALID_ORDINAL, TypeHandle


@pytest.mark.unit
class TestTypeHandle:
    """Test handle construction and value semantics."""

    def test_wraps_valid_ordinal(self) -> None:
        handle = TypeHandle.from_ordinal(42)
        assert handle.ordinal == 42
        assert str(handle) == "#42"

    @pytest.mark.parametrize("ordinal", [INVALID_ORDINAL, -1])
    def test_rejects_sentinel_and_negative(self, ordinal: int) -> None:
        with pytest.raises(InvalidHandleError):
            TypeHandle.from_ordinal(ordinal)

    def test_invalid_handle_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            TypeHandle(0)

    def test_handles_compare_by_ordinal(self) -> None:
        assert TypeHandle(7) == TypeHandle.from_ordinal(7)
        assert len({TypeHandle(7), TypeHandle(7), TypeHandle(8)}) == 2
