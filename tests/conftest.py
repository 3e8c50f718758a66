"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from til_type_builder.domain.repositories import TypeCatalog
from til_type_builder.infrastructure.catalog import InMemoryTypeCatalog


@pytest.fixture
def catalog() -> InMemoryTypeCatalog:
    """Fresh in-memory catalog with 8-byte pointers."""
    return InMemoryTypeCatalog()


@pytest.fixture
def failing_catalog():
    """Factory for catalogs that fail the named operations."""

    def make(*operations: str) -> InMemoryTypeCatalog:
        return InMemoryTypeCatalog(fail_on=set(operations))

    return make


@pytest.fixture
def mock_catalog() -> Mock:
    """Catalog double where every primitive succeeds and sizes are unknown.

    Ordinals are handed out from 100 upwards so they never collide with
    small literal values used in assertions.
    """
    catalog = Mock(spec=TypeCatalog)
    counter = iter(range(100, 10_000))

    def allocate(*_args: object) -> int:
        return next(counter)

    for name in (
        "create_aggregate",
        "create_enum",
        "create_array",
        "create_pointer",
        "create_function",
        "create_function_pointer",
        "primitive_ordinal",
    ):
        getattr(catalog, name).side_effect = allocate

    for name in (
        "add_field",
        "add_bitfield",
        "add_enum_member",
        "add_parameter",
        "set_function_attributes",
        "finalize",
    ):
        getattr(catalog, name).return_value = True

    catalog.type_size.return_value = 0
    return catalog
