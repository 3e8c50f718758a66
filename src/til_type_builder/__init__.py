"""Type builder - describe composite types and commit them to a type catalog."""

from .domain.errors import (
    BuilderConsumedError,
    CatalogError,
    InvalidHandleError,
    TypeBuildError,
    TypeValidationError,
    UnsupportedReferenceError,
)
from .domain.models import (
    CallingConvention,
    CustomCallingConvention,
    Existing,
    FieldReference,
    Primitive,
    PrimitiveType,
    SelfReference,
    TypeHandle,
)
from .domain.repositories import TypeCatalog
from .domain.services import BatchResult, BatchSubmitter
from .domain.services.building import (
    ArrayBuilder,
    EnumBuilder,
    FunctionBuilder,
    FunctionPointerBuilder,
    PointerBuilder,
    StructBuilder,
    TypeBuilder,
    factories,
    primitive_handle,
)
from .infrastructure.catalog import InMemoryTypeCatalog
from .infrastructure.config import BuilderConfig

# builders.struct_type("Point").field("x", builders.int32())
builders = factories

__all__ = [
    "ArrayBuilder",
    "BatchResult",
    "BatchSubmitter",
    "BuilderConfig",
    "BuilderConsumedError",
    "CallingConvention",
    "CatalogError",
    "CustomCallingConvention",
    "EnumBuilder",
    "Existing",
    "FieldReference",
    "FunctionBuilder",
    "FunctionPointerBuilder",
    "InMemoryTypeCatalog",
    "InvalidHandleError",
    "PointerBuilder",
    "Primitive",
    "PrimitiveType",
    "SelfReference",
    "StructBuilder",
    "TypeBuildError",
    "TypeBuilder",
    "TypeCatalog",
    "TypeHandle",
    "TypeValidationError",
    "UnsupportedReferenceError",
    "builders",
    "primitive_handle",
]
