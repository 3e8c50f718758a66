#!/usr/bin/env python3

"""Convenience constructors for builders and primitive references."""

from ....infrastructure.config import BuilderConfig
from ...errors import CatalogError
from ...models import PrimitiveType, ReferenceLike, TypeHandle
from ...repositories import TypeCatalog
from .aggregate_builder import StructBuilder
from .derived_builders import ArrayBuilder, FunctionPointerBuilder, PointerBuilder
from .enum_builder import EnumBuilder
from .function_builder import FunctionBuilder


def struct_type(name: str, config: BuilderConfig | None = None) -> StructBuilder:
    builder = StructBuilder(name)
    if config is not None:
        builder.fallback_size(config.fallback_field_size)
    return builder


def union_type(name: str) -> StructBuilder:
    # Unions never advance a cursor, so no layout settings apply
    return StructBuilder.new_union(name)


def enum_type(name: str, width: int) -> EnumBuilder:
    return EnumBuilder(name, width)


def array_type(element_type: ReferenceLike, num_elements: int) -> ArrayBuilder:
    return ArrayBuilder(element_type, num_elements)


def pointer_type(target_type: ReferenceLike) -> PointerBuilder:
    return PointerBuilder(target_type)


def function_type() -> FunctionBuilder:
    return FunctionBuilder()


def function_pointer(function_handle: TypeHandle) -> FunctionPointerBuilder:
    return FunctionPointerBuilder(function_handle)


def primitive_handle(catalog: TypeCatalog, kind: PrimitiveType) -> TypeHandle:
    """Materialize a primitive in the catalog and return its handle.

    Raises:
        CatalogError: If the catalog has no ordinal for the primitive
    """
    ordinal = catalog.primitive_ordinal(kind.basic_kind_code)
    if ordinal == 0:
        raise CatalogError(
            f"Failed to create primitive type {kind.value}", "primitive_ordinal"
        )
    return TypeHandle.from_ordinal(ordinal)


# Primitive shorthands
def void() -> PrimitiveType:
    return PrimitiveType.VOID


def int8() -> PrimitiveType:
    return PrimitiveType.INT8


def int16() -> PrimitiveType:
    return PrimitiveType.INT16


def int32() -> PrimitiveType:
    return PrimitiveType.INT32


def int64() -> PrimitiveType:
    return PrimitiveType.INT64


def uint8() -> PrimitiveType:
    return PrimitiveType.UINT8


def uint16() -> PrimitiveType:
    return PrimitiveType.UINT16


def uint32() -> PrimitiveType:
    return PrimitiveType.UINT32


def uint64() -> PrimitiveType:
    return PrimitiveType.UINT64


def float32() -> PrimitiveType:
    return PrimitiveType.FLOAT


def float64() -> PrimitiveType:
    return PrimitiveType.DOUBLE


def char() -> PrimitiveType:
    return PrimitiveType.CHAR


def boolean() -> PrimitiveType:
    return PrimitiveType.BOOL
