#!/usr/bin/env python3

"""Field references: what a field, parameter or element is typed as.

A reference is one of three closed variants:
- Primitive: a basic type the catalog materializes on demand
- Existing: a type already committed to the catalog
- SelfReference: a pointer to the aggregate currently being built

SelfReference carries no name, so a reference to some other not-yet-built
type cannot be expressed at all.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .type_handle import TypeHandle


class PrimitiveType(Enum):
    """Basic types available in the catalog."""

    VOID = "void"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "char"
    BOOL = "bool"

    @property
    def basic_kind_code(self) -> int:
        """Catalog basic-type code for this primitive."""
        return BASIC_KIND_CODES[self]


# Catalog basic-type codes. Several primitives share a code: char is a
# signed byte and bool is encoded like a 64-bit unsigned integer.
BASIC_KIND_CODES: dict[PrimitiveType, int] = {
    PrimitiveType.VOID: 0x00,
    PrimitiveType.INT8: 0x01,
    PrimitiveType.INT16: 0x02,
    PrimitiveType.INT32: 0x03,
    PrimitiveType.INT64: 0x04,
    PrimitiveType.UINT8: 0x05,
    PrimitiveType.UINT16: 0x06,
    PrimitiveType.UINT32: 0x07,
    PrimitiveType.UINT64: 0x08,
    PrimitiveType.BOOL: 0x08,
    PrimitiveType.FLOAT: 0x09,
    PrimitiveType.DOUBLE: 0x0A,
    PrimitiveType.CHAR: 0x01,
}


@dataclass(frozen=True)
class Primitive:
    """Reference to a basic type."""

    kind: PrimitiveType

    def describe(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Existing:
    """Reference to an already committed type."""

    handle: TypeHandle

    def describe(self) -> str:
        return f"type {self.handle}"


@dataclass(frozen=True)
class SelfReference:
    """Pointer to the aggregate under construction."""

    def describe(self) -> str:
        return "self pointer"


FieldReference = Union[Primitive, Existing, SelfReference]

# Anything accepted where a field reference is expected
ReferenceLike = Union[FieldReference, PrimitiveType, TypeHandle]


def as_field_reference(value: ReferenceLike) -> FieldReference:
    """Coerce a primitive kind or handle into a field reference.

    Args:
        value: A FieldReference, PrimitiveType or TypeHandle

    Returns:
        The equivalent FieldReference

    Raises:
        TypeError: If value cannot be used as a field type
    """
    if isinstance(value, (Primitive, Existing, SelfReference)):
        return value
    if isinstance(value, PrimitiveType):
        return Primitive(value)
    if isinstance(value, TypeHandle):
        return Existing(value)
    raise TypeError(f"Cannot use {type(value).__name__} as a field type")
