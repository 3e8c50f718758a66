#!/usr/bin/env python3

"""Value objects describing types under construction."""

from .bitfield_spec import BitfieldSpec
from .calling_convention import (
    CallingConvention,
    CallingConventionLike,
    CustomCallingConvention,
    calling_convention_code,
)
from .enum_member_spec import INT64_MAX, INT64_MIN, EnumMemberSpec, wrap_int64
from .field_reference import (
    BASIC_KIND_CODES,
    Existing,
    FieldReference,
    Primitive,
    PrimitiveType,
    ReferenceLike,
    SelfReference,
    as_field_reference,
)
from .field_spec import FieldSpec
from .function_attributes import FunctionAttributes
from .parameter_spec import ParameterSpec
from .type_handle import INVALID_ORDINAL, TypeHandle

__all__ = [
    "BASIC_KIND_CODES",
    "BitfieldSpec",
    "CallingConvention",
    "CallingConventionLike",
    "CustomCallingConvention",
    "EnumMemberSpec",
    "Existing",
    "FieldReference",
    "FieldSpec",
    "FunctionAttributes",
    "INT64_MAX",
    "INT64_MIN",
    "INVALID_ORDINAL",
    "ParameterSpec",
    "Primitive",
    "PrimitiveType",
    "ReferenceLike",
    "SelfReference",
    "TypeHandle",
    "as_field_reference",
    "calling_convention_code",
    "wrap_int64",
]
