#!/usr/bin/env python3

"""Builders that describe types and commit them to a catalog."""

from . import factories
from .aggregate_builder import DEFAULT_FALLBACK_FIELD_SIZE, StructBuilder
from .base_builder import TypeBuilder
from .builder_validator import VALID_ENUM_WIDTHS, BuilderValidator
from .derived_builders import ArrayBuilder, FunctionPointerBuilder, PointerBuilder
from .enum_builder import EnumBuilder
from .factories import primitive_handle
from .function_builder import FunctionBuilder
from .reference_resolver import ReferenceResolver

__all__ = [
    "ArrayBuilder",
    "BuilderValidator",
    "DEFAULT_FALLBACK_FIELD_SIZE",
    "EnumBuilder",
    "FunctionBuilder",
    "FunctionPointerBuilder",
    "PointerBuilder",
    "ReferenceResolver",
    "StructBuilder",
    "TypeBuilder",
    "VALID_ENUM_WIDTHS",
    "factories",
    "primitive_handle",
]
