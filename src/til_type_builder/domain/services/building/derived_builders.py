#!/usr/bin/env python3

"""Builders for types derived from a single target: arrays and pointers.

Each resolves its target and issues exactly one catalog call. None of them
creates a shell, so a failure never leaves a partial type behind.
"""

from ...models import ReferenceLike, TypeHandle, as_field_reference
from ...repositories import TypeCatalog
from .base_builder import TypeBuilder
from .builder_validator import BuilderValidator
from .reference_resolver import ReferenceResolver


class ArrayBuilder(TypeBuilder):
    """Builder for fixed-size array types.

    The element count is not checked; zero-length arrays (flexible array
    members) are passed through to the catalog.
    """

    kind = "array"

    def __init__(self, element_type: ReferenceLike, num_elements: int):
        super().__init__()
        self.element = as_field_reference(element_type)
        self.num_elements = num_elements

    def describe(self) -> str:
        return f"array of {self.num_elements} {self.element.describe()}"

    def validate(self) -> None:
        BuilderValidator.reject_self_reference(self.element, "array element types")

    def _commit(self, catalog: TypeCatalog) -> TypeHandle:
        element_ordinal = self._expect_ordinal(
            ReferenceResolver(catalog).resolve(self.element),
            "resolve",
            "Invalid element type for array",
        )
        ordinal = self._expect_ordinal(
            catalog.create_array(element_ordinal, self.num_elements),
            "create_array",
            "Failed to create array type",
        )
        return TypeHandle.from_ordinal(ordinal)


class PointerBuilder(TypeBuilder):
    """Builder for pointer types."""

    kind = "pointer"

    def __init__(self, target_type: ReferenceLike):
        super().__init__()
        self.target = as_field_reference(target_type)

    def describe(self) -> str:
        return f"pointer to {self.target.describe()}"

    def validate(self) -> None:
        BuilderValidator.reject_self_reference(self.target, "pointer target types")

    def _commit(self, catalog: TypeCatalog) -> TypeHandle:
        target_ordinal = self._expect_ordinal(
            ReferenceResolver(catalog).resolve(self.target),
            "resolve",
            "Invalid target type for pointer",
        )
        ordinal = self._expect_ordinal(
            catalog.create_pointer(target_ordinal),
            "create_pointer",
            "Failed to create pointer type",
        )
        return TypeHandle.from_ordinal(ordinal)


class FunctionPointerBuilder(TypeBuilder):
    """Builder for pointer-to-function types.

    The target must be a finalized function signature. That is not checked
    here; the catalog rejects anything else.
    """

    kind = "function pointer"

    def __init__(self, function_type: TypeHandle):
        super().__init__()
        self.function_type = function_type

    def describe(self) -> str:
        return f"function pointer to {self.function_type}"

    def validate(self) -> None:
        pass

    def _commit(self, catalog: TypeCatalog) -> TypeHandle:
        ordinal = self._expect_ordinal(
            catalog.create_function_pointer(self.function_type.ordinal),
            "create_function_pointer",
            "Failed to create function pointer type",
        )
        return TypeHandle.from_ordinal(ordinal)
