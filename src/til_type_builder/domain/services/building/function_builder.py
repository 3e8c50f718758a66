#!/usr/bin/env python3

"""Function signature builder.

Submission resolves the return type (absent means void, passed to the
catalog as ordinal 0), creates the function shell, adds parameters in order,
applies the whole attribute set in one call and finalizes.
"""

from ....infrastructure.logging import get_logger
from ...errors import TypeValidationError
from ...models import (
    INVALID_ORDINAL,
    CallingConvention,
    CallingConventionLike,
    FieldReference,
    FunctionAttributes,
    ParameterSpec,
    ReferenceLike,
    TypeHandle,
    as_field_reference,
    calling_convention_code,
)
from ...repositories import TypeCatalog
from .base_builder import TypeBuilder
from .builder_validator import BuilderValidator
from .reference_resolver import ReferenceResolver

logger = get_logger(__name__)


class FunctionBuilder(TypeBuilder):
    """Builder for function signature types."""

    kind = "function"

    def __init__(self) -> None:
        super().__init__()
        self.return_type: FieldReference | None = None
        self.parameters: list[ParameterSpec] = []
        self.cc: CallingConventionLike = CallingConvention.UNKNOWN
        self.is_vararg = False
        self.attributes = FunctionAttributes()

    def describe(self) -> str:
        return f"function ({len(self.parameters)} parameter(s))"

    def returns(self, return_type: ReferenceLike) -> "FunctionBuilder":
        self._ensure_open()
        self.return_type = as_field_reference(return_type)
        return self

    def param(self, name: str, param_type: ReferenceLike) -> "FunctionBuilder":
        """Add a parameter. An empty name declares an anonymous parameter."""
        self._ensure_open()
        self.parameters.append(
            ParameterSpec(name=name, reference=as_field_reference(param_type))
        )
        return self

    def hidden_param(self, name: str, param_type: ReferenceLike) -> "FunctionBuilder":
        """Add an implicit parameter such as a 'this' pointer."""
        self._ensure_open()
        self.parameters.append(
            ParameterSpec(name=name, reference=as_field_reference(param_type), is_hidden=True)
        )
        return self

    def calling_convention(self, cc: CallingConventionLike) -> "FunctionBuilder":
        self._ensure_open()
        self.cc = cc
        return self

    def vararg(self, is_vararg: bool = True) -> "FunctionBuilder":
        self._ensure_open()
        self.is_vararg = is_vararg
        return self

    def noreturn(self) -> "FunctionBuilder":
        return self._set_attribute("is_noreturn")

    def pure_func(self) -> "FunctionBuilder":
        return self._set_attribute("is_pure")

    def static_func(self) -> "FunctionBuilder":
        return self._set_attribute("is_static")

    def virtual_func(self) -> "FunctionBuilder":
        return self._set_attribute("is_virtual")

    def const_func(self) -> "FunctionBuilder":
        """Mark as a const member function."""
        return self._set_attribute("is_const")

    def constructor(self) -> "FunctionBuilder":
        return self._set_attribute("is_constructor")

    def destructor(self) -> "FunctionBuilder":
        return self._set_attribute("is_destructor")

    def _set_attribute(self, attribute: str) -> "FunctionBuilder":
        self._ensure_open()
        setattr(self.attributes, attribute, True)
        return self

    def validate(self) -> None:
        duplicate = BuilderValidator.find_duplicate(
            (p.name for p in self.parameters), skip_empty=True
        )
        if duplicate is not None:
            raise TypeValidationError(f"Duplicate parameter name '{duplicate}'")

        BuilderValidator.check_attributes(self.attributes)

        BuilderValidator.reject_self_reference(self.return_type, "return types")
        for parameter in self.parameters:
            BuilderValidator.reject_self_reference(parameter.reference, "parameter types")

    def _commit(self, catalog: TypeCatalog) -> TypeHandle:
        resolver = ReferenceResolver(catalog)

        return_ordinal = INVALID_ORDINAL
        if self.return_type is not None:
            return_ordinal = self._expect_ordinal(
                resolver.resolve(self.return_type),
                "resolve",
                f"Invalid return type ({self.return_type.describe()})",
            )

        cc_code = calling_convention_code(self.cc)
        shell = self._create_shell(
            catalog.create_function(return_ordinal, cc_code, self.is_vararg),
            "create_function",
            "Failed to create function type",
        )
        logger.debug(
            f"Function shell #{shell}: return #{return_ordinal}, cc 0x{cc_code:x}, "
            f"vararg={self.is_vararg}"
        )

        for parameter in self.parameters:
            param_ordinal = self._expect_ordinal(
                resolver.resolve(parameter.reference),
                "resolve",
                f"Invalid type for parameter '{parameter.name}'",
            )
            self._expect_success(
                catalog.add_parameter(shell, parameter.name, param_ordinal, parameter.is_hidden),
                "add_parameter",
                f"Failed to add parameter '{parameter.name}'",
            )

        attrs = self.attributes
        self._expect_success(
            catalog.set_function_attributes(
                shell,
                attrs.is_noreturn,
                attrs.is_pure,
                attrs.is_static,
                attrs.is_virtual,
                attrs.is_const,
                attrs.is_constructor,
                attrs.is_destructor,
            ),
            "set_function_attributes",
            "Failed to set function attributes",
        )

        return self._finalize_shell(catalog, shell)
