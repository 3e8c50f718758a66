#!/usr/bin/env python3

"""Struct and union builder.

Submission creates an empty shell, adds fields in declaration order, adds
bitfields, then finalizes. Fields without an explicit offset are placed at a
running cursor that advances by the size the catalog reports for each field.
When the catalog cannot size a field the cursor advances by a fixed fallback
stride instead; this is an approximation, not a layout engine.
"""

from ....infrastructure.logging import get_logger
from ...errors import TypeValidationError
from ...models import (
    BitfieldSpec,
    FieldSpec,
    ReferenceLike,
    SelfReference,
    TypeHandle,
    as_field_reference,
)
from ...repositories import TypeCatalog
from .base_builder import TypeBuilder
from .builder_validator import BuilderValidator
from .reference_resolver import ReferenceResolver

logger = get_logger(__name__)

DEFAULT_FALLBACK_FIELD_SIZE = 8


class StructBuilder(TypeBuilder):
    """Builder for struct and union types.

    Example:
        node = (
            StructBuilder("Node")
            .field("value", PrimitiveType.INT32)
            .self_ref("next")
            .submit(catalog)
        )
    """

    def __init__(self, name: str, is_union: bool = False):
        super().__init__()
        self.name = name
        self.is_union = is_union
        self.fields: list[FieldSpec] = []
        self.bitfields: list[BitfieldSpec] = []
        self.fallback_field_size = DEFAULT_FALLBACK_FIELD_SIZE

    @classmethod
    def new_union(cls, name: str) -> "StructBuilder":
        return cls(name, is_union=True)

    @property
    def kind(self) -> str:  # type: ignore[override]
        return "union" if self.is_union else "struct"

    def describe(self) -> str:
        return f"{self.kind} '{self.name}'"

    def field(self, name: str, field_type: ReferenceLike) -> "StructBuilder":
        """Add a field laid out after the previous auto-offset field."""
        self._ensure_open()
        self.fields.append(FieldSpec(name=name, reference=as_field_reference(field_type)))
        return self

    def field_at(self, name: str, field_type: ReferenceLike, offset: int) -> "StructBuilder":
        """Add a field at an explicit byte offset.

        Unions place every member at offset 0, so on a union this is the same
        as field().
        """
        if self.is_union:
            return self.field(name, field_type)
        self._ensure_open()
        self.fields.append(
            FieldSpec(name=name, reference=as_field_reference(field_type), offset=offset)
        )
        return self

    def bitfield(
        self, name: str, bit_offset: int, bit_width: int, is_unsigned: bool
    ) -> "StructBuilder":
        """Add a bitfield. On a union the bitfield is dropped with a warning."""
        self._ensure_open()
        if self.is_union:
            logger.warning(f"Ignoring bitfield '{name}' declared on union {self.name}")
            return self
        self.bitfields.append(
            BitfieldSpec(
                name=name,
                bit_offset=bit_offset,
                bit_width=bit_width,
                is_unsigned=is_unsigned,
            )
        )
        return self

    def unsigned_bitfield(self, name: str, bit_offset: int, bit_width: int) -> "StructBuilder":
        return self.bitfield(name, bit_offset, bit_width, True)

    def signed_bitfield(self, name: str, bit_offset: int, bit_width: int) -> "StructBuilder":
        return self.bitfield(name, bit_offset, bit_width, False)

    def self_ref(self, name: str) -> "StructBuilder":
        """Add a pointer-to-this-aggregate field (linked lists, trees)."""
        return self.field(name, SelfReference())

    def fallback_size(self, size: int) -> "StructBuilder":
        """Set the stride used for auto-offset fields the catalog cannot size."""
        self._ensure_open()
        self.fallback_field_size = size
        return self

    def validate(self) -> None:
        BuilderValidator.require_name(self.name, self.kind)

        if self.fallback_field_size <= 0:
            raise TypeValidationError(
                f"Fallback field size must be positive, got {self.fallback_field_size}"
            )

        field_names: set[str] = set()
        for field in self.fields:
            if field.name in field_names:
                raise TypeValidationError(
                    f"Duplicate field name '{field.name}' in {self.name}"
                )
            field_names.add(field.name)
            if field.offset is not None:
                BuilderValidator.require_non_negative(
                    field.offset, f"Offset of field '{field.name}'"
                )

        for bitfield in self.bitfields:
            if bitfield.name in field_names:
                raise TypeValidationError(
                    f"Duplicate bitfield name '{bitfield.name}' in {self.name}"
                )
            field_names.add(bitfield.name)

        BuilderValidator.check_bitfields(self.bitfields, self.name)

    def _commit(self, catalog: TypeCatalog) -> TypeHandle:
        shell = self._create_shell(
            catalog.create_aggregate(self.name, self.is_union),
            "create_aggregate",
            f"Failed to create {self.describe()}",
        )
        resolver = ReferenceResolver(catalog, self_ordinal=shell)

        cursor = 0
        for field in self.fields:
            field_ordinal = self._expect_ordinal(
                resolver.resolve(field.reference),
                "resolve",
                f"Invalid field type for field '{field.name}' "
                f"({field.reference.describe()})",
            )

            offset = field.offset if field.offset is not None else cursor
            self._expect_success(
                catalog.add_field(shell, field.name, field_ordinal, offset),
                "add_field",
                f"Failed to add field '{field.name}' to {self.name}",
            )
            logger.debug(f"Added field '{field.name}' (#{field_ordinal}) at offset {offset}")

            if not self.is_union and field.offset is None:
                field_size = catalog.type_size(field_ordinal)
                if field_size <= 0:
                    logger.debug(
                        f"Size of '{field.name}' unknown, advancing by "
                        f"{self.fallback_field_size}"
                    )
                    field_size = self.fallback_field_size
                cursor += field_size

        for bitfield in self.bitfields:
            self._expect_success(
                catalog.add_bitfield(
                    shell,
                    bitfield.name,
                    bitfield.bit_offset,
                    bitfield.bit_width,
                    bitfield.is_unsigned,
                ),
                "add_bitfield",
                f"Failed to add bitfield '{bitfield.name}' to {self.name}",
            )

        return self._finalize_shell(catalog, shell)
