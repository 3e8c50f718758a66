#!/usr/bin/env python3

"""Unit tests for the struct/union builder.

Covers validation before any catalog mutation, auto-offset layout with the
fallback stride, self references and partial submissions.
"""

import logging
from unittest.mock import Mock

import pytest

from til_type_builder.domain.errors import (
    BuilderConsumedError,
    CatalogError,
    TypeValidationError,
)
from til_type_builder.domain.models import PrimitiveType, TypeHandle
from til_type_builder.domain.services.building import PointerBuilder, StructBuilder
from til_type_builder.infrastructure.catalog import EntryKind, InMemoryTypeCatalog


class TestStructValidation:
    """Validation failures must leave the catalog untouched."""

    @pytest.mark.unit
    def test_duplicate_field_names_rejected_before_catalog_calls(
        self, catalog: InMemoryTypeCatalog
    ) -> None:
        builder = (
            StructBuilder("Dup")
            .field("x", PrimitiveType.INT32)
            .field("x", PrimitiveType.INT64)
        )

        with pytest.raises(TypeValidationError, match="Duplicate field name 'x'"):
            builder.submit(catalog)

        assert catalog.calls == []

    @pytest.mark.unit
    def test_field_and_bitfield_share_namespace(self, catalog: InMemoryTypeCatalog) -> None:
        builder = (
            StructBuilder("Flags")
            .field("mode", PrimitiveType.UINT32)
            .unsigned_bitfield("mode", 32, 4)
        )

        with pytest.raises(TypeValidationError, match="Duplicate bitfield name 'mode'"):
            builder.submit(catalog)

        assert catalog.calls == []

    @pytest.mark.unit
    def test_duplicate_bitfield_names_rejected(self) -> None:
        builder = (
            StructBuilder("Flags")
            .unsigned_bitfield("a", 0, 1)
            .unsigned_bitfield("a", 1, 1)
        )

        with pytest.raises(TypeValidationError):
            builder.validate()

    @pytest.mark.unit
    def test_empty_name_rejected(self, catalog: InMemoryTypeCatalog) -> None:
        with pytest.raises(TypeValidationError, match="name cannot be empty"):
            StructBuilder("").field("x", PrimitiveType.INT32).submit(catalog)

        assert catalog.calls == []

    @pytest.mark.unit
    def test_union_empty_name_message(self) -> None:
        with pytest.raises(TypeValidationError, match="Union name cannot be empty"):
            StructBuilder.new_union("").validate()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("first", "second"),
        [
            ((0, 4), (2, 4)),  # partial overlap [0,4) / [2,6)
            ((0, 8), (2, 2)),  # containment [0,8) / [2,4)
            ((2, 2), (0, 8)),  # containment, reversed order
            ((0, 4), (0, 2)),  # shared start
            ((4, 4), (6, 2)),  # shared end
        ],
    )
    def test_overlapping_bitfields_rejected(
        self,
        catalog: InMemoryTypeCatalog,
        first: tuple[int, int],
        second: tuple[int, int],
    ) -> None:
        builder = (
            StructBuilder("Packed")
            .unsigned_bitfield("a", *first)
            .signed_bitfield("b", *second)
        )

        with pytest.raises(TypeValidationError, match="overlaps"):
            builder.submit(catalog)

        assert catalog.calls == []

    @pytest.mark.unit
    def test_adjacent_bitfields_accepted(self) -> None:
        StructBuilder("Packed").unsigned_bitfield("a", 0, 4).unsigned_bitfield(
            "b", 4, 4
        ).validate()

    @pytest.mark.unit
    def test_negative_offsets_rejected(self) -> None:
        with pytest.raises(TypeValidationError, match="cannot be negative"):
            StructBuilder("S").field_at("x", PrimitiveType.INT8, -1).validate()

        with pytest.raises(TypeValidationError, match="cannot be negative"):
            StructBuilder("S").unsigned_bitfield("b", -2, 3).validate()

    @pytest.mark.unit
    def test_non_positive_fallback_rejected(self) -> None:
        with pytest.raises(TypeValidationError, match="Fallback field size"):
            StructBuilder("S").fallback_size(0).validate()


class TestStructLayout:
    """Auto-offset layout and explicit offsets."""

    @pytest.mark.unit
    def test_auto_offsets_follow_reported_sizes(self, catalog: InMemoryTypeCatalog) -> None:
        handle = (
            StructBuilder("Point")
            .field("x", PrimitiveType.INT32)
            .field("y", PrimitiveType.INT32)
            .submit(catalog)
        )

        entry = catalog.get(handle.ordinal)
        assert entry is not None
        assert entry.kind is EntryKind.STRUCT
        assert entry.finalized
        assert [(f.name, f.byte_offset) for f in entry.fields] == [("x", 0), ("y", 4)]
        assert catalog.type_size(handle.ordinal) == 8

    @pytest.mark.unit
    def test_unknown_sizes_use_fallback_stride(self, mock_catalog: Mock) -> None:
        StructBuilder("Opaque").field("a", PrimitiveType.INT32).field(
            "b", PrimitiveType.INT32
        ).submit(mock_catalog)

        offsets = [call.args[3] for call in mock_catalog.add_field.call_args_list]
        assert offsets == [0, 8]

    @pytest.mark.unit
    def test_configured_fallback_stride(self, mock_catalog: Mock) -> None:
        StructBuilder("Opaque32").fallback_size(4).field("a", PrimitiveType.INT64).field(
            "b", PrimitiveType.INT64
        ).field("c", PrimitiveType.INT64).submit(mock_catalog)

        offsets = [call.args[3] for call in mock_catalog.add_field.call_args_list]
        assert offsets == [0, 4, 8]

    @pytest.mark.unit
    def test_explicit_offsets_do_not_move_cursor(self, catalog: InMemoryTypeCatalog) -> None:
        handle = (
            StructBuilder("Header")
            .field("magic", PrimitiveType.UINT32)
            .field_at("payload", PrimitiveType.UINT64, 16)
            .field("version", PrimitiveType.UINT16)
            .submit(catalog)
        )

        entry = catalog.get(handle.ordinal)
        assert entry is not None
        assert [(f.name, f.byte_offset) for f in entry.fields] == [
            ("magic", 0),
            ("payload", 16),
            ("version", 4),
        ]

    @pytest.mark.unit
    def test_union_fields_share_offset_zero(self, catalog: InMemoryTypeCatalog) -> None:
        handle = (
            StructBuilder.new_union("Variant")
            .field("as_int", PrimitiveType.INT32)
            .field_at("as_double", PrimitiveType.DOUBLE, 16)
            .field("as_byte", PrimitiveType.UINT8)
            .submit(catalog)
        )

        entry = catalog.get(handle.ordinal)
        assert entry is not None
        assert entry.kind is EntryKind.UNION
        assert [f.byte_offset for f in entry.fields] == [0, 0, 0]
        assert catalog.type_size(handle.ordinal) == 8

    @pytest.mark.unit
    def test_bitfields_added_after_fields(self, catalog: InMemoryTypeCatalog) -> None:
        handle = (
            StructBuilder("Status")
            .unsigned_bitfield("ready", 0, 1)
            .signed_bitfield("delta", 1, 7)
            .submit(catalog)
        )

        entry = catalog.get(handle.ordinal)
        assert entry is not None
        assert [(b.name, b.bit_offset, b.bit_width, b.is_unsigned) for b in entry.bitfields] == [
            ("ready", 0, 1, True),
            ("delta", 1, 7, False),
        ]
        assert catalog.type_size(handle.ordinal) == 1

    @pytest.mark.unit
    def test_union_bitfields_are_dropped(self, catalog: InMemoryTypeCatalog) -> None:
        handle = (
            StructBuilder.new_union("Bits")
            .field("raw", PrimitiveType.UINT32)
            .unsigned_bitfield("low", 0, 4)
            .submit(catalog)
        )

        entry = catalog.get(handle.ordinal)
        assert entry is not None
        assert entry.bitfields == []
        assert "add_bitfield" not in [name for name, _ in catalog.calls]

    @pytest.mark.unit
    def test_union_bitfield_may_reuse_field_name(self, catalog: InMemoryTypeCatalog) -> None:
        handle = (
            StructBuilder.new_union("Reg")
            .field("a", PrimitiveType.INT32)
            .unsigned_bitfield("a", 0, 1)
            .submit(catalog)
        )

        entry = catalog.get(handle.ordinal)
        assert entry is not None
        assert [f.name for f in entry.fields] == ["a"]

    @pytest.mark.unit
    def test_union_bitfields_skip_overlap_check(self, catalog: InMemoryTypeCatalog) -> None:
        builder = (
            StructBuilder.new_union("Flags")
            .field("x", PrimitiveType.INT32)
            .unsigned_bitfield("a", 0, 4)
            .unsigned_bitfield("b", 2, 4)
        )

        assert builder.bitfields == []
        builder.submit(catalog)


class TestSelfReference:
    """Self references resolve to pointers to the shell."""

    @pytest.mark.unit
    def test_self_ref_matches_independent_pointer(self, catalog: InMemoryTypeCatalog) -> None:
        node = (
            StructBuilder("Node")
            .field("value", PrimitiveType.INT32)
            .self_ref("next")
            .submit(catalog)
        )

        entry = catalog.get(node.ordinal)
        assert entry is not None
        next_field = entry.fields[1]

        independent = PointerBuilder(node).submit(catalog)
        assert next_field.type_ordinal == independent.ordinal

        pointer_entry = catalog.get(independent.ordinal)
        assert pointer_entry is not None
        assert pointer_entry.target == node.ordinal

    @pytest.mark.unit
    def test_self_ref_advances_by_pointer_size(self, catalog: InMemoryTypeCatalog) -> None:
        node = (
            StructBuilder("Tree")
            .self_ref("left")
            .self_ref("right")
            .field("key", PrimitiveType.UINT32)
            .submit(catalog)
        )

        entry = catalog.get(node.ordinal)
        assert entry is not None
        assert [f.byte_offset for f in entry.fields] == [0, 8, 16]


class TestStructSubmission:
    """Submission protocol: consumption, idempotence and partial failures."""

    @pytest.mark.unit
    def test_builder_consumed_by_submit(self, catalog: InMemoryTypeCatalog) -> None:
        builder = StructBuilder("Once").field("x", PrimitiveType.INT32)
        builder.submit(catalog)
        calls_after_first = len(catalog.calls)

        assert builder.consumed
        with pytest.raises(BuilderConsumedError):
            builder.submit(catalog)
        with pytest.raises(BuilderConsumedError):
            builder.field("y", PrimitiveType.INT32)
        assert len(catalog.calls) == calls_after_first

    @pytest.mark.unit
    def test_submit_is_timed(self, catalog: InMemoryTypeCatalog, caplog) -> None:
        with caplog.at_level(logging.DEBUG):
            StructBuilder("Timed").field("x", PrimitiveType.INT32).submit(catalog)

        assert "Completed TypeBuilder.submit in" in caplog.text

    @pytest.mark.unit
    def test_failed_validation_consumes_builder(self, catalog: InMemoryTypeCatalog) -> None:
        builder = StructBuilder("")
        with pytest.raises(TypeValidationError):
            builder.submit(catalog)
        with pytest.raises(BuilderConsumedError):
            builder.submit(catalog)

    @pytest.mark.unit
    def test_same_configuration_yields_distinct_ordinals(
        self, catalog: InMemoryTypeCatalog
    ) -> None:
        def make() -> StructBuilder:
            return StructBuilder("Point").field("x", PrimitiveType.INT32)

        first = make().submit(catalog)
        second = make().submit(catalog)
        assert first != second

    @pytest.mark.unit
    def test_catalog_failure_leaves_pending_shell(self, failing_catalog) -> None:
        catalog = failing_catalog("add_field")
        builder = StructBuilder("Broken").field("x", PrimitiveType.INT32)

        with pytest.raises(CatalogError, match="Failed to add field 'x' to Broken") as exc_info:
            builder.submit(catalog)

        error = exc_info.value
        assert error.operation == "add_field"
        assert len(error.pending_ordinals) == 1
        shell = catalog.get(error.pending_ordinals[0])
        assert shell is not None
        assert shell.name == "Broken"
        assert not shell.finalized

        finalized = error.finalize_pending(catalog)
        assert finalized == [TypeHandle(shell.ordinal)]
        assert shell.finalized

    @pytest.mark.unit
    def test_shell_creation_failure(self, failing_catalog) -> None:
        catalog = failing_catalog("create_aggregate")

        with pytest.raises(CatalogError, match="Failed to create struct 'S'") as exc_info:
            StructBuilder("S").field("x", PrimitiveType.INT32).submit(catalog)

        assert exc_info.value.pending_ordinals == ()
        assert catalog.entries == {}

    @pytest.mark.unit
    def test_unresolvable_field_type(self, failing_catalog) -> None:
        catalog = failing_catalog("primitive_ordinal")

        with pytest.raises(CatalogError, match="Invalid field type for field 'x'") as exc_info:
            StructBuilder("S").field("x", PrimitiveType.INT32).submit(catalog)

        assert exc_info.value.operation == "resolve"

    @pytest.mark.unit
    def test_finalize_failure_reports_shell(self, failing_catalog) -> None:
        catalog = failing_catalog("finalize")

        with pytest.raises(CatalogError) as exc_info:
            StructBuilder("S").field("x", PrimitiveType.INT32).submit(catalog)

        assert exc_info.value.operation == "finalize"
        assert len(exc_info.value.pending_ordinals) == 1
