#!/usr/bin/env python3

"""In-process implementation of the TypeCatalog primitives.

Behaves like the catalog of an analysis session closely enough to exercise
builders without one: ordinals are allocated sequentially from 1, primitives
and structural types (pointers, arrays, function pointers) are interned,
named shells always get a fresh ordinal, and every primitive reports failure
with 0 or False instead of raising.

Interning differs from a real catalog, which allocates a fresh ordinal for
every pointer, array and function pointer it creates. Here two independently
built pointers to the same target share one ordinal, so a self-reference
field compares equal to a pointer built separately.

Not thread-safe. Every call is appended to `calls`, and any operation named
in `fail_on` reports failure, which tests use to simulate a catalog error.
"""

from typing import Any

from ..config import BuilderConfig
from ..logging import get_logger
from .catalog_entry import (
    CatalogEntry,
    EntryBitfield,
    EntryField,
    EntryKind,
    EntryParameter,
)

logger = get_logger(__name__)

# Byte sizes of the basic kind codes the catalog understands
PRIMITIVE_SIZES: dict[int, int] = {
    0x00: 0,  # void
    0x01: 1,
    0x02: 2,
    0x03: 4,
    0x04: 8,
    0x05: 1,
    0x06: 2,
    0x07: 4,
    0x08: 8,
    0x09: 4,
    0x0A: 8,
}

VALID_ENUM_WIDTHS = (1, 2, 4, 8)

READ_ONLY_OPERATIONS = frozenset({"primitive_ordinal", "type_size"})


class InMemoryTypeCatalog:
    """Dictionary-backed type catalog."""

    def __init__(self, pointer_size: int = 8, fail_on: set[str] | None = None):
        """Initialize an empty catalog.

        Args:
            pointer_size: Size reported for pointer types
            fail_on: Names of operations that should report failure
        """
        self.pointer_size = pointer_size
        self.fail_on: set[str] = set(fail_on or ())
        self.entries: dict[int, CatalogEntry] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._next_ordinal = 1
        self._interned: dict[tuple[Any, ...], int] = {}

    @classmethod
    def from_config(cls, config: BuilderConfig) -> "InMemoryTypeCatalog":
        """Create a catalog whose pointers match the configured target."""
        config.validate()
        return cls(pointer_size=config.pointer_size)

    @property
    def mutating_calls(self) -> list[tuple[str, tuple[Any, ...]]]:
        """Calls that may have changed catalog state."""
        return [call for call in self.calls if call[0] not in READ_ONLY_OPERATIONS]

    def get(self, ordinal: int) -> CatalogEntry | None:
        return self.entries.get(ordinal)

    # Aggregates

    def create_aggregate(self, name: str, is_union: bool) -> int:
        if self._record("create_aggregate", name, is_union) or not name:
            return 0
        kind = EntryKind.UNION if is_union else EntryKind.STRUCT
        return self._allocate(CatalogEntry(ordinal=0, kind=kind, name=name)).ordinal

    def add_field(
        self, owner_ordinal: int, field_name: str, field_type_ordinal: int, byte_offset: int
    ) -> bool:
        if self._record("add_field", owner_ordinal, field_name, field_type_ordinal, byte_offset):
            return False
        owner = self._open_entry(owner_ordinal, EntryKind.STRUCT, EntryKind.UNION)
        if owner is None or field_type_ordinal not in self.entries or byte_offset < 0:
            return False
        owner.fields.append(EntryField(field_name, field_type_ordinal, byte_offset))
        return True

    def add_bitfield(
        self,
        owner_ordinal: int,
        field_name: str,
        bit_offset: int,
        bit_width: int,
        is_unsigned: bool,
    ) -> bool:
        if self._record(
            "add_bitfield", owner_ordinal, field_name, bit_offset, bit_width, is_unsigned
        ):
            return False
        owner = self._open_entry(owner_ordinal, EntryKind.STRUCT)
        if owner is None or bit_offset < 0 or bit_width < 0:
            return False
        owner.bitfields.append(EntryBitfield(field_name, bit_offset, bit_width, is_unsigned))
        return True

    def finalize(self, ordinal: int) -> bool:
        if self._record("finalize", ordinal):
            return False
        entry = self.entries.get(ordinal)
        if entry is None:
            return False
        entry.finalized = True
        return True

    # Primitives and sizes

    def primitive_ordinal(self, basic_kind_code: int) -> int:
        if self._record("primitive_ordinal", basic_kind_code):
            return 0
        if basic_kind_code not in PRIMITIVE_SIZES:
            return 0
        return self._intern(
            ("primitive", basic_kind_code),
            lambda: CatalogEntry(
                ordinal=0,
                kind=EntryKind.PRIMITIVE,
                finalized=True,
                basic_kind_code=basic_kind_code,
                width=PRIMITIVE_SIZES[basic_kind_code],
            ),
        )

    def type_size(self, ordinal: int) -> int:
        if self._record("type_size", ordinal):
            return 0
        return self._size_of(ordinal, set())

    # Enums

    def create_enum(self, name: str, width_bytes: int) -> int:
        if self._record("create_enum", name, width_bytes):
            return 0
        if not name or width_bytes not in VALID_ENUM_WIDTHS:
            return 0
        entry = CatalogEntry(ordinal=0, kind=EntryKind.ENUM, name=name, width=width_bytes)
        return self._allocate(entry).ordinal

    def add_enum_member(self, ordinal: int, name: str, signed_value: int) -> bool:
        if self._record("add_enum_member", ordinal, name, signed_value):
            return False
        entry = self._open_entry(ordinal, EntryKind.ENUM)
        if entry is None:
            return False
        entry.members.append((name, signed_value))
        return True

    # Derived types

    def create_array(self, element_ordinal: int, count: int) -> int:
        if self._record("create_array", element_ordinal, count):
            return 0
        if element_ordinal not in self.entries or count < 0:
            return 0
        return self._intern(
            ("array", element_ordinal, count),
            lambda: CatalogEntry(
                ordinal=0,
                kind=EntryKind.ARRAY,
                finalized=True,
                target=element_ordinal,
                count=count,
            ),
        )

    def create_pointer(self, target_ordinal: int) -> int:
        if self._record("create_pointer", target_ordinal):
            return 0
        if target_ordinal not in self.entries:
            return 0
        return self._intern(
            ("pointer", target_ordinal),
            lambda: CatalogEntry(
                ordinal=0, kind=EntryKind.POINTER, finalized=True, target=target_ordinal
            ),
        )

    # Functions

    def create_function(
        self, return_ordinal: int, calling_convention_code: int, is_vararg: bool
    ) -> int:
        if self._record("create_function", return_ordinal, calling_convention_code, is_vararg):
            return 0
        # Ordinal 0 is a void return here, not a failure
        if return_ordinal != 0 and return_ordinal not in self.entries:
            return 0
        entry = CatalogEntry(
            ordinal=0,
            kind=EntryKind.FUNCTION,
            target=return_ordinal or None,
            calling_convention=calling_convention_code,
            is_vararg=is_vararg,
        )
        return self._allocate(entry).ordinal

    def add_parameter(
        self, func_ordinal: int, name: str, type_ordinal: int, is_hidden: bool
    ) -> bool:
        if self._record("add_parameter", func_ordinal, name, type_ordinal, is_hidden):
            return False
        entry = self._open_entry(func_ordinal, EntryKind.FUNCTION)
        if entry is None or type_ordinal not in self.entries:
            return False
        entry.parameters.append(EntryParameter(name, type_ordinal, is_hidden))
        return True

    def set_function_attributes(
        self,
        func_ordinal: int,
        noreturn: bool,
        pure: bool,
        static_: bool,
        virtual_: bool,
        const_: bool,
        ctor: bool,
        dtor: bool,
    ) -> bool:
        if self._record(
            "set_function_attributes",
            func_ordinal,
            noreturn,
            pure,
            static_,
            virtual_,
            const_,
            ctor,
            dtor,
        ):
            return False
        entry = self._open_entry(func_ordinal, EntryKind.FUNCTION)
        if entry is None:
            return False
        entry.attributes = {
            "noreturn": noreturn,
            "pure": pure,
            "static": static_,
            "virtual": virtual_,
            "const": const_,
            "constructor": ctor,
            "destructor": dtor,
        }
        return True

    def create_function_pointer(self, func_ordinal: int) -> int:
        if self._record("create_function_pointer", func_ordinal):
            return 0
        entry = self.entries.get(func_ordinal)
        if entry is None or entry.kind is not EntryKind.FUNCTION or not entry.finalized:
            return 0
        return self._intern(
            ("function_pointer", func_ordinal),
            lambda: CatalogEntry(
                ordinal=0,
                kind=EntryKind.FUNCTION_POINTER,
                finalized=True,
                target=func_ordinal,
            ),
        )

    # Internals

    def _record(self, operation: str, *args: Any) -> bool:
        """Log the call and return True if it should be failed on purpose."""
        self.calls.append((operation, args))
        if operation in self.fail_on:
            logger.debug(f"Injected failure for {operation}{args}")
            return True
        return False

    def _allocate(self, entry: CatalogEntry) -> CatalogEntry:
        entry.ordinal = self._next_ordinal
        self._next_ordinal += 1
        self.entries[entry.ordinal] = entry
        logger.debug(f"Allocated #{entry.ordinal} ({entry.kind.value} {entry.name or ''})")
        return entry

    def _intern(self, key: tuple[Any, ...], factory: Any) -> int:
        ordinal = self._interned.get(key)
        if ordinal is None:
            ordinal = self._allocate(factory()).ordinal
            self._interned[key] = ordinal
        return ordinal

    def _open_entry(self, ordinal: int, *kinds: EntryKind) -> CatalogEntry | None:
        """Return an unfinalized entry of one of the given kinds."""
        entry = self.entries.get(ordinal)
        if entry is None or entry.kind not in kinds or entry.finalized:
            return None
        return entry

    def _size_of(self, ordinal: int, visiting: set[int]) -> int:
        entry = self.entries.get(ordinal)
        if entry is None or ordinal in visiting:
            return 0
        visiting = visiting | {ordinal}

        if entry.kind in (EntryKind.PRIMITIVE, EntryKind.ENUM):
            return entry.width
        if entry.kind in (EntryKind.POINTER, EntryKind.FUNCTION_POINTER):
            return self.pointer_size
        if entry.kind is EntryKind.ARRAY:
            return self._size_of(entry.target or 0, visiting) * entry.count
        if entry.kind is EntryKind.UNION:
            return max(
                (self._size_of(f.type_ordinal, visiting) for f in entry.fields), default=0
            )
        if entry.kind is EntryKind.STRUCT:
            field_end = max(
                (
                    f.byte_offset + self._size_of(f.type_ordinal, visiting)
                    for f in entry.fields
                ),
                default=0,
            )
            bit_end = max((b.bit_offset + b.bit_width for b in entry.bitfields), default=0)
            return max(field_end, (bit_end + 7) // 8)
        return 0
