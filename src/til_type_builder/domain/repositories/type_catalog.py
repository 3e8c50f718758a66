#!/usr/bin/env python3

"""Capability interface of the external type catalog.

The catalog allocates ordinals and persists committed types. Builders reach
it only through the primitives below. Every primitive signals failure with
the sentinel ordinal 0 or with False; none of them raise.

Implementations are shared mutable state with no locking discipline of their
own. Callers submitting from several threads must serialize access.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TypeCatalog(Protocol):
    """Primitive operations of a type catalog."""

    def create_aggregate(self, name: str, is_union: bool) -> int:
        """Create an empty, named struct or union shell."""
        ...

    def add_field(
        self, owner_ordinal: int, field_name: str, field_type_ordinal: int, byte_offset: int
    ) -> bool:
        """Append a field at a byte offset to an aggregate shell."""
        ...

    def add_bitfield(
        self,
        owner_ordinal: int,
        field_name: str,
        bit_offset: int,
        bit_width: int,
        is_unsigned: bool,
    ) -> bool:
        """Append a bit-packed field to an aggregate shell."""
        ...

    def finalize(self, ordinal: int) -> bool:
        """Commit a populated shell."""
        ...

    def primitive_ordinal(self, basic_kind_code: int) -> int:
        """Get or create the ordinal of a basic type."""
        ...

    def type_size(self, ordinal: int) -> int:
        """Byte size of a type, 0 when unknown."""
        ...

    def create_enum(self, name: str, width_bytes: int) -> int:
        """Create an empty, named enum shell of the given width."""
        ...

    def add_enum_member(self, ordinal: int, name: str, signed_value: int) -> bool:
        """Append a member to an enum shell."""
        ...

    def create_array(self, element_ordinal: int, count: int) -> int:
        """Create an array type."""
        ...

    def create_pointer(self, target_ordinal: int) -> int:
        """Create a pointer type."""
        ...

    def create_function(
        self, return_ordinal: int, calling_convention_code: int, is_vararg: bool
    ) -> int:
        """Create a function shell; return ordinal 0 means void."""
        ...

    def add_parameter(
        self, func_ordinal: int, name: str, type_ordinal: int, is_hidden: bool
    ) -> bool:
        """Append a parameter to a function shell."""
        ...

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
        """Apply the full attribute set of a function shell."""
        ...

    def create_function_pointer(self, func_ordinal: int) -> int:
        """Create a pointer to a finalized function type."""
        ...
