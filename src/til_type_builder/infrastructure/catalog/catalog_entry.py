#!/usr/bin/env python3

"""Records stored by the in-memory catalog."""

from dataclasses import dataclass, field
from enum import Enum


class EntryKind(Enum):
    """Kinds of records held by the catalog."""

    PRIMITIVE = "primitive"
    STRUCT = "struct"
    UNION = "union"
    ENUM = "enum"
    ARRAY = "array"
    POINTER = "pointer"
    FUNCTION = "function"
    FUNCTION_POINTER = "function_pointer"

    @property
    def is_aggregate(self) -> bool:
        return self in (EntryKind.STRUCT, EntryKind.UNION)


@dataclass
class EntryField:
    name: str
    type_ordinal: int
    byte_offset: int


@dataclass
class EntryBitfield:
    name: str
    bit_offset: int
    bit_width: int
    is_unsigned: bool


@dataclass
class EntryParameter:
    name: str
    type_ordinal: int
    is_hidden: bool


@dataclass
class CatalogEntry:
    """A type record. Which attributes are meaningful depends on kind."""

    ordinal: int
    kind: EntryKind
    name: str | None = None
    finalized: bool = False
    basic_kind_code: int | None = None
    width: int = 0  # primitive and enum byte width
    target: int | None = None  # pointee, element, return or function ordinal
    count: int = 0
    calling_convention: int | None = None
    is_vararg: bool = False
    fields: list[EntryField] = field(default_factory=list)
    bitfields: list[EntryBitfield] = field(default_factory=list)
    members: list[tuple[str, int]] = field(default_factory=list)
    parameters: list[EntryParameter] = field(default_factory=list)
    attributes: dict[str, bool] = field(default_factory=dict)
