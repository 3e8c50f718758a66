#!/usr/bin/env python3

"""Type catalog implementations."""

from .catalog_entry import CatalogEntry, EntryKind
from .in_memory_catalog import InMemoryTypeCatalog

__all__ = [
    "CatalogEntry",
    "EntryKind",
    "InMemoryTypeCatalog",
]
