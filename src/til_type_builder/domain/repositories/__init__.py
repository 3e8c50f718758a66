#!/usr/bin/env python3

"""Repository interfaces for the type catalog."""

from .type_catalog import TypeCatalog

__all__ = ["TypeCatalog"]
