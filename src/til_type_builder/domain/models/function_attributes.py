#!/usr/bin/env python3

"""Attribute set of a function signature."""

from dataclasses import dataclass


@dataclass
class FunctionAttributes:
    """Attributes applied to a function type in a single catalog call."""

    is_noreturn: bool = False
    is_pure: bool = False
    is_static: bool = False
    is_virtual: bool = False
    is_const: bool = False
    is_constructor: bool = False
    is_destructor: bool = False
