#!/usr/bin/env python3

"""Calling conventions and their catalog codes."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class CallingConvention(Enum):
    """Calling conventions known to the catalog, valued by catalog code."""

    UNKNOWN = 0x10
    CDECL = 0x30
    STDCALL = 0x50
    PASCAL = 0x60
    FASTCALL = 0x70
    THISCALL = 0x80
    SWIFT = 0x90
    GOLANG = 0xB0


@dataclass(frozen=True)
class CustomCallingConvention:
    """Raw catalog code for a convention the enumeration does not name."""

    code: int


CallingConventionLike = Union[CallingConvention, CustomCallingConvention]


def calling_convention_code(cc: CallingConventionLike) -> int:
    """Map a calling convention to the code passed to the catalog."""
    if isinstance(cc, CustomCallingConvention):
        return cc.code
    return cc.value
