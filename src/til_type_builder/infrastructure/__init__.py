#!/usr/bin/env python3

"""Infrastructure layer: catalog implementations, configuration and logging."""

from .elf_platform import DEFAULT_PLATFORM, ELFClass, PlatformDetector, TargetPlatform

__all__ = [
    "DEFAULT_PLATFORM",
    "ELFClass",
    "PlatformDetector",
    "TargetPlatform",
]
