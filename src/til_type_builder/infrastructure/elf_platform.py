#!/usr/bin/env python3

"""Target platform detection from ELF binaries.

The builder lays out auto-offset struct fields with a fallback stride when the
catalog cannot report a field's size. That stride should match the pointer
width of the binary under analysis, which is read here from:
- ELF class (32-bit vs 64-bit)
- Machine architecture (e.g., x86-64, PowerPC64, ARM)
- Endianness (little-endian vs big-endian)
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from elftools.common.exceptions import ELFError
from elftools.elf.elffile import ELFFile

from .logging import get_logger

logger = get_logger(__name__)


class ELFClass(Enum):
    """ELF word size."""

    ELF32 = 32
    ELF64 = 64

    def __str__(self) -> str:
        """Return the conventional ELFCLASS name."""
        return f"ELFCLASS{self.value}"


@dataclass(frozen=True)
class TargetPlatform:
    """Layout-relevant characteristics of an analysis target."""

    elf_class: ELFClass
    machine: str
    little_endian: bool

    @property
    def pointer_size(self) -> int:
        """Pointer width in bytes."""
        return 8 if self.elf_class is ELFClass.ELF64 else 4


# Assumed when no binary is available; matches the historical fallback stride.
DEFAULT_PLATFORM = TargetPlatform(
    elf_class=ELFClass.ELF64, machine="EM_X86_64", little_endian=True
)


class PlatformDetector:
    """Detects the target platform of an ELF file."""

    @staticmethod
    def detect(elf_path: Path | str) -> TargetPlatform:
        """Detect platform from ELF file.

        Args:
            elf_path: Path to the ELF file

        Returns:
            Detected platform

        Raises:
            ValueError: If the file cannot be read or is not an ELF image
        """
        try:
            with open(elf_path, "rb") as f:
                elf = ELFFile(f)  # type: ignore[no-untyped-call]

                machine_str = elf.header["e_machine"]
                is_little_endian: bool = elf.little_endian
                elf_class = ELFClass(elf.elfclass)
        except (OSError, ELFError) as e:
            raise ValueError(f"Cannot detect platform from {elf_path}: {e}") from e

        logger.debug(
            f"ELF Characteristics: class={elf_class}, machine={machine_str}, "
            f"little_endian={is_little_endian}"
        )

        platform = TargetPlatform(
            elf_class=elf_class,
            machine=machine_str,
            little_endian=is_little_endian,
        )
        logger.info(
            f"Detected {elf_class} {machine_str} target "
            f"(pointer size {platform.pointer_size} bytes)"
        )
        return platform
