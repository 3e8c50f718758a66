"""Configuration management for the type builder."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..elf_platform import PlatformDetector

DEFAULT_FALLBACK_FIELD_SIZE = 8
VALID_POINTER_SIZES = (4, 8)


@dataclass
class BuilderConfig:
    """Configuration for builder layout and logging."""

    fallback_field_size: int = DEFAULT_FALLBACK_FIELD_SIZE
    pointer_size: int = 8
    verbose: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "BuilderConfig":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            BuilderConfig object

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        fallback_str = os.getenv(
            "TYPE_BUILDER_FALLBACK_FIELD_SIZE", str(DEFAULT_FALLBACK_FIELD_SIZE)
        )
        pointer_str = os.getenv("TYPE_BUILDER_POINTER_SIZE", "8")
        verbose_str = os.getenv("TYPE_BUILDER_VERBOSE", "false").lower()
        log_dir_str = os.getenv("TYPE_BUILDER_LOG_DIR", "logs")

        try:
            fallback_field_size = int(fallback_str)
            pointer_size = int(pointer_str)
        except ValueError as e:
            raise ValueError(f"Invalid numeric setting in environment: {e}") from e

        return cls(
            fallback_field_size=fallback_field_size,
            pointer_size=pointer_size,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str),
        )

    @classmethod
    def from_elf(cls, elf_file_path: Path, verbose: bool = False) -> "BuilderConfig":
        """
        Derive layout settings from the binary being annotated.

        Both the fallback stride and the pointer width follow the ELF class,
        so a 32-bit target lays out unknown-size fields 4 bytes apart.

        Args:
            elf_file_path: Path to the target ELF file
            verbose: Enable verbose output

        Returns:
            BuilderConfig object

        Raises:
            ValueError: If the file is not a readable ELF image
        """
        platform = PlatformDetector.detect(elf_file_path)
        return cls(
            fallback_field_size=platform.pointer_size,
            pointer_size=platform.pointer_size,
            verbose=verbose,
        )

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.fallback_field_size <= 0:
            raise ValueError(
                f"Fallback field size must be positive, got {self.fallback_field_size}"
            )

        if self.pointer_size not in VALID_POINTER_SIZES:
            raise ValueError(
                f"Pointer size must be one of {VALID_POINTER_SIZES}, got {self.pointer_size}"
            )

    def ensure_log_dir(self) -> None:
        """Create the log directory if it doesn't exist."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
