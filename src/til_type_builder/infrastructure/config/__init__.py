"""Infrastructure configuration module."""

from .builder_config import BuilderConfig

__all__ = ["BuilderConfig"]
