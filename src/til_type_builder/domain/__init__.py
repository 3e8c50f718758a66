#!/usr/bin/env python3

"""Domain layer: type descriptions, builders and the catalog interface."""

from . import errors, models, repositories, services

__all__ = [
    "errors",
    "models",
    "repositories",
    "services",
]
