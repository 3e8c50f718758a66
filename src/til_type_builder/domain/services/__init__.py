#!/usr/bin/env python3

"""Domain services layer."""

from . import building
from .batch_submitter import BatchResult, BatchSubmitter

__all__ = [
    "BatchResult",
    "BatchSubmitter",
    "building",
]
