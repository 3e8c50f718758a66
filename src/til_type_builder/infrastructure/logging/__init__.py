#!/usr/bin/env python3

"""Logging infrastructure for the type builder."""

from .logger_setup import LoggerSetup
from .submission_tracker import SubmissionTracker
from .utils import get_logger, log_timing

__all__ = [
    "LoggerSetup",
    "SubmissionTracker",
    "get_logger",
    "log_timing",
]
