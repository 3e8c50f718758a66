#!/usr/bin/env python3

"""Progress tracking for batches of builder submissions."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time


class SubmissionTracker:
    """
    Track and report builder submissions with timing statistics.

    Counts committed and failed types and keeps a stack of the submissions
    currently in flight so nested operations show up in log context.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize submission tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.committed_count = 0
        self.failed_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_submission(self, label: str) -> Iterator[None]:
        """
        Track one builder submission with timing.

        Args:
            label: Human readable description of the builder being submitted

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((label, start_time))

        self.logger.debug(f"Submitting {label}")

        try:
            yield
            elapsed = time() - start_time
            self.committed_count += 1
            self.logger.debug(f"Committed {label} in {elapsed:.4f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.failed_count += 1
            self.logger.error(
                f"Failed to commit {self.get_current_context()} after {elapsed:.4f}s: {e}"
            )
            raise
        finally:
            self.operation_stack.pop()

    def report_summary(self) -> None:
        """Report final submission statistics."""
        total_time = time() - self.start_time
        total = self.committed_count + self.failed_count

        self.logger.info("=" * 60)
        self.logger.info("SUBMISSION SUMMARY")
        self.logger.info("=" * 60)
        self.logger.info(f"Total builders: {total}")
        self.logger.info(f"Committed: {self.committed_count}")
        self.logger.info(f"Failed: {self.failed_count}")
        self.logger.info(f"Elapsed: {total_time:.3f}s")

    def get_current_context(self) -> str:
        """
        Get current submission context for logging.

        Returns:
            String describing the submissions in flight
        """
        if not self.operation_stack:
            return "idle"

        return " -> ".join(op[0] for op in self.operation_stack)

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.committed_count = 0
        self.failed_count = 0
        self.operation_stack.clear()
