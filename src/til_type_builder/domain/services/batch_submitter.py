#!/usr/bin/env python3

"""Ordered submission of several builders against one catalog.

Builders are submitted one after another, never concurrently. A failing
builder does not undo the ones committed before it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ...infrastructure.logging import SubmissionTracker, get_logger, log_timing
from ..errors import TypeBuildError
from ..models import TypeHandle
from ..repositories import TypeCatalog
from .building import TypeBuilder

logger = get_logger(__name__)


@dataclass
class BatchResult:
    """Outcome of a batch submission."""

    handles: dict[str, TypeHandle] = field(default_factory=dict)
    failures: list[tuple[str, TypeBuildError]] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.handles)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


class BatchSubmitter:
    """Submits builders in order and collects handles and failures."""

    def __init__(self, catalog: TypeCatalog):
        self.catalog = catalog
        self.tracker = SubmissionTracker(logger)

    @log_timing
    def submit_all(
        self, builders: Iterable[TypeBuilder], stop_on_error: bool = False
    ) -> BatchResult:
        """Submit every builder in declaration order.

        Args:
            builders: Builders to submit; each is consumed
            stop_on_error: Stop at the first failure instead of continuing

        Returns:
            BatchResult keyed by each builder's description. Repeated
            descriptions get a numeric suffix.
        """
        result = BatchResult()
        self.tracker.reset()

        for index, builder in enumerate(builders, 1):
            label = self._unique_label(result, builder.describe())
            logger.info(f"[{index}] Submitting {label}")

            try:
                with self.tracker.track_submission(label):
                    handle = builder.submit(self.catalog)
            except TypeBuildError as e:
                result.failures.append((label, e))
                if stop_on_error:
                    logger.warning(f"Stopping batch after failure of {label}")
                    break
                continue

            result.handles[label] = handle

        self.tracker.report_summary()
        if result.failures:
            logger.info("Failed builders:")
            for label, error in result.failures:
                logger.info(f"  - {label}: {error}")

        return result

    @staticmethod
    def _unique_label(result: BatchResult, label: str) -> str:
        taken = set(result.handles) | {name for name, _ in result.failures}
        if label not in taken:
            return label
        suffix = 2
        while f"{label} [{suffix}]" in taken:
            suffix += 1
        return f"{label} [{suffix}]"
