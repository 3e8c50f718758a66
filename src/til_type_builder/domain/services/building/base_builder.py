#!/usr/bin/env python3

"""Base builder abstract class.

Every builder follows the same protocol: chained configuration calls that
only touch local state, then a single submit() that validates, issues a
bounded sequence of catalog calls and returns a handle. A builder is consumed
by submit(), whether it succeeds or not.
"""

from abc import ABC, abstractmethod

from ....infrastructure.logging import get_logger, log_timing
from ...errors import BuilderConsumedError, CatalogError, TypeBuildError
from ...models import INVALID_ORDINAL, TypeHandle
from ...repositories import TypeCatalog

logger = get_logger(__name__)


class TypeBuilder(ABC):
    """Abstract base class for type builders.

    Subclasses implement validate() for their local invariants and _commit()
    for their catalog call sequence.
    """

    kind = "type"

    def __init__(self) -> None:
        self._consumed = False
        self._pending_shells: list[int] = []

    @property
    def consumed(self) -> bool:
        """True once submit() has been called."""
        return self._consumed

    def describe(self) -> str:
        """Short human readable label used in log and error messages."""
        return self.kind

    @abstractmethod
    def validate(self) -> None:
        """Check local invariants without touching any catalog.

        Raises:
            TypeValidationError: If the builder configuration is invalid
        """

    @abstractmethod
    def _commit(self, catalog: TypeCatalog) -> TypeHandle:
        """Issue the catalog calls for an already validated builder."""

    @log_timing
    def submit(self, catalog: TypeCatalog) -> TypeHandle:
        """Validate the builder and commit it to the catalog.

        Args:
            catalog: Catalog receiving the new type

        Returns:
            Handle of the committed type

        Raises:
            BuilderConsumedError: If the builder was already submitted
            TypeValidationError: If local validation fails; the catalog is untouched
            CatalogError: If a catalog primitive fails; earlier steps are not undone
        """
        self._ensure_open()
        self._consumed = True
        label = self.describe()

        self.validate()
        logger.debug(f"Validated {label}")

        try:
            handle = self._commit(catalog)
        except TypeBuildError as e:
            logger.error(f"Submission of {label} failed: {e}")
            raise

        logger.info(f"Committed {label} as {handle}")
        return handle

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(f"{self.describe()} has already been submitted")

    def _expect_ordinal(self, ordinal: int, operation: str, message: str) -> int:
        """Return ordinal, or raise CatalogError if it is the failure sentinel."""
        if ordinal == INVALID_ORDINAL:
            raise self._catalog_error(message, operation)
        return ordinal

    def _expect_success(self, ok: bool, operation: str, message: str) -> None:
        if not ok:
            raise self._catalog_error(message, operation)

    def _catalog_error(self, message: str, operation: str) -> CatalogError:
        return CatalogError(message, operation, tuple(self._pending_shells))

    def _create_shell(self, ordinal: int, operation: str, message: str) -> int:
        """Record a freshly created shell so failures can report it."""
        ordinal = self._expect_ordinal(ordinal, operation, message)
        self._pending_shells.append(ordinal)
        logger.debug(f"Created {self.describe()} shell #{ordinal}")
        return ordinal

    def _finalize_shell(self, catalog: TypeCatalog, ordinal: int) -> TypeHandle:
        self._expect_success(
            catalog.finalize(ordinal),
            "finalize",
            f"Failed to finalize {self.describe()}",
        )
        self._pending_shells.remove(ordinal)
        return TypeHandle.from_ordinal(ordinal)
