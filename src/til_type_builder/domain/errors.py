#!/usr/bin/env python3

"""Exceptions raised while building and committing types.

Every failure a caller can observe from a builder derives from
TypeBuildError. Validation errors are raised before the catalog is touched;
catalog errors are raised mid-submission and may leave an unfinalized shell
behind, which is reported through CatalogError.pending_ordinals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.type_handle import TypeHandle
    from .repositories.type_catalog import TypeCatalog


class InvalidHandleError(ValueError):
    """An ordinal that cannot name a committed type was wrapped in a handle."""


class TypeBuildError(Exception):
    """Base class for every builder failure."""


class TypeValidationError(TypeBuildError, ValueError):
    """Builder state is invalid; no catalog call has been made."""


class BuilderConsumedError(TypeValidationError):
    """A builder was configured or submitted after it had been submitted."""


class UnsupportedReferenceError(TypeValidationError):
    """A self reference was used where no aggregate is under construction."""


class CatalogError(TypeBuildError):
    """A catalog primitive returned its failure sentinel.

    Attributes:
        operation: Name of the catalog operation that failed
        pending_ordinals: Shells created during the failed submission that
            were never finalized
    """

    def __init__(
        self,
        message: str,
        operation: str,
        pending_ordinals: tuple[int, ...] = (),
    ):
        super().__init__(message)
        self.operation = operation
        self.pending_ordinals = pending_ordinals

    def finalize_pending(self, catalog: TypeCatalog) -> list[TypeHandle]:
        """Finalize the partially built shells left by the failed submission.

        Args:
            catalog: Catalog the failed submission ran against

        Returns:
            Handles for the shells the catalog agreed to finalize
        """
        from .models.type_handle import TypeHandle

        return [
            TypeHandle.from_ordinal(ordinal)
            for ordinal in self.pending_ordinals
            if catalog.finalize(ordinal)
        ]
