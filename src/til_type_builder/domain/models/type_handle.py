#!/usr/bin/env python3

"""Handle to a type committed to the external catalog."""

from dataclasses import dataclass

from ..errors import InvalidHandleError

# Returned by every catalog primitive on failure.
INVALID_ORDINAL = 0


@dataclass(frozen=True)
class TypeHandle:
    """Opaque, copyable reference to a committed type.

    Validity is tied to the catalog that issued the ordinal; the handle
    itself carries no ownership.
    """

    ordinal: int

    def __post_init__(self) -> None:
        if self.ordinal <= INVALID_ORDINAL:
            raise InvalidHandleError(f"Ordinal {self.ordinal} does not name a committed type")

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "TypeHandle":
        """Wrap an ordinal previously returned by a catalog.

        Args:
            ordinal: Catalog ordinal

        Returns:
            TypeHandle for the ordinal

        Raises:
            InvalidHandleError: If the ordinal is the failure sentinel or negative
        """
        return cls(ordinal)

    def __str__(self) -> str:
        return f"#{self.ordinal}"
