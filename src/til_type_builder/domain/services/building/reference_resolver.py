#!/usr/bin/env python3

"""Resolution of field references to catalog ordinals."""

from ....infrastructure.logging import get_logger
from ...errors import UnsupportedReferenceError
from ...models import Existing, FieldReference, Primitive, SelfReference
from ...repositories import TypeCatalog

logger = get_logger(__name__)


class ReferenceResolver:
    """Turns field references into ordinals during a submission.

    A resolver built without a self ordinal rejects SelfReference; one built
    for an aggregate shell resolves it to a pointer to that shell.

    Resolution returns the raw ordinal, so a failing primitive lookup comes
    back as 0 for the caller to report in its own terms.
    """

    def __init__(self, catalog: TypeCatalog, self_ordinal: int | None = None):
        self.catalog = catalog
        self.self_ordinal = self_ordinal

    def resolve(self, reference: FieldReference) -> int:
        if isinstance(reference, Primitive):
            return self.catalog.primitive_ordinal(reference.kind.basic_kind_code)
        if isinstance(reference, Existing):
            return reference.handle.ordinal
        if isinstance(reference, SelfReference):
            if self.self_ordinal is None:
                raise UnsupportedReferenceError(
                    "Self references are only supported inside a struct or union"
                )
            ordinal = self.catalog.create_pointer(self.self_ordinal)
            logger.debug(f"Resolved self reference to pointer #{ordinal}")
            return ordinal
        raise TypeError(f"Unknown field reference {reference!r}")
