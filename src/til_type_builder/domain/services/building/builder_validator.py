#!/usr/bin/env python3

"""Local validation rules shared by the builders.

All checks operate on builder state only and raise TypeValidationError
before any catalog call is made.
"""

from collections.abc import Iterable

from ...errors import TypeValidationError, UnsupportedReferenceError
from ...models import (
    INT64_MAX,
    INT64_MIN,
    BitfieldSpec,
    FieldReference,
    FunctionAttributes,
    SelfReference,
)

VALID_ENUM_WIDTHS = (1, 2, 4, 8)


class BuilderValidator:
    """Validation rules for builder configurations.

    All methods are static; builders compose them in their validate().
    """

    @staticmethod
    def require_name(name: str, kind: str) -> None:
        if not name:
            raise TypeValidationError(f"{kind.capitalize()} name cannot be empty")

    @staticmethod
    def find_duplicate(names: Iterable[str], skip_empty: bool = False) -> str | None:
        """Return the first name that repeats an earlier one.

        Args:
            names: Names in declaration order
            skip_empty: Ignore empty names (anonymous parameters)

        Returns:
            The repeated name, or None if all names are unique
        """
        seen: set[str] = set()
        for name in names:
            if skip_empty and not name:
                continue
            if name in seen:
                return name
            seen.add(name)
        return None

    @staticmethod
    def require_non_negative(value: int, what: str) -> None:
        if value < 0:
            raise TypeValidationError(f"{what} cannot be negative (got {value})")

    @staticmethod
    def bitfields_overlap(first: BitfieldSpec, second: BitfieldSpec) -> bool:
        """Check whether two bitfields claim any common bits.

        Symmetric: a range overlaps when either range's start falls inside
        the other, either range's end falls inside the other, or one range
        contains the other including shared boundaries. Adjacent ranges such
        as [0,4) and [4,8) do not overlap.
        """
        return _overlaps_one_way(first, second) or _overlaps_one_way(second, first)

    @staticmethod
    def check_bitfields(bitfields: list[BitfieldSpec], owner: str) -> None:
        for bitfield in bitfields:
            BuilderValidator.require_non_negative(
                bitfield.bit_offset, f"Bit offset of '{bitfield.name}'"
            )
            BuilderValidator.require_non_negative(
                bitfield.bit_width, f"Bit width of '{bitfield.name}'"
            )

        for index, bitfield in enumerate(bitfields):
            for earlier in bitfields[:index]:
                if BuilderValidator.bitfields_overlap(bitfield, earlier):
                    raise TypeValidationError(
                        f"Bitfield '{bitfield.name}' (bits {bitfield.bit_offset}-"
                        f"{bitfield.bit_end}) overlaps '{earlier.name}' (bits "
                        f"{earlier.bit_offset}-{earlier.bit_end}) in {owner}"
                    )

    @staticmethod
    def check_enum_width(width: int) -> None:
        if width not in VALID_ENUM_WIDTHS:
            raise TypeValidationError(
                f"Invalid enum width {width}. Must be 1, 2, 4, or 8"
            )

    @staticmethod
    def check_enum_value(name: str, value: int) -> None:
        if not INT64_MIN <= value <= INT64_MAX:
            raise TypeValidationError(
                f"Value {value} of enum member '{name}' does not fit in 64 bits"
            )

    @staticmethod
    def check_attributes(attributes: FunctionAttributes) -> None:
        if attributes.is_constructor and attributes.is_destructor:
            raise TypeValidationError(
                "Function cannot be both constructor and destructor"
            )

    @staticmethod
    def reject_self_reference(reference: FieldReference | None, role: str) -> None:
        if isinstance(reference, SelfReference):
            raise UnsupportedReferenceError(
                f"Self references are not supported in {role}"
            )


def _overlaps_one_way(first: BitfieldSpec, second: BitfieldSpec) -> bool:
    start, end = first.bit_offset, first.bit_end
    other_start, other_end = second.bit_offset, second.bit_end
    return (
        (other_start <= start < other_end)
        or (other_start < end <= other_end)
        or (start <= other_start and end >= other_end)
    )
