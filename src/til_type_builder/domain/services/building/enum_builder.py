#!/usr/bin/env python3

"""Enumeration builder."""

from ....infrastructure.logging import get_logger
from ...errors import TypeValidationError
from ...models import EnumMemberSpec, TypeHandle, wrap_int64
from ...repositories import TypeCatalog
from .base_builder import TypeBuilder
from .builder_validator import BuilderValidator

logger = get_logger(__name__)


class EnumBuilder(TypeBuilder):
    """Builder for enum types with a fixed byte width (1, 2, 4 or 8)."""

    kind = "enum"

    def __init__(self, name: str, width: int):
        super().__init__()
        self.name = name
        self.width = width
        self.members: list[EnumMemberSpec] = []

    def describe(self) -> str:
        return f"enum '{self.name}'"

    def member(self, name: str, value: int) -> "EnumBuilder":
        """Add a member with an explicit value."""
        self._ensure_open()
        self.members.append(EnumMemberSpec(name=name, value=value))
        return self

    def auto_member(self, name: str) -> "EnumBuilder":
        """Add a member valued one past the previous member, or 0 if first.

        The increment wraps in signed 64-bit arithmetic and ignores the
        enum width.
        """
        self._ensure_open()
        value = wrap_int64(self.members[-1].value + 1) if self.members else 0
        self.members.append(EnumMemberSpec(name=name, value=value))
        return self

    def validate(self) -> None:
        BuilderValidator.require_name(self.name, self.kind)
        BuilderValidator.check_enum_width(self.width)

        duplicate = BuilderValidator.find_duplicate(m.name for m in self.members)
        if duplicate is not None:
            raise TypeValidationError(
                f"Duplicate enum member name '{duplicate}' in {self.name}"
            )

        for member in self.members:
            BuilderValidator.check_enum_value(member.name, member.value)

    def _commit(self, catalog: TypeCatalog) -> TypeHandle:
        shell = self._create_shell(
            catalog.create_enum(self.name, self.width),
            "create_enum",
            f"Failed to create {self.describe()}",
        )

        for member in self.members:
            self._expect_success(
                catalog.add_enum_member(shell, member.name, member.value),
                "add_enum_member",
                f"Failed to add member '{member.name}' to enum '{self.name}'",
            )
            logger.debug(f"Added enum member {member.name} = {member.value}")

        return self._finalize_shell(catalog, shell)
