"""Enums for model fields."""

from enum import Enum

from mycap.errors import InvalidArgumentError


class GroupType(str, Enum):
    """Kinds of group a user can open."""

    GROUP = "Group"
    CONFERENCE = "Conference"

    @classmethod
    def parse(cls, value: "str | GroupType") -> "GroupType":
        """Convert a raw value to a GroupType, rejecting anything else."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError("Group type not specified.") from None
