"""Fixed-width field kinds."""

from __future__ import annotations

from enum import Enum

STRING_LEN = 128

_INT_LEN = 4


class UnknownFieldTypeError(ValueError):
    """Raised when a field type label does not name a known kind."""


class FieldType(Enum):
    """Closed set of field kinds, each with a statically known byte width."""

    INT_TYPE = "int"
    STRING_TYPE = "string"

    @property
    def length(self) -> int:
        """Return the fixed number of bytes a value of this kind occupies."""
        if self is FieldType.INT_TYPE:
            return _INT_LEN
        return STRING_LEN

    @classmethod
    def from_label(cls, label: str) -> FieldType:
        """Resolve labels such as ``int`` or ``STRING_TYPE`` to a member."""
        normalized = label.strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        known = ", ".join(member.value for member in cls)
        raise UnknownFieldTypeError(f"Unknown field type '{label}' (expected one of: {known}).")

    def __str__(self) -> str:
        return self.name
