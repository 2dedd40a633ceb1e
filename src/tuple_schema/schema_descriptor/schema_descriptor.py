"""Fixed-layout row schema descriptor."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any, NoReturn

from tuple_schema.field_types import FieldType

from .descriptor_models import FieldDescriptor, SchemaComparison

logger = logging.getLogger(__name__)


class SchemaDescriptorError(Exception):
    """Base class for schema descriptor failures."""


class FieldIndexOutOfRange(SchemaDescriptorError, IndexError):
    """Raised when a field position lies outside ``[0, num_fields())``."""


class FieldNotFound(SchemaDescriptorError, LookupError):
    """Raised when no field carries the requested name."""


class UnsupportedOperation(SchemaDescriptorError, TypeError):
    """Raised for capabilities a schema descriptor does not offer."""


class SchemaDescriptor:
    """Ordered, immutable list of field type/name pairs plus the row byte size.

    Fields are stored in construction order and the total size is computed
    once. Zero-field descriptors are allowed.
    """

    __slots__ = ("_fields", "_size")

    _fields: tuple[FieldDescriptor, ...]
    _size: int

    def __init__(
        self,
        types: Sequence[FieldType],
        names: Sequence[str | None] | None = None,
    ) -> None:
        fields = tuple(
            FieldDescriptor(field_type=field_type, name=_name_at(names, index))
            for index, field_type in enumerate(types)
        )
        object.__setattr__(self, "_fields", fields)
        object.__setattr__(self, "_size", sum(field.field_type.length for field in fields))

    @classmethod
    def create(
        cls,
        types: Sequence[FieldType],
        names: Sequence[str | None] | None = None,
    ) -> SchemaDescriptor:
        """Build a descriptor; names are absent when ``names`` is omitted or too short."""
        return cls(types, names)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'.")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot delete '{name}'.")

    def num_fields(self) -> int:
        """Return the number of fields (may be zero)."""
        return len(self._fields)

    def get_field_name(self, index: int) -> str | None:
        """Return the possibly absent name of the field at ``index``."""
        return self._field_at(index).name

    def get_field_type(self, index: int) -> FieldType:
        """Return the type of the field at ``index``."""
        return self._field_at(index).field_type

    def field_name_to_index(self, name: str | None) -> int:
        """Return the first position whose name equals ``name``.

        An absent name only matches another absent name.
        """
        for index, field in enumerate(self._fields):
            if field.name == name:
                return index
        raise FieldNotFound(f"No field named {name!r} in schema '{self}'.")

    def get_size(self) -> int:
        """Return the byte size of a row matching this descriptor."""
        return self._size

    def fields(self) -> Iterator[FieldDescriptor]:
        """Yield field descriptors in index order."""
        return iter(self._fields)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return self.fields()

    def __len__(self) -> int:
        return self.num_fields()

    @staticmethod
    def merge(first: SchemaDescriptor, second: SchemaDescriptor) -> SchemaDescriptor:
        """Concatenate two descriptors, ``first`` then ``second``.

        When one side has no fields the other side is returned as-is; the
        result then is the very same instance.
        """
        if second.num_fields() == 0:
            logger.debug("Merge with empty right-hand schema returns left operand.")
            return first
        if first.num_fields() == 0:
            logger.debug("Merge with empty left-hand schema returns right operand.")
            return second

        combined = first._fields + second._fields
        merged = SchemaDescriptor(
            [field.field_type for field in combined],
            [field.name for field in combined],
        )
        logger.debug(
            "Merged schemas of %d and %d fields into %d bytes.",
            first.num_fields(),
            second.num_fields(),
            merged.get_size(),
        )
        return merged

    def equals(
        self, other: object, mode: SchemaComparison = SchemaComparison.BYTE_WIDTH
    ) -> bool:
        """Compare field by field.

        ``BYTE_WIDTH`` treats two positions as equal when their types occupy
        the same number of bytes; ``EXACT_TYPE`` requires the same kind.
        Names never take part in the comparison.
        """
        if not isinstance(other, SchemaDescriptor):
            return False
        if self.num_fields() != other.num_fields():
            return False
        if mode is SchemaComparison.EXACT_TYPE:
            return all(
                mine.field_type is theirs.field_type
                for mine, theirs in zip(self._fields, other._fields, strict=True)
            )
        return all(
            mine.field_type.length == theirs.field_type.length
            for mine, theirs in zip(self._fields, other._fields, strict=True)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaDescriptor):
            return NotImplemented
        return self.equals(other)

    def hash_code(self) -> int:
        """Hashing is not offered for schema descriptors."""
        raise UnsupportedOperation("SchemaDescriptor does not support hashing.")

    def __hash__(self) -> int:
        return self.hash_code()

    def to_string(self) -> str:
        """Render every field as ``<type>(<name>),`` in index order."""
        return "".join(f"{field}," for field in self._fields)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r}, size={self._size})"

    def _field_at(self, index: int) -> FieldDescriptor:
        if index < 0 or index >= len(self._fields):
            raise FieldIndexOutOfRange(
                f"Field index {index} out of range [0, {len(self._fields)})."
            )
        return self._fields[index]


def merge_descriptors(first: SchemaDescriptor, second: SchemaDescriptor) -> SchemaDescriptor:
    """Module-level alias for :meth:`SchemaDescriptor.merge`."""
    return SchemaDescriptor.merge(first, second)


def _name_at(names: Sequence[str | None] | None, index: int) -> str | None:
    if names is None or index >= len(names):
        return None
    return names[index]
