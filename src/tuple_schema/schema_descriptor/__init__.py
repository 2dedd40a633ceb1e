"""Schema descriptor exports."""

from .descriptor_models import FieldDescriptor, SchemaComparison
from .schema_descriptor import (
    FieldIndexOutOfRange,
    FieldNotFound,
    SchemaDescriptor,
    SchemaDescriptorError,
    UnsupportedOperation,
    merge_descriptors,
)

__all__ = [
    "FieldDescriptor",
    "SchemaComparison",
    "FieldIndexOutOfRange",
    "FieldNotFound",
    "SchemaDescriptor",
    "SchemaDescriptorError",
    "UnsupportedOperation",
    "merge_descriptors",
]
