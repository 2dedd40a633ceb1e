"""Field type exports."""

from .type_catalog import STRING_LEN, FieldType, UnknownFieldTypeError

__all__ = ["STRING_LEN", "FieldType", "UnknownFieldTypeError"]
