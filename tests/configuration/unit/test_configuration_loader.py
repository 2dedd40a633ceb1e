"""Schema definition loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from tuple_schema.configuration.loader import (
    ConfigurationError,
    load_schema_catalog,
    resolve_descriptor,
)
from tuple_schema.configuration.runtime_settings import ColumnDefinition
from tuple_schema.field_types import STRING_LEN, FieldType


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_schema_definitions(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemas.yaml",
        """
schemas:
  users:
    fields:
      - name: id
        type: int
      - name: email
        type: string
      - type: INT_TYPE
  empty:
    fields: []
""",
    )

    catalog = load_schema_catalog(config_path)

    assert catalog.path == config_path
    assert list(catalog.schemas) == ["users", "empty"]
    assert catalog.schemas["users"].columns == (
        ColumnDefinition(name="id", field_type=FieldType.INT_TYPE),
        ColumnDefinition(name="email", field_type=FieldType.STRING_TYPE),
        ColumnDefinition(name=None, field_type=FieldType.INT_TYPE),
    )
    assert catalog.schemas["empty"].columns == ()


def test_resolved_descriptor_matches_columns(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemas.yaml",
        """
schemas:
  users:
    fields:
      - {name: id, type: int}
      - {name: null, type: string}
""",
    )

    descriptor = resolve_descriptor(load_schema_catalog(config_path), "users")

    assert descriptor.num_fields() == 2
    assert descriptor.get_field_name(0) == "id"
    assert descriptor.get_field_name(1) is None
    assert descriptor.get_size() == 4 + STRING_LEN


def test_loads_json_schema_definitions(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemas.json",
        json.dumps({"schemas": {"points": {"fields": [{"name": "x", "type": "int"}]}}}),
    )

    catalog = load_schema_catalog(config_path)

    assert catalog.schemas["points"].to_descriptor().to_string() == "INT_TYPE(x),"


def test_schema_without_fields_key_is_empty(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "schemas.yaml", "schemas:\n  blank: {}\n")

    descriptor = resolve_descriptor(load_schema_catalog(config_path), "blank")

    assert descriptor.num_fields() == 0


def test_field_names_are_kept_as_written(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemas.yaml",
        "schemas:\n  t:\n    fields:\n"
        "      - {name: '', type: int}\n"
        "      - {name: ' padded ', type: int}\n"
        "      - {name: null, type: int}\n",
    )

    catalog = load_schema_catalog(config_path)
    descriptor = resolve_descriptor(catalog, "t")

    assert [column.name for column in catalog.schemas["t"].columns] == ["", " padded ", None]
    assert descriptor.field_name_to_index("") == 0
    assert descriptor.field_name_to_index(None) == 2


def test_errors_when_file_is_not_utf8(tmp_path: Path) -> None:
    config_path = tmp_path / "schemas.yaml"
    config_path.write_bytes(b"\xff\xfeschemas: {}\n")

    with pytest.raises(ConfigurationError, match="not valid UTF-8"):
        load_schema_catalog(config_path)


def test_errors_when_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_schema_catalog(tmp_path / "missing.yaml")


def test_errors_when_yaml_is_malformed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "schemas.yaml", "schemas: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_schema_catalog(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("", "Configuration section 'schemas' is required"),
        ("- a\n- b\n", "Configuration root must be a mapping"),
        ("schemas: [1, 2]\n", "Configuration section 'schemas' is required"),
        ("schemas:\n  users: 5\n", "Configuration section 'schemas.users' is required"),
        ("schemas:\n  users:\n    fields: abc\n", "schemas.users.fields must be a list"),
        ("schemas:\n  users:\n    fields: [5]\n", r"schemas.users.fields\[0\] must be a mapping"),
        (
            "schemas:\n  users:\n    fields: [{name: a}]\n",
            r"schemas.users.fields\[0\].type must be a string",
        ),
        (
            "schemas:\n  users:\n    fields: [{name: a, type: float}]\n",
            "Unknown field type 'float'",
        ),
        (
            "schemas:\n  users:\n    fields: [{name: 7, type: int}]\n",
            r"schemas.users.fields\[0\].name must be a string",
        ),
        ("schemas:\n  ' ':\n    fields: []\n", "schema name must not be empty"),
    ],
)
def test_errors_when_schema_definitions_invalid(
    tmp_path: Path, contents: str, message: str
) -> None:
    config_path = _write_file(tmp_path / "schemas.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_schema_catalog(config_path)


def test_resolve_descriptor_rejects_unknown_schema(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "schemas.yaml", "schemas:\n  users: {}\n")
    catalog = load_schema_catalog(config_path)

    with pytest.raises(ConfigurationError, match=r"Schema 'orders' is not defined.*known: users"):
        resolve_descriptor(catalog, "orders")
