"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schemas.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Schema definitions for tuple-schema.
# Each entry under `schemas` describes one fixed-layout row.
# Field types: int (4 bytes) or string (fixed width).

schemas:
  example:
    # Fields are laid out in the order listed here.
    fields:
      - name: "id"
        type: int
      - name: "label"
        type: string
      # Omit `name` (or set it to null) for an unnamed field.
      - type: int
"""


def build_placeholder_configuration() -> str:
    """Build a YAML schema definition file with an example schema and guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the example schema definition file to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Schema definition file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
