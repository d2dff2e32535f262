"""Utility to surface the report JSON schemas and examples."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft7Validator, ValidationError

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"
EXAMPLE_DIR = SCHEMA_DIR / "examples"

SchemaValidationError = ValidationError
"""Alias for jsonschema.ValidationError.
Keeps callers unaware of the implementation.
"""

REPORT_SCHEMA = "loop_findings_report_v0.1"

SCHEMA_FILES = {
    REPORT_SCHEMA: "loop_findings_report_schema_v0.1.json",
}

EXAMPLE_FILES = {
    "loop_findings_report_example_min": "loop_findings_report_example_min.json",
    "loop_findings_report_example_empty": "loop_findings_report_example_empty.json",
}

_SCHEMAS: dict[str, Mapping[str, Any]] = {}
_EXAMPLES: dict[str, Any] = {}


def _load_json_file(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def get_schema(name: str) -> Mapping[str, Any]:
    """Return the JSON schema with the given registry name."""

    if name not in _SCHEMAS:
        _SCHEMAS[name] = _load_json_file(SCHEMA_DIR / SCHEMA_FILES[name])
    return _SCHEMAS[name]


def get_example(name: str) -> Any:
    """Return a representative example document by name."""

    if name not in _EXAMPLES:
        _EXAMPLES[name] = _load_json_file(EXAMPLE_DIR / EXAMPLE_FILES[name])
    return _EXAMPLES[name]


def validate(name: str, instance: Any) -> None:
    """Validate an instance against a named schema."""

    Draft7Validator(get_schema(name)).validate(instance)
