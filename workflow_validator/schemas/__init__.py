# workflow_validator/schemas/__init__.py
from __future__ import annotations

"""Schema documents
-------------------
The properties (sidecar metadata) schema and the packaged workflow body schema,
plus the helpers that turn jsonschema violations into report lines.
"""

import json
from pathlib import Path
from typing import Any, Iterable, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError


WORKFLOW_SCHEMA_PATH = Path(__file__).with_name("workflow-schema.json")

PROPERTIES_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["name", "description", "iconName", "categories"],
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "creator": {"type": "string"},
        "iconName": {"type": "string"},
        "categories": {
            "anyOf": [
                {"type": "array", "items": {"type": "string"}},
                {"type": "null"},
            ]
        },
    },
}


def load_workflow_schema(path: Optional[Path | str] = None) -> dict[str, Any]:
    """Read the workflow schema document; defaults to the packaged copy."""
    p = Path(path) if path is not None else WORKFLOW_SCHEMA_PATH
    return json.loads(p.read_text(encoding="utf-8"))


def build_validator(schema: dict[str, Any]) -> Draft7Validator:
    Draft7Validator.check_schema(schema)
    return Draft7Validator(schema)


def instance_path(path: Iterable[Any]) -> str:
    """Render a jsonschema path as `instance.jobs.build.steps[0]`."""
    out = "instance"
    for part in path:
        out += f"[{part}]" if isinstance(part, int) else f".{part}"
    return out


def format_violation(error: ValidationError) -> str:
    return f"{instance_path(error.absolute_path)}: {error.message}"


def violations(validator: Draft7Validator, instance: Any) -> list[str]:
    """One report line per schema violation, in validation order."""
    return [format_violation(e) for e in validator.iter_errors(instance)]


__all__ = [
    "PROPERTIES_SCHEMA",
    "WORKFLOW_SCHEMA_PATH",
    "load_workflow_schema",
    "build_validator",
    "instance_path",
    "format_violation",
    "violations",
]
