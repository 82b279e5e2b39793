# workflow_validator/core/properties.py
from __future__ import annotations

"""Workflow properties (sidecar metadata)
-----------------------------------------
Validates `<folder>/properties/<type>.properties.json` against the properties
schema and checks that custom icons exist on disk.
"""

import json
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from workflow_validator.schemas import PROPERTIES_SCHEMA, build_validator, violations
from workflow_validator.utils.files import exists, read_text
from workflow_validator.utils.logger import get_logger


class WorkflowProperties(BaseModel):
    """Display attributes of one workflow, as shown in the template picker."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    creator: Optional[str] = None
    icon_name: str = Field(..., alias="iconName")
    categories: Optional[list[str]] = Field(...)


async def read_properties_document(path: Path | str) -> Any:
    """Raw parsed JSON. Raises OSError / json.JSONDecodeError."""
    return json.loads(await read_text(path))


async def load_properties(path: Path | str) -> WorkflowProperties:
    data = await read_properties_document(path)
    try:
        return WorkflowProperties.model_validate(data)
    except ValidationError as ve:
        lines = [f"Invalid properties '{path}':"]
        for e in ve.errors():
            loc = ".".join(str(p) for p in e.get("loc", []))
            lines.append(f"  - {loc or '<root>'}: {e.get('msg', 'invalid value')}")
        raise ValueError("\n".join(lines)) from ve


class PropertiesValidator:
    def __init__(
        self,
        icons_dir: Path,
        *,
        builtin_icon_prefix: str = "octicon",
        schema: Optional[dict[str, Any]] = None,
    ):
        self.icons_dir = Path(icons_dir)
        self.builtin_icon_prefix = builtin_icon_prefix
        self._validator: Draft7Validator = build_validator(schema or PROPERTIES_SCHEMA)
        self.log = get_logger(__name__)

    def schema_errors(self, data: Any) -> list[str]:
        return violations(self._validator, data)

    def icon_path(self, icon_name: str) -> Path:
        return self.icons_dir / f"{icon_name}.svg"

    async def icon_errors(self, data: Any) -> list[str]:
        icon_name = data.get("iconName") if isinstance(data, dict) else None
        if not icon_name or not isinstance(icon_name, str):
            return []
        if icon_name.startswith(self.builtin_icon_prefix):
            return []
        if await exists(self.icon_path(icon_name)):
            return []
        self.log.debug(f"Icon not found: {self.icon_path(icon_name)}")
        return [f"No icon named {icon_name} found"]

    async def validate(self, path: Path | str) -> list[str]:
        """
        Schema violations followed by the missing-icon error, if any.
        Read and JSON parse failures propagate to the caller.
        """
        data = await read_properties_document(path)
        return self.schema_errors(data) + await self.icon_errors(data)


__all__ = [
    "WorkflowProperties",
    "PropertiesValidator",
    "load_properties",
    "read_properties_document",
]
