# workflow_validator/core/checker.py
from __future__ import annotations

"""Per-file workflow check
---------------------------
Folds properties errors and workflow schema violations into one immutable
WorkflowRecord. Nothing raised while checking a file escapes `check()`.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

from workflow_validator.core.properties import PropertiesValidator
from workflow_validator.core.workflow_loader import load_workflow_document
from workflow_validator.schemas import build_validator, violations
from workflow_validator.utils.logger import get_logger


@dataclass(frozen=True)
class WorkflowRecord:
    """Outcome of checking one workflow file; `id` is the workflow path."""
    id: str
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


def describe_error(exc: BaseException) -> str:
    return f"{exc.__class__.__name__}: {exc}"


class WorkflowChecker:
    def __init__(self, properties: PropertiesValidator, workflow_schema: dict[str, Any]):
        self.properties = properties
        self._validator: Draft7Validator = build_validator(workflow_schema)
        self.log = get_logger(__name__)

    async def check(self, workflow_path: Path | str, properties_path: Path | str) -> WorkflowRecord:
        errors: list[str] = []

        try:
            errors.extend(await self.properties.validate(properties_path))
        except Exception as e:
            errors = [describe_error(e)]

        try:
            body = await load_workflow_document(workflow_path)
            errors.extend(violations(self._validator, body))
        except Exception as e:
            errors.append(describe_error(e))

        self.log.debug(f"Checked {workflow_path}: {len(errors)} error(s)", extra={"workflow": workflow_path})
        return WorkflowRecord(id=str(workflow_path), errors=tuple(errors))


__all__ = ["WorkflowRecord", "WorkflowChecker", "describe_error"]
