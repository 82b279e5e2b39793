# workflow_validator/core/scanner.py
from __future__ import annotations

from pathlib import Path
from typing import AsyncIterator, Iterable

from workflow_validator.core.checker import WorkflowChecker, WorkflowRecord
from workflow_validator.utils.files import list_regular_files
from workflow_validator.utils.logger import get_logger


def workflow_type(filename: str) -> str:
    """`ci/python-app.yml` -> `python-app`."""
    return Path(filename).stem


def properties_path_for(folder: Path | str, filename: str, dirname: str = "properties") -> Path:
    return Path(folder) / dirname / f"{workflow_type(filename)}.properties.json"


async def iter_workflow_files(
    folders: Iterable[Path | str],
    properties_dirname: str = "properties",
) -> AsyncIterator[tuple[Path, Path]]:
    """Yield (workflow path, properties path) in folder order, then name order."""
    for folder in folders:
        for name in await list_regular_files(folder):
            yield Path(folder) / name, properties_path_for(folder, name, properties_dirname)


async def check_workflows(
    folders: Iterable[Path | str],
    checker: WorkflowChecker,
    *,
    properties_dirname: str = "properties",
) -> list[WorkflowRecord]:
    """
    Check every workflow under `folders` sequentially and return only the
    records with errors. A folder that cannot be listed aborts the scan.
    """
    log = get_logger(__name__)
    result: list[WorkflowRecord] = []
    checked = 0

    async for workflow_path, props_path in iter_workflow_files(folders, properties_dirname):
        record = await checker.check(workflow_path, props_path)
        checked += 1
        if not record.ok:
            result.append(record)

    log.debug(f"Scanned {checked} workflow(s); {len(result)} with errors")
    return result


__all__ = ["workflow_type", "properties_path_for", "iter_workflow_files", "check_workflows"]
