# workflow_validator/core/engine.py
from __future__ import annotations

"""Validation engine
--------------------
Wires settings, schemas and validators together, runs one timed scan over the
configured folders and reports the outcome. `run_validation` is the single
entry point used by the CLI and returns the process exit code.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from workflow_validator.core.checker import WorkflowChecker, WorkflowRecord
from workflow_validator.core.properties import PropertiesValidator
from workflow_validator.core.reporter import Reporter, make_reporter, running_on_github
from workflow_validator.core.scanner import check_workflows
from workflow_validator.schemas import load_workflow_schema
from workflow_validator.utils.config import Settings, get_settings, load_scan_settings
from workflow_validator.utils.logger import get_logger
from workflow_validator.utils.timing import Stopwatch, human_ms


def build_checker(settings: Settings) -> WorkflowChecker:
    properties = PropertiesValidator(
        settings.ICONS_DIR,
        builtin_icon_prefix=settings.BUILTIN_ICON_PREFIX,
    )
    return WorkflowChecker(properties, load_workflow_schema(settings.WORKFLOW_SCHEMA_FILE))


def report(errored: Sequence[WorkflowRecord], reporter: Reporter) -> None:
    if errored:
        reporter.start_group(f"😟 - Found {len(errored)} workflows with errors:")
        for record in errored:
            reporter.error(f"Errors in {record.id} - {', '.join(record.errors)}")
        reporter.end_group()
        reporter.set_failed(f"Found {len(errored)} workflows with errors")
    else:
        reporter.info("🎉🤘 - Found no workflows with errors!")


async def validate_folders(
    folders: Sequence[Path | str],
    checker: WorkflowChecker,
    reporter: Reporter,
    *,
    properties_dirname: str = "properties",
) -> list[WorkflowRecord]:
    with Stopwatch() as sw:
        errored = await check_workflows(folders, checker, properties_dirname=properties_dirname)
    reporter.info(f"Call to check_workflows took {human_ms(sw.elapsed_ms())}.")
    report(errored, reporter)
    return errored


def run_validation(
    settings: Optional[Settings] = None,
    *,
    folders: Optional[Sequence[Path | str]] = None,
    reporter: Optional[Reporter] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> int:
    """
    One full validation pass. Folders default to the settings document.
    `overrides` are applied on top of the loaded settings (CLI options).
    Returns 0 when nothing is wrong, 1 otherwise.
    """
    overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    try:
        settings = settings or get_settings()
        if overrides:
            settings = settings.model_copy(update=overrides)
        reporter = reporter or make_reporter(settings.GITHUB_ACTIONS)
        log = get_logger(__name__)

        if folders is None:
            folders = load_scan_settings(settings.SETTINGS_FILE).folders
        log.debug(f"Scanning {len(folders)} folder(s): {', '.join(str(f) for f in folders)}")
        checker = build_checker(settings)
        asyncio.run(
            validate_folders(folders, checker, reporter, properties_dirname=settings.PROPERTIES_DIRNAME)
        )
    except Exception as e:
        if reporter is None:
            github = overrides.get("GITHUB_ACTIONS")
            reporter = make_reporter(running_on_github() if github is None else github)
        # get_logger() needs valid settings
        logging.getLogger(__name__).error("Validation aborted", exc_info=e)
        reporter.error(f"Unhandled error while validating workflows: {e}")
        reporter.set_failed("Unhandled error")

    return reporter.exit_code


__all__ = ["build_checker", "report", "validate_folders", "run_validation"]
