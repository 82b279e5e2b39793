# workflow_validator/cli.py
from __future__ import annotations

"""Command-line interface
------------------------
`validate` is the CI entry point; `list` and `config` help when editing
workflow templates locally.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import click

from workflow_validator.core.engine import run_validation
from workflow_validator.core.properties import WorkflowProperties, load_properties
from workflow_validator.core.scanner import iter_workflow_files
from workflow_validator.utils.config import Settings, get_settings, load_scan_settings
from workflow_validator.utils.logger import set_log_level


# -------- helpers --------


def _echo_json(obj) -> None:
    click.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _effective_settings(**overrides: Any) -> Settings:
    update = {k: v for k, v in overrides.items() if v is not None}
    s = get_settings()
    return s.model_copy(update=update) if update else s


def _folders(settings: Settings, folders: List[str]) -> list[str]:
    if folders:
        return list(folders)
    return load_scan_settings(settings.SETTINGS_FILE).folders


_settings_option = click.option(
    "--settings", "settings_file",
    type=click.Path(dir_okay=False, path_type=Path, resolve_path=True),
    default=None,
    help="Scan settings document (default: SETTINGS_FILE)",
)
_folder_option = click.option(
    "--folder", "folders",
    multiple=True,
    help="Folder to scan; repeatable, replaces the settings document's folders",
)


# -------- CLI root --------


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL from settings",
)
@click.version_option(package_name="starter-workflow-validator")
def cli(log_level: Optional[str]):
    if log_level:
        set_log_level(log_level.upper())


# -------- commands --------


@cli.command("config")
def cmd_config():
    """Print effective configuration (after .env & env vars)."""
    _echo_json(get_settings().model_dump(mode="json"))


@cli.command("validate")
@_settings_option
@_folder_option
@click.option(
    "--icons-dir",
    type=click.Path(file_okay=False, path_type=Path, resolve_path=True),
    default=None,
    help="Directory holding <iconName>.svg files (default: ICONS_DIR)",
)
@click.option(
    "--schema", "schema_file",
    type=click.Path(dir_okay=False, exists=True, path_type=Path, resolve_path=True),
    default=None,
    help="Workflow schema document (default: packaged schema)",
)
@click.option("--github/--no-github", default=None, help="Emit GitHub Actions workflow commands")
def cmd_validate(
    settings_file: Optional[Path],
    folders: List[str],
    icons_dir: Optional[Path],
    schema_file: Optional[Path],
    github: Optional[bool],
):
    """Validate every workflow and its properties file; exit 1 on any error."""
    code = run_validation(
        folders=list(folders) or None,
        overrides=dict(
            SETTINGS_FILE=settings_file,
            ICONS_DIR=icons_dir,
            WORKFLOW_SCHEMA_FILE=schema_file,
            GITHUB_ACTIONS=github,
        ),
    )
    sys.exit(code)


async def _collect_properties(
    folders: list[str], dirname: str
) -> list[tuple[Path, Optional[WorkflowProperties]]]:
    rows: list[tuple[Path, Optional[WorkflowProperties]]] = []
    async for wf_path, props_path in iter_workflow_files(folders, dirname):
        try:
            props = await load_properties(props_path)
        except (OSError, ValueError):
            # `validate` reports the details
            props = None
        rows.append((wf_path, props))
    return rows


@cli.command("list")
@_settings_option
@_folder_option
def cmd_list(settings_file: Optional[Path], folders: List[str]):
    """List workflows with the name and categories from their properties."""
    settings = _effective_settings(SETTINGS_FILE=settings_file)
    rows = asyncio.run(_collect_properties(_folders(settings, folders), settings.PROPERTIES_DIRNAME))

    if not rows:
        click.echo("No workflows found.")
        return

    click.echo(f"Found {len(rows)} workflow(s):\n")
    for fp, props in rows:
        if props is None:
            click.echo(f" - <invalid properties>  <- {fp}")
            continue
        cats = ", ".join(props.categories) if props.categories else "-"
        click.echo(f" - {props.name}  [{cats}]  <- {fp}")


def main() -> None:
    cli(prog_name="workflow-validator")


if __name__ == "__main__":
    main()
