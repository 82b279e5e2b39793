# workflow_validator/core/reporter.py
from __future__ import annotations

"""CI reporting
----------------
Renders a validation outcome either as GitHub Actions workflow commands
(`::group::`, `::error::`, `::endgroup::`) or as plain console lines.
Every report line, informational ones included, goes to stdout regardless
of LOG_LEVEL.
"""

import os
from typing import Optional

import click


def escape_data(message: str) -> str:
    """Escape a workflow command payload the way the Actions runner expects."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def running_on_github() -> bool:
    """Runner detection straight from the environment, for when settings cannot load."""
    return os.environ.get("GITHUB_ACTIONS", "").strip().lower() == "true"


class Reporter:
    """Base reporter: plain console output."""

    def __init__(self) -> None:
        self.failed = False
        self.failure_message: Optional[str] = None

    def info(self, message: str) -> None:
        click.echo(message)

    def start_group(self, title: str) -> None:
        click.echo(title)

    def end_group(self) -> None:
        pass

    def error(self, message: str) -> None:
        click.echo(f"ERR {message}")

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.failure_message = message
        click.echo(f"FAILED: {message}")

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


class GithubReporter(Reporter):
    def start_group(self, title: str) -> None:
        click.echo(f"::group::{escape_data(title)}")

    def end_group(self) -> None:
        click.echo("::endgroup::")

    def error(self, message: str) -> None:
        click.echo(f"::error::{escape_data(message)}")

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.failure_message = message
        self.error(message)


def make_reporter(github: bool) -> Reporter:
    return GithubReporter() if github else Reporter()


__all__ = ["escape_data", "running_on_github", "Reporter", "GithubReporter", "make_reporter"]
