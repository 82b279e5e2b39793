# workflow_validator/core/workflow_loader.py
from __future__ import annotations

"""Workflow body loader
------------------------
Parses workflow YAML the way GitHub reads it: YAML 1.2 booleans, so the
`on:` trigger key stays the string "on" instead of becoming True.
"""

from pathlib import Path
from typing import Any
import re

import yaml

from workflow_validator.utils.files import read_text


_BOOL_TAG = "tag:yaml.org,2002:bool"


class WorkflowYamlLoader(yaml.SafeLoader):
    """SafeLoader that only treats true/false as booleans."""


WorkflowYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
WorkflowYamlLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def parse_workflow(text: str) -> Any:
    """Parse a single YAML document. Raises yaml.YAMLError on bad input."""
    return yaml.load(text, Loader=WorkflowYamlLoader)


async def load_workflow_document(path: Path | str) -> Any:
    return parse_workflow(await read_text(path))


__all__ = [
    "WorkflowYamlLoader",
    "parse_workflow",
    "load_workflow_document",
]
