import json
import textwrap
from pathlib import Path

import pytest

from workflow_validator.utils.config import get_settings


VALID_WORKFLOW = textwrap.dedent(
    """
    name: Python application

    on:
      push:
        branches: [ $default-branch ]
      pull_request:
        branches: [ $default-branch ]

    permissions:
      contents: read

    jobs:
      build:
        runs-on: ubuntu-latest
        steps:
          - uses: actions/checkout@v4
          - name: Set up Python
            uses: actions/setup-python@v5
            with:
              python-version: "3.12"
          - name: Test
            run: pytest
    """
)

VALID_PROPERTIES = {
    "name": "Python application",
    "description": "Create and test a Python application.",
    "iconName": "octicon python",
    "categories": ["Python"],
}


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_properties() -> dict:
    return dict(VALID_PROPERTIES)


@pytest.fixture
def make_workflow():
    """Write `<folder>/<name>` plus its properties sidecar; return the workflow path."""

    def _make(folder: Path, name: str, body: str = VALID_WORKFLOW, properties=VALID_PROPERTIES) -> Path:
        folder.mkdir(parents=True, exist_ok=True)
        wf = folder / name
        wf.write_text(body, encoding="utf-8")
        if properties is not None:
            props_dir = folder / "properties"
            props_dir.mkdir(exist_ok=True)
            text = properties if isinstance(properties, str) else json.dumps(properties)
            (props_dir / f"{Path(name).stem}.properties.json").write_text(text, encoding="utf-8")
        return wf

    return _make


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    d = tmp_path / "icons"
    d.mkdir()
    (d / "blank.svg").write_text("<svg/>", encoding="utf-8")
    return d
