from pathlib import Path

import pytest

from workflow_validator.core.checker import WorkflowChecker
from workflow_validator.core.properties import PropertiesValidator
from workflow_validator.core.scanner import (
    check_workflows,
    iter_workflow_files,
    properties_path_for,
    workflow_type,
)
from workflow_validator.schemas import load_workflow_schema


@pytest.fixture
def checker(icons_dir: Path) -> WorkflowChecker:
    return WorkflowChecker(PropertiesValidator(icons_dir), load_workflow_schema())


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("python-app.yml", "python-app"),
        ("docker.image.yaml", "docker.image"),
        ("Makefile", "Makefile"),
    ],
)
def test_workflow_type_strips_last_extension(filename, expected):
    assert workflow_type(filename) == expected


def test_properties_path_convention():
    assert properties_path_for("ci", "python-app.yml") == Path("ci/properties/python-app.properties.json")
    assert properties_path_for("ci", "x.yml", "meta") == Path("ci/meta/x.properties.json")


@pytest.mark.asyncio
async def test_iter_skips_subdirectories_and_keeps_folder_order(tmp_path, make_workflow):
    a, b = tmp_path / "b-first", tmp_path / "a-second"
    make_workflow(a, "zeta.yml")
    make_workflow(a, "alpha.yml")
    make_workflow(b, "one.yml")
    (a / "nested").mkdir()

    pairs = [pair async for pair in iter_workflow_files([a, b])]
    assert [wf.name for wf, _ in pairs] == ["alpha.yml", "zeta.yml", "one.yml"]
    assert pairs[0][1] == a / "properties" / "alpha.properties.json"


@pytest.mark.asyncio
async def test_only_errored_records_are_returned(tmp_path, checker, make_workflow, valid_properties):
    good, bad = tmp_path / "good", tmp_path / "bad"
    make_workflow(good, "one.yml")
    make_workflow(good, "two.yml")
    broken_props = dict(valid_properties)
    del broken_props["iconName"]
    broken = make_workflow(bad, "broken.yml", properties=broken_props)
    make_workflow(bad, "fine.yml")

    result = await check_workflows([good, bad], checker)
    assert len(result) == 1
    assert result[0].id == str(broken)
    assert result[0].errors == ("instance: 'iconName' is a required property",)


@pytest.mark.asyncio
async def test_no_folders_means_no_records(checker):
    assert await check_workflows([], checker) == []


@pytest.mark.asyncio
async def test_empty_folder_means_no_records(tmp_path, checker):
    (tmp_path / "empty").mkdir()
    assert await check_workflows([tmp_path / "empty"], checker) == []


@pytest.mark.asyncio
async def test_missing_folder_aborts_the_scan(tmp_path, checker, make_workflow):
    make_workflow(tmp_path / "good", "one.yml")
    with pytest.raises(FileNotFoundError):
        await check_workflows([tmp_path / "good", tmp_path / "missing"], checker)


@pytest.mark.asyncio
async def test_folder_that_is_a_file_aborts_the_scan(tmp_path, checker):
    f = tmp_path / "not-a-dir"
    f.write_text("", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        await check_workflows([f], checker)


@pytest.mark.asyncio
async def test_custom_properties_dirname(tmp_path, checker, make_workflow):
    wf = make_workflow(tmp_path / "ci", "one.yml")
    result = await check_workflows([tmp_path / "ci"], checker, properties_dirname="meta")
    assert [r.id for r in result] == [str(wf)]
    assert result[0].errors[0].startswith("FileNotFoundError: ")
