"""CLI tests for sets, add-to-set and remove-from-set."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from quartermaster.cli import cli
from quartermaster.context import QuartermasterContext


@pytest.fixture
def ctx(tmp_path: Path, project_dir: Path, shared_repo: Path) -> QuartermasterContext:
    return QuartermasterContext.for_test(
        cwd=project_dir,
        home=tmp_path,
        global_config_dir=tmp_path / "agent",
        repo_override=str(shared_repo),
    )


def test_sets_lists_counts_and_description(ctx: QuartermasterContext) -> None:
    result = CliRunner().invoke(cli, ["sets"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output == (
        "Sets (version 1):\n"
        "- writer (skills:1 extensions:0 tools:0 prompts:1) - Writing tools\n"
    )


def test_sets_without_file(ctx: QuartermasterContext, shared_repo: Path) -> None:
    sets_path = shared_repo / "quartermaster_sets.json"
    sets_path.unlink()

    result = CliRunner().invoke(cli, ["sets"], obj=ctx)

    assert result.exit_code == 0
    assert result.output == f"No sets file found at {sets_path}.\n"


def test_sets_with_no_sets(ctx: QuartermasterContext, shared_repo: Path) -> None:
    sets_path = shared_repo / "quartermaster_sets.json"
    sets_path.write_text(json.dumps({"version": 2, "sets": {}}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["sets"], obj=ctx)

    assert result.output == f"No sets defined in {sets_path}.\n"


def test_sets_invalid_version(ctx: QuartermasterContext, shared_repo: Path) -> None:
    sets_path = shared_repo / "quartermaster_sets.json"
    sets_path.write_text(json.dumps({"version": 0, "sets": {}}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["sets"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Sets file has invalid version: 0" in result.output


def test_sets_file_option(ctx: QuartermasterContext, shared_repo: Path) -> None:
    (shared_repo / "team.json").write_text(
        json.dumps({"version": 1, "sets": {"ops": {"items": {"tools": ["tools/grep.js"]}}}}),
        encoding="utf-8",
    )

    result = CliRunner().invoke(cli, ["--sets-file", "team.json", "sets"], obj=ctx)

    assert result.output == "Sets (version 1):\n- ops (skills:0 extensions:0 tools:1 prompts:0)\n"


def test_add_to_set_twice(ctx: QuartermasterContext, shared_repo: Path) -> None:
    runner = CliRunner()

    first = runner.invoke(cli, ["add-to-set", "writer", "tools", "grep.js"], obj=ctx)
    second = runner.invoke(cli, ["add-to-set", "writer", "tools", "tools/grep.js"], obj=ctx)

    assert first.output == "Set update results:\n- added writer tools/grep.js\n"
    assert second.output == "Set update results:\n- already present writer tools/grep.js\n"
    data = json.loads((shared_repo / "quartermaster_sets.json").read_text(encoding="utf-8"))
    assert data["sets"]["writer"]["items"]["tools"] == ["tools/grep.js"]


def test_add_to_set_rejects_external_path(ctx: QuartermasterContext) -> None:
    result = CliRunner().invoke(cli, ["add-to-set", "writer", "tools", "/abs/x.js"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Set items must be repo-relative paths: /abs/x.js" in result.output


def test_add_to_set_unknown_type(ctx: QuartermasterContext) -> None:
    result = CliRunner().invoke(cli, ["add-to-set", "writer", "themes", "x"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Unknown item type: themes." in result.output


def test_remove_from_set(ctx: QuartermasterContext) -> None:
    runner = CliRunner()

    first = runner.invoke(
        cli, ["remove-from-set", "writer", "skills", "writing-helper"], obj=ctx
    )
    second = runner.invoke(
        cli, ["remove-from-set", "writer", "skills", "writing-helper"], obj=ctx
    )

    assert first.output == "Set update results:\n- removed writer skills/writing-helper\n"
    assert second.output == "Set update results:\n- missing writer skills/writing-helper\n"


def test_remove_from_unknown_set(ctx: QuartermasterContext) -> None:
    result = CliRunner().invoke(cli, ["remove-from-set", "nope", "skills", "a"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Unknown set: nope." in result.output


def test_sets_ignores_blank_set_names(ctx: QuartermasterContext, shared_repo: Path) -> None:
    sets_path = shared_repo / "quartermaster_sets.json"
    data = json.loads(sets_path.read_text(encoding="utf-8"))
    data["sets"]["  "] = {"items": {"tools": ["tools/grep.js"]}}
    sets_path.write_text(json.dumps(data), encoding="utf-8")

    result = CliRunner().invoke(cli, ["sets"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output == (
        "Sets (version 1):\n"
        "- writer (skills:1 extensions:0 tools:0 prompts:1) - Writing tools\n"
    )
