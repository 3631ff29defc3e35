"""Shared fixtures: a shared repo tree and an empty project directory."""

import json
from pathlib import Path

import pytest


def write_file(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def shared_repo(tmp_path: Path) -> Path:
    """Shared repo with one or more items of every type and a ``writer`` set."""
    repo = tmp_path / "shared"
    write_file(repo / "skills" / "writing-helper" / "SKILL.md", "# Writing helper\n")
    write_file(repo / "skills" / "review" / "nested" / "SKILL.md", "# Review\n")
    write_file(repo / "extensions" / "timer.ts", "export default {};\n")
    write_file(repo / "extensions" / "bundle" / "index.ts", "export default {};\n")
    write_file(repo / "tools" / "grep.js", "module.exports = {};\n")
    write_file(repo / "prompts" / "drafting" / "outline.md", "Outline this.\n")
    write_file(
        repo / "quartermaster_sets.json",
        json.dumps(
            {
                "version": 1,
                "sets": {
                    "writer": {
                        "description": "Writing tools",
                        "items": {
                            "skills": ["skills/writing-helper"],
                            "prompts": ["prompts/drafting/outline.md"],
                        },
                    }
                },
            },
            indent=2,
        ),
    )
    return repo


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project
