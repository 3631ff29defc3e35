import json
from pathlib import Path

import pytest

from quartermaster.models.item import group_discovered_items
from quartermaster.operations.discovery import discover_items, find_entrypoints


def _touch(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_discovery_shape(tmp_path: Path) -> None:
    _touch(tmp_path / "skills" / "a" / "SKILL.md")
    _touch(tmp_path / "skills" / "b" / "c" / "SKILL.md")
    _touch(tmp_path / "extensions" / "x.ts")
    _touch(tmp_path / "extensions" / "y" / "index.ts")
    _touch(tmp_path / "prompts" / "p" / "q.md")

    grouped = group_discovered_items(discover_items(tmp_path))

    assert grouped == {
        "skills": ["skills/a", "skills/b/c"],
        "extensions": ["extensions/x.ts", "extensions/y"],
        "tools": [],
        "prompts": ["prompts/p/q.md"],
    }


def test_discovered_items_carry_absolute_paths(tmp_path: Path) -> None:
    _touch(tmp_path / "tools" / "grep.js")

    items = discover_items(tmp_path)

    assert [item.absolute_path for item in items["tools"]] == [tmp_path / "tools" / "grep.js"]
    assert items["tools"][0].item_type == "tools"


def test_skill_directories_are_not_descended(tmp_path: Path) -> None:
    _touch(tmp_path / "skills" / "outer" / "SKILL.md")
    _touch(tmp_path / "skills" / "outer" / "inner" / "SKILL.md")

    grouped = group_discovered_items(discover_items(tmp_path))

    assert grouped["skills"] == ["skills/outer"]


def test_prompts_only_include_markdown(tmp_path: Path) -> None:
    _touch(tmp_path / "prompts" / "a.md")
    _touch(tmp_path / "prompts" / "notes.txt")

    grouped = group_discovered_items(discover_items(tmp_path))

    assert grouped["prompts"] == ["prompts/a.md"]


def test_entrypoints_are_top_level_only(tmp_path: Path) -> None:
    root = tmp_path / "extensions"
    _touch(root / "nested" / "deeper" / "thing.ts")
    _touch(root / "readme.md")
    _touch(root / "plugin" / "package.json", json.dumps({"pi": {"extensions": ["a.ts"]}}))
    _touch(root / "library" / "package.json", json.dumps({"name": "library"}))
    _touch(root / "js-index" / "index.js")

    found = find_entrypoints(root)

    assert found == [root / "js-index", root / "plugin"]


def test_malformed_package_json_propagates(tmp_path: Path) -> None:
    _touch(tmp_path / "tools" / "broken" / "package.json", "{nope")

    with pytest.raises(ValueError):
        discover_items(tmp_path)


def test_missing_type_directories_yield_empty_lists(tmp_path: Path) -> None:
    grouped = group_discovered_items(discover_items(tmp_path))

    assert grouped == {"skills": [], "extensions": [], "tools": [], "prompts": []}
