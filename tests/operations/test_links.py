"""Symlink engine tests: state transitions against the in-memory fake, then real disk."""

import os
from pathlib import Path

import pytest

from quartermaster.filesystem.fake import FakeFilesystem
from quartermaster.filesystem.real import RealFilesystem
from quartermaster.models.link import LinkResult, TargetState
from quartermaster.operations.links import inspect_target, link_item, remove_item

SOURCE = Path("/shared/skills/writing-helper")
TARGET = Path("/project/.pi/skills/writing-helper")


class TestInspectTarget:
    def test_absent(self) -> None:
        fs = FakeFilesystem(directories={SOURCE})

        assert inspect_target(fs, SOURCE, TARGET) == TargetState.ABSENT

    def test_linked_to_source(self) -> None:
        fs = FakeFilesystem(directories={SOURCE}, symlinks={TARGET: SOURCE})

        assert inspect_target(fs, SOURCE, TARGET) == TargetState.LINKED_TO_SOURCE

    def test_relative_link_resolved_against_link_directory(self) -> None:
        relative = Path("../../../shared/skills/writing-helper")
        fs = FakeFilesystem(directories={SOURCE}, symlinks={TARGET: relative})

        assert inspect_target(fs, SOURCE, TARGET) == TargetState.LINKED_TO_SOURCE

    def test_linked_elsewhere(self) -> None:
        fs = FakeFilesystem(symlinks={TARGET: Path("/elsewhere")})

        assert inspect_target(fs, SOURCE, TARGET) == TargetState.LINKED_ELSEWHERE

    def test_occupied(self) -> None:
        fs = FakeFilesystem(files={TARGET})

        assert inspect_target(fs, SOURCE, TARGET) == TargetState.OCCUPIED


class TestLinkItem:
    def test_creates_link_and_parents(self) -> None:
        fs = FakeFilesystem(directories={SOURCE})

        result = link_item(fs, SOURCE, TARGET)

        assert result == LinkResult(status="linked")
        assert fs.created_links == [(TARGET, SOURCE)]
        assert TARGET.parent in fs.created_directories

    def test_second_install_is_already_linked(self) -> None:
        fs = FakeFilesystem(directories={SOURCE})

        first = link_item(fs, SOURCE, TARGET)
        second = link_item(fs, SOURCE, TARGET)

        assert first.status == "linked"
        assert second.status == "already linked"
        assert len(fs.created_links) == 1

    def test_missing_source_fails(self) -> None:
        fs = FakeFilesystem()

        result = link_item(fs, SOURCE, TARGET)

        assert result == LinkResult(status="failed", detail="source not found")
        assert not result.ok
        assert fs.created_links == []

    def test_regular_file_target_is_never_overwritten(self) -> None:
        fs = FakeFilesystem(directories={SOURCE}, files={TARGET})

        result = link_item(fs, SOURCE, TARGET)

        assert result == LinkResult(status="failed", detail="target exists and is not a symlink")
        assert TARGET in fs.files
        assert fs.created_links == []

    def test_link_elsewhere_is_never_repointed(self) -> None:
        elsewhere = Path("/other/skills/writing-helper")
        fs = FakeFilesystem(directories={SOURCE, elsewhere}, symlinks={TARGET: elsewhere})

        result = link_item(fs, SOURCE, TARGET)

        assert result == LinkResult(status="failed", detail="target already links elsewhere")
        assert fs.symlinks[TARGET] == elsewhere


class TestRemoveItem:
    def test_removes_symlink_then_reports_missing(self) -> None:
        fs = FakeFilesystem(directories={SOURCE}, symlinks={TARGET: SOURCE})

        first = remove_item(fs, TARGET)
        second = remove_item(fs, TARGET)

        assert first.status == "removed"
        assert second.status == "missing"
        assert fs.removed_links == [TARGET]
        assert fs.exists(SOURCE)

    def test_absent_target_is_missing(self) -> None:
        fs = FakeFilesystem()

        assert remove_item(fs, TARGET) == LinkResult(status="missing")
        assert remove_item(fs, TARGET) == LinkResult(status="missing")

    def test_regular_file_is_left_alone(self) -> None:
        fs = FakeFilesystem(files={TARGET})

        result = remove_item(fs, TARGET)

        assert result == LinkResult(status="failed", detail="target exists and is not a symlink")
        assert TARGET in fs.files

    def test_dangling_symlink_is_removed(self) -> None:
        fs = FakeFilesystem(symlinks={TARGET: Path("/gone")})

        assert remove_item(fs, TARGET).status == "removed"


class TestOnDisk:
    @pytest.fixture
    def source(self, tmp_path: Path) -> Path:
        source = tmp_path / "shared" / "skills" / "writing-helper"
        source.mkdir(parents=True)
        (source / "SKILL.md").write_text("# Writing helper\n", encoding="utf-8")
        return source

    def test_idempotent_install(self, tmp_path: Path, source: Path) -> None:
        fs = RealFilesystem()
        target = tmp_path / "project" / ".pi" / "skills" / "writing-helper"

        assert link_item(fs, source, target).status == "linked"
        assert link_item(fs, source, target).status == "already linked"
        assert target.is_symlink()
        assert Path(os.readlink(target)) == source

    def test_conflict_safety(self, tmp_path: Path, source: Path) -> None:
        fs = RealFilesystem()
        target = tmp_path / "project" / ".pi" / "skills" / "writing-helper"
        target.mkdir(parents=True)
        (target / "mine.txt").write_text("keep me", encoding="utf-8")

        result = link_item(fs, source, target)

        assert result.status == "failed"
        assert result.detail == "target exists and is not a symlink"
        assert (target / "mine.txt").read_text(encoding="utf-8") == "keep me"

    def test_idempotent_remove_keeps_source(self, tmp_path: Path, source: Path) -> None:
        fs = RealFilesystem()
        target = tmp_path / "project" / ".pi" / "skills" / "writing-helper"
        link_item(fs, source, target)

        assert remove_item(fs, target).status == "removed"
        assert remove_item(fs, target).status == "missing"
        assert (source / "SKILL.md").exists()
