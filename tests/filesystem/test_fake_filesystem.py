from pathlib import Path

import pytest

from quartermaster.filesystem.fake import FakeFilesystem


def test_parents_of_files_are_directories() -> None:
    fs = FakeFilesystem(files={Path("/repo/skills/a/SKILL.md")})

    assert fs.exists(Path("/repo/skills/a"))
    assert fs.lexists(Path("/repo"))
    assert not fs.exists(Path("/repo/skills/b"))


def test_exists_follows_symlinks() -> None:
    fs = FakeFilesystem(
        directories={Path("/shared/skills/a")},
        symlinks={Path("/project/.pi/skills/a"): Path("/shared/skills/a")},
    )

    assert fs.exists(Path("/project/.pi/skills/a"))


def test_dangling_symlink_lexists_but_does_not_exist() -> None:
    link = Path("/project/.pi/tools/x.js")
    fs = FakeFilesystem(symlinks={link: Path("/gone/x.js")})

    assert fs.lexists(link)
    assert not fs.exists(link)


def test_symlink_loop_does_not_exist() -> None:
    a = Path("/loop/a")
    b = Path("/loop/b")
    fs = FakeFilesystem(symlinks={a: b, b: a})

    assert not fs.exists(a)


def test_symlink_refuses_existing_path() -> None:
    fs = FakeFilesystem(files={Path("/project/file")})

    with pytest.raises(FileExistsError):
        fs.symlink(Path("/project/file"), Path("/shared/file"))


def test_unlink_missing_path_raises() -> None:
    fs = FakeFilesystem()

    with pytest.raises(FileNotFoundError):
        fs.unlink(Path("/nothing"))


def test_read_link_on_non_link_raises() -> None:
    fs = FakeFilesystem(files={Path("/project/file")})

    with pytest.raises(OSError):
        fs.read_link(Path("/project/file"))
